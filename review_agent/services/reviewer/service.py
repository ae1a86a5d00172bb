"""Reviewer service - orchestration layer."""

from typing import Optional

from langchain_core.language_models import BaseChatModel

from review_agent.core.llm import get_chat_llm
from review_agent.core.logging import get_logger
from review_agent.services.github.service import get_pull_request_context
from review_agent.services.reviewer.graph import create_review_graph
from review_agent.services.reviewer.schemas import PullRequestContext, ReviewConfig, ReviewResult

logger = get_logger("reviewer.service")


async def review_pull_request(
    pr: PullRequestContext,
    config: ReviewConfig,
    llm: Optional[BaseChatModel] = None,
) -> ReviewResult:
    """Review a pull request and write the results back to GitHub.

    Raises whatever the first failing step raised; in that case neither the
    description nor the comment has been touched.
    """
    logger.info(f"Starting code review process: {pr.slug}")

    if llm is None:
        llm = get_chat_llm(model=config.model)

    graph = create_review_graph(pr, config, llm)

    # No cap unless configured; LangGraph runs every branch at once
    run_config = {"max_concurrency": config.max_concurrency} if config.max_concurrency else {}
    state = await graph.ainvoke({"analyses": []}, config=run_config)

    analyses = state.get("analyses", [])
    critical = sum(1 for a in analyses if a.has_critical_feedback)

    logger.info(
        f"Code review process completed successfully: {len(analyses)} files, "
        f"{critical} with critical feedback"
    )

    return ReviewResult(
        pr=pr.slug,
        files_reviewed=len(analyses),
        critical_files=critical,
        summary=state.get("summary", ""),
        comment_posted=state.get("comment_posted", False),
    )


async def review_pull_request_by_number(
    owner: str,
    repo: str,
    pr_number: int,
    config: ReviewConfig,
) -> ReviewResult:
    """Load the PR from GitHub, then review it."""
    pr = await get_pull_request_context(owner, repo, pr_number)
    return await review_pull_request(pr, config)
