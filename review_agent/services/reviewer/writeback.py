"""Assemble and issue the two write-backs: description and feedback comment."""

import asyncio
from typing import Optional

from review_agent.core.logging import get_logger
from review_agent.services.github.service import post_pr_comment, update_pr_description
from review_agent.services.reviewer.schemas import FileAnalysis, PullRequestContext, ReviewConfig

logger = get_logger("reviewer.writeback")


def summary_header(model: str) -> str:
    return f"## {model} Summary"


def feedback_header(model: str) -> str:
    return f"## {model} Feedback"


def build_description(current_body: Optional[str], summary: str, model: str) -> str:
    """Existing PR body with the summary block appended."""
    return f"{current_body or ''}\n\n{summary_header(model)}\n\n{summary}"


def build_feedback_comment(analyses: list[FileAnalysis], model: str) -> Optional[str]:
    """Comment body covering every file with critical feedback.

    Returns None when no file qualifies.
    """
    critical = [a for a in analyses if a.has_critical_feedback]
    if not critical:
        return None

    body = f"{feedback_header(model)}\n\n"
    for analysis in critical:
        body += f"### {analysis.filename}\n\n"
        body += "```diff\n" + analysis.patch + "\n```\n\n"
        body += f"{analysis.feedback}\n\n"
    return body


async def dispatch_write_backs(
    pr: PullRequestContext,
    summary: str,
    analyses: list[FileAnalysis],
    config: ReviewConfig,
) -> bool:
    """Update the description and post critical feedback concurrently.

    Returns:
        Whether a feedback comment was posted
    """
    logger.info("Updating PR description and adding comments...")
    writes = [update_pr_description(pr, build_description(pr.body, summary, config.model))]

    comment = build_feedback_comment(analyses, config.model)
    if comment is None:
        logger.info("No critical feedback to add to the PR.")
    else:
        writes.append(
            post_pr_comment(
                pr,
                comment,
                update_existing=config.update_existing_comment,
                marker=feedback_header(config.model),
            )
        )

    await asyncio.gather(*writes)
    return comment is not None
