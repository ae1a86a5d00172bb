"""Per-file review task: content, context excerpt, critique, parse."""

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from review_agent.core.exceptions import ExternalServiceError
from review_agent.core.llm import message_text
from review_agent.core.logging import get_logger
from review_agent.core.prompts import render_file_review_prompt, render_file_review_system_prompt
from review_agent.services.github.service import get_file_content
from review_agent.services.reviewer.patch_context import count_added_lines, extract_context
from review_agent.services.reviewer.response_parser import (
    CRITICAL_FEEDBACK_SENTINEL,
    MalformedReview,
    ReviewParseResult,
    parse_review_response,
)
from review_agent.services.reviewer.schemas import (
    FileAnalysis,
    FileDiff,
    PullRequestContext,
    ReviewConfig,
)

logger = get_logger("reviewer.file")


async def analyze_file_changes(
    llm: BaseChatModel,
    filename: str,
    patch: str,
    context: str,
) -> ReviewParseResult:
    """Request a critique of one file's changes and parse the reply."""
    logger.info(f"Analyzing changes for file: {filename}")
    messages = [
        SystemMessage(content=render_file_review_system_prompt(CRITICAL_FEEDBACK_SENTINEL)),
        HumanMessage(content=render_file_review_prompt(filename, patch, context)),
    ]

    try:
        response = await llm.ainvoke(messages)
    except Exception as e:
        logger.error(f"Error in analyze_file_changes for {filename}: {e}")
        raise ExternalServiceError("OpenAI", f"Failed to analyze file changes: {e}") from e

    result = parse_review_response(message_text(response))
    if isinstance(result, MalformedReview):
        logger.warning(f"Malformed review for {filename}: {result.reason}; treating as non-critical")
    return result


async def review_file(
    file: FileDiff,
    pr: PullRequestContext,
    config: ReviewConfig,
    llm: BaseChatModel,
) -> FileAnalysis:
    """Produce the analysis for one changed file.

    Fetch, extraction and model call run strictly in that order.
    """
    full_content = await get_file_content(pr, file.filename)

    logger.debug(f"Extracting context for {count_added_lines(file.patch)} added lines in {file.filename}")
    context = extract_context(full_content, file.patch, config.context_lines)

    result = await analyze_file_changes(llm, file.filename, file.patch, context)

    logger.info(
        f"Analysis complete for {file.filename}. "
        f"Critical feedback: {result.has_critical_feedback}"
    )
    return FileAnalysis(
        filename=file.filename,
        feedback=result.feedback,
        patch=file.patch,
        has_critical_feedback=result.has_critical_feedback,
    )
