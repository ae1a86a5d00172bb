"""Whole-PR summary request."""

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from review_agent.core.exceptions import ExternalServiceError
from review_agent.core.llm import message_text
from review_agent.core.logging import get_logger
from review_agent.core.prompts import render_pr_summary_prompt, render_pr_summary_system_prompt
from review_agent.services.reviewer.schemas import FileDiff

logger = get_logger("reviewer.summary")

CHANGE_SEPARATOR = "---\n\n"


def format_pr_changes(files: list[FileDiff]) -> str:
    """Concatenate every file's name and raw patch into one prompt body."""
    return CHANGE_SEPARATOR.join(f"File: {f.filename}\n\n{f.patch}\n\n" for f in files)


async def generate_pr_summary(llm: BaseChatModel, files: list[FileDiff]) -> str:
    """Ask the model for a bullet-point summary of the whole PR."""
    logger.info("Generating PR summary...")
    messages = [
        SystemMessage(content=render_pr_summary_system_prompt()),
        HumanMessage(content=render_pr_summary_prompt(format_pr_changes(files))),
    ]

    try:
        response = await llm.ainvoke(messages)
    except Exception as e:
        logger.error(f"Error in generate_pr_summary: {e}")
        raise ExternalServiceError("OpenAI", f"Failed to generate PR summary: {e}") from e

    logger.info("PR summary generated successfully")
    return message_text(response)
