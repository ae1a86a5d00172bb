"""Shared library utilities."""

from review_agent.core.llm import get_chat_llm, message_text
from review_agent.core.logging import get_logger

__all__ = [
    "get_chat_llm",
    "message_text",
    "get_logger",
]
