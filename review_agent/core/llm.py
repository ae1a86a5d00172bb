"""LLM client using the OpenAI chat completions API."""

from typing import Optional

from langchain_openai import ChatOpenAI

from review_agent.config import settings
from review_agent.core.logging import get_logger

logger = get_logger("llm")

DEFAULT_MODEL = "gpt-4o"


def get_chat_llm(
    model: str = DEFAULT_MODEL,
    temperature: Optional[float] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
) -> ChatOpenAI:
    """Get a chat LLM instance.

    ``base_url`` (or ``OPENAI_BASE_URL``) points the client at an
    OpenAI-compatible gateway such as OpenRouter.
    """
    if api_key is None and settings.openai_api_key:
        api_key = settings.openai_api_key.get_secret_value()
    if not api_key:
        raise ValueError("OPENAI_API_KEY not configured")

    base_url = base_url or settings.openai_base_url

    logger.info(f"[LLM] Using model {model}" + (f" via {base_url}" if base_url else ""))

    kwargs = {}
    if temperature is not None:
        kwargs["temperature"] = temperature
    if base_url:
        kwargs["base_url"] = base_url

    return ChatOpenAI(model=model, api_key=api_key, **kwargs)


def message_text(message) -> str:
    """Plain text of a chat response; empty when the model returned nothing."""
    content = getattr(message, "content", None)
    if not content:
        return ""
    if isinstance(content, str):
        return content
    # Some providers return a list of content blocks
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
