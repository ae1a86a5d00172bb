"""Configuration for the Context Review Agent."""

from typing import Optional

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support.

    Credentials also accept the ``INPUT_*`` names GitHub Actions uses for
    action inputs.
    """

    # App
    environment: str = Field(default="development")
    debug: bool = Field(default=True)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    # Credentials
    github_token: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_TOKEN", "INPUT_GITHUB_TOKEN"),
    )
    openai_api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "INPUT_OPENAI_API_KEY"),
    )
    openai_base_url: Optional[str] = Field(default=None)
    github_webhook_secret: Optional[str] = Field(default=None)

    # Review Configuration
    review_model: str = Field(
        default="gpt-4o",
        validation_alias=AliasChoices("REVIEW_MODEL", "INPUT_MODEL"),
    )
    context_lines: int = Field(
        default=3,
        validation_alias=AliasChoices("CONTEXT_LINES", "INPUT_CONTEXT_LINES"),
    )
    update_existing_comment: bool = Field(default=False)
    max_concurrency: Optional[int] = Field(default=None)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"

    @field_validator("context_lines")
    @classmethod
    def _non_negative_context(cls, value: int) -> int:
        if value < 0:
            raise ValueError("context_lines must be >= 0")
        return value

    @field_validator("max_concurrency", mode="before")
    @classmethod
    def _empty_concurrency_is_unbounded(cls, value):
        if value in ("", 0, "0"):
            return None
        return value


def require_credentials(config: Settings) -> None:
    """Raise if either credential needed for a review run is missing."""
    if not config.github_token or not config.github_token.get_secret_value():
        raise ValueError("GITHUB_TOKEN not configured")
    if not config.openai_api_key or not config.openai_api_key.get_secret_value():
        raise ValueError("OPENAI_API_KEY not configured")


settings = Settings()
