"""Pydantic schemas for reviewer service."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FileDiff(BaseModel):
    """A changed file as listed by GitHub."""

    model_config = ConfigDict(frozen=True)

    filename: str
    patch: str = ""


class FileAnalysis(BaseModel):
    """Review output for a single changed file."""

    filename: str
    feedback: str
    patch: str
    has_critical_feedback: bool = False


class PullRequestContext(BaseModel):
    """The pull request a review run operates on."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    number: int
    head_sha: str
    body: Optional[str] = None

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}#{self.number}"


class ReviewConfig(BaseModel):
    """Tunables threaded into a review run."""

    model_config = ConfigDict(frozen=True)

    context_lines: int = Field(default=3, ge=0)
    model: str = "gpt-4o"
    update_existing_comment: bool = False
    max_concurrency: Optional[int] = Field(default=None, ge=1)

    @classmethod
    def from_settings(cls, settings) -> "ReviewConfig":
        return cls(
            context_lines=settings.context_lines,
            model=settings.review_model,
            update_existing_comment=settings.update_existing_comment,
            max_concurrency=settings.max_concurrency,
        )


class ReviewResult(BaseModel):
    """Result of a PR review."""

    success: bool = True
    pr: str
    files_reviewed: int
    critical_files: int
    summary: str
    comment_posted: bool
