"""Graph state schema for a review run."""

import operator
from typing import Annotated, TypedDict

from review_agent.services.reviewer.schemas import FileAnalysis, FileDiff


class ReviewState(TypedDict, total=False):
    """State shared by the review graph nodes."""

    # Changed files, set once by list_files
    files: list[FileDiff]

    # Per-file results, merged from concurrent review_file branches
    analyses: Annotated[list[FileAnalysis], operator.add]

    summary: str
    comment_posted: bool


class FileReviewInput(TypedDict):
    """Payload sent to a single review_file branch."""

    file: FileDiff


class SummaryInput(TypedDict):
    """Payload sent to the summarize_pr branch."""

    files: list[FileDiff]
