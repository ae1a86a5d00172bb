"""GitHub service."""

from review_agent.services.github.service import (
    get_file_content,
    get_pull_request_context,
    list_changed_files,
    post_pr_comment,
    update_pr_description,
)

__all__ = [
    "get_file_content",
    "get_pull_request_context",
    "list_changed_files",
    "post_pr_comment",
    "update_pr_description",
]
