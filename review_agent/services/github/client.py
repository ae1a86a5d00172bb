"""GitHub API client - data layer."""

from typing import Optional

from github import Auth, Github, GithubException
from github.IssueComment import IssueComment
from github.PullRequest import PullRequest
from github.Repository import Repository

from review_agent.config import settings
from review_agent.core.exceptions import FileTooLargeError
from review_agent.core.logging import get_logger
from review_agent.services.reviewer.schemas import FileDiff

logger = get_logger("github.data")

_github_client: Optional[Github] = None


def get_github_client() -> Github:
    """Get a GitHub client authenticated with the configured token."""
    global _github_client

    if _github_client:
        return _github_client

    if not settings.github_token or not settings.github_token.get_secret_value():
        raise ValueError("GITHUB_TOKEN not configured")

    _github_client = Github(auth=Auth.Token(settings.github_token.get_secret_value()))

    logger.info("GitHub client initialized")
    return _github_client


def get_repository(owner: str, repo: str) -> Repository:
    client = get_github_client()
    return client.get_repo(f"{owner}/{repo}")


def fetch_pull_request(owner: str, repo: str, pr_number: int) -> PullRequest:
    """Fetch a pull request from GitHub API."""
    return get_repository(owner, repo).get_pull(pr_number)


def fetch_pr_files(owner: str, repo: str, pr_number: int) -> list[FileDiff]:
    """Fetch changed files from a PR. Binary and oversized diffs have no patch."""
    pr = fetch_pull_request(owner, repo, pr_number)
    return [FileDiff(filename=f.filename, patch=f.patch or "") for f in pr.get_files()]


def _is_too_large(error: GithubException) -> bool:
    text = f"{error.data} {error}".lower()
    return "too large" in text or "too_large" in text


def fetch_file_contents(owner: str, repo: str, path: str, ref: str) -> str:
    """Fetch full file contents from repository at ``ref``.

    Raises:
        FileTooLargeError: GitHub won't return the blob through the contents API
    """
    repository = get_repository(owner, repo)
    try:
        content = repository.get_contents(path, ref=ref)
    except GithubException as e:
        if _is_too_large(e):
            raise FileTooLargeError(path) from e
        raise

    if isinstance(content, list):
        raise ValueError(f"Path {path} is a directory, not a file")
    # Blobs between 1 MB and 100 MB come back with no content
    if content.encoding == "none":
        raise FileTooLargeError(path)
    # Binary files decode lossily instead of failing the run
    return content.decoded_content.decode("utf-8", errors="replace")


def update_pull_request_body(owner: str, repo: str, pr_number: int, body: str) -> None:
    """Replace the PR description."""
    pr = fetch_pull_request(owner, repo, pr_number)
    pr.edit(body=body)
    logger.info(f"Updated description of {owner}/{repo}#{pr_number}")


def create_issue_comment(owner: str, repo: str, pr_number: int, body: str) -> IssueComment:
    """Create a new conversation comment on a PR."""
    pr = fetch_pull_request(owner, repo, pr_number)
    comment = pr.create_issue_comment(body)
    logger.info(f"Created comment {comment.id} on {owner}/{repo}#{pr_number}")
    return comment


def find_issue_comment(
    owner: str,
    repo: str,
    pr_number: int,
    prefix: str,
) -> Optional[IssueComment]:
    """Return the most recent PR comment whose body starts with ``prefix``."""
    pr = fetch_pull_request(owner, repo, pr_number)
    found = None
    for comment in pr.get_issue_comments():
        if (comment.body or "").startswith(prefix):
            found = comment
    return found


def edit_issue_comment(comment: IssueComment, body: str) -> None:
    """Overwrite an existing comment."""
    comment.edit(body)
    logger.info(f"Edited comment {comment.id}")
