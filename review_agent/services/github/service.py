"""GitHub service - business logic layer.

PyGithub is synchronous; every call runs in a worker thread so that
concurrent file reviews interleave on the event loop.
"""

import asyncio

from github import GithubException

from review_agent.core.exceptions import ExternalServiceError, FileTooLargeError, PRNotFoundError
from review_agent.core.logging import get_logger
from review_agent.services.github import client
from review_agent.services.reviewer.schemas import FileDiff, PullRequestContext

logger = get_logger("github.service")


async def get_pull_request_context(owner: str, repo: str, pr_number: int) -> PullRequestContext:
    """Load the head commit and description of a PR."""
    logger.info(f"Fetching PR: {owner}/{repo}#{pr_number}")
    try:
        pr = await asyncio.to_thread(client.fetch_pull_request, owner, repo, pr_number)
    except GithubException as e:
        if e.status == 404:
            raise PRNotFoundError(owner, repo, pr_number) from e
        logger.error(f"Error fetching PR {owner}/{repo}#{pr_number}: {e}")
        raise ExternalServiceError("GitHub", f"Failed to get pull request: {e}") from e

    return PullRequestContext(
        owner=owner,
        repo=repo,
        number=pr_number,
        head_sha=pr.head.sha,
        body=pr.body,
    )


async def list_changed_files(pr: PullRequestContext) -> list[FileDiff]:
    """Get changed files from a PR."""
    logger.info("Fetching changed files...")
    try:
        files = await asyncio.to_thread(client.fetch_pr_files, pr.owner, pr.repo, pr.number)
    except Exception as e:
        logger.error(f"Error in list_changed_files: {e}")
        raise ExternalServiceError("GitHub", f"Failed to get changed files: {e}") from e

    logger.info(f"Found {len(files)} changed files")
    return files


async def get_file_content(pr: PullRequestContext, filename: str) -> str:
    """Get a file's content at the PR head.

    Oversized files are skipped with a warning and yield an empty string.
    """
    logger.info(f"Fetching content for file: {filename}")
    try:
        content = await asyncio.to_thread(
            client.fetch_file_contents, pr.owner, pr.repo, filename, pr.head_sha
        )
    except FileTooLargeError:
        logger.warning(f"File {filename} is too large to fetch content. Skipping.")
        return ""
    except Exception as e:
        logger.error(f"Error in get_file_content for {filename}: {e}")
        raise ExternalServiceError("GitHub", f"Failed to get file content: {e}") from e

    logger.info(f"Successfully fetched content for {filename}")
    return content


async def update_pr_description(pr: PullRequestContext, body: str) -> None:
    """Replace the PR description."""
    logger.info("Updating PR description...")
    try:
        await asyncio.to_thread(client.update_pull_request_body, pr.owner, pr.repo, pr.number, body)
    except Exception as e:
        logger.error(f"Error in update_pr_description: {e}")
        raise ExternalServiceError("GitHub", f"Failed to update PR description: {e}") from e
    logger.info("PR description updated successfully")


async def post_pr_comment(
    pr: PullRequestContext,
    body: str,
    update_existing: bool = False,
    marker: str = "",
) -> None:
    """Post ``body`` as a PR comment.

    With ``update_existing`` the most recent comment starting with ``marker``
    is edited in place; otherwise a new comment is always created.
    """
    try:
        if update_existing and marker:
            existing = await asyncio.to_thread(
                client.find_issue_comment, pr.owner, pr.repo, pr.number, marker
            )
            if existing is not None:
                logger.info("Updating existing feedback comment")
                await asyncio.to_thread(client.edit_issue_comment, existing, body)
                return

        logger.info("Creating new feedback comment")
        await asyncio.to_thread(client.create_issue_comment, pr.owner, pr.repo, pr.number, body)
    except Exception as e:
        logger.error(f"Error in post_pr_comment: {e}")
        raise ExternalServiceError("GitHub", f"Failed to add PR comment: {e}") from e

    logger.info("PR comment added successfully")
