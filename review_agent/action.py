"""GitHub Actions entry point.

Reads the workflow event payload, reviews the pull request it describes and
reports failure through the ``::error::`` workflow command and a non-zero
exit status.
"""

import asyncio
import json
import os
from pathlib import Path
from typing import Optional

from review_agent.config import Settings, require_credentials, settings
from review_agent.core.exceptions import ValidationError
from review_agent.core.logging import get_logger
from review_agent.services.reviewer.schemas import PullRequestContext, ReviewConfig
from review_agent.services.reviewer.service import review_pull_request

logger = get_logger("action")

UNKNOWN_ERROR = "An unknown error occurred"


def load_event_payload(event_path: Optional[str] = None) -> dict:
    """Load the JSON payload of the event that triggered the workflow."""
    event_path = event_path or os.environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        raise ValidationError("GITHUB_EVENT_PATH is not set; not running inside GitHub Actions")
    return json.loads(Path(event_path).read_text(encoding="utf-8"))


def pull_request_from_event(payload: dict, repository: Optional[str] = None) -> PullRequestContext:
    """Build the run's PR context from a ``pull_request`` event payload."""
    pr = payload.get("pull_request")
    if not pr:
        raise ValidationError("Event payload has no pull_request; trigger this action on pull_request events")

    repository = repository or os.environ.get("GITHUB_REPOSITORY") or payload.get("repository", {}).get("full_name")
    if not repository or "/" not in repository:
        raise ValidationError(f"Cannot determine repository from {repository!r}")
    owner, repo = repository.split("/", 1)

    return PullRequestContext(
        owner=owner,
        repo=repo,
        number=pr["number"],
        head_sha=pr["head"]["sha"],
        body=pr.get("body"),
    )


def set_failed(message: str) -> None:
    """Report a failed run to the Actions runner."""
    message = message or UNKNOWN_ERROR
    # Workflow commands need newlines escaped
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    print(f"::error::{escaped}", flush=True)


async def run(config: Optional[Settings] = None) -> None:
    """Review the pull request that triggered the workflow."""
    config = config or settings
    require_credentials(config)
    pr = pull_request_from_event(load_event_payload())
    await review_pull_request(pr, ReviewConfig.from_settings(config))


def main() -> int:
    try:
        asyncio.run(run())
    except Exception as e:
        logger.error(f"Error in run function: {e}")
        set_failed(str(e))
        return 1
    return 0
