"""GitHub webhook routes."""

from fastapi import APIRouter, BackgroundTasks, Request

from review_agent.config import require_credentials, settings
from review_agent.core.exceptions import ValidationError
from review_agent.core.logging import get_logger
from review_agent.core.security import require_github_signature
from review_agent.services.github.schemas import (
    EventIgnoredResponse,
    ManualReviewRequest,
    PingResponse,
    ReviewStartedResponse,
)
from review_agent.services.reviewer.schemas import ReviewConfig
from review_agent.services.reviewer.service import review_pull_request_by_number

logger = get_logger("github.routes")

router = APIRouter()

REVIEWED_ACTIONS = ("opened", "synchronize")


@router.post("/webhook/github")
async def github_webhook(request: Request, background_tasks: BackgroundTasks):
    """Handle GitHub webhook events."""
    event = request.headers.get("X-GitHub-Event")
    signature = request.headers.get("X-Hub-Signature-256", "")
    delivery_id = request.headers.get("X-GitHub-Delivery")

    logger.info(f"Webhook received: event={event}, delivery={delivery_id}")

    body = await request.body()
    require_github_signature(body, signature)

    payload = await request.json()

    if event == "pull_request":
        return handle_pull_request(payload, background_tasks)
    if event == "ping":
        return PingResponse(zen=payload.get("zen", ""))

    logger.info(f"Unhandled event type: {event}")
    return EventIgnoredResponse(message=f"Event {event} not handled")


@router.post("/review", response_model=ReviewStartedResponse)
async def manual_review(request: ManualReviewRequest, background_tasks: BackgroundTasks):
    """Start a review of any PR the token can access."""
    _check_credentials()
    background_tasks.add_task(run_review, request.owner, request.repo, request.pr_number)
    return ReviewStartedResponse(pr=f"{request.owner}/{request.repo}#{request.pr_number}")


def handle_pull_request(payload: dict, background_tasks: BackgroundTasks):
    """Handle pull_request events."""
    action = payload.get("action")
    pr = payload.get("pull_request", {})
    repo = payload.get("repository", {})

    owner = repo.get("owner", {}).get("login")
    repo_name = repo.get("name")
    pr_number = pr.get("number")

    logger.info(f"PR event: {action} on {owner}/{repo_name}#{pr_number}")

    if action not in REVIEWED_ACTIONS:
        return EventIgnoredResponse(message=f"Action {action} not reviewed")

    if not owner or not repo_name or not pr_number:
        raise ValidationError("pull_request payload is missing repository or number")

    _check_credentials()
    background_tasks.add_task(run_review, owner, repo_name, pr_number)

    return ReviewStartedResponse(pr=f"{owner}/{repo_name}#{pr_number}", action=action)


def _check_credentials() -> None:
    try:
        require_credentials(settings)
    except ValueError as e:
        raise ValidationError(str(e)) from e


async def run_review(owner: str, repo: str, pr_number: int) -> None:
    """Run the review in background."""
    try:
        result = await review_pull_request_by_number(
            owner, repo, pr_number, ReviewConfig.from_settings(settings)
        )
        logger.info(f"Review completed: {result.pr}, {result.critical_files} critical files")
    except Exception as e:
        logger.error(f"Review failed for {owner}/{repo}#{pr_number}: {e}")
