#!/usr/bin/env python3
"""Run a PR review locally: run_review.py OWNER REPO PR_NUMBER."""
import asyncio
import sys

from dotenv import load_dotenv

load_dotenv()

from review_agent.config import require_credentials, settings
from review_agent.services.reviewer.schemas import ReviewConfig
from review_agent.services.reviewer.service import review_pull_request_by_number


async def main(owner: str, repo: str, pr_number: int):
    require_credentials(settings)
    result = await review_pull_request_by_number(
        owner=owner,
        repo=repo,
        pr_number=pr_number,
        config=ReviewConfig.from_settings(settings),
    )
    print(f"Review result: {result.model_dump_json(indent=2)}")


if __name__ == "__main__":
    if len(sys.argv) != 4:
        sys.exit(__doc__)
    asyncio.run(main(sys.argv[1], sys.argv[2], int(sys.argv[3])))
