"""Shared fixtures for reviewer tests."""

import pytest
from langchain_core.messages import AIMessage

from review_agent.services.reviewer.schemas import (
    FileAnalysis,
    FileDiff,
    PullRequestContext,
    ReviewConfig,
)


class FakeChatModel:
    """Stands in for ChatOpenAI: answers summary and per-file review prompts."""

    def __init__(self, summary="- Adds a feature", reviews=None, fail_for=None):
        self.summary = summary
        self.reviews = reviews or {}
        self.fail_for = fail_for
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        user = messages[-1].content
        if user.startswith("Summarize"):
            if self.fail_for == "summary":
                raise RuntimeError("summary quota exceeded")
            return AIMessage(content=self.summary)
        for filename, reply in self.reviews.items():
            if f"for file {filename}:" in user:
                if self.fail_for == filename:
                    raise RuntimeError(f"model rejected {filename}")
                return AIMessage(content=reply)
        return AIMessage(content="Looks fine.\nCRITICAL_FEEDBACK: false")


@pytest.fixture
def pr():
    return PullRequestContext(
        owner="acme",
        repo="widgets",
        number=42,
        head_sha="abc123",
        body="Adds the widget cache.",
    )


@pytest.fixture
def review_config():
    return ReviewConfig(context_lines=1, model="gpt-4o")


@pytest.fixture
def changed_files():
    return [
        FileDiff(filename="app/cache.py", patch="@@ -1,2 +1,3 @@\n import os\n+import json\n x = 1"),
        FileDiff(filename="README.md", patch="@@ -3,1 +3,1 @@\n-old\n+new"),
    ]


@pytest.fixture
def analyses():
    return [
        FileAnalysis(
            filename="app/cache.py",
            feedback="1. **Observation:** Unbounded cache",
            patch="+cache = {}",
            has_critical_feedback=True,
        ),
        FileAnalysis(
            filename="README.md",
            feedback="Typo fix looks good.",
            patch="-teh\n+the",
            has_critical_feedback=False,
        ),
    ]


@pytest.fixture
def fake_llm():
    return FakeChatModel
