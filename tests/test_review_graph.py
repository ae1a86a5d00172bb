"""Tests for the review graph and the reviewer service."""

from unittest.mock import AsyncMock, patch

import pytest

from review_agent.core.exceptions import ExternalServiceError
from review_agent.services.reviewer.schemas import ReviewConfig
from review_agent.services.reviewer.service import review_pull_request, review_pull_request_by_number

CONTENT = "import os\nimport json\nx = 1"


@pytest.fixture
def github():
    """Patch every GitHub call the graph makes."""
    with patch(
        "review_agent.services.reviewer.graph.list_changed_files", new_callable=AsyncMock
    ) as list_files, patch(
        "review_agent.services.reviewer.file_review.get_file_content", new_callable=AsyncMock
    ) as content, patch(
        "review_agent.services.reviewer.writeback.update_pr_description", new_callable=AsyncMock
    ) as update, patch(
        "review_agent.services.reviewer.writeback.post_pr_comment", new_callable=AsyncMock
    ) as comment:
        content.return_value = CONTENT
        yield {
            "list_files": list_files,
            "content": content,
            "update": update,
            "comment": comment,
        }


class TestReviewPullRequest:
    """Tests for review_pull_request function."""

    @pytest.mark.asyncio
    async def test_full_run(self, github, pr, review_config, changed_files, fake_llm):
        """Every file is analyzed once, then both write-backs happen."""
        github["list_files"].return_value = changed_files
        llm = fake_llm(
            summary="- Adds JSON support",
            reviews={
                "app/cache.py": "1. **Observation:** Unused import\nCRITICAL_FEEDBACK: true",
                "README.md": "Fine.\nCRITICAL_FEEDBACK: false",
            },
        )

        result = await review_pull_request(pr, review_config, llm=llm)

        assert result.pr == "acme/widgets#42"
        assert result.files_reviewed == 2
        assert result.critical_files == 1
        assert result.summary == "- Adds JSON support"
        assert result.comment_posted is True

        assert github["content"].await_count == 2
        assert len(llm.calls) == 3
        github["update"].assert_awaited_once_with(
            pr, "Adds the widget cache.\n\n## gpt-4o Summary\n\n- Adds JSON support"
        )
        comment_body = github["comment"].call_args.args[1]
        assert "### app/cache.py" in comment_body
        assert "### README.md" not in comment_body

    @pytest.mark.asyncio
    async def test_summary_prompt_carries_patches(self, github, pr, review_config, changed_files, fake_llm):
        """The summary request concatenates file names and raw patches."""
        github["list_files"].return_value = changed_files
        llm = fake_llm()

        await review_pull_request(pr, review_config, llm=llm)

        summary_calls = [c for c in llm.calls if c[-1].content.startswith("Summarize")]
        assert len(summary_calls) == 1
        prompt = summary_calls[0][-1].content
        assert f"File: app/cache.py\n\n{changed_files[0].patch}\n\n---\n\nFile: README.md" in prompt
        assert "bullet points" in summary_calls[0][0].content

    @pytest.mark.asyncio
    async def test_no_critical_feedback_skips_comment(self, github, pr, review_config, changed_files, fake_llm):
        """Only the description is written when nothing is critical."""
        github["list_files"].return_value = changed_files

        result = await review_pull_request(pr, review_config, llm=fake_llm())

        assert result.comment_posted is False
        github["update"].assert_awaited_once()
        github["comment"].assert_not_called()

    @pytest.mark.asyncio
    async def test_no_changed_files(self, github, pr, review_config, fake_llm):
        """An empty PR still gets a summary and no comment."""
        github["list_files"].return_value = []

        result = await review_pull_request(pr, review_config, llm=fake_llm(summary="- Nothing"))

        assert result.files_reviewed == 0
        github["update"].assert_awaited_once()
        github["comment"].assert_not_called()

    @pytest.mark.asyncio
    async def test_file_failure_aborts_before_write_back(self, github, pr, review_config, changed_files, fake_llm):
        """One failing file review means nothing is written back."""
        github["list_files"].return_value = changed_files
        llm = fake_llm(reviews={"README.md": "unused"}, fail_for="README.md")

        with pytest.raises(ExternalServiceError, match="Failed to analyze file changes"):
            await review_pull_request(pr, review_config, llm=llm)

        github["update"].assert_not_called()
        github["comment"].assert_not_called()

    @pytest.mark.asyncio
    async def test_summary_failure_aborts_before_write_back(self, github, pr, review_config, changed_files, fake_llm):
        """A failing summary request means nothing is written back."""
        github["list_files"].return_value = changed_files

        with pytest.raises(ExternalServiceError, match="Failed to generate PR summary"):
            await review_pull_request(pr, review_config, llm=fake_llm(fail_for="summary"))

        github["update"].assert_not_called()
        github["comment"].assert_not_called()

    @pytest.mark.asyncio
    async def test_listing_failure_stops_run(self, github, pr, review_config, fake_llm):
        """A failed file listing stops the run before any model call."""
        github["list_files"].side_effect = ExternalServiceError("GitHub", "Failed to get changed files: 502")
        llm = fake_llm()

        with pytest.raises(ExternalServiceError, match="Failed to get changed files"):
            await review_pull_request(pr, review_config, llm=llm)

        assert llm.calls == []
        github["update"].assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrency_cap(self, github, pr, changed_files, fake_llm):
        """A configured concurrency cap still reviews every file."""
        github["list_files"].return_value = changed_files
        config = ReviewConfig(context_lines=1, max_concurrency=1)

        result = await review_pull_request(pr, config, llm=fake_llm())

        assert result.files_reviewed == 2

    @pytest.mark.asyncio
    @patch("review_agent.services.reviewer.service.get_chat_llm")
    async def test_builds_llm_from_config(self, mock_get_llm, github, pr, fake_llm):
        """Without an explicit model client, one is built for the configured model."""
        github["list_files"].return_value = []
        mock_get_llm.return_value = fake_llm()

        await review_pull_request(pr, ReviewConfig(model="gpt-4o-mini"))

        mock_get_llm.assert_called_once_with(model="gpt-4o-mini")


class TestReviewPullRequestByNumber:
    """Tests for review_pull_request_by_number function."""

    @pytest.mark.asyncio
    @patch("review_agent.services.reviewer.service.review_pull_request", new_callable=AsyncMock)
    @patch("review_agent.services.reviewer.service.get_pull_request_context", new_callable=AsyncMock)
    async def test_loads_context_first(self, mock_context, mock_review, pr, review_config):
        """The PR head and body are loaded before reviewing."""
        mock_context.return_value = pr

        await review_pull_request_by_number("acme", "widgets", 42, review_config)

        mock_context.assert_awaited_once_with("acme", "widgets", 42)
        mock_review.assert_awaited_once_with(pr, review_config)
