"""LangGraph pipeline for a review run.

    START -> list_files -> { summarize_pr, review_file x N } -> write_back -> END

The summary branch and every per-file branch run in the same superstep.
write_back only runs once all of them have finished; an exception in any
branch aborts the run, so nothing is written back after a failure.
"""

from langchain_core.language_models import BaseChatModel
from langgraph.graph import END, START, StateGraph
from langgraph.types import Send

from review_agent.core.logging import get_logger
from review_agent.services.github.service import list_changed_files
from review_agent.services.reviewer.file_review import review_file
from review_agent.services.reviewer.schemas import PullRequestContext, ReviewConfig
from review_agent.services.reviewer.state import FileReviewInput, ReviewState, SummaryInput
from review_agent.services.reviewer.summary import generate_pr_summary
from review_agent.services.reviewer.writeback import dispatch_write_backs

logger = get_logger("reviewer.graph")


def create_review_graph(pr: PullRequestContext, config: ReviewConfig, llm: BaseChatModel):
    """Create the review graph for one pull request."""

    async def list_files_node(state: ReviewState) -> dict:
        files = await list_changed_files(pr)
        return {"files": files}

    def dispatch_reviews(state: ReviewState) -> list[Send]:
        """Fan out the summary request and one review per changed file."""
        files = state["files"]
        logger.info(f"Analyzing {len(files)} changed files...")
        sends = [Send("summarize_pr", {"files": files})]
        sends.extend(Send("review_file", {"file": f}) for f in files)
        return sends

    async def summarize_pr_node(state: SummaryInput) -> dict:
        summary = await generate_pr_summary(llm, state["files"])
        return {"summary": summary}

    async def review_file_node(state: FileReviewInput) -> dict:
        analysis = await review_file(state["file"], pr, config, llm)
        return {"analyses": [analysis]}

    async def write_back_node(state: ReviewState) -> dict:
        posted = await dispatch_write_backs(
            pr,
            state.get("summary", ""),
            state.get("analyses", []),
            config,
        )
        return {"comment_posted": posted}

    graph = StateGraph(ReviewState)

    graph.add_node("list_files", list_files_node)
    graph.add_node("summarize_pr", summarize_pr_node)
    graph.add_node("review_file", review_file_node)
    graph.add_node("write_back", write_back_node)

    graph.add_edge(START, "list_files")
    graph.add_conditional_edges("list_files", dispatch_reviews, ["summarize_pr", "review_file"])
    graph.add_edge("summarize_pr", "write_back")
    graph.add_edge("review_file", "write_back")
    graph.add_edge("write_back", END)

    return graph.compile()
