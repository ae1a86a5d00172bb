"""Prompt templates using Jinja2."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

PROMPTS_DIR = Path(__file__).parent
_env = Environment(loader=FileSystemLoader(PROMPTS_DIR), undefined=StrictUndefined)


def render_file_review_system_prompt(sentinel: str) -> str:
    """Render the per-file critique system prompt."""
    template = _env.get_template("file_review_system.jinja2")
    return template.render(sentinel=sentinel)


def render_file_review_prompt(filename: str, patch: str, context: str) -> str:
    """Render the per-file critique request."""
    template = _env.get_template("file_review.jinja2")
    return template.render(filename=filename, patch=patch, context=context)


def render_pr_summary_system_prompt() -> str:
    """Render the whole-PR summary system prompt."""
    template = _env.get_template("pr_summary_system.jinja2")
    return template.render()


def render_pr_summary_prompt(changes: str) -> str:
    """Render the whole-PR summary request."""
    template = _env.get_template("pr_summary.jinja2")
    return template.render(changes=changes)
