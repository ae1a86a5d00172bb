"""Context Review Agent: LLM review of pull request changes with surrounding code."""

__version__ = "0.1.0"
