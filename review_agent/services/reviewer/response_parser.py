"""Parse the model's free-text review into feedback and a critical flag."""

from dataclasses import dataclass
from typing import Union

CRITICAL_FEEDBACK_SENTINEL = "CRITICAL_FEEDBACK:"


@dataclass(frozen=True)
class ParsedReview:
    """Response carried the sentinel; the flag is trustworthy."""

    feedback: str
    has_critical_feedback: bool


@dataclass(frozen=True)
class MalformedReview:
    """Response without the sentinel. Feedback is kept, the flag is unknown."""

    feedback: str
    reason: str

    @property
    def has_critical_feedback(self) -> bool:
        return False


ReviewParseResult = Union[ParsedReview, MalformedReview]


def parse_review_response(content: str) -> ReviewParseResult:
    """Split a review on the critical-feedback sentinel.

    Text before the first sentinel is the feedback. Text between the first
    and any second sentinel decides the flag: it must equal ``true``
    (case-insensitive, surrounding whitespace ignored).
    """
    content = content or ""
    parts = content.split(CRITICAL_FEEDBACK_SENTINEL)

    if len(parts) < 2:
        return MalformedReview(
            feedback=content.strip(),
            reason=f"response is missing the {CRITICAL_FEEDBACK_SENTINEL} marker",
        )

    feedback, indicator = parts[0], parts[1]
    return ParsedReview(
        feedback=feedback.strip(),
        has_critical_feedback=indicator.strip().lower() == "true",
    )
