"""Core schemas for API responses."""

from review_agent.core.schemas.responses import ErrorResponse, HealthResponse

__all__ = ["ErrorResponse", "HealthResponse"]
