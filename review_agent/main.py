"""Context Review Agent - FastAPI entry point."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from review_agent import __version__
from review_agent.config import settings
from review_agent.core.exceptions import ApiException
from review_agent.core.logging import get_logger
from review_agent.core.schemas.responses import ErrorResponse, HealthResponse
from review_agent.services.github.routes import router as github_router

logger = get_logger("main")

app = FastAPI(
    title="Context Review Agent",
    description="LLM pull request reviewer with surrounding-code context",
    version=__version__,
)


@app.exception_handler(ApiException)
async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    """Handle custom API exceptions and return structured error response."""
    logger.warning(f"API error: {exc.message} (status={exc.status_code})")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=exc.message,
            details=exc.details if exc.details else None,
        ).model_dump(),
    )

app.include_router(github_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "context-review-agent",
        "version": __version__,
        "status": "running",
    }


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Context Review Agent on {settings.host}:{settings.port}")
    uvicorn.run(
        "review_agent.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
