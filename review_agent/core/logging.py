"""
Logging configuration for the Context Review Agent.
"""

import sys
from typing import Optional

from loguru import logger

from review_agent.config import settings


def configure_logging(environment: Optional[str] = None, debug: Optional[bool] = None) -> None:
    """Configure logging sinks for the current environment.

    Development gets a colourised human-readable sink; every other
    environment (including GitHub Actions runs) gets JSON lines.
    """

    logger.remove()

    environment = environment or settings.environment
    debug = settings.debug if debug is None else debug
    log_level = "DEBUG" if debug else "INFO"

    if environment == "development":
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<blue>{extra[logger_name]}</blue>:<blue>{function}</blue>:<blue>{line}</blue> - "
                "<level>{message}</level>"
            ),
            level=log_level,
            colorize=True,
            backtrace=True,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stderr,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
                "{extra[logger_name]}:{function}:{line} - {message}"
            ),
            level=log_level,
            serialize=True,
        )


logger.configure(extra={"logger_name": "review_agent"})
configure_logging()


def get_logger(name: Optional[str] = None):
    """Get a logger instance with optional name binding."""
    if name:
        return logger.bind(logger_name=name)
    return logger
