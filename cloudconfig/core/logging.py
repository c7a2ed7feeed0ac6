"""Structured logging setup."""
import logging
import sys
from typing import Any

import structlog

from cloudconfig.core.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure structlog for the process.

    Logs always go to stderr; stdout carries the setup prompts.
    """
    renderer: Any
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a bound logger for a module."""
    return structlog.get_logger(name)
