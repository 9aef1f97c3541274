"""Structured logging configuration for Spoticus."""

from __future__ import annotations

import logging
from typing import IO, Optional

import structlog


def configure_logging(level: int | str = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Configure structlog for the bot process.

    Args:
        level: Standard logging level (e.g., logging.DEBUG) or its name ("DEBUG").
        stream: Where log lines go. Defaults to stdout for structlog and
            stderr for stdlib loggers.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    # Third-party libraries (slack_sdk, kubernetes) log through stdlib logging
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )
