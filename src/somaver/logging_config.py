"""Structured logging configuration.

Log events are rendered as JSON lines on stderr so that command output on
stdout stays machine readable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_DEFAULT_LEVEL = "WARNING"


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honoured.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = _DEFAULT_LEVEL) -> None:
    """Configure structlog for the process.

    Args:
        level: Standard level name (DEBUG, INFO, WARNING, ERROR).

    Raises:
        ValueError: If the level name is unknown.
    """
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level: {level!r}")

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger bound to `name` (usually __name__).

    Does not configure structlog; the CLI calls `configure_logging()`, host
    applications keep their own configuration.
    """
    return structlog.get_logger(name)
