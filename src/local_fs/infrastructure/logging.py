"""structlog setup for the filesystem layer.

Until setup_logging() runs, loggers handed out by get_logger() only emit
WARNING and above, and always to stderr. Library callers importing
local_fs for its functions therefore never see log lines mixed into their
stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor


def _base_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
) -> None:
    """
    Route structured logs to stderr at the given level.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_format: 'json' for one object per line, 'console' for humans
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)

    if log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*_base_processors(), renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def _ensure_quiet_default() -> None:
    """Install a WARNING-level stderr configuration if nobody configured structlog."""
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[*_base_processors(), structlog.dev.ConsoleRenderer(colors=False)],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Return a structlog logger, optionally pre-bound with context.

    Args:
        name: Usually the calling module's __name__
        **initial_context: Key/value pairs attached to every event

    Returns:
        A bound structlog logger
    """
    _ensure_quiet_default()
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
