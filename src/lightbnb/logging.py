"""Structured logging configuration."""

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger


def configure_logging(*, json_output: bool = False, level: int = logging.INFO) -> None:
    """Configure structlog for the data layer.

    Args:
        json_output: If True, render one JSON object per event (for deployed servers).
            Otherwise, pretty console output.
        level: Minimum logging level (default: INFO).
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_output:
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def parse_level(name: str) -> int:
    """Translate a level name such as ``"debug"`` into a :mod:`logging` constant.

    Unknown names fall back to INFO.
    """
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a logger instance."""
    logger: FilteringBoundLogger = structlog.get_logger(name)
    return logger
