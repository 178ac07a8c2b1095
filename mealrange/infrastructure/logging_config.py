"""Structured logging setup."""

import logging
from typing import Optional

import structlog

from mealrange.infrastructure.config import get_log_json, get_log_level


def configure_logging(level: Optional[str] = None, json: Optional[bool] = None) -> None:
    """
    Configure structlog for the application layer.

    Args:
        level: Log level name, defaults to MEALRANGE_LOG_LEVEL
        json: Render JSON lines instead of console output, defaults to
            MEALRANGE_LOG_JSON

    Example:
        >>> configure_logging(level="DEBUG")
        >>> structlog.get_logger(__name__).info("ready", component="mealrange")
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name!r}")
    use_json = get_log_json() if json is None else json

    renderer = (
        structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )
