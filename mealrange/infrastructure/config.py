"""Configuration utilities for infrastructure layer."""

import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TIMEZONE = "UTC"
DEFAULT_HISTORY_DAYS = 30
DEFAULT_SUGGESTION_LIMIT = 10


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def get_reporting_timezone() -> ZoneInfo:
    """
    Get the timezone that decides where a calendar day starts.

    Returns:
        ZoneInfo from MEALRANGE_TIMEZONE, defaults to UTC

    Raises:
        ValueError: If the name is not a known IANA timezone
    """
    name = os.getenv("MEALRANGE_TIMEZONE", DEFAULT_TIMEZONE)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone in MEALRANGE_TIMEZONE: {name!r}") from e


def get_history_days() -> int:
    """
    Get the default history window in days.

    Returns:
        Value of MEALRANGE_HISTORY_DAYS, defaults to 30
    """
    return _get_int("MEALRANGE_HISTORY_DAYS", DEFAULT_HISTORY_DAYS)


def get_suggestion_limit() -> int:
    """Get the default number of suggestions (MEALRANGE_SUGGESTION_LIMIT)."""
    return _get_int("MEALRANGE_SUGGESTION_LIMIT", DEFAULT_SUGGESTION_LIMIT)


def get_log_level() -> str:
    """
    Get the structlog level name.

    Returns:
        Upper-cased value of MEALRANGE_LOG_LEVEL, defaults to INFO
    """
    return os.getenv("MEALRANGE_LOG_LEVEL", "INFO").upper()


def get_log_json() -> bool:
    """True when MEALRANGE_LOG_JSON is set to 1/true/yes."""
    return os.getenv("MEALRANGE_LOG_JSON", "0").strip().lower() in {"1", "true", "yes"}
