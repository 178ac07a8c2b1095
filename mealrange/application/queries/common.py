"""Helpers shared by the summary queries."""

from datetime import date, datetime, time, tzinfo
from typing import List, Sequence, Tuple

import structlog

from mealrange.domain.nutrition.invariants import ensure_valid_items
from mealrange.domain.nutrition.models import Entry
from mealrange.domain.shared.errors import RangeInvariantViolationError

logger = structlog.get_logger(__name__)


def day_bounds(day: date, tz: tzinfo) -> Tuple[datetime, datetime]:
    """First and last instant of a calendar day in tz."""
    return (
        datetime.combine(day, time.min, tzinfo=tz),
        datetime.combine(day, time.max, tzinfo=tz),
    )


def today(tz: tzinfo) -> date:
    """Current calendar date in tz."""
    return datetime.now(tz).date()


def checked_entries(entries: Sequence[Entry]) -> List[Entry]:
    """
    Run the range invariant gate over stored items.

    Stored rows did not necessarily come through the response
    validator (migrations, manual edits), so every query re-checks them
    before aggregating.

    Raises:
        RangeInvariantViolationError: On the first invalid stored item
    """
    for entry in entries:
        try:
            ensure_valid_items(entry.items)
        except RangeInvariantViolationError as e:
            logger.error(
                "Stored entry item violates range invariant",
                entry_id=entry.id,
                item_index=e.item_index,
                field=e.field,
            )
            raise
    return list(entries)
