"""
Temporal aggregation.

Buckets entries by calendar date and derives weekly statistics. The
caller supplies entries already filtered to the reporting window; the
reference timezone, when given, only decides where a day starts.
"""

from __future__ import annotations

import datetime as dt
import math
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from mealrange.domain.aggregation.items import aggregate_items
from mealrange.domain.nutrition.models import (
    NUTRIENT_FIELDS,
    DailyRange,
    DailyRanges,
    DailySummary,
    Entry,
    EntryItem,
    NutritionalTotals,
    WeeklyAverage,
    WeeklySummary,
)
from mealrange.domain.nutrition.ranges import NutritionalRange

DAYS_PER_WEEK = 7


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (1.5 -> 2, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def calendar_date(timestamp: dt.datetime, tz: Optional[dt.tzinfo] = None) -> dt.date:
    """
    Calendar day of an instant.

    Aware timestamps are converted to tz first; naive timestamps are
    taken as already expressed in the reference timezone.
    """
    if tz is not None and timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(tz)
    return timestamp.date()


def group_by_calendar_date(
    entries: Iterable[Entry], tz: Optional[dt.tzinfo] = None
) -> List[DailySummary]:
    """
    One DailySummary per calendar date, ascending by date.

    Args:
        entries: Entries with their items
        tz: Reference timezone for day boundaries

    Returns:
        Daily totals and entry counts

    Example:
        >>> group_by_calendar_date([])
        []
    """
    buckets: Dict[dt.date, List[Entry]] = {}
    for entry in entries:
        buckets.setdefault(calendar_date(entry.timestamp, tz), []).append(entry)

    summaries = []
    for day in sorted(buckets):
        bucket = buckets[day]
        items: List[EntryItem] = [item for entry in bucket for item in entry.items]
        summaries.append(
            DailySummary(date=day, totals=aggregate_items(items), entry_count=len(bucket))
        )
    return summaries


def compute_weekly_average(days: Sequence[DailySummary]) -> WeeklyAverage:
    """
    Rounded per-day averages and the spread of daily mid totals.

    For every nutrient, each of min/mid/max is averaged over the days
    and rounded half up. daily_ranges holds the smallest and largest
    daily mid total.

    Example:
        >>> result = compute_weekly_average([])
        >>> result.averages == NutritionalTotals.zero()
        True
    """
    n = len(days)
    if n == 0:
        return WeeklyAverage(averages=NutritionalTotals.zero(), daily_ranges=DailyRanges.zero())

    averages = {}
    daily_ranges = {}
    for name in NUTRIENT_FIELDS:
        ranges = [getattr(day.totals, name) for day in days]
        averages[name] = NutritionalRange(
            min=round_half_up(sum(r.min for r in ranges) / n),
            mid=round_half_up(sum(r.mid for r in ranges) / n),
            max=round_half_up(sum(r.max for r in ranges) / n),
        )
        mids = [r.mid for r in ranges]
        daily_ranges[name] = DailyRange(min=min(mids), max=max(mids))

    return WeeklyAverage(
        averages=NutritionalTotals(**averages),
        daily_ranges=DailyRanges(**daily_ranges),
    )


def consistency_score(days_logged: int, period_days: int = DAYS_PER_WEEK) -> int:
    """
    Percentage of days in the period with at least one entry.

    Raises:
        ValueError: If period_days is not positive or days_logged is
            outside [0, period_days]
    """
    if period_days <= 0:
        raise ValueError(f"period_days must be positive: {period_days}")
    if not 0 <= days_logged <= period_days:
        raise ValueError(f"days_logged must be between 0 and {period_days}: {days_logged}")
    return round_half_up(100 * days_logged / period_days)


def week_bounds(reference: dt.date) -> Tuple[dt.date, dt.date]:
    """Monday and Sunday of the week containing reference."""
    monday = reference - dt.timedelta(days=reference.weekday())
    return monday, monday + dt.timedelta(days=DAYS_PER_WEEK - 1)


def summarize_week(
    days: Sequence[DailySummary],
    week_start: dt.date,
    period_days: int = DAYS_PER_WEEK,
) -> WeeklySummary:
    """
    Weekly statistics for the days of one period.

    Args:
        days: Daily summaries inside the period (one per logged date)
        week_start: First day of the period
        period_days: Period length used for the consistency score
    """
    weekly = compute_weekly_average(days)
    return WeeklySummary(
        week_start=week_start,
        week_end=week_start + dt.timedelta(days=period_days - 1),
        averages=weekly.averages,
        daily_ranges=weekly.daily_ranges,
        days_logged=len(days),
        consistency_score=consistency_score(len(days), period_days),
    )
