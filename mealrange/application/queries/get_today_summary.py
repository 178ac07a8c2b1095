"""Get today summary query - day totals plus one summary per entry."""

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import List, Optional

import structlog

from mealrange.application.ports import IEntryRepository
from mealrange.application.queries.common import checked_entries, day_bounds, today
from mealrange.domain.aggregation.items import (
    aggregate_confidence,
    aggregate_items,
    aggregate_totals,
)
from mealrange.domain.nutrition.models import Confidence, NutritionalTotals
from mealrange.infrastructure.config import get_reporting_timezone

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EntrySummary:
    """Totals of a single entry."""

    id: str
    raw_text: str
    timestamp: datetime
    totals: NutritionalTotals
    confidence: Confidence
    item_count: int


@dataclass(frozen=True)
class TodaySummary:
    """
    Nutrition summary of one day.

    Attributes:
        date: Summarized calendar date
        totals: Sum of all entry totals
        confidence: Worst confidence among all items of the day
        entries: Entry summaries, newest first
        entry_count: Number of entries logged
    """

    date: date
    totals: NutritionalTotals
    confidence: Confidence
    entries: List[EntrySummary]
    entry_count: int


@dataclass(frozen=True)
class GetTodaySummaryQuery:
    """
    Query: Get day summary.

    Attributes:
        owner: User ID to filter entries
        date: Date to summarize (if None, today in the reporting timezone)
    """

    owner: str
    date: Optional[date] = None


class GetTodaySummaryQueryHandler:
    """Handler for GetTodaySummaryQuery."""

    def __init__(self, repository: IEntryRepository, tz: Optional[tzinfo] = None):
        """
        Initialize handler.

        Args:
            repository: Entry repository port
            tz: Reporting timezone (defaults to MEALRANGE_TIMEZONE)
        """
        self._repository = repository
        self._tz = tz or get_reporting_timezone()

    async def handle(self, query: GetTodaySummaryQuery) -> TodaySummary:
        """
        Execute query and aggregate the day.

        Returns:
            TodaySummary; all-zero totals when nothing was logged

        Raises:
            RangeInvariantViolationError: If a stored item is invalid
        """
        day = query.date or today(self._tz)
        start, end = day_bounds(day, self._tz)

        entries = checked_entries(
            await self._repository.get_by_owner_and_range(owner=query.owner, start=start, end=end)
        )

        summaries = [
            EntrySummary(
                id=entry.id,
                raw_text=entry.raw_text,
                timestamp=entry.timestamp,
                totals=aggregate_items(entry.items),
                confidence=aggregate_confidence(entry.items),
                item_count=len(entry.items),
            )
            for entry in sorted(entries, key=lambda e: e.timestamp, reverse=True)
        ]

        summary = TodaySummary(
            date=day,
            totals=aggregate_totals(s.totals for s in summaries),
            confidence=aggregate_confidence(item for entry in entries for item in entry.items),
            entries=summaries,
            entry_count=len(summaries),
        )

        logger.info(
            "Day summary calculated",
            owner=query.owner,
            date=day.isoformat(),
            calories_mid=summary.totals.calories.mid,
            entry_count=summary.entry_count,
        )
        return summary
