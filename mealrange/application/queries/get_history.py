"""Get history query - daily totals over a trailing window."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import List, Optional

import structlog

from mealrange.application.entry_parsing import normalize_timestamp
from mealrange.application.ports import IEntryRepository
from mealrange.application.queries.common import checked_entries
from mealrange.domain.aggregation.temporal import calendar_date, group_by_calendar_date
from mealrange.domain.nutrition.models import DailySummary
from mealrange.infrastructure.config import get_history_days, get_reporting_timezone

logger = structlog.get_logger(__name__)

MIN_HISTORY_DAYS = 1
MAX_HISTORY_DAYS = 365


@dataclass(frozen=True)
class HistorySummary:
    """
    Daily summaries for charting.

    Attributes:
        days: One summary per logged date, newest first
        period_from: First date of the window
        period_to: Last date of the window
    """

    days: List[DailySummary]
    period_from: date
    period_to: date


@dataclass(frozen=True)
class GetHistoryQuery:
    """
    Query: Get daily history.

    Attributes:
        owner: User ID to filter entries
        days: Window length (defaults to MEALRANGE_HISTORY_DAYS, clamped
            to 1-365)
        end: Window end (defaults to now; naive values are read in the
            reporting timezone)
    """

    owner: str
    days: Optional[int] = None
    end: Optional[datetime] = None


class GetHistoryQueryHandler:
    """Handler for GetHistoryQuery."""

    def __init__(self, repository: IEntryRepository, tz: Optional[tzinfo] = None):
        self._repository = repository
        self._tz = tz or get_reporting_timezone()

    async def handle(self, query: GetHistoryQuery) -> HistorySummary:
        """
        Execute query.

        Returns:
            HistorySummary; dates without entries are omitted
        """
        requested = query.days if query.days is not None else get_history_days()
        days = min(max(requested, MIN_HISTORY_DAYS), MAX_HISTORY_DAYS)

        end = normalize_timestamp(query.end, self._tz) if query.end else datetime.now(timezone.utc)
        start = end - timedelta(days=days)

        entries = checked_entries(
            await self._repository.get_by_owner_and_range(owner=query.owner, start=start, end=end)
        )
        daily = group_by_calendar_date(entries, tz=self._tz)

        logger.info(
            "History calculated",
            owner=query.owner,
            window_days=days,
            days_logged=len(daily),
        )

        return HistorySummary(
            days=list(reversed(daily)),
            period_from=calendar_date(start, self._tz),
            period_to=calendar_date(end, self._tz),
        )
