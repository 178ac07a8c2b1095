"""Get weekly summary query - averages and consistency for a Monday-Sunday week."""

from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Optional

import structlog

from mealrange.application.ports import IEntryRepository
from mealrange.application.queries.common import checked_entries, day_bounds, today
from mealrange.domain.aggregation.temporal import (
    group_by_calendar_date,
    summarize_week,
    week_bounds,
)
from mealrange.domain.nutrition.models import WeeklySummary
from mealrange.infrastructure.config import get_reporting_timezone

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GetWeeklySummaryQuery:
    """
    Query: Get weekly summary.

    Attributes:
        owner: User ID to filter entries
        reference: Any date in the week (if None, today)
    """

    owner: str
    reference: Optional[date] = None


class GetWeeklySummaryQueryHandler:
    """Handler for GetWeeklySummaryQuery."""

    def __init__(self, repository: IEntryRepository, tz: Optional[tzinfo] = None):
        self._repository = repository
        self._tz = tz or get_reporting_timezone()

    async def handle(self, query: GetWeeklySummaryQuery) -> WeeklySummary:
        """
        Execute query.

        Algorithm:
            1. Resolve the Monday-Sunday week containing reference
            2. Bucket the week's entries by calendar date
            3. Average daily totals and score logging consistency
        """
        reference = query.reference or today(self._tz)
        week_start, week_end = week_bounds(reference)
        start, _ = day_bounds(week_start, self._tz)
        _, end = day_bounds(week_end, self._tz)

        entries = checked_entries(
            await self._repository.get_by_owner_and_range(owner=query.owner, start=start, end=end)
        )
        days = group_by_calendar_date(entries, tz=self._tz)
        summary = summarize_week(days, week_start)

        logger.info(
            "Weekly summary calculated",
            owner=query.owner,
            week_start=week_start.isoformat(),
            days_logged=summary.days_logged,
            consistency_score=summary.consistency_score,
        )
        return summary
