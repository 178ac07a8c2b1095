"""List entries query - paginated entries with an optional time window."""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import List, Optional

import structlog

from mealrange.application.entry_parsing import normalize_timestamp
from mealrange.application.ports import IEntryRepository
from mealrange.domain.nutrition.models import Entry
from mealrange.infrastructure.config import get_reporting_timezone

logger = structlog.get_logger(__name__)

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class EntryPage:
    """
    One page of entries.

    Attributes:
        entries: Entries with items, newest first
        total: Number of entries matching the filter
        has_more: True if entries remain after this page
    """

    entries: List[Entry]
    total: int
    has_more: bool


@dataclass(frozen=True)
class ListEntriesQuery:
    """
    Query: List entries for user with optional filters.

    Attributes:
        owner: User ID to filter entries
        start: Optional window start (inclusive)
        end: Optional window end (inclusive)
        limit: Page size (default: 100, clamped to 1-100)
        offset: Pagination offset (default: 0)
    """

    owner: str
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    limit: int = MAX_PAGE_SIZE
    offset: int = 0


class ListEntriesQueryHandler:
    """Handler for ListEntriesQuery."""

    def __init__(self, repository: IEntryRepository, tz: Optional[tzinfo] = None):
        self._repository = repository
        self._tz = tz or get_reporting_timezone()

    async def handle(self, query: ListEntriesQuery) -> EntryPage:
        """
        Execute query.

        Naive window bounds are read in the reporting timezone.

        Returns:
            EntryPage ordered by timestamp desc
        """
        limit = min(max(query.limit, 1), MAX_PAGE_SIZE)
        offset = max(query.offset, 0)
        start = normalize_timestamp(query.start, self._tz) if query.start else None
        end = normalize_timestamp(query.end, self._tz) if query.end else None

        matching = [
            entry
            for entry in await self._repository.list_by_owner(query.owner)
            if (start is None or entry.timestamp >= start)
            and (end is None or entry.timestamp <= end)
        ]
        page = matching[offset : offset + limit]

        logger.debug(
            "Entries listed",
            owner=query.owner,
            total=len(matching),
            returned=len(page),
            offset=offset,
        )
        return EntryPage(
            entries=page,
            total=len(matching),
            has_more=offset + len(page) < len(matching),
        )
