"""Get entry query - retrieve a single entry with its items."""

from dataclasses import dataclass
from typing import Optional

import structlog

from mealrange.application.ports import IEntryRepository
from mealrange.domain.nutrition.models import Entry

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GetEntryQuery:
    """
    Query: Get single entry by ID.

    Attributes:
        entry_id: Entry ID to retrieve
        owner: User ID for authorization
    """

    entry_id: str
    owner: str


class GetEntryQueryHandler:
    """Handler for GetEntryQuery."""

    def __init__(self, repository: IEntryRepository):
        """
        Initialize handler.

        Args:
            repository: Entry repository port
        """
        self._repository = repository

    async def handle(self, query: GetEntryQuery) -> Optional[Entry]:
        """
        Execute query and return entry if owned by owner.

        Returns:
            Entry with items in parser order, None if not found or
            owned by someone else

        Example:
            >>> handler = GetEntryQueryHandler(repository)
            >>> entry = await handler.handle(GetEntryQuery("entry-1", "user123"))
            >>> entry.owner == "user123"
            True
        """
        entry = await self._repository.get_by_id(query.entry_id, query.owner)
        if entry is None:
            logger.debug(
                "Entry not found or access denied",
                entry_id=query.entry_id,
                owner=query.owner,
            )
        else:
            logger.debug("Entry retrieved", entry_id=entry.id, item_count=len(entry.items))
        return entry
