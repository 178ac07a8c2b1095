"""Update entry command and handler.

Re-parses the description and replaces every item of the entry. Items
are never edited in place.
"""

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Optional

import structlog

from mealrange.application.commands.create_entry import EntryResult
from mealrange.application.entry_parsing import (
    normalize_raw_text,
    normalize_timestamp,
    parse_entry_items,
)
from mealrange.application.ports import IEntryRepository, ITextParser
from mealrange.domain.shared.errors import EntryNotFoundError
from mealrange.infrastructure.config import get_reporting_timezone

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdateEntryCommand:
    """
    Command: Replace an entry's description and items.

    Attributes:
        entry_id: Entry to update
        owner: User ID (for authorization)
        raw_text: New description
        timestamp: New timestamp (keeps the current one if None; naive
            values are read in the reporting timezone)
    """

    entry_id: str
    owner: str
    raw_text: str
    timestamp: Optional[datetime] = None


class UpdateEntryCommandHandler:
    """Handler for UpdateEntryCommand."""

    def __init__(
        self,
        parser: ITextParser,
        repository: IEntryRepository,
        tz: Optional[tzinfo] = None,
    ):
        self._parser = parser
        self._repository = repository
        self._tz = tz or get_reporting_timezone()

    async def handle(self, command: UpdateEntryCommand) -> EntryResult:
        """
        Execute update command.

        The stored entry is left untouched if parsing or validation
        fails.

        Raises:
            EntryNotFoundError: If the entry doesn't exist for owner
            InvalidEntryError: If raw_text is empty
            TextParserError: If the parser failed
            ValidationError: If the parser response was rejected
        """
        raw_text = normalize_raw_text(command.raw_text)

        entry = await self._repository.get_by_id(command.entry_id, command.owner)
        if entry is None:
            raise EntryNotFoundError(f"Entry {command.entry_id} not found")

        logger.info("Updating entry", entry_id=entry.id, owner=command.owner)

        items = await parse_entry_items(
            self._parser, raw_text, entry.id, created_at=datetime.now(timezone.utc)
        )
        timestamp = (
            normalize_timestamp(command.timestamp, self._tz)
            if command.timestamp
            else entry.timestamp
        )
        updated = entry.model_copy(
            update={
                "raw_text": raw_text,
                "timestamp": timestamp,
                "items": items,
            }
        )
        await self._repository.save(updated)

        logger.info("Entry updated", entry_id=entry.id, item_count=len(items))
        return EntryResult.of(updated)
