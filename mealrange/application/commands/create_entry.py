"""Create entry command and handler.

Turns a free-text meal description into a stored entry with validated
items. A rejected parser response stores nothing.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Optional

import structlog

from mealrange.application.entry_parsing import (
    normalize_raw_text,
    normalize_timestamp,
    parse_entry_items,
)
from mealrange.application.ports import IEntryRepository, ITextParser
from mealrange.domain.aggregation.items import aggregate_confidence, aggregate_items
from mealrange.domain.nutrition.models import Confidence, Entry, NutritionalTotals
from mealrange.infrastructure.config import get_reporting_timezone

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EntryResult:
    """Entry with its recomputed totals and aggregate confidence."""

    entry: Entry
    totals: NutritionalTotals
    confidence: Confidence

    @classmethod
    def of(cls, entry: Entry) -> "EntryResult":
        return cls(
            entry=entry,
            totals=aggregate_items(entry.items),
            confidence=aggregate_confidence(entry.items),
        )


@dataclass(frozen=True)
class CreateEntryCommand:
    """
    Command: Log a meal from a text description.

    Attributes:
        owner: User who logs the meal
        raw_text: Free-text description
        timestamp: When the meal was eaten (defaults to now, UTC; naive
            values are read in the reporting timezone)
    """

    owner: str
    raw_text: str
    timestamp: Optional[datetime] = None


class CreateEntryCommandHandler:
    """Handler for CreateEntryCommand."""

    def __init__(
        self,
        parser: ITextParser,
        repository: IEntryRepository,
        tz: Optional[tzinfo] = None,
    ):
        """
        Initialize handler.

        Args:
            parser: Text parser port
            repository: Entry repository port
            tz: Timezone of naive timestamps (defaults to MEALRANGE_TIMEZONE)
        """
        self._parser = parser
        self._repository = repository
        self._tz = tz or get_reporting_timezone()

    async def handle(self, command: CreateEntryCommand) -> EntryResult:
        """
        Execute create command.

        Flow:
        1. Normalize raw text
        2. Parse and validate items (both gates)
        3. Persist entry with items in parser order

        Returns:
            EntryResult with entry totals and confidence

        Raises:
            InvalidEntryError: If raw_text is empty
            TextParserError: If the parser failed
            ValidationError: If the parser response was rejected

        Example:
            >>> handler = CreateEntryCommandHandler(parser, repository)
            >>> result = await handler.handle(
            ...     CreateEntryCommand(owner="user123", raw_text="two eggs")
            ... )
            >>> result.totals.calories.mid > 0
            True
        """
        raw_text = normalize_raw_text(command.raw_text)
        now = datetime.now(timezone.utc)
        entry_id = str(uuid.uuid4())

        logger.info(
            "Creating entry",
            owner=command.owner,
            entry_id=entry_id,
            text_length=len(raw_text),
        )

        items = await parse_entry_items(self._parser, raw_text, entry_id, created_at=now)
        timestamp = normalize_timestamp(command.timestamp, self._tz) if command.timestamp else now

        entry = Entry(
            id=entry_id,
            owner=command.owner,
            raw_text=raw_text,
            timestamp=timestamp,
            created_at=now,
            items=items,
        )
        await self._repository.save(entry)

        result = EntryResult.of(entry)
        logger.info(
            "Entry created",
            entry_id=entry_id,
            item_count=len(items),
            confidence=result.confidence.value,
        )
        return result
