"""Parse a meal description through both validation gates."""

from datetime import datetime, tzinfo
from typing import List, Optional

import structlog

from mealrange.application.ports import ITextParser
from mealrange.domain.nutrition.invariants import ensure_valid_items
from mealrange.domain.nutrition.models import EntryItem
from mealrange.domain.parsing.response_validator import validate_and_parse
from mealrange.domain.shared.errors import (
    InvalidEntryError,
    TextParserError,
    ValidationError,
)

logger = structlog.get_logger(__name__)


def normalize_raw_text(raw_text: str) -> str:
    """
    Strip a meal description.

    Raises:
        InvalidEntryError: If the text is empty or whitespace
    """
    text = raw_text.strip() if isinstance(raw_text, str) else ""
    if not text:
        raise InvalidEntryError("raw_text is required and cannot be empty")
    return text


def normalize_timestamp(timestamp: datetime, tz: tzinfo) -> datetime:
    """
    Make a meal timestamp timezone-aware.

    Naive timestamps are wall-clock time in the reporting timezone;
    stored entries are always aware so they compare with query bounds.
    """
    if timestamp.tzinfo is None or timestamp.utcoffset() is None:
        return timestamp.replace(tzinfo=tz)
    return timestamp


async def parse_entry_items(
    parser: ITextParser,
    raw_text: str,
    entry_id: str,
    created_at: Optional[datetime] = None,
) -> List[EntryItem]:
    """
    Call the text parser and materialize validated items.

    Flow:
    1. Call the parser port (no retry)
    2. Schema gate: validate_and_parse
    3. Sanity gate: ensure_valid_items
    4. Attach items to entry_id in parser order

    Raises:
        TextParserError: If the parser port raised
        ValidationError: If either gate rejected the batch
    """
    try:
        response = await parser.parse(raw_text)
    except Exception as e:
        logger.warning("Text parser call failed", entry_id=entry_id, error=str(e))
        raise TextParserError(f"Failed to parse food description: {e}") from e

    try:
        parsed = validate_and_parse(response)
        ensure_valid_items(parsed)
    except ValidationError as e:
        logger.warning(
            "Parser response rejected",
            entry_id=entry_id,
            error_kind=type(e).__name__,
            item_index=e.item_index,
            field=e.field,
        )
        raise

    logger.info("Parser response accepted", entry_id=entry_id, item_count=len(parsed))
    return [EntryItem.from_parsed(p, entry_id=entry_id, created_at=created_at) for p in parsed]
