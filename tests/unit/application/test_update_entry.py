"""Unit tests for UpdateEntryCommand and handler."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from zoneinfo import ZoneInfo

import pytest

from mealrange.application.commands.update_entry import (
    UpdateEntryCommand,
    UpdateEntryCommandHandler,
)
from mealrange.domain.nutrition.models import Confidence
from mealrange.domain.shared.errors import (
    EntryNotFoundError,
    InvalidEntryError,
    SchemaViolationError,
)
from mealrange.infrastructure.persistence import InMemoryEntryRepository


@pytest.fixture
def mock_parser():
    return AsyncMock()


@pytest.fixture
def repository():
    return InMemoryEntryRepository()


@pytest.fixture
def handler(mock_parser, repository):
    return UpdateEntryCommandHandler(parser=mock_parser, repository=repository)


class TestUpdateEntryCommandHandler:
    """Test UpdateEntryCommandHandler."""

    @pytest.mark.asyncio
    async def test_update_replaces_items(
        self, handler, mock_parser, repository, make_entry, parser_response, make_payload
    ):
        """Test that all items are replaced by the new parse."""
        entry = make_entry(entry_id="entry-1", raw_text="an apple", calories=[95])
        await repository.save(entry)
        mock_parser.parse.return_value = parser_response(
            make_payload(name="pear", calories=(90, 100, 110), confidence="low"),
            make_payload(name="yogurt", calories=(120, 150, 180)),
        )

        result = await handler.handle(
            UpdateEntryCommand(entry_id="entry-1", owner="user123", raw_text="pear and yogurt")
        )

        assert result.entry.id == "entry-1"
        assert result.entry.raw_text == "pear and yogurt"
        assert result.entry.timestamp == entry.timestamp
        assert [i.name for i in result.entry.items] == ["pear", "yogurt"]
        assert all(i.entry_id == "entry-1" for i in result.entry.items)
        assert result.totals.calories.mid == 250
        assert result.confidence is Confidence.LOW

        stored = await repository.get_by_id("entry-1", "user123")
        assert [i.name for i in stored.items] == ["pear", "yogurt"]

    @pytest.mark.asyncio
    async def test_update_timestamp(
        self, handler, mock_parser, repository, make_entry, parser_response
    ):
        """Test that a new timestamp replaces the old one."""
        await repository.save(make_entry(entry_id="entry-1"))
        mock_parser.parse.return_value = parser_response()
        moved = datetime(2025, 10, 14, 19, 0, tzinfo=timezone.utc)

        result = await handler.handle(
            UpdateEntryCommand(
                entry_id="entry-1", owner="user123", raw_text="banana", timestamp=moved
            )
        )

        assert result.entry.timestamp == moved

    @pytest.mark.asyncio
    async def test_unknown_entry(self, handler, mock_parser):
        """Test that a missing entry raises before parsing."""
        with pytest.raises(EntryNotFoundError):
            await handler.handle(
                UpdateEntryCommand(entry_id="missing", owner="user123", raw_text="banana")
            )

        mock_parser.parse.assert_not_called()

    @pytest.mark.asyncio
    async def test_other_owner_cannot_update(self, handler, repository, make_entry):
        """Test owner scoping."""
        await repository.save(make_entry(entry_id="entry-1", owner="user123"))

        with pytest.raises(EntryNotFoundError):
            await handler.handle(
                UpdateEntryCommand(entry_id="entry-1", owner="intruder", raw_text="banana")
            )

    @pytest.mark.asyncio
    async def test_empty_text_rejected(self, handler, repository, make_entry):
        """Test that blank descriptions are rejected."""
        await repository.save(make_entry(entry_id="entry-1"))

        with pytest.raises(InvalidEntryError):
            await handler.handle(
                UpdateEntryCommand(entry_id="entry-1", owner="user123", raw_text=" ")
            )

    @pytest.mark.asyncio
    async def test_rejected_response_keeps_stored_entry(
        self, handler, mock_parser, repository, make_entry, parser_response, make_payload
    ):
        """Test that a failed re-parse leaves the entry untouched."""
        original = make_entry(entry_id="entry-1", calories=[95])
        await repository.save(original)
        mock_parser.parse.return_value = parser_response(make_payload(confidence=None))

        with pytest.raises(SchemaViolationError):
            await handler.handle(
                UpdateEntryCommand(entry_id="entry-1", owner="user123", raw_text="banana")
            )

        stored = await repository.get_by_id("entry-1", "user123")
        assert stored == original

    @pytest.mark.asyncio
    async def test_naive_timestamp_made_aware(
        self, mock_parser, repository, make_entry, parser_response
    ):
        """Test that a naive new timestamp is read in the reporting timezone."""
        await repository.save(make_entry(entry_id="entry-1"))
        mock_parser.parse.return_value = parser_response()
        rome = ZoneInfo("Europe/Rome")
        handler = UpdateEntryCommandHandler(mock_parser, repository, tz=rome)

        result = await handler.handle(
            UpdateEntryCommand(
                entry_id="entry-1",
                owner="user123",
                raw_text="banana",
                timestamp=datetime(2025, 10, 16, 0, 30),
            )
        )

        assert result.entry.timestamp == datetime(2025, 10, 16, 0, 30, tzinfo=rome)
        stored = await repository.get_by_owner_and_range(
            "user123",
            datetime(2025, 10, 15, 22, 0, tzinfo=timezone.utc),
            datetime(2025, 10, 15, 23, 0, tzinfo=timezone.utc),
        )
        assert [e.id for e in stored] == ["entry-1"]
