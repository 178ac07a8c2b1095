"""Unit tests for GetHistoryQuery and handler."""

from datetime import date, datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest
from freezegun import freeze_time

from mealrange.application.queries.get_history import (
    MAX_HISTORY_DAYS,
    GetHistoryQuery,
    GetHistoryQueryHandler,
)
from mealrange.infrastructure.persistence import InMemoryEntryRepository

END = datetime(2025, 10, 15, 21, 0, tzinfo=timezone.utc)


@pytest.fixture
def repository():
    return InMemoryEntryRepository()


@pytest.fixture
def handler(repository):
    return GetHistoryQueryHandler(repository=repository, tz=timezone.utc)


@pytest.fixture
def mock_repository():
    repository = AsyncMock()
    repository.get_by_owner_and_range.return_value = []
    return repository


class TestGetHistoryQueryHandler:
    """Test GetHistoryQueryHandler."""

    @pytest.mark.asyncio
    async def test_daily_totals_newest_first(self, handler, repository, make_entry):
        """Test one summary per logged date, newest first."""
        await repository.save(
            make_entry(entry_id="a", timestamp=END - timedelta(days=2), calories=[1800])
        )
        await repository.save(
            make_entry(entry_id="b", timestamp=END - timedelta(hours=3), calories=[500])
        )
        await repository.save(
            make_entry(entry_id="c", timestamp=END - timedelta(hours=10), calories=[700])
        )

        result = await handler.handle(GetHistoryQuery(owner="user123", days=7, end=END))

        assert [d.date for d in result.days] == [date(2025, 10, 15), date(2025, 10, 13)]
        assert result.days[0].entry_count == 2
        assert result.days[0].totals.calories.mid == 1200
        assert result.days[1].totals.calories.mid == 1800
        assert result.period_from == date(2025, 10, 8)
        assert result.period_to == date(2025, 10, 15)

    @pytest.mark.asyncio
    async def test_entries_outside_window_excluded(self, handler, repository, make_entry):
        """Test that the window bounds the result."""
        await repository.save(make_entry(entry_id="old", timestamp=END - timedelta(days=40)))
        await repository.save(make_entry(entry_id="new", timestamp=END - timedelta(days=1)))

        result = await handler.handle(GetHistoryQuery(owner="user123", days=30, end=END))

        assert len(result.days) == 1

    @pytest.mark.asyncio
    async def test_empty_history(self, handler):
        """Test that no entries yields no days."""
        result = await handler.handle(GetHistoryQuery(owner="user123", end=END))

        assert result.days == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "requested,expected",
        [(None, 30), (0, 1), (-5, 1), (90, 90), (1000, MAX_HISTORY_DAYS)],
    )
    async def test_window_clamped(self, mock_repository, requested, expected):
        """Test default and clamping of the window length."""
        handler = GetHistoryQueryHandler(mock_repository, tz=timezone.utc)

        await handler.handle(GetHistoryQuery(owner="user123", days=requested, end=END))

        kwargs = mock_repository.get_by_owner_and_range.call_args.kwargs
        assert kwargs["end"] == END
        assert kwargs["start"] == END - timedelta(days=expected)

    @pytest.mark.asyncio
    async def test_window_default_from_env(self, monkeypatch, mock_repository):
        """Test that MEALRANGE_HISTORY_DAYS sets the default window."""
        monkeypatch.setenv("MEALRANGE_HISTORY_DAYS", "14")
        handler = GetHistoryQueryHandler(mock_repository, tz=timezone.utc)

        await handler.handle(GetHistoryQuery(owner="user123", end=END))

        kwargs = mock_repository.get_by_owner_and_range.call_args.kwargs
        assert kwargs["start"] == END - timedelta(days=14)

    @pytest.mark.asyncio
    async def test_end_defaults_to_now(self, mock_repository):
        """Test that a missing end is the current time."""
        handler = GetHistoryQueryHandler(mock_repository, tz=timezone.utc)

        with freeze_time("2025-10-15 21:00:00"):
            result = await handler.handle(GetHistoryQuery(owner="user123", days=7))

        assert result.period_to == date(2025, 10, 15)
        assert result.period_from == date(2025, 10, 8)

    @pytest.mark.asyncio
    async def test_naive_end_uses_reporting_timezone(self, handler, repository, make_entry):
        """Test that a naive end is compared with stored aware timestamps."""
        await repository.save(make_entry(entry_id="new", timestamp=END - timedelta(days=1)))

        result = await handler.handle(
            GetHistoryQuery(owner="user123", days=7, end=datetime(2025, 10, 15, 21, 0))
        )

        assert [d.date for d in result.days] == [date(2025, 10, 14)]
        assert result.period_to == date(2025, 10, 15)
