"""In-memory entry repository implementation.

Provides an in-memory implementation of IEntryRepository port for testing.
Mirrors the relational layout: entries and flat item rows are stored
separately and joined on read.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from mealrange.domain.nutrition.models import Entry
from mealrange.infrastructure.persistence.rows import entry_item_from_row, entry_item_to_row


class InMemoryEntryRepository:
    """
    In-memory implementation of IEntryRepository port.

    Thread safety: NOT thread-safe (use locks if needed in production)
    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> repository = InMemoryEntryRepository()
        >>> await repository.save(entry)
        >>> retrieved = await repository.get_by_id(entry.id, entry.owner)
    """

    def __init__(self) -> None:
        """Initialize repository with empty storage."""
        self._entries: Dict[str, Entry] = {}
        self._item_rows: Dict[str, List[Dict[str, Any]]] = {}

    async def save(self, entry: Entry) -> None:
        """
        Save or replace an entry together with all of its items.

        Items are stored as flat rows in entry order.
        """
        self._entries[entry.id] = entry.model_copy(update={"items": []})
        self._item_rows[entry.id] = [entry_item_to_row(item) for item in entry.items]

    async def get_by_id(self, entry_id: str, owner: str) -> Optional[Entry]:
        """
        Retrieve entry by ID for a specific owner.

        Returns:
            Entry with items if found and owned by owner, None otherwise
        """
        entry = self._entries.get(entry_id)
        if entry is None or entry.owner != owner:
            return None
        return self._hydrate(entry)

    async def get_by_owner_and_range(
        self, owner: str, start: datetime, end: datetime
    ) -> List[Entry]:
        """
        Entries of owner with start <= timestamp <= end, oldest first.

        Args:
            owner: Entry owner
            start: Range start (inclusive)
            end: Range end (inclusive)
        """
        entries = [
            e for e in self._entries.values() if e.owner == owner and start <= e.timestamp <= end
        ]
        return [self._hydrate(e) for e in sorted(entries, key=lambda e: e.timestamp)]

    async def list_by_owner(self, owner: str) -> List[Entry]:
        """All entries of owner, newest first."""
        entries = [e for e in self._entries.values() if e.owner == owner]
        return [
            self._hydrate(e) for e in sorted(entries, key=lambda e: e.timestamp, reverse=True)
        ]

    async def delete(self, entry_id: str, owner: str) -> bool:
        """
        Delete entry and its item rows.

        Returns:
            True if deleted, False if not found or not owned by owner
        """
        entry = self._entries.get(entry_id)
        if entry is None or entry.owner != owner:
            return False
        del self._entries[entry_id]
        self._item_rows.pop(entry_id, None)
        return True

    def clear(self) -> None:
        """Clear all entries (for testing)."""
        self._entries.clear()
        self._item_rows.clear()

    def _hydrate(self, entry: Entry) -> Entry:
        rows = self._item_rows.get(entry.id, [])
        return entry.model_copy(update={"items": [entry_item_from_row(row) for row in rows]})
