"""
Ports (Interfaces) for collaborator dependencies.

The core only needs two collaborators: a text parser that turns a meal
description into raw response text, and an entry source that returns
already-materialized entries with their items.

Design Pattern: Ports & Adapters (Hexagonal Architecture)
"""

from datetime import datetime
from typing import List, Optional, Protocol, runtime_checkable

from mealrange.domain.nutrition.models import Entry


@runtime_checkable
class ITextParser(Protocol):
    """
    Port for the external text-parsing capability.

    Implementations call a language model primed with
    RESPONSE_PREFILL and return its text unchanged. The core never
    retries this call; timeouts and cancellation belong to the adapter.
    """

    async def parse(self, raw_text: str) -> str:
        """
        Parse a meal description.

        Args:
            raw_text: Meal description as typed by the user

        Returns:
            Raw response text, without the primed prefix

        Raises:
            Exception: Any adapter failure (wrapped as TextParserError)
        """
        ...


@runtime_checkable
class IEntryRepository(Protocol):
    """
    Port for entry storage.

    Entries are returned with their items in parser order.
    """

    async def save(self, entry: Entry) -> None:
        """Save or replace an entry with all of its items."""
        ...

    async def get_by_id(self, entry_id: str, owner: str) -> Optional[Entry]:
        """
        Get entry by ID.

        Returns:
            Entry if found and owned by owner, None otherwise
        """
        ...

    async def get_by_owner_and_range(
        self, owner: str, start: datetime, end: datetime
    ) -> List[Entry]:
        """
        Get entries in [start, end], ordered by timestamp ascending.

        Args:
            owner: Entry owner
            start: Range start (inclusive)
            end: Range end (inclusive)
        """
        ...

    async def list_by_owner(self, owner: str) -> List[Entry]:
        """Get all entries of owner, newest first."""
        ...

    async def delete(self, entry_id: str, owner: str) -> bool:
        """
        Delete an entry together with its items.

        Returns:
            True if deleted, False if not found or owned by someone else
        """
        ...
