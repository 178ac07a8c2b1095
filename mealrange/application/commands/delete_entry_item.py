"""Delete entry item command and handler.

Whole-item deletion is the only mutation an item supports. Entry totals
are recomputed from the remaining items, never decremented. Removing
the last item removes the entry, so an empty entry never counts as a
logged meal.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from mealrange.application.commands.create_entry import EntryResult
from mealrange.application.ports import IEntryRepository
from mealrange.domain.shared.errors import EntryItemNotFoundError, EntryNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DeleteEntryItemCommand:
    """
    Command: Remove one item from an entry.

    Attributes:
        entry_id: Owning entry
        item_id: Item to remove
        owner: User ID (for authorization)
    """

    entry_id: str
    item_id: str
    owner: str


class DeleteEntryItemCommandHandler:
    """Handler for DeleteEntryItemCommand."""

    def __init__(self, repository: IEntryRepository):
        self._repository = repository

    async def handle(self, command: DeleteEntryItemCommand) -> Optional[EntryResult]:
        """
        Execute delete command.

        Flow:
        1. Verify entry exists and owner owns it
        2. Verify item belongs to the entry
        3. Delete the whole entry if it was the last item, else save
           the remaining items

        Returns:
            EntryResult recomputed from the remaining items, or None
            when the entry itself was deleted

        Raises:
            EntryNotFoundError: If the entry doesn't exist for owner
            EntryItemNotFoundError: If the item is not part of the entry
        """
        entry = await self._repository.get_by_id(command.entry_id, command.owner)
        if entry is None:
            raise EntryNotFoundError(f"Entry {command.entry_id} not found")

        remaining = [item for item in entry.items if item.id != command.item_id]
        if len(remaining) == len(entry.items):
            raise EntryItemNotFoundError(
                f"Item {command.item_id} not found in entry {command.entry_id}"
            )

        if not remaining:
            await self._repository.delete(entry.id, command.owner)
            logger.info(
                "Last entry item deleted, entry removed",
                entry_id=entry.id,
                item_id=command.item_id,
            )
            return None

        updated = entry.model_copy(update={"items": remaining})
        await self._repository.save(updated)

        logger.info(
            "Entry item deleted",
            entry_id=entry.id,
            item_id=command.item_id,
            remaining_items=len(remaining),
        )
        return EntryResult.of(updated)
