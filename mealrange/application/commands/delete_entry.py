"""Delete entry command and handler.

Removes an entry and all of its items. Only the owner can delete.
"""

from dataclasses import dataclass

import structlog

from mealrange.application.ports import IEntryRepository
from mealrange.domain.shared.errors import EntryNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DeleteEntryCommand:
    """
    Command: Delete entry.

    Attributes:
        entry_id: Entry to delete
        owner: User ID (for authorization)
    """

    entry_id: str
    owner: str


class DeleteEntryCommandHandler:
    """Handler for DeleteEntryCommand."""

    def __init__(self, repository: IEntryRepository):
        """
        Initialize handler.

        Args:
            repository: Entry repository port
        """
        self._repository = repository

    async def handle(self, command: DeleteEntryCommand) -> None:
        """
        Execute delete command.

        Raises:
            EntryNotFoundError: If the entry doesn't exist or belongs to
                another owner
        """
        logger.info("Deleting entry", entry_id=command.entry_id, owner=command.owner)

        deleted = await self._repository.delete(command.entry_id, command.owner)
        if not deleted:
            logger.warning(
                "Entry not found for deletion",
                entry_id=command.entry_id,
                owner=command.owner,
            )
            raise EntryNotFoundError(f"Entry {command.entry_id} not found")

        logger.info("Entry deleted", entry_id=command.entry_id)
