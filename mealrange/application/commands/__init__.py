"""Entry commands."""

from .create_entry import CreateEntryCommand, CreateEntryCommandHandler, EntryResult
from .delete_entry import DeleteEntryCommand, DeleteEntryCommandHandler
from .delete_entry_item import DeleteEntryItemCommand, DeleteEntryItemCommandHandler
from .update_entry import UpdateEntryCommand, UpdateEntryCommandHandler

__all__ = [
    "CreateEntryCommand",
    "CreateEntryCommandHandler",
    "DeleteEntryCommand",
    "DeleteEntryCommandHandler",
    "DeleteEntryItemCommand",
    "DeleteEntryItemCommandHandler",
    "EntryResult",
    "UpdateEntryCommand",
    "UpdateEntryCommandHandler",
]
