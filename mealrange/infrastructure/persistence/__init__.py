"""Persistence adapters."""

from .in_memory_entry_repository import InMemoryEntryRepository

__all__ = ["InMemoryEntryRepository"]
