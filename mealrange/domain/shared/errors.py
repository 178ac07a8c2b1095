"""
Domain exceptions.

Typed exceptions for explicit error handling.
Every validation failure is terminal for the batch that triggered it.
"""

from __future__ import annotations

from typing import Optional


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ValidationError(DomainError):
    """
    Parser output or stored data failed validation.

    Carries the location of the first violation so the caller can
    decide whether to retry the upstream parse, surface an error to
    the user, or discard the entry.

    Attributes:
        item_index: Position of the offending item (None for batch-level)
        field: Dotted path of the offending field (e.g. "calories.mid")
    """

    def __init__(
        self,
        message: str,
        item_index: Optional[int] = None,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.item_index = item_index
        self.field = field

    def __str__(self) -> str:
        location = []
        if self.item_index is not None:
            location.append(f"item {self.item_index}")
        if self.field:
            location.append(f"field '{self.field}'")
        if not location:
            return self.message
        return f"{self.message} ({', '.join(location)})"


class MalformedResponseError(ValidationError):
    """
    Text is not valid JSON once correctly prefixed.

    Example:
        >>> raise MalformedResponseError("response is not valid JSON")
    """

    pass


class SchemaViolationError(ValidationError):
    """
    Valid JSON with the wrong shape, type or enum value.

    Raised when:
    - Top-level value is not an object with an items array
    - An item is missing a field or has the wrong type
    - Confidence is outside {low, medium, high}

    Example:
        >>> raise SchemaViolationError("missing items array")
    """

    pass


class RangeInvariantViolationError(ValidationError):
    """
    Well-typed range with min/mid/max out of order or negative.

    Example:
        >>> raise RangeInvariantViolationError(
        ...     "range is not ordered", item_index=0, field="calories"
        ... )
    """

    pass


# ═══════════════════════════════════════════════════════════
# ENTRY EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class EntryDomainError(DomainError):
    """Base exception for entry operations."""

    pass


class InvalidEntryError(EntryDomainError):
    """
    Entry input rejected before parsing.

    Raised when:
    - raw_text is empty or whitespace

    Example:
        >>> raise InvalidEntryError("raw_text cannot be empty")
    """

    pass


class EntryNotFoundError(EntryDomainError):
    """
    Entry not found.

    Raised when:
    - Entry ID doesn't exist
    - Entry belongs to another owner

    Example:
        >>> raise EntryNotFoundError("Entry abc123 not found")
    """

    pass


class EntryItemNotFoundError(EntryDomainError):
    """Raised when an item is not part of the given entry."""

    pass


# ═══════════════════════════════════════════════════════════
# EXTERNAL SERVICE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ExternalServiceError(DomainError):
    """
    External service call failed.

    Base class for all external service errors.
    """

    pass


class TextParserError(ExternalServiceError):
    """
    Text-parsing capability failed to return a response.

    The core never retries the call; the original exception is chained.

    Example:
        >>> raise TextParserError("text parser unavailable")
    """

    pass
