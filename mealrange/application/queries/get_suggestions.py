"""Get suggestions query - past descriptions for quick re-logging."""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

import structlog

from mealrange.application.ports import IEntryRepository
from mealrange.infrastructure.config import get_suggestion_limit

logger = structlog.get_logger(__name__)

MAX_SUGGESTIONS = 20


@dataclass(frozen=True)
class Suggestion:
    """A distinct past description with its usage."""

    raw_text: str
    last_used: datetime
    use_count: int


@dataclass(frozen=True)
class GetSuggestionsQuery:
    """
    Query: Get re-logging suggestions.

    Attributes:
        owner: User ID to filter entries
        search: Case-insensitive substring filter
        limit: Maximum results (defaults to MEALRANGE_SUGGESTION_LIMIT,
            clamped to 1-20)
    """

    owner: str
    search: Optional[str] = None
    limit: Optional[int] = None


class GetSuggestionsQueryHandler:
    """Handler for GetSuggestionsQuery."""

    def __init__(self, repository: IEntryRepository):
        self._repository = repository

    async def handle(self, query: GetSuggestionsQuery) -> List[Suggestion]:
        """
        Execute query.

        Returns:
            Suggestions, most used first; ties broken by most recent use
        """
        requested = query.limit if query.limit is not None else get_suggestion_limit()
        limit = min(max(requested, 1), MAX_SUGGESTIONS)
        needle = (query.search or "").strip().lower()

        usage: Dict[str, Suggestion] = {}
        for entry in await self._repository.list_by_owner(query.owner):
            seen = usage.get(entry.raw_text)
            if seen is None:
                usage[entry.raw_text] = Suggestion(entry.raw_text, entry.timestamp, 1)
            else:
                usage[entry.raw_text] = Suggestion(
                    entry.raw_text,
                    max(seen.last_used, entry.timestamp),
                    seen.use_count + 1,
                )

        suggestions = [s for s in usage.values() if not needle or needle in s.raw_text.lower()]
        suggestions.sort(key=lambda s: (s.use_count, s.last_used), reverse=True)

        logger.debug("Suggestions computed", owner=query.owner, count=len(suggestions))
        return suggestions[:limit]
