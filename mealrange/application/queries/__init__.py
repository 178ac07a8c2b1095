"""Entry and summary queries."""

from .get_entry import GetEntryQuery, GetEntryQueryHandler
from .get_history import GetHistoryQuery, GetHistoryQueryHandler, HistorySummary
from .get_suggestions import GetSuggestionsQuery, GetSuggestionsQueryHandler, Suggestion
from .get_today_summary import (
    EntrySummary,
    GetTodaySummaryQuery,
    GetTodaySummaryQueryHandler,
    TodaySummary,
)
from .get_weekly_summary import GetWeeklySummaryQuery, GetWeeklySummaryQueryHandler
from .list_entries import EntryPage, ListEntriesQuery, ListEntriesQueryHandler

__all__ = [
    "EntryPage",
    "EntrySummary",
    "GetEntryQuery",
    "GetEntryQueryHandler",
    "GetHistoryQuery",
    "GetHistoryQueryHandler",
    "GetSuggestionsQuery",
    "GetSuggestionsQueryHandler",
    "GetTodaySummaryQuery",
    "GetTodaySummaryQueryHandler",
    "GetWeeklySummaryQuery",
    "GetWeeklySummaryQueryHandler",
    "HistorySummary",
    "ListEntriesQuery",
    "ListEntriesQueryHandler",
    "Suggestion",
    "TodaySummary",
]
