"""Nutrition value objects and invariant checks."""

from .models import (
    NUTRIENT_FIELDS,
    Confidence,
    DailyRange,
    DailyRanges,
    DailySummary,
    Entry,
    EntryItem,
    NutritionalTotals,
    ParsedItem,
    WeeklyAverage,
    WeeklySummary,
)
from .ranges import NutritionalRange, add_ranges, sum_ranges, zero_range

__all__ = [
    "NUTRIENT_FIELDS",
    "Confidence",
    "DailyRange",
    "DailyRanges",
    "DailySummary",
    "Entry",
    "EntryItem",
    "NutritionalRange",
    "NutritionalTotals",
    "ParsedItem",
    "WeeklyAverage",
    "WeeklySummary",
    "add_ranges",
    "sum_ranges",
    "zero_range",
]
