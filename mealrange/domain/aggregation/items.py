"""
Item aggregation.

One fold serves every level of the hierarchy (item -> entry -> day ->
week): totals have the same five nutrient fields as an item, so summing
entries into a day is the same call as summing items into an entry.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from mealrange.domain.nutrition.models import (
    NUTRIENT_FIELDS,
    Confidence,
    NutrientBundle,
    NutritionalTotals,
)
from mealrange.domain.nutrition.ranges import add_ranges, zero_range


class HasConfidence(Protocol):
    confidence: Confidence


def aggregate_items(items: Iterable[NutrientBundle]) -> NutritionalTotals:
    """
    Sum nutrient ranges component-wise.

    Args:
        items: Items, entry items or totals

    Returns:
        NutritionalTotals; all zeros for an empty input

    Example:
        >>> totals = aggregate_items([])
        >>> totals == NutritionalTotals.zero()
        True
    """
    acc = {name: zero_range() for name in NUTRIENT_FIELDS}
    for item in items:
        for name in NUTRIENT_FIELDS:
            acc[name] = add_ranges(acc[name], getattr(item, name))
    return NutritionalTotals(**acc)


def aggregate_totals(totals_list: Iterable[NutritionalTotals]) -> NutritionalTotals:
    """Sum entry totals into day totals (same fold as aggregate_items)."""
    return aggregate_items(totals_list)


def aggregate_confidence(items: Iterable[HasConfidence]) -> Confidence:
    """
    Worst confidence among items.

    low if any item is low, else medium if any is medium, else high.
    An empty list is high.
    """
    return Confidence.worst(item.confidence for item in items)
