"""
Flat storage rows <-> EntryItem.

Storage keeps one column per range component (calories_min,
calories_mid, ...). Numeric columns may come back as Decimal or str
depending on the driver, so they are converted with float(); range
ordering is not checked here, that is the job of the invariant gate at
query time.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from mealrange.domain.nutrition.models import NUTRIENT_FIELDS, Confidence, EntryItem
from mealrange.domain.nutrition.ranges import NutritionalRange

_COMPONENTS = ("min", "mid", "max")


def entry_item_from_row(row: Mapping[str, Any]) -> EntryItem:
    """
    Build an EntryItem from a flat storage row.

    Raises:
        KeyError: If a required column is missing
        ValueError: If a numeric column or the confidence is invalid

    Example:
        >>> row = {"id": "i1", "entry_id": "e1", "name": "apple",
        ...        "confidence": "high", "calories_min": 80, ...}
        >>> entry_item_from_row(row).calories.mid
    """
    ranges = {
        name: NutritionalRange(
            **{part: float(row[f"{name}_{part}"]) for part in _COMPONENTS}
        )
        for name in NUTRIENT_FIELDS
    }
    return EntryItem(
        id=str(row["id"]),
        entry_id=str(row["entry_id"]),
        name=row["name"],
        confidence=Confidence(row["confidence"]),
        created_at=row.get("created_at"),
        **ranges,
    )


def entry_item_to_row(item: EntryItem) -> Dict[str, Any]:
    """Flatten an EntryItem into storage columns."""
    row: Dict[str, Any] = {
        "id": item.id,
        "entry_id": item.entry_id,
        "name": item.name,
        "confidence": item.confidence.value,
        "created_at": item.created_at,
    }
    for name in NUTRIENT_FIELDS:
        r = getattr(item, name)
        for part in _COMPONENTS:
            row[f"{name}_{part}"] = getattr(r, part)
    return row
