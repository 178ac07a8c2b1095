"""
Range invariant checks.

Second gate after schema validation: the response validator only
confirms numeric type, these checks confirm numeric sanity. They also
guard data that never went through the parser (stored rows, manual
entries).
"""

from __future__ import annotations

from typing import Iterable, Optional

from mealrange.domain.nutrition.models import NUTRIENT_FIELDS, NutrientBundle
from mealrange.domain.nutrition.ranges import NutritionalRange
from mealrange.domain.shared.errors import RangeInvariantViolationError


def validate_range(r: NutritionalRange) -> bool:
    """
    True when min <= mid <= max and min >= 0.

    NaN components fail every comparison and are rejected.

    Example:
        >>> validate_range(NutritionalRange(min=0, mid=50, max=100))
        True
        >>> validate_range(NutritionalRange(min=100, mid=50, max=100))
        False
    """
    return r.min <= r.mid and r.mid <= r.max and r.min >= 0


def validate_totals(totals: NutrientBundle) -> bool:
    """True when all five nutrient ranges are valid."""
    return all(validate_range(getattr(totals, name)) for name in NUTRIENT_FIELDS)


def ensure_valid_range(
    r: NutritionalRange, field: str, item_index: Optional[int] = None
) -> None:
    """
    Raise if the range breaks ordering or non-negativity.

    Raises:
        RangeInvariantViolationError: With the field and item position
    """
    if validate_range(r):
        return
    if not r.min >= 0:
        reason = f"negative or undefined minimum {r.min}"
    else:
        reason = f"expected min <= mid <= max, got ({r.min}, {r.mid}, {r.max})"
    raise RangeInvariantViolationError(
        f"invalid range: {reason}", item_index=item_index, field=field
    )


def ensure_valid_totals(totals: NutrientBundle, item_index: Optional[int] = None) -> None:
    """Raise on the first invalid nutrient range."""
    for name in NUTRIENT_FIELDS:
        ensure_valid_range(getattr(totals, name), field=name, item_index=item_index)


def ensure_valid_items(items: Iterable[NutrientBundle]) -> None:
    """
    Reject the whole batch if any item carries an invalid range.

    Raises:
        RangeInvariantViolationError: Naming the first offending item
    """
    for index, item in enumerate(items):
        ensure_valid_totals(item, item_index=index)
