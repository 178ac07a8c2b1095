"""
Range arithmetic.

Interval triples (min, mid, max) and the fold operator used at every
aggregation level. Ordering is not enforced at construction: a
well-typed but inverted range must survive until the invariant gate
rejects it (see invariants.py).
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field


class NutritionalRange(BaseModel):
    """
    Uncertain nutritional quantity.

    Attributes:
        min: Lower bound of the estimate
        mid: Most likely value
        max: Upper bound of the estimate

    Example:
        >>> a = NutritionalRange(min=100, mid=150, max=200)
        >>> b = NutritionalRange(min=50, mid=75, max=100)
        >>> (a + b).mid
        225.0
    """

    model_config = ConfigDict(frozen=True)

    min: float = Field(..., description="Lower bound")
    mid: float = Field(..., description="Most likely value")
    max: float = Field(..., description="Upper bound")

    def __add__(self, other: NutritionalRange) -> NutritionalRange:
        if not isinstance(other, NutritionalRange):
            return NotImplemented
        return add_ranges(self, other)

    @classmethod
    def zero(cls) -> NutritionalRange:
        """Additive identity."""
        return zero_range()


def zero_range() -> NutritionalRange:
    """Return the (0, 0, 0) range."""
    return NutritionalRange(min=0, mid=0, max=0)


def add_ranges(a: NutritionalRange, b: NutritionalRange) -> NutritionalRange:
    """
    Component-wise sum of two ranges.

    Associative and commutative. Adding two ordered ranges yields an
    ordered range, so the sum never hides the width of either input.
    """
    return NutritionalRange(
        min=a.min + b.min,
        mid=a.mid + b.mid,
        max=a.max + b.max,
    )


def sum_ranges(ranges: Iterable[NutritionalRange]) -> NutritionalRange:
    """Fold ranges with add_ranges; the empty fold is zero_range()."""
    total = zero_range()
    for r in ranges:
        total = add_ranges(total, r)
    return total
