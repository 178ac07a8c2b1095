"""Unit tests for NutritionalRange arithmetic."""

import pytest
from pydantic import ValidationError

from mealrange.domain.nutrition.ranges import (
    NutritionalRange,
    add_ranges,
    sum_ranges,
    zero_range,
)


class TestNutritionalRange:
    """Test NutritionalRange value object."""

    def test_is_immutable(self):
        """Test that ranges cannot be modified."""
        r = NutritionalRange(min=1, mid=2, max=3)

        with pytest.raises(ValidationError):
            r.mid = 5  # type: ignore[misc]

    def test_inverted_range_is_constructible(self):
        """Test that ordering is left to the invariant gate."""
        r = NutritionalRange(min=100, mid=50, max=100)

        assert r.min == 100
        assert r.mid == 50

    def test_plus_operator(self):
        """Test that + is component-wise addition."""
        a = NutritionalRange(min=100, mid=150, max=200)
        b = NutritionalRange(min=50, mid=75, max=100)

        assert a + b == NutritionalRange(min=150, mid=225, max=300)

    def test_plus_rejects_other_types(self):
        """Test that adding a non-range raises TypeError."""
        with pytest.raises(TypeError):
            NutritionalRange(min=1, mid=2, max=3) + 1  # type: ignore[operator]

    def test_zero_classmethod(self):
        """Test additive identity."""
        assert NutritionalRange.zero() == NutritionalRange(min=0, mid=0, max=0)


class TestAddRanges:
    """Test add_ranges and sum_ranges."""

    def test_zero_is_identity(self):
        """Test a + 0 == a."""
        a = NutritionalRange(min=1.5, mid=2.5, max=4)

        assert add_ranges(a, zero_range()) == a
        assert add_ranges(zero_range(), a) == a

    def test_commutative(self):
        """Test a + b == b + a."""
        a = NutritionalRange(min=10, mid=20, max=30)
        b = NutritionalRange(min=1, mid=5, max=9)

        assert add_ranges(a, b) == add_ranges(b, a)

    def test_associative(self):
        """Test (a + b) + c == a + (b + c)."""
        a = NutritionalRange(min=10, mid=20, max=30)
        b = NutritionalRange(min=1, mid=5, max=9)
        c = NutritionalRange(min=0, mid=3, max=4)

        assert add_ranges(add_ranges(a, b), c) == add_ranges(a, add_ranges(b, c))

    def test_sum_of_empty_is_zero(self):
        """Test the empty fold."""
        assert sum_ranges([]) == zero_range()

    def test_sum_preserves_width(self):
        """Test that the sum is as wide as the inputs combined."""
        total = sum_ranges(
            [
                NutritionalRange(min=100, mid=150, max=200),
                NutritionalRange(min=200, mid=250, max=300),
                NutritionalRange(min=60, mid=80, max=100),
            ]
        )

        assert total == NutritionalRange(min=360, mid=480, max=600)
