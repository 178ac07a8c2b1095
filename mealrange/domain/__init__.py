"""Pure domain core: no I/O, no logging."""

from mealrange.domain.aggregation.items import (
    aggregate_confidence,
    aggregate_items,
    aggregate_totals,
)
from mealrange.domain.aggregation.temporal import (
    compute_weekly_average,
    consistency_score,
    group_by_calendar_date,
)
from mealrange.domain.nutrition.invariants import validate_range, validate_totals
from mealrange.domain.parsing.response_validator import validate_and_parse

__all__ = [
    "aggregate_confidence",
    "aggregate_items",
    "aggregate_totals",
    "compute_weekly_average",
    "consistency_score",
    "group_by_calendar_date",
    "validate_and_parse",
    "validate_range",
    "validate_totals",
]
