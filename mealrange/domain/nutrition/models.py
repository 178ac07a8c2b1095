"""
Nutrition domain models.

Item, entry and aggregate records. All models are immutable; aggregates
are recomputed from source records on every query.
"""

from __future__ import annotations

import datetime as dt
import uuid
from enum import Enum
from typing import Iterable, List, Optional, Protocol, Tuple

from pydantic import BaseModel, ConfigDict, Field

from mealrange.domain.nutrition.ranges import NutritionalRange, zero_range

NUTRIENT_FIELDS: Tuple[str, ...] = ("calories", "protein", "carbs", "fat", "fiber")


class Confidence(str, Enum):
    """
    Ordinal quality tag on an estimate.

    Ordering: LOW < MEDIUM < HIGH. A group is only as reliable as its
    least reliable member.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]

    @classmethod
    def worst(cls, values: Iterable[Confidence]) -> Confidence:
        """
        Lowest confidence among values.

        An empty group is HIGH: absence of items is not evidence of
        uncertainty.
        """
        worst = cls.HIGH
        for raw in values:
            value = cls(raw)
            if value.rank < worst.rank:
                worst = value
                if worst is cls.LOW:
                    break
        return worst


_CONFIDENCE_RANK = {Confidence.LOW: 0, Confidence.MEDIUM: 1, Confidence.HIGH: 2}


class NutrientBundle(Protocol):
    """Anything carrying the five nutrient ranges (items, totals)."""

    calories: NutritionalRange
    protein: NutritionalRange
    carbs: NutritionalRange
    fat: NutritionalRange
    fiber: NutritionalRange


class NutritionalTotals(BaseModel):
    """
    Aggregate of five nutrient ranges.

    No identity: structurally identical to the nutrient fields of an
    item, so totals fold exactly like items.
    """

    model_config = ConfigDict(frozen=True)

    calories: NutritionalRange
    protein: NutritionalRange
    carbs: NutritionalRange
    fat: NutritionalRange
    fiber: NutritionalRange

    @classmethod
    def zero(cls) -> NutritionalTotals:
        """All-zero totals."""
        return cls(**{name: zero_range() for name in NUTRIENT_FIELDS})


class ParsedItem(BaseModel):
    """
    Food item accepted by the response validator.

    Attributes:
        name: Food name as emitted by the parser
        calories: Energy in kcal
        protein: Protein in g
        carbs: Carbohydrates in g
        fat: Total fat in g
        fiber: Dietary fiber in g
        confidence: Estimate quality

    Example:
        >>> item = ParsedItem(
        ...     name="banana",
        ...     calories=NutritionalRange(min=90, mid=105, max=120),
        ...     protein=NutritionalRange(min=1, mid=1, max=2),
        ...     carbs=NutritionalRange(min=23, mid=27, max=31),
        ...     fat=NutritionalRange(min=0, mid=0, max=1),
        ...     fiber=NutritionalRange(min=2, mid=3, max=4),
        ...     confidence=Confidence.HIGH,
        ... )
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Food name")
    calories: NutritionalRange
    protein: NutritionalRange
    carbs: NutritionalRange
    fat: NutritionalRange
    fiber: NutritionalRange
    confidence: Confidence

    def totals(self) -> NutritionalTotals:
        """Nutrient ranges of this item as totals."""
        return NutritionalTotals(**{name: getattr(self, name) for name in NUTRIENT_FIELDS})


class EntryItem(ParsedItem):
    """
    Parsed item attached to an entry.

    Immutable after creation; the only allowed mutation is deleting the
    whole item from its entry.
    """

    id: str = Field(..., min_length=1, description="Item identifier")
    entry_id: str = Field(..., min_length=1, description="Owning entry")
    created_at: Optional[dt.datetime] = None

    @classmethod
    def from_parsed(
        cls,
        parsed: ParsedItem,
        entry_id: str,
        item_id: Optional[str] = None,
        created_at: Optional[dt.datetime] = None,
    ) -> EntryItem:
        """Attach a validated item to an entry."""
        return cls(
            id=item_id or str(uuid.uuid4()),
            entry_id=entry_id,
            created_at=created_at,
            **parsed.model_dump(),
        )


class Entry(BaseModel):
    """
    One free-text meal log occurrence.

    Attributes:
        id: Entry identifier
        owner: User who logged the entry
        raw_text: Original description
        timestamp: When the meal was eaten
        created_at: When the entry was recorded
        items: Items in parser order
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    owner: str = Field(..., min_length=1)
    raw_text: str
    timestamp: dt.datetime
    created_at: Optional[dt.datetime] = None
    items: List[EntryItem] = Field(default_factory=list)


class DailySummary(BaseModel):
    """Totals of all entries sharing a calendar date."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    totals: NutritionalTotals
    entry_count: int = Field(..., ge=0)


class DailyRange(BaseModel):
    """Spread of daily midpoint totals for one nutrient."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float


class DailyRanges(BaseModel):
    model_config = ConfigDict(frozen=True)

    calories: DailyRange
    protein: DailyRange
    carbs: DailyRange
    fat: DailyRange
    fiber: DailyRange

    @classmethod
    def zero(cls) -> DailyRanges:
        return cls(**{name: DailyRange(min=0, max=0) for name in NUTRIENT_FIELDS})


class WeeklyAverage(BaseModel):
    """
    Per-day averages and daily spread over a set of days.

    averages holds the rounded mean of each min/mid/max component;
    daily_ranges holds min/max of the daily mid totals, which is
    distinct from any single day's estimation width.
    """

    model_config = ConfigDict(frozen=True)

    averages: NutritionalTotals
    daily_ranges: DailyRanges


class WeeklySummary(BaseModel):
    """Weekly statistics for one Monday-Sunday period."""

    model_config = ConfigDict(frozen=True)

    week_start: dt.date
    week_end: dt.date
    averages: NutritionalTotals
    daily_ranges: DailyRanges
    days_logged: int = Field(..., ge=0)
    consistency_score: int = Field(..., ge=0, le=100)
