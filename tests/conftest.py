"""Shared test fixtures.

Loads .env.test (if present) before any mealrange config getter runs and
provides factories for items, entries and parser responses.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest
from dotenv import load_dotenv

from mealrange.domain.nutrition.models import Confidence, Entry, EntryItem
from mealrange.domain.nutrition.ranges import NutritionalRange

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Unset MEALRANGE_* so every test starts from defaults."""
    for name in (
        "MEALRANGE_TIMEZONE",
        "MEALRANGE_HISTORY_DAYS",
        "MEALRANGE_SUGGESTION_LIMIT",
        "MEALRANGE_LOG_LEVEL",
        "MEALRANGE_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


def _range(mid: float, spread: float = 0.2) -> NutritionalRange:
    return NutritionalRange(min=mid * (1 - spread), mid=mid, max=mid * (1 + spread))


@pytest.fixture
def make_item() -> Callable[..., EntryItem]:
    """Factory for EntryItem with ordered ranges around given mids."""
    counter = {"n": 0}

    def _make(
        name: str = "apple",
        calories: float = 100.0,
        protein: float = 10.0,
        carbs: float = 20.0,
        fat: float = 5.0,
        fiber: float = 2.0,
        confidence: Confidence = Confidence.HIGH,
        entry_id: str = "entry-1",
        item_id: Optional[str] = None,
    ) -> EntryItem:
        counter["n"] += 1
        return EntryItem(
            id=item_id or f"item-{counter['n']}",
            entry_id=entry_id,
            name=name,
            calories=_range(calories),
            protein=_range(protein),
            carbs=_range(carbs),
            fat=_range(fat),
            fiber=_range(fiber),
            confidence=confidence,
        )

    return _make


@pytest.fixture
def make_entry(make_item) -> Callable[..., Entry]:
    """Factory for Entry; pass items or calories mids (one item per value)."""

    def _make(
        entry_id: str = "entry-1",
        owner: str = "user123",
        raw_text: str = "an apple",
        timestamp: Optional[datetime] = None,
        items: Optional[List[EntryItem]] = None,
        calories: Optional[List[float]] = None,
    ) -> Entry:
        if items is None:
            items = [make_item(calories=c, entry_id=entry_id) for c in (calories or [100.0])]
        return Entry(
            id=entry_id,
            owner=owner,
            raw_text=raw_text,
            timestamp=timestamp or datetime(2025, 10, 15, 12, 0, tzinfo=timezone.utc),
            items=items,
        )

    return _make


def item_payload(
    name: str = "banana",
    calories: tuple = (90, 105, 120),
    confidence: Any = "high",
    **overrides: Any,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "name": name,
        "calories": dict(zip(("min", "mid", "max"), calories)),
        "protein": {"min": 1, "mid": 1.3, "max": 2},
        "carbs": {"min": 23, "mid": 27, "max": 31},
        "fat": {"min": 0, "mid": 0.4, "max": 1},
        "fiber": {"min": 2, "mid": 3.1, "max": 4},
        "confidence": confidence,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_payload() -> Callable[..., Dict[str, Any]]:
    """Factory for one wire-format item dict."""
    return item_payload


@pytest.fixture
def parser_response() -> Callable[..., str]:
    """
    Factory for primed parser output: the JSON document without its
    leading brace, as the text parser returns it.
    """

    def _make(*items: Dict[str, Any]) -> str:
        document = json.dumps({"items": list(items) or [item_payload()]})
        return document[1:]

    return _make
