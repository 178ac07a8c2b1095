"""
Response validator.

Turns raw text from the external text parser into validated items.
Acceptance is all-or-nothing: one bad item rejects the whole batch,
and nothing is coerced (a number encoded as a string is as wrong as a
missing field).
"""

from __future__ import annotations

import json
from typing import Annotated, Any, List, NoReturn, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from mealrange.domain.nutrition.models import Confidence, ParsedItem
from mealrange.domain.parsing.prompts import RESPONSE_PREFILL
from mealrange.domain.shared.errors import (
    MalformedResponseError,
    SchemaViolationError,
)

# int or float, never bool or str; inf/nan rejected
FiniteNumber = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class _RangePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    min: FiniteNumber
    mid: FiniteNumber
    max: FiniteNumber


class _ItemPayload(BaseModel):
    """Wire shape of one item in the parser response."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(..., min_length=1)
    calories: _RangePayload
    protein: _RangePayload
    carbs: _RangePayload
    fat: _RangePayload
    fiber: _RangePayload
    confidence: Confidence

    @field_validator("name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Reject whitespace-only names without rewriting the value."""
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("confidence", mode="before")
    @classmethod
    def exact_confidence(cls, v: Any) -> Any:
        if isinstance(v, Confidence):
            return v
        if not isinstance(v, str) or v not in {c.value for c in Confidence}:
            raise ValueError("confidence must be one of 'low', 'medium', 'high'")
        return v


def _reject_constant(token: str) -> NoReturn:
    raise ValueError(f"non-standard JSON constant {token}")


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError) as e:
        raise MalformedResponseError(f"response is not valid JSON: {e}") from e


def _schema_error(e: PydanticValidationError, index: int) -> SchemaViolationError:
    first = e.errors()[0]
    loc = [str(part) for part in first.get("loc", ())]
    field: Optional[str] = ".".join(loc) or None
    if first.get("type") == "model_type" and not loc:
        message = "item must be an object"
    else:
        message = first.get("msg", "invalid item")
    return SchemaViolationError(message, item_index=index, field=field)


def validate_and_parse(raw_text: str, prefix: str = RESPONSE_PREFILL) -> List[ParsedItem]:
    """
    Validate raw parser output into typed items.

    Pure: no I/O, no logging, no mutation.

    Args:
        raw_text: Parser output, missing the primed prefix
        prefix: Text stripped from the output by priming; pass "" for
            complete JSON

    Returns:
        Validated items in input order

    Raises:
        MalformedResponseError: Not valid JSON once prefixed
        SchemaViolationError: Wrong shape, type or enum value

    Example:
        >>> items = validate_and_parse(
        ...     '"items":[{"name":"banana",'
        ...     '"calories":{"min":90,"mid":105,"max":120},'
        ...     '"protein":{"min":1,"mid":1,"max":2},'
        ...     '"carbs":{"min":23,"mid":27,"max":31},'
        ...     '"fat":{"min":0,"mid":0,"max":1},'
        ...     '"fiber":{"min":2,"mid":3,"max":4},'
        ...     '"confidence":"high"}]}'
        ... )
        >>> items[0].calories.mid
        105.0
    """
    if not isinstance(raw_text, str):
        raise MalformedResponseError("response is not text")

    document = _parse_json(prefix + raw_text)

    if not isinstance(document, dict) or not isinstance(document.get("items"), list):
        raise SchemaViolationError("missing items array", field="items")

    items: List[ParsedItem] = []
    for index, element in enumerate(document["items"]):
        try:
            payload = _ItemPayload.model_validate(element)
        except PydanticValidationError as e:
            raise _schema_error(e, index) from e
        items.append(ParsedItem.model_validate(payload.model_dump()))

    return items
