"""
Prompt contract for the external text parser.

The system prompt is static and cacheable by the provider. The parser
is primed with RESPONSE_PREFILL as the start of its answer, so its
output arrives without the leading brace; the response validator puts
it back before parsing.
"""

from typing import Any


# ═══════════════════════════════════════════════════════════
# SYSTEM PROMPT (Cacheable - static instructions)
# ═══════════════════════════════════════════════════════════

TEXT_PARSER_SYSTEM_PROMPT = """You parse food descriptions into nutritional data. Return JSON only.

Schema: {"items":[{"name":"string","calories":{"min":n,"mid":n,"max":n},"protein":{"min":n,"mid":n,"max":n},"carbs":{"min":n,"mid":n,"max":n},"fat":{"min":n,"mid":n,"max":n},"fiber":{"min":n,"mid":n,"max":n},"confidence":"low|medium|high"}]}

Rules:
- Split compound inputs into separate items
- All values in grams except calories (kcal)
- Vague inputs: wide ranges, low confidence
- Precise inputs (quantities, brands): tight ranges, high confidence
- mid = most likely value
- min/max = reasonable bounds (not extreme outliers)"""

RESPONSE_PREFILL = "{"


def build_text_parser_messages(raw_text: str) -> list[dict[str, Any]]:
    """
    Build the conversation sent to the text parser.

    Args:
        raw_text: Meal description as typed by the user

    Returns:
        User message followed by the assistant prefill

    Example:
        >>> messages = build_text_parser_messages("two eggs and toast")
        >>> messages[-1]["content"]
        '{'
    """
    return [
        {"role": "user", "content": raw_text},
        {"role": "assistant", "content": RESPONSE_PREFILL},
    ]
