"""Safe coercion of loosely-typed Figma values.

Figma hands out ``figma.mixed`` symbols, nulls, strings and missing fields
where numbers are expected. These helpers normalize such input into
well-typed values with a defined default and report every fallback to a
diagnostic sink instead of raising.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional, Tuple

from ..integrations.figma_nodes import MIXED, VisualNode
from .diagnostics import DEFAULT_SINK, CoercionWarning, DiagnosticSink

# Leading decimal prefix, as accepted by JavaScript's parseFloat ("12px" → 12)
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

FONT_WEIGHT_NAMES = {
    "thin": 100,
    "extralight": 200,
    "ultralight": 200,
    "light": 300,
    "normal": 400,
    "regular": 400,
    "medium": 500,
    "semibold": 600,
    "demibold": 600,
    "bold": 700,
    "extrabold": 800,
    "ultrabold": 800,
    "black": 900,
    "heavy": 900,
}
DEFAULT_FONT_WEIGHT = 400


def is_placeholder(value: Any) -> bool:
    """True for the ``figma.mixed`` placeholder."""
    return value is MIXED


def is_finite_number(value: Any) -> bool:
    """True for ints and floats that fit a finite float (bools excluded)."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # JSON integers wider than a double
        return False


def parse_leading_float(text: str) -> Optional[float]:
    """Parse the leading decimal of ``text``; None when there is none."""
    match = _LEADING_FLOAT_RE.match(text)
    if not match:
        return None
    parsed = float(match.group(1))
    return parsed if math.isfinite(parsed) else None


def _fallback(sink: Optional[DiagnosticSink], field: str, value: Any, default: Any, reason: str) -> Any:
    (sink or DEFAULT_SINK).warn(CoercionWarning(field=field, value=value, default=default, reason=reason))
    return default


def _missing_reason(value: Any) -> Optional[str]:
    if is_placeholder(value):
        return "placeholder"
    if value is None:
        return "missing"
    return None


def safe_number(
    value: Any,
    default: float = 0,
    *,
    field: str = "value",
    sink: Optional[DiagnosticSink] = None,
) -> float:
    """Finite numbers pass through, numeric strings parse, everything else → default."""
    reason = _missing_reason(value)
    if reason:
        return _fallback(sink, field, value, default, reason)

    if is_finite_number(value):
        return value

    if isinstance(value, str):
        parsed = parse_leading_float(value)
        if parsed is not None:
            return parsed

    return _fallback(sink, field, value, default, "invalid")


def safe_string(
    value: Any,
    default: str = "",
    *,
    field: str = "value",
    sink: Optional[DiagnosticSink] = None,
) -> str:
    if isinstance(value, str):
        return value
    return _fallback(sink, field, value, default, _missing_reason(value) or "invalid")


def safe_font_weight(
    value: Any,
    *,
    field: str = "fontWeight",
    sink: Optional[DiagnosticSink] = None,
) -> float:
    """Numeric weights pass through; weight names and numeric strings map to 100-900.

    Names are matched case-insensitively, ignoring spaces, hyphens and
    underscores ("Semi Bold" → 600). Anything else → 400.
    """
    if is_finite_number(value):
        return value

    if isinstance(value, str):
        key = re.sub(r"[\s_-]+", "", value.lower())
        if key in FONT_WEIGHT_NAMES:
            return FONT_WEIGHT_NAMES[key]
        if key.isdigit() and int(key) in FONT_WEIGHT_NAMES.values():
            return int(key)

    return _fallback(sink, field, value, DEFAULT_FONT_WEIGHT, _missing_reason(value) or "invalid")


def safe_font_size(
    value: Any,
    default: float = 14,
    *,
    field: str = "fontSize",
    sink: Optional[DiagnosticSink] = None,
) -> float:
    """Strictly positive finite numbers pass through, everything else → default."""
    if is_finite_number(value) and value > 0:
        return value
    return _fallback(sink, field, value, default, _missing_reason(value) or "invalid")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 → 3, -2.5 → -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def node_size(node: VisualNode, sink: Optional[DiagnosticSink] = None) -> Tuple[float, float]:
    """(width, height) of a node, 0 for anything unusable."""
    width = safe_number(node.width, 0, field="width", sink=sink)
    height = safe_number(node.height, 0, field="height", sink=sink)
    return width, height
