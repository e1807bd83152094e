"""Numeric coercion shared by the aggregation engine and field values"""

import math
import re
from decimal import Decimal
from typing import Any

_PREFIXED_INT = re.compile(r"^0([xob])([0-9a-f]+)$", re.IGNORECASE)
_DECIMAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)(e[+-]?\d+)?$", re.IGNORECASE)
_BASES = {"x": 16, "o": 8, "b": 2}


def to_number(raw: Any) -> float:
    """
    Coerce a raw cell value to a finite number, falling back to 0.

    Mirrors ``Number(raw) || 0``: blanks, ``None``, non-numeric text, NaN and
    infinities all become 0, so a blank cell cannot be told apart from a true
    zero once coerced.

    Args:
        raw: Stored value (str, int, float, bool, None, ...)

    Returns:
        Finite float (ints are returned unchanged)
    """
    if raw is None:
        return 0
    if isinstance(raw, bool):
        return 1 if raw else 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, (float, Decimal)):
        value = float(raw)
        return value if math.isfinite(value) else 0
    if not isinstance(raw, str):
        return 0

    text = raw.strip()
    if not text:
        return 0

    prefixed = _PREFIXED_INT.match(text)
    if prefixed:
        base = _BASES[prefixed.group(1).lower()]
        try:
            return int(prefixed.group(2), base)
        except ValueError:
            return 0

    if not _DECIMAL.match(text):
        return 0

    value = float(text)
    return value if math.isfinite(value) else 0


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up"""
    return math.floor(value + 0.5)


def js_string(value: Any) -> str:
    """Render a value the way it reads in a chart label ("10" not "10.0")"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
