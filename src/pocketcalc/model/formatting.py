"""
Number Formatting
Converts between display text and floating point values.
"""
from __future__ import annotations

import math
from typing import Optional

# Integral values below this magnitude are printed without a decimal point.
# Python's repr switches to exponent notation at the same threshold.
INTEGRAL_LIMIT = 1e16


def format_number(value: float) -> str:
    """
    Shortest round-trip representation of a value for the display.

    Trailing zeros and a bare decimal point are suppressed, so 7.0 -> "7"
    and 0.5 -> "0.5". Negative zero is printed as "0".
    """
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < INTEGRAL_LIMIT:
        return str(int(value))
    return repr(value)


def parse_number(text: str) -> Optional[float]:
    """Parse display text. Returns None if it is not a finite number."""
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
