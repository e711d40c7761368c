"""
Lenient numeric coercion of text.

Reads the longest numeric prefix of a string the way a loosely typed
language casts a string to a number:
  • leading whitespace is skipped
  • optional sign, digits, optional fraction, optional exponent
  • anything after the prefix is ignored
  • no prefix at all → 0
"""

from __future__ import annotations

import math
import re

_NUMERIC_PREFIX = re.compile(
    r"[ \t\n\r\v\f]*"
    r"(?P<num>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)"
)


def numeric_prefix(text: str) -> str | None:
    """Numeric prefix of *text* (without the leading whitespace) or None."""
    m = _NUMERIC_PREFIX.match(text)
    return m.group("num") if m else None


def parse_int(text: str) -> int:
    num = numeric_prefix(text)
    if num is None:
        return 0
    if not any(c in num for c in ".eE"):
        return int(num)
    # fraction / exponent: go through float and truncate toward zero
    value = float(num)
    if not math.isfinite(value):
        return 0
    return int(value)


def parse_float(text: str) -> float:
    num = numeric_prefix(text)
    if num is None:
        return 0.0
    return float(num)


__all__ = ["numeric_prefix", "parse_int", "parse_float"]
