"""Input Coercion - permissive number conversion and truthiness for request fields.

Invariants:
    - to_number never raises: unparseable input becomes NaN and is stored as-is
    - Finite integral results inside the safe-integer range are returned as int
      (3200, not 3200.0)
    - is_truthy treats None, "", False, 0 and NaN as missing; everything else present

Design Decisions:
    - Regex-driven string parsing: float() and int() accept "nan", "inf" and
      "1_000", none of which count as numbers here
    - Containers (lists, objects) coerce to NaN rather than being flattened
"""

import math
import re
from typing import Any

_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_RADIX = {
    "0x": (16, re.compile(r"[0-9a-fA-F]+")),
    "0o": (8, re.compile(r"[0-7]+")),
    "0b": (2, re.compile(r"[01]+")),
}
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}
_MAX_SAFE_INTEGER = 2**53 - 1


def to_number(value: Any) -> int | float:
    """Coerce a request value to a number; NaN when it cannot be read as one."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return _normalize(value)
    if isinstance(value, str):
        return _normalize(_parse_text(value.strip()))
    return math.nan


def is_truthy(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return not (value == 0 or math.isnan(value))
    if isinstance(value, str):
        return value != ""
    return True


def _parse_text(text: str) -> int | float:
    if not text:
        return 0
    if text in _INFINITY:
        return _INFINITY[text]
    radix = _RADIX.get(text[:2].lower())
    if radix is not None:
        base, digits = radix
        if digits.fullmatch(text[2:]):
            return int(text[2:], base)
        return math.nan
    if _DECIMAL.fullmatch(text):
        return float(text)
    return math.nan


def _normalize(number: int | float) -> int | float:
    if (
        isinstance(number, float)
        and number.is_integer()
        and abs(number) <= _MAX_SAFE_INTEGER
    ):
        return int(number)
    return number
