# backend/utils/coercion.py
import math
import re
from typing import Any, Optional

# Optional sign followed by leading digits; the rest of the string is ignored
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
# Whole-string integer, used for row ids
_WHOLE_INT = re.compile(r"\s*([+-]?\d+)\s*")

# SQLite INTEGER is a signed 64-bit value
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def _in_range(value: int) -> Optional[int]:
    return value if INT_MIN <= value <= INT_MAX else None


def parse_int(value: Any) -> Optional[int]:
    """Lenient integer parsing used for form input.

    "12" -> 12, " 7 " -> 7, "12abc" -> 12, "3.7" -> 3.
    Anything without leading digits ("", "abc", None) is not a number and
    gives None, as does a value the database cannot store.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return _in_range(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return _in_range(int(value))

    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return _in_range(int(match.group(1)))


def parse_id(value: Any) -> Optional[int]:
    """Strict parsing for row ids: the whole string must be an integer.

    "5" -> 5, " 5 " -> 5; "5abc", "1e2" and "" give None, which matches no row.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return _in_range(value)

    match = _WHOLE_INT.fullmatch(str(value))
    if not match:
        return None
    return _in_range(int(match.group(1)))
