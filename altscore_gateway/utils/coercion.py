"""Coercion of raw form values into numbers and text"""

import math
from typing import Optional, Union

# Raw form value: the calculator submits whatever the user typed
RawNumber = Union[int, float, str, None]


def to_number(value: RawNumber) -> float:
    """
    Coerce a raw form value to a finite float.

    Missing, blank, non-numeric and non-finite values become 0.0 so the
    score calculator never rejects a form.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0

    return number if math.isfinite(number) else 0.0


def to_text(value: Optional[str]) -> str:
    """Missing select values (null) read as the empty, unmatched choice"""
    return "" if value is None else value


def to_int(value: RawNumber) -> int:
    """Coerce a raw form value to an int, truncating toward zero ("30.7" -> 30)"""
    return int(to_number(value))


def round_half_up(value: Union[int, float]) -> int:
    """Round .5 upward, as the client does, instead of Python's banker's rounding"""
    return math.floor(value + 0.5)
