"""
RecipeFinder utility functions
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Union

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert ints, floats and Decimals without float repr noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Number, places: int = 0) -> Decimal:
    """Round like a cashier: halves go away from zero.

    Python's round() uses banker's rounding, which would turn 2.5 cents
    into 2; prices and percentages here always round .5 up.
    """
    exponent = Decimal(1).scaleb(-places)
    return to_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def percentage(part: Number, whole: Number, places: int) -> float:
    """``part / whole * 100`` rounded half-up to ``places`` decimals."""
    ratio = to_decimal(part) / to_decimal(whole) * 100
    return float(round_half_up(ratio, places))


def ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def unique_ints(values: Iterable) -> List[int]:
    """Coerce to int and drop repeats, keeping first occurrence order."""
    return list(dict.fromkeys(int(v) for v in values))
