"""Decimal utilities for reproducible score arithmetic.

Scores are computed with Decimal so the result does not depend on the
order in which responses are summed.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence, Union

Number = Union[int, float, Decimal]


def to_decimal(value: Number, places: int = 4) -> Decimal:
    """Convert a number to Decimal with explicit precision and ROUND_HALF_UP rounding.

    Args:
        value: Numeric value to convert.
        places: Number of decimal places to quantize to.

    Returns:
        Decimal with the specified precision.
    """
    if isinstance(value, Decimal):
        return value.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places,
        rounding=ROUND_HALF_UP,
    )


def exact_decimal(value: Number) -> Decimal:
    """Convert without quantizing; floats go through ``str`` to keep their shortest repr."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)
