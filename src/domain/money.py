"""Decimal helpers for monetary arithmetic.

Every amount that enters a computation goes through ``to_decimal`` so that a
missing or corrupt value counts as zero instead of failing the whole
calculation.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """
    Parse a value into a Decimal, falling back to zero

    Args:
        value: Decimal, int, float, numeric string or None

    Returns:
        Decimal value, or Decimal("0") for None, non-numeric or non-finite input
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        return Decimal(value)
    else:
        # floats go through str() so 0.1 becomes Decimal("0.1")
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return ZERO

    if not result.is_finite():
        return ZERO
    return result


def round_money(value: Any) -> Decimal:
    """Round to 2 fractional digits, half away from zero"""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
