"""Cent and percentage rounding shared by the calculators."""

from __future__ import annotations

import math
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
WHOLE = Decimal("1")
TENTH = Decimal("0.1")
# Float noise below this precision is discarded before ceiling to a cent.
_NOISE = Decimal("0.000000001")


def to_decimal(value: float | int | Decimal) -> Decimal:
    """Convert via the shortest repr so 18.99 stays 18.99 instead of its binary expansion."""

    if isinstance(value, Decimal):
        return value
    return Decimal(repr(value)) if isinstance(value, float) else Decimal(value)


def is_usable(value: object) -> bool:
    """Return True for real, finite numbers (bools and NaN/inf excluded)."""

    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    return math.isfinite(value)


def round2(value: float | Decimal) -> float:
    """Round to the nearest cent, halves away from zero."""

    return float(to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))


def ceil_cents(value: float | Decimal) -> float:
    """Round up to the next whole cent."""

    cleaned = to_decimal(value).quantize(_NOISE, rounding=ROUND_HALF_UP)
    return float(cleaned.quantize(CENT, rounding=ROUND_CEILING))


def round_percent(value: float | Decimal) -> int:
    """Integer percentage, halves rounded up."""

    return int(to_decimal(value).quantize(WHOLE, rounding=ROUND_HALF_UP))


def format_tenths(value: float | Decimal) -> str:
    """One-decimal display string, halves rounded up."""

    return str(to_decimal(value).quantize(TENTH, rounding=ROUND_HALF_UP))


__all__ = ["CENT", "ceil_cents", "format_tenths", "is_usable", "round2", "round_percent", "to_decimal"]
