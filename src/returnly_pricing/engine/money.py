"""Cent rounding.  All engine arithmetic is ``Decimal``; floats are converted via ``str``."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round2(value: Decimal | int | float | str) -> Decimal:
    """Round half-up to the nearest cent."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
