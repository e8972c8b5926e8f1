"""Error taxonomy for the pricing engine.

Input-validation errors are raised before any fee line is computed, so a
caller never sees a partial breakdown.  ``ReconciliationMismatch`` is an
internal invariant violation (driver + company != customer total) and
signals a configuration or rounding defect, never bad user input.
"""

from __future__ import annotations

from decimal import Decimal


class PricingError(Exception):
    """Base class for every error raised by the pricing engine."""


class InvalidRequest(PricingError):
    """A ``PricingRequest`` field is outside its accepted range."""

    field: str = ""

    def __init__(self, value: object, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"{self.field} is invalid (got {value})")


class InvalidItemValue(InvalidRequest):
    field = "item_value"

    def __init__(self, value: object) -> None:
        super().__init__(value, f"item_value must be greater than 0 (got {value})")


class InvalidItemCount(InvalidRequest):
    field = "number_of_items"

    def __init__(self, value: object) -> None:
        super().__init__(value, f"number_of_items must be at least 1 (got {value})")


class InvalidTip(InvalidRequest):
    field = "tip"

    def __init__(self, value: object) -> None:
        super().__init__(value, f"tip must not be negative (got {value})")


class ReconciliationMismatch(PricingError):
    """Driver earnings + company revenue do not add up to the customer total."""

    def __init__(self, total_price: Decimal, allocated: Decimal, difference: Decimal) -> None:
        self.total_price = total_price
        self.allocated = allocated
        self.difference = difference
        super().__init__(
            f"Payment mismatch: customer pays ${total_price}, "
            f"but driver + company = ${allocated} (difference: ${difference})"
        )
