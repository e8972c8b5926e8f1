"""Input types — what checkout / admin order creation hands the engine.

Lower-bound checks on ``item_value``, ``number_of_items`` and ``tip`` are done
by the fee composer (it raises the domain errors in ``returnly_pricing.errors``).
The schema only caps magnitudes so every amount stays within cent precision.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from returnly_pricing.models.tiers import ServiceTier

MAX_AMOUNT = Decimal("1000000")
MAX_ITEMS = 1000
MAX_MILES = Decimal("5000")
MAX_MINUTES = Decimal("100000")


class RouteInfo(BaseModel):
    """Pickup → drop-off route, supplied by the mapping collaborator."""

    model_config = ConfigDict(frozen=True)

    distance_miles: Decimal = Field(
        default=Decimal("0"), ge=0, le=MAX_MILES, description="Route distance (miles)",
    )
    estimated_minutes: Decimal = Field(
        default=Decimal("0"), ge=0, le=MAX_MINUTES, description="Estimated drive time (minutes)",
    )


class PricingRequest(BaseModel):
    """One pricing evaluation.  Built once per quote, never mutated."""

    model_config = ConfigDict(frozen=True)

    item_value: Decimal = Field(le=MAX_AMOUNT, description="Declared value of the returned item(s) ($)")
    number_of_items: int = Field(default=1, le=MAX_ITEMS, description="Boxes / items picked up")
    route: RouteInfo = Field(
        default_factory=RouteInfo,
        description="Route info.  Missing → zero route (base-fee-only quote).",
    )
    is_rush: bool = Field(default=False, description="Same-day rush pickup")
    tip: Decimal = Field(default=Decimal("0"), le=MAX_AMOUNT, description="Customer tip ($), 100% to driver")
    service_tier: ServiceTier = Field(
        default=ServiceTier.STANDARD,
        description="Flat service level.  Only read by the flat-tier pricing model.",
    )

    @field_validator("route", mode="before")
    @classmethod
    def _missing_route_is_zero(cls, value):
        return RouteInfo() if value is None else value


class TaxContext(BaseModel):
    """Already-resolved tax information for the pickup address."""

    model_config = ConfigDict(frozen=True)

    rate: Decimal = Field(default=Decimal("0"), ge=0, le=1, description="Sales-tax rate as a fraction (0.0875 = 8.75%)")
    jurisdiction_name: str = Field(default="", description="e.g. 'St. Louis County, MO'")
    is_donation_exempt: bool = Field(
        default=False,
        description="Charitable drop-off — tax is suppressed entirely.",
    )
