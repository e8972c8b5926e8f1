"""Customer-facing fee schedule for the dynamic pricing model."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from returnly_pricing.models.tiers import SizeTier


def _default_size_upcharges() -> dict[SizeTier, Decimal]:
    return {
        SizeTier.SMALL: Decimal("0.00"),
        SizeTier.MEDIUM: Decimal("2.00"),
        SizeTier.LARGE: Decimal("5.00"),
    }


class FeeSchedule(BaseModel):
    """Rates the customer sees on the receipt."""

    model_config = ConfigDict(frozen=True)

    base_price: Decimal = Field(default=Decimal("3.99"), ge=0, description="Flat pickup fee, always charged ($)")
    size_upcharges: dict[SizeTier, Decimal] = Field(
        default_factory=_default_size_upcharges,
        description="Handling surcharge per size tier ($).  Every tier must be priced.",
    )
    multi_item_fee: Decimal = Field(
        default=Decimal("1.50"), ge=0,
        description="Charged per item beyond the first ($)",
    )
    small_order_fee: Decimal = Field(
        default=Decimal("2.00"), ge=0,
        description="Flat fee on low-value returns ($)",
    )
    small_order_threshold: Decimal = Field(
        default=Decimal("15.00"), ge=0,
        description="Item values strictly below this pay the small-order fee ($)",
    )
    distance_rate_per_mile: Decimal = Field(default=Decimal("0.50"), ge=0, description="$ per route mile")
    time_rate_per_minute: Decimal = Field(default=Decimal("0.15"), ge=0, description="$ per estimated minute")
    rush_fee: Decimal = Field(default=Decimal("4.00"), ge=0, description="Flat same-day rush fee ($)")
    service_fee_rate: Decimal = Field(
        default=Decimal("0.15"), ge=0, le=1,
        description="Platform markup as a fraction of subtotal (tip excluded)",
    )

    @field_validator("size_upcharges")
    @classmethod
    def _every_tier_priced(cls, value: dict[SizeTier, Decimal]) -> dict[SizeTier, Decimal]:
        missing = [tier.value for tier in SizeTier if tier not in value]
        if missing:
            raise ValueError(f"size_upcharges is missing tiers: {', '.join(missing)}")
        negative = [tier.value for tier, amount in value.items() if amount < 0]
        if negative:
            raise ValueError(f"size_upcharges must be non-negative: {', '.join(negative)}")
        return value
