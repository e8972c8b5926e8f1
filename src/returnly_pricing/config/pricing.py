"""Top-level pricing configuration — bundles every rate the engine reads.

A ``PricingConfig`` is frozen.  Load it once per process and pass it
explicitly to each call; two quotes priced against different snapshots would
produce ledgers that do not reconcile with each other.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from returnly_pricing.config.fees import FeeSchedule
from returnly_pricing.config.service_tiers import FlatTierSchedule
from returnly_pricing.config.size import SizeTierBounds
from returnly_pricing.config.split import SplitPolicy
from returnly_pricing.config.tax import TaxPolicy
from returnly_pricing.models.tiers import PricingModelName

MINUTES_PER_HOUR = Decimal("60")


class PricingConfig(BaseModel):
    """Complete rule set for one pricing version."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(default="default", description="Label recorded alongside quotes")
    model: PricingModelName = Field(
        default="dynamic",
        description="Pricing model: 'dynamic' (value / distance / time based) or "
                    "'flat_tier' (fixed Standard / Priority / Instant prices).",
    )
    fees: FeeSchedule = Field(default_factory=FeeSchedule)
    size_bounds: SizeTierBounds = Field(default_factory=SizeTierBounds)
    split: SplitPolicy = Field(default_factory=SplitPolicy)
    flat_tiers: FlatTierSchedule = Field(default_factory=FlatTierSchedule)
    tax: TaxPolicy = Field(default_factory=TaxPolicy)

    @model_validator(mode="after")
    def _driver_rates_within_customer_rates(self) -> "PricingConfig":
        # Company remainders are computed by subtraction and must never go negative.
        if self.split.driver_rate_per_mile > self.fees.distance_rate_per_mile:
            raise ValueError(
                f"driver_rate_per_mile ({self.split.driver_rate_per_mile}) must be <= "
                f"distance_rate_per_mile ({self.fees.distance_rate_per_mile})"
            )
        customer_rate_per_hour = self.fees.time_rate_per_minute * MINUTES_PER_HOUR
        if self.split.driver_rate_per_hour > customer_rate_per_hour:
            raise ValueError(
                f"driver_rate_per_hour ({self.split.driver_rate_per_hour}) must be <= "
                f"time_rate_per_minute × 60 ({customer_rate_per_hour})"
            )
        return self
