"""Flat per-service-tier pricing used for manually created admin orders."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from returnly_pricing.models.tiers import ServiceTier


class ServiceTierPrice(BaseModel):
    """Fixed customer price and fixed driver pay for one service level."""

    model_config = ConfigDict(frozen=True)

    price: Decimal = Field(gt=0, description="Customer price before tip ($)")
    driver_pay: Decimal = Field(ge=0, description="Driver pay before tip ($)")

    @model_validator(mode="after")
    def _driver_within_price(self) -> "ServiceTierPrice":
        if self.driver_pay > self.price:
            raise ValueError(
                f"driver_pay ({self.driver_pay}) must be <= price ({self.price})"
            )
        return self


class FlatTierSchedule(BaseModel):
    """Standard / Priority / Instant price sheet."""

    model_config = ConfigDict(frozen=True)

    standard: ServiceTierPrice = Field(
        default_factory=lambda: ServiceTierPrice(price=Decimal("6.99"), driver_pay=Decimal("5.00")),
    )
    priority: ServiceTierPrice = Field(
        default_factory=lambda: ServiceTierPrice(price=Decimal("9.99"), driver_pay=Decimal("8.00")),
    )
    instant: ServiceTierPrice = Field(
        default_factory=lambda: ServiceTierPrice(price=Decimal("12.99"), driver_pay=Decimal("10.00")),
    )

    def price_for(self, tier: ServiceTier) -> ServiceTierPrice:
        return getattr(self, tier.value)
