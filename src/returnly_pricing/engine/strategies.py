"""Pricing models behind one interface.

Two pricing models coexist in the marketplace:

- **dynamic** — value / size / distance / time based (checkout flow).
- **flat_tier** — fixed Standard / Priority / Instant price with fixed driver
  pay (manual admin order creation).

Both produce the same ``FeeBreakdown`` / ``DriverEarnings`` / ``RevenueSplit``
records, so the assembler, receipt and downstream ledgers never need to know
which model priced an order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from returnly_pricing.config.pricing import PricingConfig
from returnly_pricing.engine.fees import compute_breakdown, validate_request
from returnly_pricing.engine.money import ZERO, round2
from returnly_pricing.engine.size import classify_size
from returnly_pricing.engine.split import (
    build_driver_earnings,
    build_revenue_split,
    enforce_reconciliation,
    split_revenue,
)
from returnly_pricing.models.request import PricingRequest
from returnly_pricing.models.results import DriverEarnings, FeeBreakdown, RevenueSplit
from returnly_pricing.models.tiers import PricingModelName


class PricingStrategy(ABC):
    """Common contract for a pricing model."""

    name: ClassVar[PricingModelName]

    def __init__(self, config: PricingConfig) -> None:
        self.config = config

    @abstractmethod
    def compute_breakdown(self, request: PricingRequest) -> FeeBreakdown:
        """Validate the request and itemize the customer charge."""

    @abstractmethod
    def split_revenue(
        self, breakdown: FeeBreakdown, *, strict: bool = True,
    ) -> tuple[DriverEarnings, RevenueSplit]:
        """Allocate the charge to driver and company; must reconcile."""


class DynamicPricing(PricingStrategy):
    name = "dynamic"

    def compute_breakdown(self, request: PricingRequest) -> FeeBreakdown:
        return compute_breakdown(request, self.config)

    def split_revenue(self, breakdown, *, strict=True):
        return split_revenue(breakdown, self.config, strict=strict)


class FlatTierPricing(PricingStrategy):
    """Fixed price per service tier; the tier price is booked as the base line.

    No size, distance, time, rush or service-fee lines apply.  The driver gets
    the tier's fixed pay plus the tip; the company keeps the rest of the price.
    """

    name = "flat_tier"

    def compute_breakdown(self, request: PricingRequest) -> FeeBreakdown:
        validate_request(request)
        tier = self.config.flat_tiers.price_for(request.service_tier)

        base_price = round2(tier.price)
        tip = round2(request.tip)
        item_value = round2(request.item_value)
        return FeeBreakdown(
            base_price=base_price,
            size_upcharge=ZERO,
            multi_item_fee=ZERO,
            small_order_fee=ZERO,
            distance_fee=ZERO,
            time_fee=ZERO,
            rush_fee=ZERO,
            subtotal=base_price,
            service_fee=ZERO,
            tip=tip,
            total_price=base_price + tip,
            item_value=item_value,
            number_of_items=request.number_of_items,
            size_tier=classify_size(item_value, self.config.size_bounds),
            route=request.route,
            service_tier=request.service_tier,
            pricing_model="flat_tier",
        )

    def split_revenue(self, breakdown, *, strict=True):
        tier = self.config.flat_tiers.price_for(breakdown.service_tier)
        driver_base_pay = round2(tier.driver_pay)

        earnings = build_driver_earnings(
            base_pay=driver_base_pay,
            distance_pay=ZERO,
            time_pay=ZERO,
            size_bonus=ZERO,
            tip=breakdown.tip,
        )
        split = build_revenue_split(
            service_fee=breakdown.service_fee,
            base_fee_share=breakdown.base_price - driver_base_pay,
            distance_fee_share=ZERO,
            time_fee_share=ZERO,
            multi_item_fee=breakdown.multi_item_fee,
            small_order_fee=breakdown.small_order_fee,
            rush_fee=breakdown.rush_fee,
        )
        enforce_reconciliation(
            breakdown, earnings, split, self.config.split.reconciliation_tolerance, strict=strict,
        )
        return earnings, split


STRATEGIES: dict[str, type[PricingStrategy]] = {
    DynamicPricing.name: DynamicPricing,
    FlatTierPricing.name: FlatTierPricing,
}


def get_strategy(config: PricingConfig, model: PricingModelName | None = None) -> PricingStrategy:
    """Build the strategy for ``model``, defaulting to ``config.model``."""
    name = model or config.model
    try:
        strategy_cls = STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown pricing model {name!r}; expected one of {sorted(STRATEGIES)}") from None
    return strategy_cls(config)
