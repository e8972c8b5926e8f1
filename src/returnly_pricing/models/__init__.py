"""Request and result models — engine input/output contracts."""

from returnly_pricing.models.tiers import PricingModelName, ServiceTier, SizeTier
from returnly_pricing.models.request import PricingRequest, RouteInfo, TaxContext
from returnly_pricing.models.results import (
    DriverEarnings,
    FeeBreakdown,
    PaymentBreakdownView,
    ReconciliationReport,
    RevenueSplit,
)

__all__ = [
    "PricingModelName",
    "ServiceTier",
    "SizeTier",
    "PricingRequest",
    "RouteInfo",
    "TaxContext",
    "DriverEarnings",
    "FeeBreakdown",
    "PaymentBreakdownView",
    "ReconciliationReport",
    "RevenueSplit",
]
