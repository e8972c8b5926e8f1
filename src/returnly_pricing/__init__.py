"""Returnly pricing — itemized pickup pricing and driver / company revenue split."""

from returnly_pricing.config.pricing import PricingConfig
from returnly_pricing.engine.orchestrator import quote
from returnly_pricing.models.request import PricingRequest, RouteInfo, TaxContext
from returnly_pricing.models.results import PaymentBreakdownView

__version__ = "1.0.0"

__all__ = [
    "PricingConfig",
    "PricingRequest",
    "RouteInfo",
    "TaxContext",
    "PaymentBreakdownView",
    "quote",
]
