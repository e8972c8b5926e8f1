"""Configuration models — rates, split policy, tiers, and process settings."""

from returnly_pricing.config.fees import FeeSchedule
from returnly_pricing.config.size import SizeTierBounds
from returnly_pricing.config.split import SplitPolicy
from returnly_pricing.config.service_tiers import FlatTierSchedule, ServiceTierPrice
from returnly_pricing.config.tax import TaxPolicy
from returnly_pricing.config.pricing import PricingConfig
from returnly_pricing.config.settings import PricingSettings, get_settings
from returnly_pricing.config.loader import (
    default_pricing_config,
    load_pricing_config,
    resolve_pricing_config,
)

__all__ = [
    "FeeSchedule",
    "SizeTierBounds",
    "SplitPolicy",
    "FlatTierSchedule",
    "ServiceTierPrice",
    "TaxPolicy",
    "PricingConfig",
    "PricingSettings",
    "get_settings",
    "default_pricing_config",
    "load_pricing_config",
    "resolve_pricing_config",
]
