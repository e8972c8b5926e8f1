"""Engine — size classifier, fee composer, revenue splitter, assembler."""

from returnly_pricing.engine.size import classify_size
from returnly_pricing.engine.fees import compute_breakdown, validate_request
from returnly_pricing.engine.split import check_reconciliation, split_revenue
from returnly_pricing.engine.assembler import assemble
from returnly_pricing.engine.strategies import (
    DynamicPricing,
    FlatTierPricing,
    PricingStrategy,
    get_strategy,
)
from returnly_pricing.engine.orchestrator import compare_models, quote

__all__ = [
    "classify_size",
    "compute_breakdown",
    "validate_request",
    "split_revenue",
    "check_reconciliation",
    "assemble",
    # Pricing models
    "PricingStrategy",
    "DynamicPricing",
    "FlatTierPricing",
    "get_strategy",
    "quote",
    "compare_models",
]
