"""Pricing pipeline entry point.

  request → size tier → fee lines → driver / company split → assembled view

Entry point: ``quote(request, tax, config)``
  - Routes to the dynamic model or the flat-tier model via ``config.model``
    (or the explicit ``model`` override).
  - Raises ``InvalidRequest`` subclasses for bad input; nothing partial is returned.
"""

from __future__ import annotations

import logging

from returnly_pricing.config.pricing import PricingConfig
from returnly_pricing.engine.assembler import assemble
from returnly_pricing.engine.strategies import get_strategy
from returnly_pricing.models.request import PricingRequest, TaxContext
from returnly_pricing.models.results import PaymentBreakdownView
from returnly_pricing.models.tiers import PricingModelName

logger = logging.getLogger(__name__)


def quote(
    request: PricingRequest,
    tax: TaxContext | None = None,
    config: PricingConfig | None = None,
    *,
    model: PricingModelName | None = None,
    strict: bool = True,
) -> PaymentBreakdownView:
    """Price one order end to end and return the full itemized view."""
    config = config or PricingConfig()
    tax = tax or TaxContext()

    strategy = get_strategy(config, model)
    breakdown = strategy.compute_breakdown(request)
    earnings, split = strategy.split_revenue(breakdown, strict=strict)
    view = assemble(breakdown, split, earnings, tax, config)

    logger.debug(
        "Quoted %s order (config=%s, tier=%s): total=%s grand_total=%s driver=%s company=%s",
        strategy.name, config.version, breakdown.size_tier.value,
        breakdown.total_price, view.grand_total,
        earnings.driver_total_earning, split.company_total_revenue,
    )
    return view


def compare_models(
    request: PricingRequest,
    tax: TaxContext | None = None,
    config: PricingConfig | None = None,
    *,
    strict: bool = True,
) -> dict[str, PaymentBreakdownView]:
    """Quote the same request under every pricing model."""
    return {
        name: quote(request, tax, config, model=name, strict=strict)
        for name in ("dynamic", "flat_tier")
    }
