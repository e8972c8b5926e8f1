"""Breakdown assembler — fee lines + ledgers + tax → ``PaymentBreakdownView``."""

from __future__ import annotations

from returnly_pricing.config.pricing import PricingConfig
from returnly_pricing.engine.money import ZERO, round2
from returnly_pricing.engine.split import check_reconciliation
from returnly_pricing.models.request import TaxContext
from returnly_pricing.models.results import (
    DriverEarnings,
    FeeBreakdown,
    PaymentBreakdownView,
    RevenueSplit,
)


def assemble(
    breakdown: FeeBreakdown,
    split: RevenueSplit,
    earnings: DriverEarnings,
    tax: TaxContext,
    config: PricingConfig | None = None,
) -> PaymentBreakdownView:
    """Attach tax and customer totals.  Single pass, no side effects.

    Tax is computed on ``total_price`` less the tip (unless the tax policy
    taxes tips) and suppressed entirely for donation drop-offs.
    """
    config = config or PricingConfig()

    taxable_amount = (
        breakdown.total_price
        if config.tax.tax_tips
        else breakdown.total_price - breakdown.tip
    )
    tax_amount = ZERO if tax.is_donation_exempt else round2(taxable_amount * tax.rate)
    grand_total = breakdown.total_price + tax_amount

    return PaymentBreakdownView(
        pricing_model=breakdown.pricing_model,
        fees=breakdown,
        driver=earnings,
        company=split,
        tax_rate=tax.rate,
        tax_jurisdiction_name=tax.jurisdiction_name,
        is_donation_exempt=tax.is_donation_exempt,
        taxable_amount=taxable_amount,
        tax_amount=tax_amount,
        grand_total=grand_total,
        item_value=breakdown.item_value,
        customer_net_cost=grand_total - breakdown.item_value,
        reconciliation=check_reconciliation(
            breakdown, earnings, split, config.split.reconciliation_tolerance,
        ),
    )
