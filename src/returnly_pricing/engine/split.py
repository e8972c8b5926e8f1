"""Revenue splitter — divide the customer charge into driver and company ledgers.

Split lines (base, distance, time) pay the driver a rounded amount and give
the company the remainder of the already-rounded customer line, so the two
ledgers add back to ``total_price`` to the cent.  The postcondition is still
checked on every call: a failure here means a config or rounding defect.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from returnly_pricing.config.pricing import MINUTES_PER_HOUR, PricingConfig
from returnly_pricing.engine.money import round2
from returnly_pricing.errors import ReconciliationMismatch
from returnly_pricing.models.results import (
    DriverEarnings,
    FeeBreakdown,
    ReconciliationReport,
    RevenueSplit,
)

logger = logging.getLogger(__name__)


def split_revenue(
    breakdown: FeeBreakdown,
    config: PricingConfig,
    *,
    strict: bool = True,
) -> tuple[DriverEarnings, RevenueSplit]:
    """Allocate every fee line of a dynamic breakdown to driver or company."""
    policy = config.split
    route = breakdown.route

    # Base: driver keeps a fixed share
    driver_base_pay = round2(breakdown.base_price * policy.driver_base_share)
    company_base_fee_share = breakdown.base_price - driver_base_pay

    # Distance: driver $/mile, company keeps the margin
    driver_distance_pay = round2(policy.driver_rate_per_mile * route.distance_miles)
    company_distance_fee_share = breakdown.distance_fee - driver_distance_pay

    # Time: driver $/hour of route time, company keeps the margin
    driver_time_pay = round2(route.estimated_minutes * policy.driver_rate_per_hour / MINUTES_PER_HOUR)
    company_time_fee_share = breakdown.time_fee - driver_time_pay

    earnings = build_driver_earnings(
        base_pay=driver_base_pay,
        distance_pay=driver_distance_pay,
        time_pay=driver_time_pay,
        size_bonus=breakdown.size_upcharge,
        tip=breakdown.tip,
    )
    split = build_revenue_split(
        service_fee=breakdown.service_fee,
        base_fee_share=company_base_fee_share,
        distance_fee_share=company_distance_fee_share,
        time_fee_share=company_time_fee_share,
        multi_item_fee=breakdown.multi_item_fee,
        small_order_fee=breakdown.small_order_fee,
        rush_fee=breakdown.rush_fee,
    )

    enforce_reconciliation(breakdown, earnings, split, policy.reconciliation_tolerance, strict=strict)
    return earnings, split


def build_driver_earnings(
    *,
    base_pay: Decimal,
    distance_pay: Decimal,
    time_pay: Decimal,
    size_bonus: Decimal,
    tip: Decimal,
) -> DriverEarnings:
    return DriverEarnings(
        driver_base_pay=base_pay,
        driver_distance_pay=distance_pay,
        driver_time_pay=time_pay,
        driver_size_bonus=size_bonus,
        driver_tip=tip,
        driver_total_earning=base_pay + distance_pay + time_pay + size_bonus + tip,
    )


def build_revenue_split(
    *,
    service_fee: Decimal,
    base_fee_share: Decimal,
    distance_fee_share: Decimal,
    time_fee_share: Decimal,
    multi_item_fee: Decimal,
    small_order_fee: Decimal,
    rush_fee: Decimal,
) -> RevenueSplit:
    return RevenueSplit(
        company_service_fee=service_fee,
        company_base_fee_share=base_fee_share,
        company_distance_fee_share=distance_fee_share,
        company_time_fee_share=time_fee_share,
        company_multi_item_fee=multi_item_fee,
        company_small_order_fee=small_order_fee,
        company_rush_fee=rush_fee,
        company_total_revenue=(
            service_fee + base_fee_share + distance_fee_share + time_fee_share
            + multi_item_fee + small_order_fee + rush_fee
        ),
    )


def check_reconciliation(
    breakdown: FeeBreakdown,
    earnings: DriverEarnings,
    split: RevenueSplit,
    tolerance: Decimal = Decimal("0.01"),
) -> ReconciliationReport:
    """Compare what the customer pays with what driver + company receive."""
    allocated = earnings.driver_total_earning + split.company_total_revenue
    difference = abs(breakdown.total_price - allocated)
    is_balanced = difference <= tolerance
    if is_balanced:
        explanation = "Payment breakdown is balanced"
    else:
        explanation = (
            f"Payment mismatch: customer pays ${breakdown.total_price}, "
            f"but driver + company = ${allocated} (difference: ${difference})"
        )
    return ReconciliationReport(
        total_price=breakdown.total_price,
        allocated=allocated,
        difference=difference,
        is_balanced=is_balanced,
        explanation=explanation,
    )


def enforce_reconciliation(
    breakdown: FeeBreakdown,
    earnings: DriverEarnings,
    split: RevenueSplit,
    tolerance: Decimal,
    *,
    strict: bool = True,
) -> ReconciliationReport:
    """Check the ledger postcondition; log any mismatch and raise when ``strict``."""
    report = check_reconciliation(breakdown, earnings, split, tolerance)
    if not report.is_balanced:
        logger.error(
            "Ledger reconciliation failed (model=%s, total=%s, allocated=%s, difference=%s)",
            breakdown.pricing_model, report.total_price, report.allocated, report.difference,
        )
        if strict:
            raise ReconciliationMismatch(report.total_price, report.allocated, report.difference)
    return report
