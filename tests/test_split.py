"""Tests for engine/split.py — driver / company ledgers and reconciliation."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from returnly_pricing.config import PricingConfig
from returnly_pricing.engine.fees import compute_breakdown
from returnly_pricing.engine.split import check_reconciliation, split_revenue
from returnly_pricing.errors import ReconciliationMismatch
from returnly_pricing.models import PricingRequest, RouteInfo


def test_scenario_b_driver_ledger(scenario_b: PricingRequest, config: PricingConfig):
    earnings, _ = split_revenue(compute_breakdown(scenario_b, config), config)

    assert earnings.driver_base_pay == Decimal("2.79")      # 3.99 × 0.70 = 2.793
    assert earnings.driver_distance_pay == Decimal("1.75")  # 5 × 0.35
    assert earnings.driver_time_pay == Decimal("1.33")      # 10/60 × 8 = 1.333…
    assert earnings.driver_size_bonus == Decimal("5.00")
    assert earnings.driver_tip == Decimal("3.00")
    assert earnings.driver_total_earning == Decimal("13.87")


def test_scenario_b_company_ledger(scenario_b: PricingRequest, config: PricingConfig):
    _, split = split_revenue(compute_breakdown(scenario_b, config), config)

    assert split.company_service_fee == Decimal("3.00")
    assert split.company_base_fee_share == Decimal("1.20")
    assert split.company_distance_fee_share == Decimal("0.75")
    assert split.company_time_fee_share == Decimal("0.17")
    assert split.company_multi_item_fee == Decimal("3.00")
    assert split.company_small_order_fee == 0
    assert split.company_rush_fee == Decimal("4.00")
    assert split.company_total_revenue == Decimal("12.12")


def test_scenario_a_split(scenario_a: PricingRequest, config: PricingConfig):
    breakdown = compute_breakdown(scenario_a, config)
    earnings, split = split_revenue(breakdown, config)

    assert earnings.driver_total_earning == Decimal("4.79")  # 2.79 base + 2.00 size bonus
    assert split.company_total_revenue == Decimal("2.10")    # 1.20 base share + 0.90 service
    assert earnings.driver_total_earning + split.company_total_revenue == breakdown.total_price


def test_zero_tip_means_zero_driver_tip(scenario_a: PricingRequest, config: PricingConfig):
    earnings, _ = split_revenue(compute_breakdown(scenario_a, config), config)
    assert earnings.driver_tip == 0


def test_ledger_totals_are_sums_of_fields(scenario_b: PricingRequest, config: PricingConfig):
    earnings, split = split_revenue(compute_breakdown(scenario_b, config), config)

    assert earnings.driver_total_earning == (
        earnings.driver_base_pay + earnings.driver_distance_pay + earnings.driver_time_pay
        + earnings.driver_size_bonus + earnings.driver_tip
    )
    assert split.company_total_revenue == (
        split.company_service_fee + split.company_base_fee_share
        + split.company_distance_fee_share + split.company_time_fee_share
        + split.company_multi_item_fee + split.company_small_order_fee + split.company_rush_fee
    )


def test_reconciles_exactly_over_grid(config: PricingConfig):
    """driver + company == total to the cent for every combination."""
    for value in ("3", "20", "99.95", "400"):
        for items in (1, 3):
            for miles in ("0", "0.05", "1.37", "7.77", "42.1"):
                for minutes in ("0", "1", "13", "47.5", "95"):
                    for rush in (False, True):
                        for tip in ("0", "2.35"):
                            req = PricingRequest(
                                item_value=Decimal(value),
                                number_of_items=items,
                                route=RouteInfo(distance_miles=Decimal(miles), estimated_minutes=Decimal(minutes)),
                                is_rush=rush,
                                tip=Decimal(tip),
                            )
                            b = compute_breakdown(req, config)
                            earnings, split = split_revenue(b, config)
                            assert earnings.driver_total_earning + split.company_total_revenue == b.total_price
                            assert split.company_distance_fee_share >= 0
                            assert split.company_time_fee_share >= 0


def test_custom_split_policy(scenario_b: PricingRequest):
    cfg = PricingConfig.model_validate({
        "split": {"driver_base_share": "0.50", "driver_rate_per_mile": "0.40", "driver_rate_per_hour": "9"},
    })
    b = compute_breakdown(scenario_b, cfg)
    earnings, split = split_revenue(b, cfg)

    assert earnings.driver_base_pay == Decimal("2.00")      # 1.995 → 2.00
    assert earnings.driver_distance_pay == Decimal("2.00")
    assert earnings.driver_time_pay == Decimal("1.50")
    assert split.company_time_fee_share == 0
    assert earnings.driver_total_earning + split.company_total_revenue == b.total_price


# ═══════════════════════════════════════════════════════════════════════════
# Reconciliation postcondition
# ═══════════════════════════════════════════════════════════════════════════

def test_check_reconciliation_balanced(scenario_b: PricingRequest, config: PricingConfig):
    b = compute_breakdown(scenario_b, config)
    earnings, split = split_revenue(b, config)
    report = check_reconciliation(b, earnings, split)

    assert report.is_balanced
    assert report.difference == 0
    assert report.allocated == Decimal("25.99")
    assert report.explanation == "Payment breakdown is balanced"


def test_tampered_breakdown_raises_when_strict(scenario_b: PricingRequest, config: PricingConfig):
    b = compute_breakdown(scenario_b, config)
    tampered = b.model_copy(update={"total_price": b.total_price + Decimal("0.50")})

    with pytest.raises(ReconciliationMismatch) as exc_info:
        split_revenue(tampered, config, strict=True)
    assert exc_info.value.difference == Decimal("0.50")
    assert exc_info.value.total_price == Decimal("26.49")


def test_tampered_breakdown_logged_when_not_strict(
    scenario_b: PricingRequest, config: PricingConfig, caplog: pytest.LogCaptureFixture,
):
    b = compute_breakdown(scenario_b, config)
    tampered = b.model_copy(update={"total_price": b.total_price + Decimal("1.00")})

    with caplog.at_level(logging.ERROR, logger="returnly_pricing.engine.split"):
        earnings, split = split_revenue(tampered, config, strict=False)

    assert earnings.driver_total_earning == Decimal("13.87")
    assert "reconciliation failed" in caplog.text
    report = check_reconciliation(tampered, earnings, split)
    assert not report.is_balanced
    assert "Payment mismatch" in report.explanation


def test_difference_within_tolerance_is_balanced(scenario_b: PricingRequest, config: PricingConfig):
    b = compute_breakdown(scenario_b, config)
    earnings, split = split_revenue(b, config)
    off_by_a_cent = b.model_copy(update={"total_price": b.total_price + Decimal("0.01")})

    assert check_reconciliation(off_by_a_cent, earnings, split).is_balanced
    assert not check_reconciliation(off_by_a_cent, earnings, split, tolerance=Decimal("0")).is_balanced
