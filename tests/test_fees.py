"""Tests for engine/fees.py — the fee composer."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import pytest
from pydantic import ValidationError

from returnly_pricing.config import PricingConfig
from returnly_pricing.engine.fees import compute_breakdown
from returnly_pricing.errors import InvalidItemCount, InvalidItemValue, InvalidTip, InvalidRequest
from returnly_pricing.models import PricingRequest, RouteInfo, SizeTier
from returnly_pricing.models.request import MAX_AMOUNT


def _request(**overrides) -> PricingRequest:
    data = dict(item_value=Decimal("50"), number_of_items=1)
    data.update(overrides)
    return PricingRequest(**data)


# ═══════════════════════════════════════════════════════════════════════════
# Reference scenarios
# ═══════════════════════════════════════════════════════════════════════════

def test_scenario_a_single_medium_item(scenario_a: PricingRequest, config: PricingConfig):
    b = compute_breakdown(scenario_a, config)

    assert b.size_tier == SizeTier.MEDIUM
    assert b.base_price == Decimal("3.99")
    assert b.size_upcharge == Decimal("2.00")
    assert b.multi_item_fee == 0
    assert b.small_order_fee == 0
    assert b.distance_fee == 0
    assert b.time_fee == 0
    assert b.rush_fee == 0
    assert b.subtotal == Decimal("5.99")
    # 5.99 × 0.15 = 0.8985 → 0.90
    assert b.service_fee == Decimal("0.90")
    assert b.total_price == Decimal("6.89")


def test_scenario_b_rush_multi_item_route(scenario_b: PricingRequest, config: PricingConfig):
    b = compute_breakdown(scenario_b, config)

    assert b.size_tier == SizeTier.LARGE
    assert b.base_price == Decimal("3.99")
    assert b.size_upcharge == Decimal("5.00")
    assert b.multi_item_fee == Decimal("3.00")
    assert b.small_order_fee == 0
    assert b.distance_fee == Decimal("2.50")
    assert b.time_fee == Decimal("1.50")
    assert b.rush_fee == Decimal("4.00")
    assert b.subtotal == Decimal("19.99")
    # 19.99 × 0.15 = 2.9985 → 3.00
    assert b.service_fee == Decimal("3.00")
    assert b.tip == Decimal("3.00")
    assert b.total_price == Decimal("25.99")


# ═══════════════════════════════════════════════════════════════════════════
# Individual lines
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("value, expected", [("14.99", "2.00"), ("15", "0"), ("15.01", "0")])
def test_small_order_fee_threshold(value: str, expected: str, config: PricingConfig):
    b = compute_breakdown(_request(item_value=Decimal(value)), config)
    assert b.small_order_fee == Decimal(expected)


@pytest.mark.parametrize("items, expected", [(1, "0"), (2, "1.50"), (5, "6.00")])
def test_multi_item_fee(items: int, expected: str, config: PricingConfig):
    b = compute_breakdown(_request(number_of_items=items), config)
    assert b.multi_item_fee == Decimal(expected)


def test_rush_fee_only_when_rush(config: PricingConfig):
    assert compute_breakdown(_request(is_rush=False), config).rush_fee == 0
    assert compute_breakdown(_request(is_rush=True), config).rush_fee == Decimal("4.00")


def test_small_item_has_no_size_upcharge(config: PricingConfig):
    b = compute_breakdown(_request(item_value=Decimal("10")), config)
    assert b.size_tier == SizeTier.SMALL
    assert b.size_upcharge == 0
    assert b.small_order_fee == Decimal("2.00")


def test_rounding_is_half_up_per_line(config: PricingConfig):
    """0.50 × 0.05 mi = 0.025 → 0.03 (banker's rounding would give 0.02)."""
    route = RouteInfo(distance_miles=Decimal("0.05"), estimated_minutes=Decimal("0"))
    b = compute_breakdown(_request(route=route), config)
    assert b.distance_fee == Decimal("0.03")


def test_no_binary_float_drift(config: PricingConfig):
    """0.15 × 7 min is exactly 1.05, not 1.0499999…"""
    route = RouteInfo(distance_miles=Decimal("0"), estimated_minutes=Decimal("7"))
    b = compute_breakdown(_request(route=route), config)
    assert b.time_fee == Decimal("1.05")


def test_float_inputs_are_accepted(config: PricingConfig):
    req = PricingRequest(item_value=50.0, tip=2.5, route={"distance_miles": 1.1, "estimated_minutes": 3})
    b = compute_breakdown(req, config)
    assert b.tip == Decimal("2.50")
    assert b.distance_fee == Decimal("0.55")


def test_missing_route_quotes_base_only(config: PricingConfig):
    b = compute_breakdown(PricingRequest(item_value=Decimal("50"), route=None), config)
    assert b.route == RouteInfo()
    assert b.distance_fee == 0
    assert b.time_fee == 0


def test_service_fee_never_applies_to_tip(config: PricingConfig):
    without_tip = compute_breakdown(_request(), config)
    with_tip = compute_breakdown(_request(tip=Decimal("20")), config)
    assert with_tip.service_fee == without_tip.service_fee
    assert with_tip.total_price - without_tip.total_price == Decimal("20.00")


def test_custom_fee_schedule():
    cfg = PricingConfig.model_validate({"fees": {"base_price": "5.00", "rush_fee": "7.50"}})
    b = compute_breakdown(_request(is_rush=True), cfg)
    assert b.base_price == Decimal("5.00")
    assert b.rush_fee == Decimal("7.50")


# ═══════════════════════════════════════════════════════════════════════════
# Composition invariants
# ═══════════════════════════════════════════════════════════════════════════

def test_composition_invariants_over_grid(config: PricingConfig):
    for value in ("1", "14.99", "25", "80", "150", "999.99"):
        for items in (1, 2, 4):
            for miles in ("0", "0.7", "3.33", "12.5"):
                for minutes in ("0", "7", "23", "61"):
                    for rush in (False, True):
                        req = PricingRequest(
                            item_value=Decimal(value),
                            number_of_items=items,
                            route=RouteInfo(distance_miles=Decimal(miles), estimated_minutes=Decimal(minutes)),
                            is_rush=rush,
                            tip=Decimal("1.25"),
                        )
                        b = compute_breakdown(req, config)
                        assert b.subtotal == (
                            b.base_price + b.size_upcharge + b.multi_item_fee + b.small_order_fee
                            + b.distance_fee + b.time_fee + b.rush_fee
                        )
                        assert b.service_fee == (b.subtotal * Decimal("0.15")).quantize(
                            Decimal("0.01"), rounding=ROUND_HALF_UP
                        )
                        assert b.total_price == b.subtotal + b.service_fee + b.tip


def test_every_line_is_whole_cents(scenario_b: PricingRequest, config: PricingConfig):
    b = compute_breakdown(scenario_b, config)
    for name in ("base_price", "size_upcharge", "multi_item_fee", "small_order_fee", "distance_fee",
                 "time_fee", "rush_fee", "subtotal", "service_fee", "tip", "total_price"):
        assert getattr(b, name).as_tuple().exponent == -2, f"{name} not quantized to cents"


# ═══════════════════════════════════════════════════════════════════════════
# Validation errors
# ═══════════════════════════════════════════════════════════════════════════

def test_zero_item_value_rejected(config: PricingConfig):
    with pytest.raises(InvalidItemValue) as exc_info:
        compute_breakdown(_request(item_value=Decimal("0")), config)
    assert exc_info.value.field == "item_value"


def test_negative_item_value_rejected(config: PricingConfig):
    with pytest.raises(InvalidItemValue):
        compute_breakdown(_request(item_value=Decimal("-5")), config)


def test_zero_items_rejected(config: PricingConfig):
    with pytest.raises(InvalidItemCount):
        compute_breakdown(_request(number_of_items=0), config)


def test_negative_tip_rejected(config: PricingConfig):
    with pytest.raises(InvalidTip):
        compute_breakdown(_request(tip=Decimal("-0.01")), config)


def test_validation_errors_share_a_base(config: PricingConfig):
    with pytest.raises(InvalidRequest):
        compute_breakdown(_request(number_of_items=-3), config)


def test_item_value_checked_first(config: PricingConfig):
    """Several bad fields → the first check wins; nothing is computed."""
    with pytest.raises(InvalidItemValue):
        compute_breakdown(_request(item_value=Decimal("0"), number_of_items=0, tip=Decimal("-1")), config)


def test_sub_cent_item_value_rounds_to_cents(config: PricingConfig):
    fb = compute_breakdown(_request(item_value=Decimal("49.999")), config)
    assert fb.item_value == Decimal("50.00")
    assert fb.item_value.as_tuple().exponent == -2


def test_item_value_below_half_a_cent_rejected(config: PricingConfig):
    with pytest.raises(InvalidItemValue):
        compute_breakdown(_request(item_value=Decimal("0.004")), config)


class TestMagnitudeLimits:
    """Oversized amounts are refused by the schema instead of overflowing cent rounding."""

    def test_huge_tip(self):
        with pytest.raises(ValidationError):
            _request(tip=Decimal("1e27"))

    def test_huge_item_value(self):
        with pytest.raises(ValidationError):
            _request(item_value=Decimal("1e27"))

    def test_huge_item_count(self):
        with pytest.raises(ValidationError):
            _request(number_of_items=10**30)

    def test_huge_distance(self):
        with pytest.raises(ValidationError):
            RouteInfo(distance_miles=Decimal("1e28"))

    def test_huge_minutes(self):
        with pytest.raises(ValidationError):
            RouteInfo(estimated_minutes=Decimal("1e28"))

    def test_largest_accepted_amounts_still_price(self, config: PricingConfig):
        fb = compute_breakdown(_request(item_value=MAX_AMOUNT, tip=MAX_AMOUNT), config)
        assert fb.tip == Decimal("1000000.00")
        assert fb.total_price == fb.subtotal + fb.service_fee + fb.tip
