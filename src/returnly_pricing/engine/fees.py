"""Fee composer — the seven independent customer fee lines and their totals.

Each line is rounded half-up to the cent after its own multiplication;
subtotal, service fee and total are then built from the rounded lines so the
receipt always adds up exactly.
"""

from __future__ import annotations

from returnly_pricing.config.pricing import PricingConfig
from returnly_pricing.engine.money import ZERO, round2
from returnly_pricing.engine.size import classify_size
from returnly_pricing.errors import InvalidItemCount, InvalidItemValue, InvalidTip
from returnly_pricing.models.request import PricingRequest
from returnly_pricing.models.results import FeeBreakdown


def validate_request(request: PricingRequest) -> None:
    """Reject out-of-range input before any fee line is computed."""
    # A sub-cent value rounds to $0.00 and is rejected like zero
    if request.item_value <= 0 or round2(request.item_value) <= 0:
        raise InvalidItemValue(request.item_value)
    if request.number_of_items < 1:
        raise InvalidItemCount(request.number_of_items)
    if request.tip < 0:
        raise InvalidTip(request.tip)


def compute_breakdown(request: PricingRequest, config: PricingConfig) -> FeeBreakdown:
    """Compose the dynamic (value / distance / time) customer charge."""
    validate_request(request)

    fees = config.fees
    route = request.route
    item_value = round2(request.item_value)
    size_tier = classify_size(item_value, config.size_bounds)

    # 1. Flat base fee
    base_price = round2(fees.base_price)

    # 2. Handling surcharge by size tier
    size_upcharge = round2(fees.size_upcharges[size_tier])

    # 3. Additional items
    multi_item_fee = round2(fees.multi_item_fee * max(0, request.number_of_items - 1))

    # 4. Low-value protection
    small_order_fee = (
        round2(fees.small_order_fee)
        if item_value < fees.small_order_threshold
        else ZERO
    )

    # 5-6. Route
    distance_fee = round2(fees.distance_rate_per_mile * route.distance_miles)
    time_fee = round2(fees.time_rate_per_minute * route.estimated_minutes)

    # 7. Rush
    rush_fee = round2(fees.rush_fee) if request.is_rush else ZERO

    subtotal = (
        base_price + size_upcharge + multi_item_fee + small_order_fee
        + distance_fee + time_fee + rush_fee
    )
    service_fee = round2(subtotal * fees.service_fee_rate)
    tip = round2(request.tip)
    total_price = subtotal + service_fee + tip

    return FeeBreakdown(
        base_price=base_price,
        size_upcharge=size_upcharge,
        multi_item_fee=multi_item_fee,
        small_order_fee=small_order_fee,
        distance_fee=distance_fee,
        time_fee=time_fee,
        rush_fee=rush_fee,
        subtotal=subtotal,
        service_fee=service_fee,
        tip=tip,
        total_price=total_price,
        item_value=item_value,
        number_of_items=request.number_of_items,
        size_tier=size_tier,
        route=route,
        service_tier=request.service_tier,
        pricing_model="dynamic",
    )
