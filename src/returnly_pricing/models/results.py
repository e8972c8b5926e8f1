"""Result types — the contract between the engine, billing, payouts and the receipt UI.

Every monetary field is a ``Decimal`` quantized to the cent.  Models are
frozen: downstream consumers (payment capture, payout ledger, revenue
reporting) read them but never edit them in place.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from returnly_pricing.models.request import RouteInfo
from returnly_pricing.models.tiers import PricingModelName, ServiceTier, SizeTier


# ═══════════════════════════════════════════════════════════════════════════
# Customer charge
# ═══════════════════════════════════════════════════════════════════════════

class FeeBreakdown(BaseModel):
    """Itemized customer charge.

    Invariants:
      subtotal    = base_price + size_upcharge + multi_item_fee + small_order_fee
                    + distance_fee + time_fee + rush_fee
      total_price = subtotal + service_fee + tip
    """

    model_config = ConfigDict(frozen=True)

    # --- Fee lines ---
    base_price: Decimal
    size_upcharge: Decimal
    multi_item_fee: Decimal
    small_order_fee: Decimal
    distance_fee: Decimal
    time_fee: Decimal
    rush_fee: Decimal

    # --- Totals ---
    subtotal: Decimal
    service_fee: Decimal
    """Platform markup, a fixed fraction of subtotal (never of tip)."""
    tip: Decimal
    total_price: Decimal
    """What the customer is charged before tax."""

    # --- Context carried to the splitter and assembler ---
    item_value: Decimal
    number_of_items: int
    size_tier: SizeTier
    route: RouteInfo
    service_tier: ServiceTier
    pricing_model: PricingModelName


# ═══════════════════════════════════════════════════════════════════════════
# Ledgers
# ═══════════════════════════════════════════════════════════════════════════

class DriverEarnings(BaseModel):
    """Driver side of the split.  Appended to the external payout record."""

    model_config = ConfigDict(frozen=True)

    driver_base_pay: Decimal
    driver_distance_pay: Decimal
    driver_time_pay: Decimal
    driver_size_bonus: Decimal
    driver_tip: Decimal
    driver_total_earning: Decimal


class RevenueSplit(BaseModel):
    """Company side of the split.  Feeds revenue reporting.

    The platform surcharges (multi-item, small-order, rush) go entirely to the
    company and are broken out so each contribution stays addressable.
    """

    model_config = ConfigDict(frozen=True)

    company_service_fee: Decimal
    company_base_fee_share: Decimal
    company_distance_fee_share: Decimal
    company_time_fee_share: Decimal
    company_multi_item_fee: Decimal
    company_small_order_fee: Decimal
    company_rush_fee: Decimal
    company_total_revenue: Decimal


class ReconciliationReport(BaseModel):
    """Does driver + company account for every cent the customer pays?"""

    model_config = ConfigDict(frozen=True)

    total_price: Decimal
    allocated: Decimal
    """driver_total_earning + company_total_revenue"""
    difference: Decimal
    """abs(total_price − allocated)"""
    is_balanced: bool
    explanation: str


# ═══════════════════════════════════════════════════════════════════════════
# Assembled view
# ═══════════════════════════════════════════════════════════════════════════

class PaymentBreakdownView(BaseModel):
    """Everything the receipt UI and downstream billing need, in one record."""

    model_config = ConfigDict(frozen=True)

    pricing_model: PricingModelName
    fees: FeeBreakdown
    driver: DriverEarnings
    company: RevenueSplit

    # --- Tax ---
    tax_rate: Decimal
    tax_jurisdiction_name: str
    is_donation_exempt: bool
    taxable_amount: Decimal
    tax_amount: Decimal

    # --- Customer totals ---
    grand_total: Decimal
    """total_price + tax_amount — the amount handed to payment capture."""
    item_value: Decimal
    customer_net_cost: Decimal
    """grand_total − item_value.  Negative means the customer nets a gain
    once the item refund lands; shown as-is, never clamped."""

    reconciliation: ReconciliationReport
