"""Receipt text — plain-text rendering of an assembled payment breakdown.

Used by the /quote endpoints and by support staff pasting a breakdown into a
ticket.  Every named line of the view appears, zero or not.
"""

from __future__ import annotations

from decimal import Decimal

from returnly_pricing.models.results import PaymentBreakdownView


def _money(value: Decimal) -> str:
    return f"${value:.2f}"


def _line(label: str, value: Decimal) -> str:
    return f"  {label:32s} {_money(value):>10s}"


def generate_receipt(view: PaymentBreakdownView) -> str:
    """Render the customer charge, tax, driver earnings and company revenue."""
    f = view.fees
    d = view.driver
    c = view.company

    sections: list[str] = []

    # ── Customer charges ──
    sections.append("=" * 46)
    sections.append(f"CUSTOMER PAYS ({view.pricing_model}, {f.size_tier.value} item)")
    sections.append("=" * 46)
    sections.extend([
        _line("Base service", f.base_price),
        _line("Size upcharge", f.size_upcharge),
        _line(f"Additional items ({max(f.number_of_items - 1, 0)})", f.multi_item_fee),
        _line("Small order fee", f.small_order_fee),
        _line(f"Distance ({f.route.distance_miles} mi)", f.distance_fee),
        _line(f"Time ({f.route.estimated_minutes} min)", f.time_fee),
        _line("Rush pickup", f.rush_fee),
        _line("Subtotal", f.subtotal),
        _line("Service fee", f.service_fee),
        _line("Tip", f.tip),
        _line("TOTAL", f.total_price),
    ])

    # ── Tax ──
    if view.is_donation_exempt:
        tax_label = "Tax (donation, exempt)"
    else:
        rate_pct = view.tax_rate * 100
        where = f", {view.tax_jurisdiction_name}" if view.tax_jurisdiction_name else ""
        tax_label = f"Tax ({rate_pct:.2f}%{where})"
    sections.append(_line(tax_label, view.tax_amount))
    sections.append(_line("GRAND TOTAL", view.grand_total))

    sections.append("")
    sections.append(_line("Item refund received", view.item_value))
    if view.customer_net_cost >= 0:
        sections.append(_line("Net customer cost", view.customer_net_cost))
    else:
        sections.append(_line("Net customer gain", -view.customer_net_cost))

    # ── Driver ──
    sections.append("")
    sections.append("=" * 46)
    sections.append("DRIVER EARNS")
    sections.append("=" * 46)
    sections.extend([
        _line("Base pay", d.driver_base_pay),
        _line("Distance pay", d.driver_distance_pay),
        _line("Time pay", d.driver_time_pay),
        _line("Size bonus", d.driver_size_bonus),
        _line("Tip (100%)", d.driver_tip),
        _line("TOTAL", d.driver_total_earning),
    ])

    # ── Company ──
    sections.append("")
    sections.append("=" * 46)
    sections.append("COMPANY GETS")
    sections.append("=" * 46)
    sections.extend([
        _line("Service fee", c.company_service_fee),
        _line("Base fee share", c.company_base_fee_share),
        _line("Distance fee share", c.company_distance_fee_share),
        _line("Time fee share", c.company_time_fee_share),
        _line("Additional items", c.company_multi_item_fee),
        _line("Small order fee", c.company_small_order_fee),
        _line("Rush fee", c.company_rush_fee),
        _line("TOTAL", c.company_total_revenue),
    ])

    sections.append("")
    sections.append(view.reconciliation.explanation)
    return "\n".join(sections)


def generate_comparison(views: dict[str, PaymentBreakdownView]) -> str:
    """One line per pricing model: total, driver, company, driver share."""
    lines = [f"{'Model':12s} {'Total':>10s} {'Driver':>10s} {'Company':>10s} {'Driver %':>9s}"]
    for name, view in views.items():
        total = view.fees.total_price
        driver = view.driver.driver_total_earning
        share = (driver / total * 100) if total > 0 else Decimal("0")
        lines.append(
            f"{name:12s} {_money(total):>10s} {_money(driver):>10s} "
            f"{_money(view.company.company_total_revenue):>10s} {share:8.1f}%"
        )
    return "\n".join(lines)
