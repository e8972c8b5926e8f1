"""Sensitivity / tornado analysis on pricing rates.

Vary one config rate at a time, re-quote the same request, measure how far
the customer total, driver earning and company revenue move.

Default sweep set:
  - fees.base_price ± 20%
  - fees.distance_rate_per_mile ± 20%
  - fees.time_rate_per_minute ± 10%
  - fees.service_fee_rate ± 20%
  - split.driver_base_share ± 10%
  - split.driver_rate_per_mile ± 10%
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from pydantic import ValidationError

from returnly_pricing.config.pricing import PricingConfig
from returnly_pricing.engine.orchestrator import quote
from returnly_pricing.models.request import PricingRequest
from returnly_pricing.models.results import PaymentBreakdownView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Dot-path into PricingConfig (e.g. 'fees.base_price')."""

    base_value: Decimal
    low_value: Decimal
    high_value: Decimal

    total_at_low: Decimal
    total_at_high: Decimal
    driver_at_low: Decimal
    driver_at_high: Decimal
    company_at_low: Decimal
    company_at_high: Decimal

    delta_total: Decimal
    """abs(total_at_high − total_at_low) — swing width used for sorting."""


@dataclass
class SensitivityResult:
    base_total: Decimal
    base_driver: Decimal
    base_company: Decimal

    bars: list[TornadoBar] = field(default_factory=list)
    """Sorted by delta_total (descending)."""


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Base price", "fees.base_price", -0.20, 0.20),
    ("Distance rate", "fees.distance_rate_per_mile", -0.20, 0.20),
    ("Time rate", "fees.time_rate_per_minute", -0.10, 0.10),
    ("Service fee rate", "fees.service_fee_rate", -0.20, 0.20),
    ("Driver base share", "split.driver_base_share", -0.10, 0.10),
    ("Driver mileage rate", "split.driver_rate_per_mile", -0.10, 0.10),
]


def _get_nested_value(config: PricingConfig, path: str) -> Decimal:
    current: object = config
    for part in path.split("."):
        if part not in getattr(type(current), "model_fields", {}):
            raise AttributeError(f"{path} is not a PricingConfig field")
        current = getattr(current, part)
    if isinstance(current, bool) or not isinstance(current, (Decimal, int, float)):
        raise TypeError(f"{path} is not a numeric rate")
    return Decimal(str(current))


def _with_value(config: PricingConfig, path: str, value: Decimal) -> PricingConfig:
    """Return a re-validated copy of ``config`` with ``path`` set to ``value``.

    Config models are frozen, so the copy goes through a dict round-trip.
    """
    data = config.model_dump()
    parts = path.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    target[parts[-1]] = value
    return PricingConfig.model_validate(data)


def _quote(request: PricingRequest, config: PricingConfig, strict: bool) -> PaymentBreakdownView:
    return quote(request, config=config, model="dynamic", strict=strict)


def run_sensitivity(
    request: PricingRequest,
    config: PricingConfig,
    sweeps: list[tuple[str, str, float, float]] | None = None,
    *,
    strict: bool = True,
) -> SensitivityResult:
    """Run a one-at-a-time sweep for one request.

    Parameters
    ----------
    request : PricingRequest
        Order to re-price.
    config : PricingConfig
        Base rates.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.  A sweep whose low or high
        point produces an invalid config (e.g. driver rate above customer
        rate), or whose path is not a numeric rate, is skipped.
    strict : bool
        Raise on unbalanced ledgers instead of only logging them.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base = _quote(request, config, strict)
    bars: list[TornadoBar] = []

    for name, path, low_pct, high_pct in sweeps:
        try:
            base_val = _get_nested_value(config, path)
        except (AttributeError, TypeError) as exc:
            logger.warning("Skipping sweep %s: %s", path, exc)
            continue

        low_val = base_val * (1 + Decimal(str(low_pct)))
        high_val = base_val * (1 + Decimal(str(high_pct)))

        try:
            low = _quote(request, _with_value(config, path, low_val), strict)
            high = _quote(request, _with_value(config, path, high_val), strict)
        except ValidationError as exc:
            logger.warning("Skipping sweep %s: %s", path, exc.errors()[0]["msg"])
            continue

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=base_val,
            low_value=low_val,
            high_value=high_val,
            total_at_low=low.fees.total_price,
            total_at_high=high.fees.total_price,
            driver_at_low=low.driver.driver_total_earning,
            driver_at_high=high.driver.driver_total_earning,
            company_at_low=low.company.company_total_revenue,
            company_at_high=high.company.company_total_revenue,
            delta_total=abs(high.fees.total_price - low.fees.total_price),
        ))

    # Largest swing first
    bars.sort(key=lambda b: b.delta_total, reverse=True)

    return SensitivityResult(
        base_total=base.fees.total_price,
        base_driver=base.driver.driver_total_earning,
        base_company=base.company.company_total_revenue,
        bars=bars,
    )
