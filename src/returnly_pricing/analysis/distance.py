"""Distance curve — how price and driver share move with route length."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import numpy as np

from returnly_pricing.config.pricing import PricingConfig
from returnly_pricing.engine.orchestrator import quote
from returnly_pricing.models.request import PricingRequest, RouteInfo


@dataclass
class DistanceCurve:
    miles: np.ndarray
    minutes: np.ndarray
    total_price: np.ndarray
    driver_total_earning: np.ndarray
    company_total_revenue: np.ndarray
    driver_share: np.ndarray
    """Driver pay (tip excluded) ÷ customer charge (tip excluded)."""


def distance_curve(
    request: PricingRequest,
    config: PricingConfig,
    max_miles: float = 30.0,
    steps: int = 31,
    minutes_per_mile: float = 3.0,
) -> DistanceCurve:
    """Re-quote ``request`` over ``steps`` evenly spaced route lengths.

    Estimated minutes scale with distance at ``minutes_per_mile``
    (3.0 ≈ 20 mph average city speed).
    """
    if steps < 2:
        raise ValueError("steps must be >= 2")
    if max_miles <= 0:
        raise ValueError("max_miles must be > 0")

    miles = np.round(np.linspace(0.0, max_miles, steps), 2)
    minutes = np.round(miles * minutes_per_mile, 2)

    totals = np.zeros(steps)
    driver = np.zeros(steps)
    company = np.zeros(steps)
    share = np.zeros(steps)

    for i, (d, m) in enumerate(zip(miles, minutes)):
        route = RouteInfo(distance_miles=Decimal(str(d)), estimated_minutes=Decimal(str(m)))
        view = quote(request.model_copy(update={"route": route}), config=config, model="dynamic")
        totals[i] = float(view.fees.total_price)
        driver[i] = float(view.driver.driver_total_earning)
        company[i] = float(view.company.company_total_revenue)
        charge = view.fees.total_price - view.fees.tip
        pay = view.driver.driver_total_earning - view.driver.driver_tip
        share[i] = float(pay / charge) if charge > 0 else 0.0

    return DistanceCurve(
        miles=miles,
        minutes=minutes,
        total_price=totals,
        driver_total_earning=driver,
        company_total_revenue=company,
        driver_share=share,
    )
