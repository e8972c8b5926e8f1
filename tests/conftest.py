"""Shared test fixtures — default config and the reference pricing scenarios."""

from __future__ import annotations

from decimal import Decimal

import pytest

from returnly_pricing.config import PricingConfig
from returnly_pricing.models import PricingRequest, RouteInfo, TaxContext


@pytest.fixture
def config() -> PricingConfig:
    return PricingConfig()


@pytest.fixture
def scenario_a() -> PricingRequest:
    """No rush, single medium item, no route."""
    return PricingRequest(
        item_value=Decimal("50"),
        number_of_items=1,
        route=RouteInfo(distance_miles=Decimal("0"), estimated_minutes=Decimal("0")),
        is_rush=False,
        tip=Decimal("0"),
    )


@pytest.fixture
def scenario_b() -> PricingRequest:
    """Rush + 3 large items + 5 miles + 10 minutes + $3 tip."""
    return PricingRequest(
        item_value=Decimal("200"),
        number_of_items=3,
        route=RouteInfo(distance_miles=Decimal("5"), estimated_minutes=Decimal("10")),
        is_rush=True,
        tip=Decimal("3.00"),
    )


@pytest.fixture
def no_tax() -> TaxContext:
    return TaxContext()


@pytest.fixture
def missouri_tax() -> TaxContext:
    return TaxContext(rate=Decimal("0.08"), jurisdiction_name="St. Louis County, MO")


@pytest.fixture
def donation_tax() -> TaxContext:
    return TaxContext(
        rate=Decimal("0.08"),
        jurisdiction_name="St. Louis County, MO",
        is_donation_exempt=True,
    )
