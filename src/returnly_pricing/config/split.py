"""Driver / company allocation rules."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class SplitPolicy(BaseModel):
    """How each fee line is divided between driver and company.

    Lines not listed here are routed whole: size upcharge and tip to the
    driver; service fee, multi-item, small-order and rush fees to the company.
    """

    model_config = ConfigDict(frozen=True)

    driver_base_share: Decimal = Field(
        default=Decimal("0.70"), ge=0, le=1,
        description="Fraction of the base price paid to the driver",
    )
    driver_rate_per_mile: Decimal = Field(
        default=Decimal("0.35"), ge=0,
        description="Driver distance pay ($/mile).  Company keeps the rest of the distance fee.",
    )
    driver_rate_per_hour: Decimal = Field(
        default=Decimal("8.00"), ge=0,
        description="Driver time pay ($/hour of estimated route time).",
    )
    reconciliation_tolerance: Decimal = Field(
        default=Decimal("0.01"), ge=0,
        description="Largest |total − (driver + company)| accepted as balanced ($)",
    )
