"""Size-tier boundaries on declared item value."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SizeTierBounds(BaseModel):
    """value < medium_min → small; medium_min ≤ value < large_min → medium; else large."""

    model_config = ConfigDict(frozen=True)

    medium_min: Decimal = Field(default=Decimal("25.00"), ge=0, description="Lowest value classed as medium ($)")
    large_min: Decimal = Field(default=Decimal("150.00"), ge=0, description="Lowest value classed as large ($)")

    @model_validator(mode="after")
    def _ordered(self) -> "SizeTierBounds":
        if self.medium_min > self.large_min:
            raise ValueError(
                f"medium_min ({self.medium_min}) must be <= large_min ({self.large_min})"
            )
        return self
