"""How the assembler applies an externally resolved tax rate."""

from pydantic import BaseModel, ConfigDict, Field


class TaxPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    tax_tips: bool = Field(
        default=False,
        description="Include the tip in the taxable amount.  Tips are normally "
                    "passed straight to the driver and left untaxed.",
    )
