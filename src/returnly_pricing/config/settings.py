"""Process settings, read from ``PRICING_*`` environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingSettings(BaseSettings):
    """Runtime settings for the pricing service."""

    environment: str = Field(default="development", description="development / staging / production")
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Emit JSON log lines")
    config_path: Path | None = Field(
        default=None,
        description="JSON file with a PricingConfig.  Unset → built-in defaults.",
    )
    strict_reconciliation: bool | None = Field(
        default=None,
        description="Raise on ledger mismatch instead of only logging it.  "
                    "Unset → strict everywhere except production.",
    )
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(env_prefix="PRICING_", extra="ignore")

    @property
    def reconciliation_is_strict(self) -> bool:
        if self.strict_reconciliation is not None:
            return self.strict_reconciliation
        return self.environment.lower() != "production"


def get_settings() -> PricingSettings:
    """Get settings instance."""
    return PricingSettings()
