"""Load a ``PricingConfig`` from disk or fall back to the built-in defaults."""

from __future__ import annotations

import logging
from pathlib import Path

from returnly_pricing.config.pricing import PricingConfig
from returnly_pricing.config.settings import PricingSettings

logger = logging.getLogger(__name__)


def default_pricing_config() -> PricingConfig:
    return PricingConfig()


def load_pricing_config(path: str | Path) -> PricingConfig:
    """Read and validate a JSON pricing config.

    Raises ``FileNotFoundError`` for a missing file and
    ``pydantic.ValidationError`` for an invalid one.
    """
    path = Path(path)
    config = PricingConfig.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info("Loaded pricing config %r (model=%s) from %s", config.version, config.model, path)
    return config


def resolve_pricing_config(settings: PricingSettings) -> PricingConfig:
    """Pick the config named by ``settings.config_path``, or the defaults."""
    if settings.config_path is None:
        logger.info("No PRICING_CONFIG_PATH set, using default pricing config")
        return default_pricing_config()
    return load_pricing_config(settings.config_path)
