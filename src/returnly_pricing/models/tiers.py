"""Closed enumerations shared by config, requests, and results."""

from __future__ import annotations

from enum import Enum
from typing import Literal


class SizeTier(str, Enum):
    """Handling-size class derived from declared item value."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def rank(self) -> int:
        """Ordinal used to compare tiers (small < medium < large)."""
        return _SIZE_RANK[self]


_SIZE_RANK = {SizeTier.SMALL: 0, SizeTier.MEDIUM: 1, SizeTier.LARGE: 2}


class ServiceTier(str, Enum):
    """Flat service levels offered on manually created admin orders."""

    STANDARD = "standard"
    PRIORITY = "priority"
    INSTANT = "instant"


PricingModelName = Literal["dynamic", "flat_tier"]
