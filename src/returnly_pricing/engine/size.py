"""Size classifier — declared item value → handling tier."""

from __future__ import annotations

from decimal import Decimal

from returnly_pricing.config.size import SizeTierBounds
from returnly_pricing.models.tiers import SizeTier

_DEFAULT_BOUNDS = SizeTierBounds()


def classify_size(item_value: Decimal, bounds: SizeTierBounds | None = None) -> SizeTier:
    """Map a non-negative item value to its size tier.

    Monotone by construction: bounds are ordered (``medium_min <= large_min``)
    and each comparison is a lower bound.  Negative values are the caller's
    problem; they fall through to ``SMALL``.
    """
    bounds = bounds or _DEFAULT_BOUNDS
    if item_value >= bounds.large_min:
        return SizeTier.LARGE
    if item_value >= bounds.medium_min:
        return SizeTier.MEDIUM
    return SizeTier.SMALL
