"""Pricing analysis — rate sensitivity and distance curves."""

from returnly_pricing.analysis.sensitivity import (
    DEFAULT_SWEEPS,
    SensitivityResult,
    TornadoBar,
    run_sensitivity,
)
from returnly_pricing.analysis.distance import DistanceCurve, distance_curve

__all__ = [
    "DEFAULT_SWEEPS",
    "SensitivityResult",
    "TornadoBar",
    "run_sensitivity",
    "DistanceCurve",
    "distance_curve",
]
