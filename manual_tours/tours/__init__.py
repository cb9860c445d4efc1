"""
Tour path generation (manual, radial and sweep tours) and the angle-stepping
policies they use.
"""

from __future__ import annotations

from .angle_policies import (
    AnglePolicy,
    FixedAngleStep,
    FixedFrameCount,
)

from .path import (
    MANIP_TYPES,
    TourConfig,
    TourPath,
    manual_tour,
    phi_start_of,
    radial_tour,
    resolve_theta,
    sweep_tour,
)

__all__ = [
    "AnglePolicy",
    "FixedAngleStep",
    "FixedFrameCount",
    "MANIP_TYPES",
    "TourConfig",
    "TourPath",
    "manual_tour",
    "phi_start_of",
    "radial_tour",
    "resolve_theta",
    "sweep_tour",
]
