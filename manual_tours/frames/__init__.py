"""
Frame tables handed to renderers: long basis/data tables per frame, plus
axis placement helpers.
"""

from __future__ import annotations

from .flatten import (
    FrameTables,
    abbreviate,
    flatten_tour,
    oblique_frame,
)

from .axes import (
    AXES_POSITIONS,
    PanZoom,
    pan_zoom,
    scale_axes,
)

__all__ = [
    "FrameTables",
    "abbreviate",
    "flatten_tour",
    "oblique_frame",
    "AXES_POSITIONS",
    "PanZoom",
    "pan_zoom",
    "scale_axes",
]
