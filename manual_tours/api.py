from __future__ import annotations

"""
Public API re-exports for manual_tours.

Import style:
    from manual_tours.api import manual_tour, flatten_tour, basis_random, ...

Notes
-----
- Curated: implementation helpers (coercion, status output) stay in their modules.
"""

# ----------------------------
# Errors
# ----------------------------
from .errors import InvalidArgument, NumericDegenerate

# ----------------------------
# Geometry: orthonormalization / manipulation space / rotation
# ----------------------------
from .geometry.orthonormal import (
    check_orthonormal,
    is_orthonormal,
    orthonormalise,
)

from .geometry.manip_space import (
    Basis,
    as_basis,
    create_manip_space,
    resolve_manip_var,
)

from .geometry.rotation import (
    oblique_basis,
    rotate_manip_space,
    rotation_matrix,
)

# ----------------------------
# Tour paths
# ----------------------------
from .tours.angle_policies import (
    AnglePolicy,
    FixedAngleStep,
    FixedFrameCount,
)

from .tours.path import (
    TourConfig,
    TourPath,
    manual_tour,
    radial_tour,
    sweep_tour,
)

# ----------------------------
# Frame tables / axes
# ----------------------------
from .frames.flatten import (
    FrameTables,
    abbreviate,
    flatten_tour,
    oblique_frame,
)

from .frames.axes import (
    PanZoom,
    pan_zoom,
    scale_axes,
)

# ----------------------------
# Bases / preprocessing
# ----------------------------
from .bases import (
    basis_half_circle,
    basis_identity,
    basis_random,
    manip_var_of,
)

from .preprocessing import scale_01, scale_sd


__all__ = [
    # errors
    "InvalidArgument",
    "NumericDegenerate",
    # geometry
    "check_orthonormal",
    "is_orthonormal",
    "orthonormalise",
    "Basis",
    "as_basis",
    "create_manip_space",
    "resolve_manip_var",
    "oblique_basis",
    "rotate_manip_space",
    "rotation_matrix",
    # tours
    "AnglePolicy",
    "FixedAngleStep",
    "FixedFrameCount",
    "TourConfig",
    "TourPath",
    "manual_tour",
    "radial_tour",
    "sweep_tour",
    # frames
    "FrameTables",
    "abbreviate",
    "flatten_tour",
    "oblique_frame",
    "PanZoom",
    "pan_zoom",
    "scale_axes",
    # bases / preprocessing
    "basis_half_circle",
    "basis_identity",
    "basis_random",
    "manip_var_of",
    "scale_01",
    "scale_sd",
]
