"""
Linear-algebra core of a manual tour: orthonormalization, manipulation
space construction, and the (theta, phi) rotation.
"""

from __future__ import annotations

from .orthonormal import (
    check_orthonormal,
    is_orthonormal,
    orthonormalise,
    orthonormality_error,
)

from .manip_space import (
    Basis,
    as_basis,
    create_manip_space,
    manip_space_values,
    resolve_manip_var,
)

from .rotation import (
    oblique_basis,
    rotate_manip_space,
    rotation_matrix,
)

__all__ = [
    "check_orthonormal",
    "is_orthonormal",
    "orthonormalise",
    "orthonormality_error",
    "Basis",
    "as_basis",
    "create_manip_space",
    "manip_space_values",
    "resolve_manip_var",
    "oblique_basis",
    "rotate_manip_space",
    "rotation_matrix",
]
