# manual_tours/geometry/rotation.py
from __future__ import annotations

import numpy as np
import pandas as pd

from ..errors import InvalidArgument
from .manip_space import ManipVar, as_basis, manip_space_values, resolve_manip_var

__all__ = ["rotation_matrix", "rotate_manip_space", "oblique_basis"]


def rotation_matrix(theta: float, phi: float) -> np.ndarray:
    """
    The (3, 3) manual-tour rotation as a function of theta and phi.

    theta : in-plane angle, the direction in the XY plane along which the
        manipulated variable moves.
    phi : out-of-plane angle, how far that variable is rotated towards the
        z-axis of the manipulation space. phi = 0 gives the identity.
    """
    s_t, c_t = np.sin(theta), np.cos(theta)
    s_p, c_p = np.sin(phi), np.cos(phi)

    return np.array(
        [
            [c_t**2 * c_p + s_t**2, -c_t * s_t * (1 - c_p), -c_t * s_p],
            [-c_t * s_t * (1 - c_p), s_t**2 * c_p + c_t**2, -s_t * s_p],
            [c_t * s_p, s_t * s_p, c_p],
        ],
        dtype=float,
    )


def rotate_manip_space(manip_space, theta: float, phi: float):
    """
    Rotate a (p, 3) manipulation space by :func:`rotation_matrix`.

    Returns ``manip_space @ R`` with the same shape; a DataFrame input keeps
    its index and columns. The result is orthonormal whenever the input is.

    Raises
    ------
    InvalidArgument
        If the input is not a (p, 3) numeric matrix.
    """
    M = np.asarray(manip_space, dtype=float)
    if M.ndim != 2 or M.shape[1] != 3:
        raise InvalidArgument(
            f"manip_space must have shape (p, 3); got {M.shape}. "
            "Only 2D projections (plus one manipulation axis) are supported."
        )

    r_space = M @ rotation_matrix(theta, phi)

    if isinstance(manip_space, pd.DataFrame):
        return pd.DataFrame(r_space, index=manip_space.index.copy(), columns=manip_space.columns.copy())
    return r_space


def oblique_basis(basis, manip_var: ManipVar, theta: float = 0.0, phi: float = 0.0) -> np.ndarray:
    """
    A single manual-tour frame: the (p, d) basis after rotating ``manip_var``
    by (theta, phi). Useful for interactive, one-frame-at-a-time views.
    """
    B = as_basis(basis)
    if B.d != 2:
        raise InvalidArgument(f"oblique_basis needs a (p, 2) basis; got d={B.d}.")
    k = resolve_manip_var(manip_var, B.p, B.labels)
    r_space = rotate_manip_space(manip_space_values(B.values, k), theta, phi)
    return r_space[:, : B.d]
