# manual_tours/bases.py
"""
Simple starting bases and manipulation-variable suggestions.

Statistical basis finders (PCA, LDA, projection pursuit) are deliberately not
provided; any orthonormal (p, 2) matrix can be used as a starting basis.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from .errors import InvalidArgument
from .geometry.manip_space import as_basis
from .geometry.orthonormal import check_orthonormal, orthonormalise

__all__ = ["basis_identity", "basis_random", "basis_half_circle", "manip_var_of"]


def _check_dims(p: int, d: int) -> None:
    if isinstance(p, bool) or int(p) != p or int(p) < 1:
        raise InvalidArgument(f"p must be a positive integer; got {p!r}.")
    if isinstance(d, bool) or int(d) != d or not (1 <= int(d) <= int(p)):
        raise InvalidArgument(f"d must be an integer in [1, p={p}]; got {d!r}.")


def basis_identity(p: int, d: int = 2) -> np.ndarray:
    """The first d columns of the (p, p) identity."""
    _check_dims(p, d)
    return np.eye(int(p), int(d), dtype=float)


def basis_random(p: int, d: int = 2, *, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """A random (p, d) orthonormal basis (orthonormalised standard normal draw)."""
    _check_dims(p, d)
    if rng is None:
        rng = np.random.default_rng()
    return orthonormalise(rng.standard_normal((int(p), int(d))))


def basis_half_circle(data):
    """
    A basis giving every variable the same contribution, with directions spaced
    evenly around a half circle. A variable-agnostic starting point.

    ``data`` is either the number of variables p, or an (n, p) table; a
    DataFrame's column names become the row labels of a DataFrame result.
    """
    if isinstance(data, (int, np.integer)) and not isinstance(data, bool):
        p = int(data)
        columns = None
    else:
        p = int(np.shape(data)[1]) if np.ndim(data) == 2 else -1
        columns = list(data.columns) if isinstance(data, pd.DataFrame) else None
    if p < 2:
        raise InvalidArgument(f"basis_half_circle needs at least 2 variables; got {p}.")

    arc = np.linspace(0.0, np.pi, p + 1)[:-1]
    bas = orthonormalise(np.column_stack([np.sin(arc), np.cos(arc)]))

    if columns is not None:
        return pd.DataFrame(bas, index=[str(c) for c in columns], columns=["half_circ1", "half_circ2"])
    return bas


def manip_var_of(basis, rank: int = 1) -> int:
    """
    Suggest a manipulation variable: the 1-based number of the variable with
    the ``rank``-th largest absolute contribution to the first basis column.

    A non-orthonormal basis only triggers a NumericDegenerate warning.
    """
    B = as_basis(basis)
    check_orthonormal(B.values)
    if isinstance(rank, bool) or int(rank) != rank or not (1 <= int(rank) <= B.p):
        raise InvalidArgument(f"rank must be an integer in [1, p={B.p}]; got {rank!r}.")

    order = np.argsort(-np.abs(B.values[:, 0]), kind="stable")
    return int(order[int(rank) - 1]) + 1
