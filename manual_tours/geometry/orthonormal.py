# manual_tours/geometry/orthonormal.py
from __future__ import annotations

import warnings

import numpy as np

from ..errors import InvalidArgument, NumericDegenerate

__all__ = ["orthonormalise", "is_orthonormal", "check_orthonormal", "orthonormality_error"]


def orthonormalise(x, *, eps: float = 1e-12) -> np.ndarray:
    """
    Orthonormalize the columns of a (p, k) matrix by modified Gram–Schmidt.

    Columns are processed left to right, so span(first j columns) is preserved
    for every j. An input whose columns are already orthonormal comes back
    unchanged up to floating point error.

    Parameters
    ----------
    x : (p, k) array-like
    eps : float
        A column whose residual norm falls to ``eps`` or below is treated as
        linearly dependent on the previous ones.

    Returns
    -------
    Q : (p, k) ndarray with orthonormal columns.

    Raises
    ------
    InvalidArgument
        If x is not 2D, or a column is (numerically) dependent on earlier ones.
    """
    X = np.array(x, dtype=float)
    if X.ndim != 2:
        raise InvalidArgument(f"orthonormalise expects a 2D matrix; got shape {X.shape}.")

    p, k = X.shape
    Q = np.empty((p, k), dtype=float)
    for j in range(k):
        v = X[:, j].copy()
        for i in range(j):
            v -= float(Q[:, i] @ v) * Q[:, i]
        n = float(np.linalg.norm(v))
        if n <= float(eps):
            raise InvalidArgument(
                f"Column {j} is linearly dependent on the previous columns "
                f"(residual norm {n:.3g}); cannot orthonormalise."
            )
        Q[:, j] = v / n
    return Q


def orthonormality_error(x) -> float:
    """max |xᵀx − I|, element-wise."""
    X = np.asarray(x, dtype=float)
    if X.ndim != 2:
        raise InvalidArgument(f"Expected a 2D matrix; got shape {X.shape}.")
    G = X.T @ X
    return float(np.max(np.abs(G - np.eye(X.shape[1])))) if X.size else 0.0


def is_orthonormal(x, tol: float = 1e-3) -> bool:
    """
    Test whether a numeric matrix has orthonormal columns.

    True iff the element-wise distance of xᵀx from the identity is below ``tol``.
    """
    return orthonormality_error(x) < float(tol)


def check_orthonormal(x, tol: float = 1e-3, *, what: str = "basis") -> bool:
    """
    Like :func:`is_orthonormal`, but warns (NumericDegenerate) instead of
    silently returning False.
    """
    err = orthonormality_error(x)
    ok = err < float(tol)
    if not ok:
        warnings.warn(
            f"Supplied {what} isn't orthonormal: max |xᵀx - I| = {err:.3g} (tol={float(tol):g}).",
            NumericDegenerate,
            stacklevel=3,
        )
    return ok
