# manual_tours/geometry/manip_space.py
"""
Input normalization for projection bases, and construction of the
(p, d+1) manipulation space used as the rotation workspace of a manual tour.
"""

from __future__ import annotations

import numbers
import warnings
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..errors import InvalidArgument, NumericDegenerate
from .orthonormal import orthonormalise

ManipVar = Union[int, str]

__all__ = [
    "Basis",
    "ManipVar",
    "as_basis",
    "resolve_manip_var",
    "create_manip_space",
    "manip_space_values",
]


# ============================================================
# Basis record
# ============================================================

@dataclass(frozen=True, eq=False)
class Basis:
    """
    A (p, d) projection basis with optional variable labels.

    values:
      read-only float array, shape (p, d).
    labels:
      one label per row (variable), or None if the input carried none.
    """
    values: np.ndarray
    labels: Optional[Tuple[str, ...]] = None

    @property
    def p(self) -> int:
        return int(self.values.shape[0])

    @property
    def d(self) -> int:
        return int(self.values.shape[1])


def _labels_from_index(index: pd.Index) -> Optional[Tuple[str, ...]]:
    # a default RangeIndex carries no variable names
    if isinstance(index, pd.RangeIndex):
        return None
    return tuple(str(v) for v in index)


def as_basis(basis, *, labels: Optional[Sequence[str]] = None) -> Basis:
    """
    Coerce a basis (ndarray, nested sequence, or DataFrame) to a :class:`Basis`.

    Row labels are taken from ``labels`` if given, else from a DataFrame index.
    """
    if isinstance(basis, Basis):
        if labels is None:
            return basis
        basis = basis.values

    if isinstance(basis, pd.DataFrame):
        if labels is None:
            labels = _labels_from_index(basis.index)
        raw = basis.to_numpy()
    else:
        raw = basis

    try:
        B = np.array(raw, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgument("basis must be coercible to a numeric matrix.") from e

    if B.ndim != 2:
        raise InvalidArgument(f"basis must be a 2D (p, d) matrix; got shape {B.shape}.")
    p, d = B.shape
    if p < 1 or d < 1:
        raise InvalidArgument(f"basis must have at least one row and one column; got shape {B.shape}.")
    if not np.all(np.isfinite(B)):
        raise InvalidArgument("basis contains non-finite values.")

    if labels is not None:
        labels = tuple(str(v) for v in labels)
        if len(labels) != p:
            raise InvalidArgument(f"Got {len(labels)} labels for a basis with p={p} rows.")

    B.setflags(write=False)
    return Basis(values=B, labels=labels)


def resolve_manip_var(manip_var: ManipVar, p: int, labels: Optional[Sequence[str]] = None) -> int:
    """
    Resolve a manipulation variable to its 1-based variable number in [1, p].

    Accepts an integer (or integral float) variable number, or a string that
    exactly matches one of ``labels``. Never clamps.
    """
    if isinstance(manip_var, str):
        if labels is None:
            raise InvalidArgument(
                f"manip_var {manip_var!r} given by name, but the basis has no variable labels; "
                "try a variable number."
            )
        try:
            return list(labels).index(manip_var) + 1
        except ValueError:
            raise InvalidArgument(
                f"manip_var {manip_var!r} not matched to a variable name; try a variable number."
            ) from None

    if isinstance(manip_var, (bool, np.bool_)):
        raise InvalidArgument("manip_var must be an integer variable number, not a bool.")

    if isinstance(manip_var, numbers.Integral):
        k = int(manip_var)
    elif isinstance(manip_var, numbers.Real) and float(manip_var).is_integer():
        k = int(manip_var)
    else:
        raise InvalidArgument(f"manip_var must be an integer in [1, {p}] or a variable name; got {manip_var!r}.")

    if not (1 <= k <= int(p)):
        raise InvalidArgument(f"manip_var out of range: got {k}, expected 1 <= manip_var <= {int(p)}.")
    return k


# ============================================================
# Manipulation space
# ============================================================

def manip_space_values(B: np.ndarray, k: int, *, span_tol: float = 1e-8) -> np.ndarray:
    """
    Core construction on plain arrays: orthonormalise([B | e_k]).

    B is (p, d), k is 1-based. If e_k already lies in span(B) the extra column
    is instead the standard axis with the largest component orthogonal to B,
    and a NumericDegenerate warning is emitted.
    """
    B = np.asarray(B, dtype=float)
    p = int(B.shape[0])

    Q = orthonormalise(B)
    e = np.zeros(p, dtype=float)
    e[int(k) - 1] = 1.0

    r = e - Q @ (Q.T @ e)
    if float(np.linalg.norm(r)) <= float(span_tol):
        resid = np.eye(p) - Q @ Q.T
        norms = np.linalg.norm(resid, axis=0)
        j = int(np.argmax(norms))
        if float(norms[j]) <= float(span_tol):
            raise InvalidArgument(
                f"basis spans all p={p} dimensions; there is no direction left to rotate into."
            )
        warnings.warn(
            f"Variable {int(k)} lies entirely in the projection plane; "
            f"using axis {j + 1} as the out-of-plane direction.",
            NumericDegenerate,
            stacklevel=3,
        )
        r = resid[:, j]

    return orthonormalise(np.column_stack([Q, r]))


def create_manip_space(basis, manip_var: ManipVar):
    """
    Create a (p, d+1) orthonormal manipulation space.

    The basis is concatenated with a zero vector whose ``manip_var`` element
    is set to 1, and the result is orthonormalised.

    Parameters
    ----------
    basis : (p, d) array-like or DataFrame
        Orthonormal basis. A DataFrame index provides the variable labels.
    manip_var : int or str
        1-based variable number, or a variable label.

    Returns
    -------
    manip_space : (p, d+1) ndarray, or a DataFrame (index kept, columns cleared)
        when ``basis`` is a DataFrame.
    """
    B = as_basis(basis)
    k = resolve_manip_var(manip_var, B.p, B.labels)
    M = manip_space_values(B.values, k)
    if isinstance(basis, pd.DataFrame):
        return pd.DataFrame(M, index=basis.index.copy())
    return M
