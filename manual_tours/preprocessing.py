# manual_tours/preprocessing.py
from __future__ import annotations

import numpy as np
import pandas as pd

from .errors import InvalidArgument

__all__ = ["scale_sd", "scale_01"]


def _as_numeric(data) -> np.ndarray:
    try:
        X = np.asarray(data.to_numpy(dtype=float) if isinstance(data, pd.DataFrame) else data, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgument("data must be a numeric (n, p) table.") from e
    if X.ndim != 2 or X.shape[0] < 2:
        raise InvalidArgument(f"data must be a 2D table with at least 2 rows; got shape {X.shape}.")
    return X


def _like(values: np.ndarray, data):
    if isinstance(data, pd.DataFrame):
        return pd.DataFrame(values, index=data.index.copy(), columns=data.columns.copy())
    return values


def scale_sd(data):
    """Center each column and divide by its sample standard deviation (ddof=1)."""
    X = _as_numeric(data)
    sd = X.std(axis=0, ddof=1)
    if np.any(sd == 0):
        raise InvalidArgument(f"Cannot scale constant column(s): {np.flatnonzero(sd == 0).tolist()}.")
    return _like((X - X.mean(axis=0)) / sd, data)


def scale_01(data):
    """Rescale each column to the interval [0, 1]."""
    X = _as_numeric(data)
    lo = X.min(axis=0)
    span = X.max(axis=0) - lo
    if np.any(span == 0):
        raise InvalidArgument(f"Cannot scale constant column(s): {np.flatnonzero(span == 0).tolist()}.")
    return _like((X - lo) / span, data)
