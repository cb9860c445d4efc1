# manual_tours/frames/axes.py
"""
Axis placement helpers for renderers: scale and offset the first two columns
of a table (basis axes, a unit circle, ...) into a region of the data plot.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Union

import numpy as np
import pandas as pd

from ..errors import InvalidArgument

AxesPosition = Literal["center", "left", "right", "bottomleft", "topright", "off"]

__all__ = ["AxesPosition", "PanZoom", "pan_zoom", "scale_axes", "AXES_POSITIONS"]

AXES_POSITIONS = ("center", "left", "right", "bottomleft", "topright", "off")

# position -> (scale as a fraction of the y-range, x offset and y offset as
# fractions of the x- and y-range, relative to the center of `to`)
_PRESETS = {
    "center": (0.30, 0.00, 0.0),
    "bottomleft": (0.25, -0.25, -0.5),
    "topright": (0.25, 0.25, 0.5),
    "left": (0.30, -0.70, 0.0),
    "right": (0.30, 0.70, 0.0),
}


@dataclass(frozen=True)
class PanZoom:
    """Manual axes placement: x -> x * zoom + pan, per column."""
    pan: Tuple[float, float] = (0.0, 0.0)
    zoom: Tuple[float, float] = (1.0, 1.0)


def _first_two_columns(x) -> np.ndarray:
    """The first two columns of x as a float (m, 2) array; other columns are never read."""
    if isinstance(x, pd.DataFrame):
        if x.shape[1] < 2:
            raise InvalidArgument(f"Expected a table with at least 2 columns; got shape {x.shape}.")
        raw = x.iloc[:, :2]
    else:
        raw = x
        if np.ndim(raw) != 2 or np.shape(raw)[1] < 2:
            raise InvalidArgument(f"Expected a table with at least 2 columns; got shape {np.shape(raw)}.")
        raw = np.asarray(raw)[:, :2]
    try:
        return np.asarray(raw, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgument("The first two columns must be numeric.") from e


def _apply(x, scale: Tuple[float, float], offset: Tuple[float, float]):
    if isinstance(x, pd.DataFrame):
        XY = _first_two_columns(x)
        out = x.copy()
        for j in (0, 1):
            out[out.columns[j]] = XY[:, j] * scale[j] + offset[j]
        return out

    XY = _first_two_columns(x)
    X = np.array(x, dtype=float, copy=True)
    X[:, 0] = XY[:, 0] * scale[0] + offset[0]
    X[:, 1] = XY[:, 1] * scale[1] + offset[1]
    return X


def pan_zoom(
    pan: Tuple[float, float] = (0.0, 0.0),
    zoom: Tuple[float, float] = (1.0, 1.0),
    x=None,
):
    """
    Pan (offset) and zoom (scale) the first two columns of ``x``.

    With ``x=None`` returns a :class:`PanZoom` that can be passed to
    :func:`scale_axes` as its ``position``.
    """
    pan = (float(pan[0]), float(pan[1]))
    zoom = (float(zoom[0]), float(zoom[1]))
    if x is None:
        return PanZoom(pan=pan, zoom=zoom)

    n_cols = np.shape(x)[1] if np.ndim(x) == 2 else None
    if n_cols != 2:
        warnings.warn(
            f"pan_zoom is only defined for 2 columns; x has {n_cols}. Only the first 2 are transformed.",
            UserWarning,
            stacklevel=2,
        )
    return _apply(x, zoom, pan)


def scale_axes(
    x,
    position: Union[AxesPosition, PanZoom] = "center",
    to=None,
):
    """
    Scale and position the first two columns of ``x`` relative to ``to``.

    Parameters
    ----------
    x : (m, >=2) array or DataFrame
        Table to transform, e.g. a basis or a unit circle.
    position : str or PanZoom
        One of "center", "left", "right", "bottomleft", "topright", "off",
        or a PanZoom for manual placement.
    to : (n, >=2) array or DataFrame, optional
        Table whose first two columns' ranges set the size and location.
        Defaults to the square [-1, 1] x [-1, 1].

    Returns
    -------
    Transformed copy of ``x`` (same type), or None if position is "off".
    """
    if isinstance(position, PanZoom):
        return _apply(x, position.zoom, position.pan)

    if position not in AXES_POSITIONS:
        raise InvalidArgument(f"position must be one of {AXES_POSITIONS} or a PanZoom; got {position!r}.")
    if position == "off":
        return None

    T = _first_two_columns(np.array([[-1.0, -1.0], [1.0, 1.0]]) if to is None else to)
    if T.shape[0] < 1:
        raise InvalidArgument("`to` has no rows.")

    xrange = (float(np.min(T[:, 0])), float(np.max(T[:, 0])))
    yrange = (float(np.min(T[:, 1])), float(np.max(T[:, 1])))
    xdiff = xrange[1] - xrange[0]
    ydiff = yrange[1] - yrange[0]
    xcenter = 0.5 * (xrange[0] + xrange[1])
    ycenter = 0.5 * (yrange[0] + yrange[1])

    s, fx, fy = _PRESETS[position]
    scale = s * ydiff
    offset = (fx * xdiff + xcenter, fy * ydiff + ycenter)
    return _apply(x, (scale, scale), offset)
