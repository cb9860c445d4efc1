# manual_tours/frames/flatten.py
"""
Tour path -> long tables, for consumption by any plotting backend.

basis_frames: one row per (frame, variable) with the variable's axis coordinates.
data_frames:  one row per (frame, observation) with projected, per-frame
              mean-centred data coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..errors import InvalidArgument
from ..geometry.manip_space import ManipVar, as_basis, resolve_manip_var
from ..geometry.rotation import oblique_basis
from ..tours.path import TourPath, phi_start_of
from ..utils.status_utils import _auto_every, _frame_progress, _maybe_clear, _maybe_status

__all__ = ["FrameTables", "flatten_tour", "oblique_frame", "abbreviate"]

_COORD_NAMES = ("x", "y", "z", "w")
_VOWELS = set("aeiou")


# ============================================================
# Result
# ============================================================

@dataclass(frozen=True, eq=False)
class FrameTables:
    """
    basis_frames:
      columns x, y, frame, label; p rows per frame.
    data_frames:
      columns x, y, frame (+ label if available); n rows per frame, or None
      when no data was supplied.
    manip_var:
      1-based manipulated variable (for highlighting), or None for tours
      that were not produced by a manual tour.
    """
    basis_frames: pd.DataFrame
    data_frames: Optional[pd.DataFrame] = None
    manip_var: Optional[int] = None

    @property
    def n_frames(self) -> int:
        if len(self.basis_frames) == 0:
            return 0
        return int(self.basis_frames["frame"].max())

    def frame(self, i: int) -> Tuple[pd.DataFrame, Optional[pd.DataFrame]]:
        """Rows of frame ``i`` (1-based) from both tables."""
        b = self.basis_frames[self.basis_frames["frame"] == int(i)]
        if self.data_frames is None:
            return b, None
        return b, self.data_frames[self.data_frames["frame"] == int(i)]


# ============================================================
# Labels
# ============================================================

def _abbreviate_one(name: str, minlength: int) -> str:
    chars = list(str(name).strip())
    if len(chars) <= minlength:
        return "".join(chars)

    def _initial(i: int) -> bool:
        return i == 0 or chars[i - 1].isspace()

    def _length() -> int:
        # spaces are dropped at the end, so they do not count
        return sum(not c.isspace() for c in chars)

    # drop lower-case vowels, then lower-case letters, right to left, keeping word initials;
    # then anything but the first character
    for droppable in (
        lambda i: chars[i] in _VOWELS and not _initial(i),
        lambda i: chars[i].islower() and not _initial(i),
        lambda i: not chars[i].isspace(),
    ):
        i = len(chars) - 1
        while _length() > minlength and i > 0:
            if droppable(i):
                del chars[i]
            i -= 1
        if _length() <= minlength:
            break
    return "".join(c for c in chars if not c.isspace())


def abbreviate(names: Sequence[str], minlength: int = 3) -> List[str]:
    """
    Abbreviate names to at least ``minlength`` characters, keeping them unique.

    Lower-case vowels are removed first (from the right), then lower-case
    letters, then any remaining characters. The first letter of every word is
    kept through the first two passes, and spaces are dropped from shortened
    names ("Sepal Length" -> "SpL").
    Names that would collide are lengthened until they are distinct (or whole).
    """
    names = [str(n) for n in names]
    minlength = int(minlength)
    if minlength < 1:
        raise InvalidArgument(f"minlength must be >= 1; got {minlength}.")

    lengths = [minlength] * len(names)
    out = [_abbreviate_one(n, m) for n, m in zip(names, lengths)]
    max_len = max((len(n) for n in names), default=0)

    while True:
        seen = {}
        for i, a in enumerate(out):
            seen.setdefault(a, []).append(i)
        clashes = [idx for idx in seen.values() if len(idx) > 1]
        grew = False
        for idx in clashes:
            for i in idx:
                if lengths[i] < max_len:
                    lengths[i] += 1
                    out[i] = _abbreviate_one(names[i], lengths[i])
                    grew = True
        if not grew:
            return out


def _tile_labels(labels, per_frame: int, n_frames: int, *, what: str) -> np.ndarray:
    if isinstance(labels, str):
        labels = [labels]
    labs = np.asarray(list(labels), dtype=object)
    if labs.ndim != 1 or labs.size == 0:
        raise InvalidArgument(f"{what} must be a non-empty 1D sequence of labels.")
    if per_frame % labs.size != 0:
        raise InvalidArgument(
            f"{what} has length {labs.size}, which does not evenly divide the {per_frame} rows per frame."
        )
    return np.tile(labs, (per_frame // labs.size) * int(n_frames))


# ============================================================
# Input coercion
# ============================================================

def _coerce_tour(tour) -> Tuple[np.ndarray, Optional[int], Optional[Tuple[str, ...]]]:
    if isinstance(tour, TourPath):
        return np.asarray(tour.frames, dtype=float), int(tour.manip_var), tour.labels

    try:
        frames = np.asarray(tour, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgument("tour must be a TourPath or a numeric (n_frames, p, d) array.") from e
    if frames.ndim != 3:
        raise InvalidArgument(f"tour array must have shape (n_frames, p, d); got {frames.shape}.")
    return frames, None, None


def _coerce_data(data, p: int) -> Tuple[Optional[np.ndarray], Optional[List[str]], Optional[List[str]]]:
    """Return (X, column names or None, row names or None)."""
    if data is None:
        return None, None, None

    columns = index = None
    if isinstance(data, pd.DataFrame):
        non_numeric = [c for c in data.columns if not pd.api.types.is_numeric_dtype(data[c])]
        if non_numeric:
            raise InvalidArgument(f"data must be numeric; non-numeric columns: {non_numeric}.")
        if not isinstance(data.columns, pd.RangeIndex):
            columns = [str(c) for c in data.columns]
        if not isinstance(data.index, pd.RangeIndex):
            index = [str(r) for r in data.index]

    try:
        X = data.to_numpy(dtype=float) if isinstance(data, pd.DataFrame) else np.asarray(data, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgument("data must be coercible to a numeric (n, p) matrix.") from e
    if X.ndim != 2:
        raise InvalidArgument(f"data must be a 2D (n, p) matrix; got shape {X.shape}.")
    if X.shape[1] != int(p):
        raise InvalidArgument(f"data has {X.shape[1]} columns but the tour bases have p={int(p)} rows.")
    if X.shape[0] < 1:
        raise InvalidArgument("data has no rows.")
    if not np.all(np.isfinite(X)):
        raise InvalidArgument("data contains missing or non-finite values.")
    return X, columns, index


# ============================================================
# Flattening
# ============================================================

def flatten_tour(
    tour,
    data=None,
    basis_label: Optional[Sequence[str]] = None,
    data_label: Optional[Sequence[str]] = None,
    *,
    progress: bool = False,
) -> FrameTables:
    """
    Turn a tour path into long data frames.

    Parameters
    ----------
    tour : TourPath or (n_frames, p, d) array
        The bases to flatten (d <= 4).
    data : (n, p) array-like or DataFrame, optional
        Data projected through every basis; each frame is mean-centred.
    basis_label : sequence of str, optional
        Axis labels, tiled over the p variables of each frame. Defaults to a
        3-character abbreviation of the data's column names, else of the
        tour's variable labels, else V1..Vp.
    data_label : sequence of str, optional
        Observation labels, tiled over the n rows of each frame. Defaults to
        the DataFrame index when ``data`` has a non-default one.
    progress : bool
        Show a status line while projecting the data.

    Returns
    -------
    FrameTables
    """
    frames, manip_var, tour_labels = _coerce_tour(tour)
    n_frames, p, d = frames.shape
    if d > len(_COORD_NAMES):
        raise InvalidArgument(f"Can only flatten bases with d <= {len(_COORD_NAMES)}; got d={d}.")
    coord_cols = list(_COORD_NAMES[:d])

    X, data_columns, data_index = _coerce_data(data, p)

    # ---- basis ----
    basis_frames = pd.DataFrame(frames.reshape(n_frames * p, d), columns=coord_cols)
    basis_frames["frame"] = np.repeat(np.arange(1, n_frames + 1), p)

    if basis_label is None:
        names = data_columns if data_columns is not None else tour_labels
        basis_label = abbreviate(names, 3) if names is not None else [f"V{j}" for j in range(1, p + 1)]
    basis_frames["label"] = _tile_labels(basis_label, p, n_frames, what="basis_label")

    if X is None:
        return FrameTables(basis_frames=basis_frames, data_frames=None, manip_var=manip_var)

    # ---- data ----
    n = int(X.shape[0])
    every = _auto_every(n_frames)
    blocks = np.empty((n_frames, n, d), dtype=float)
    for i in range(n_frames):
        proj = X @ frames[i]
        blocks[i] = proj - proj.mean(axis=0, keepdims=True)
        if i % every == 0 or i == n_frames - 1:
            _maybe_status(progress, _frame_progress("Projecting data", i, n_frames))
    _maybe_clear(progress)

    data_frames = pd.DataFrame(blocks.reshape(n_frames * n, d), columns=coord_cols)
    data_frames["frame"] = np.repeat(np.arange(1, n_frames + 1), n)

    if data_label is None:
        data_label = data_index
    if data_label is not None:
        data_frames["label"] = _tile_labels(data_label, n, n_frames, what="data_label")

    return FrameTables(basis_frames=basis_frames, data_frames=data_frames, manip_var=manip_var)


def oblique_frame(
    basis,
    manip_var: ManipVar,
    theta: float = 0.0,
    phi: float = 0.0,
    data=None,
    basis_label: Optional[Sequence[str]] = None,
    data_label: Optional[Sequence[str]] = None,
) -> FrameTables:
    """
    Long tables of a single manual-tour frame (frame id 1): ``manip_var``
    rotated by (theta, phi) from ``basis``.
    """
    B = as_basis(basis)
    k = resolve_manip_var(manip_var, B.p, B.labels)
    frame = oblique_basis(B.values, k, theta=theta, phi=phi)
    frames = frame[None, :, :]
    frames.setflags(write=False)
    phis = np.array([float(phi)])
    phis.setflags(write=False)

    single = TourPath(
        frames=frames,
        manip_var=k,
        theta=float(theta),
        phi_start=phi_start_of(B.values, k),
        phis=phis,
        labels=B.labels,
    )
    return flatten_tour(single, data=data, basis_label=basis_label, data_label=data_label)
