# manual_tours/tours/path.py
"""
Tour path generation: rotate one variable into and out of a 2D projection.

The manipulated variable starts at its own out-of-plane angle phi_start and the
path visits phi_min, then phi_max, then returns to phi_start. Each frame is the
first two columns of the rotated manipulation space.
"""

from __future__ import annotations

import dataclasses
import numbers
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

import numpy as np

from ..errors import InvalidArgument
from ..geometry.manip_space import Basis, ManipVar, as_basis, manip_space_values, resolve_manip_var
from ..geometry.orthonormal import check_orthonormal
from ..geometry.rotation import rotate_manip_space
from .angle_policies import AnglePolicy, FixedAngleStep, FixedFrameCount

__all__ = [
    "MANIP_TYPES",
    "TourConfig",
    "TourPath",
    "manual_tour",
    "radial_tour",
    "sweep_tour",
    "resolve_theta",
    "phi_start_of",
]

MANIP_TYPES = ("radial", "horizontal", "vertical")


# ============================================================
# Config / result
# ============================================================

@dataclass(frozen=True)
class TourConfig:
    """
    manip_type:
      "radial" (rotate along the variable's own direction), "horizontal"
      (theta = 0) or "vertical" (theta = pi/2). Ignored when theta is set.

    theta:
      explicit in-plane angle (radians); overrides manip_type.

    phi_min, phi_max:
      out-of-plane angles (radians) the variable is rotated to. Must bracket
      the basis's own phi_start.

    policy:
      how phi is stepped along the path (FixedFrameCount or FixedAngleStep).

    tol:
      orthonormality tolerance of the input basis (warning only).
    """
    manip_type: Optional[str] = "radial"
    theta: Optional[float] = None
    phi_min: float = 0.0
    phi_max: float = 0.5 * np.pi
    policy: AnglePolicy = field(default_factory=FixedFrameCount)
    tol: float = 1e-3

    def __post_init__(self) -> None:
        if self.manip_type is not None:
            mt = str(self.manip_type).lower()
            if mt not in MANIP_TYPES:
                raise InvalidArgument(f"manip_type must be one of {MANIP_TYPES}; got {self.manip_type!r}.")
            object.__setattr__(self, "manip_type", mt)
        if self.theta is None and self.manip_type is None:
            raise InvalidArgument("Either theta or manip_type must be set.")
        if not isinstance(self.policy, AnglePolicy):
            raise InvalidArgument(f"policy must be an AnglePolicy; got {type(self.policy).__name__}.")
        for name in ("phi_min", "phi_max"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, numbers.Real):
                raise InvalidArgument(f"{name} must be a real number of radians; got {v!r}.")
        if not (np.isfinite(self.phi_min) and np.isfinite(self.phi_max)):
            raise InvalidArgument("phi_min and phi_max must be finite.")
        if float(self.phi_min) > float(self.phi_max):
            raise InvalidArgument(f"phi_min ({self.phi_min}) must be <= phi_max ({self.phi_max}).")


@dataclass(frozen=True, eq=False)
class TourPath:
    """
    An ordered sequence of (p, d) projection bases.

    frames:
      read-only array, shape (n_frames, p, d).
    manip_var:
      1-based number of the manipulated variable.
    theta:
      in-plane angle used for every frame.
    phi_start:
      out-of-plane angle of the manipulated variable in the input basis.
    phis:
      per-frame phi; the target out-of-plane angle for manual/radial tours,
      the raw rotation angle for sweep tours.
    labels:
      variable labels of the input basis, if any.
    """
    frames: np.ndarray
    manip_var: int
    theta: float
    phi_start: float
    phis: np.ndarray
    labels: Optional[Tuple[str, ...]] = None

    @property
    def n_frames(self) -> int:
        return int(self.frames.shape[0])

    @property
    def p(self) -> int:
        return int(self.frames.shape[1])

    @property
    def d(self) -> int:
        return int(self.frames.shape[2])

    def __len__(self) -> int:
        return self.n_frames

    def __getitem__(self, i) -> np.ndarray:
        return self.frames[i]

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.frames)

    def to_array(self) -> np.ndarray:
        """Writable copy of the frames, shape (n_frames, p, d)."""
        return np.array(self.frames, dtype=float, copy=True)

    def flatten(self, data=None, basis_label=None, data_label=None, *, progress: bool = False):
        """Shortcut for :func:`manual_tours.frames.flatten.flatten_tour`."""
        from ..frames.flatten import flatten_tour

        return flatten_tour(self, data=data, basis_label=basis_label, data_label=data_label, progress=progress)

    def to_text(self, *, decimals: int = 3) -> str:
        r = int(decimals)
        name = f"{self.manip_var}"
        if self.labels is not None:
            name += f" ({self.labels[self.manip_var - 1]})"
        return (
            "\n"
            + "=" * 12
            + " Tour Path "
            + "=" * 12
            + "\n\n"
            + f"Frames: {self.n_frames} bases of shape (p={self.p}, d={self.d})\n"
            + f"Manip var: {name}\n"
            + f"Theta: {self.theta:.{r}f} rad\n"
            + f"Phi start: {self.phi_start:.{r}f} rad\n"
            + f"Phi range: [{float(np.min(self.phis)):.{r}f}, {float(np.max(self.phis)):.{r}f}] rad\n"
            + "\n"
            + "=" * 35
            + "\n"
        )


# ============================================================
# Angle helpers
# ============================================================

def resolve_theta(B: np.ndarray, k: int, manip_type: Optional[str] = "radial", theta: Optional[float] = None) -> float:
    """
    In-plane angle of the tour. An explicit theta wins over manip_type.

    radial: atan2(B[k,1], B[k,0]); horizontal: 0; vertical: pi/2.
    """
    if theta is not None:
        t = float(theta)
        if not np.isfinite(t):
            raise InvalidArgument(f"theta must be finite; got {theta!r}.")
        return t
    if manip_type is None:
        raise InvalidArgument("Either theta or manip_type must be set.")

    mt = str(manip_type).lower()
    if mt == "horizontal":
        return 0.0
    if mt == "vertical":
        return 0.5 * np.pi
    if mt == "radial":
        return float(np.arctan2(B[k - 1, 1], B[k - 1, 0]))
    raise InvalidArgument(f"manip_type must be one of {MANIP_TYPES}; got {manip_type!r}.")


def phi_start_of(B: np.ndarray, k: int) -> float:
    """Angle between the variable's in-plane contribution and its full (unit) extent."""
    r = float(np.hypot(B[k - 1, 0], B[k - 1, 1]))
    return float(np.arccos(np.clip(r, 0.0, 1.0)))


def _direction_sign(B: np.ndarray, k: int, theta: float) -> float:
    # +1 when the theta direction points along the variable's in-plane contribution
    along = np.cos(theta) * B[k - 1, 0] + np.sin(theta) * B[k - 1, 1]
    return -1.0 if along < 0 else 1.0


def _prepare(basis, manip_var: ManipVar, tol: float) -> Tuple[Basis, int]:
    B = as_basis(basis)
    if B.d != 2:
        raise InvalidArgument(f"Manual tours need a (p, 2) basis; got d={B.d}.")
    if B.p < 3:
        raise InvalidArgument(f"Manual tours need at least 3 variables; got p={B.p}.")
    k = resolve_manip_var(manip_var, B.p, B.labels)
    check_orthonormal(B.values, tol=tol)
    return B, k


def _rotate_frames(M: np.ndarray, theta: float, phi_rot: np.ndarray, d: int) -> np.ndarray:
    frames = np.empty((len(phi_rot), M.shape[0], d), dtype=float)
    for i, phi in enumerate(phi_rot):
        frames[i] = rotate_manip_space(M, theta, float(phi))[:, :d]
    frames.setflags(write=False)
    return frames


# ============================================================
# Public entry points
# ============================================================

def manual_tour(basis, manip_var: ManipVar, cfg: Optional[TourConfig] = None, **overrides) -> TourPath:
    """
    Rotate ``manip_var`` from its resting angle to phi_min, to phi_max, and back.

    Parameters
    ----------
    basis : (p, 2) array-like or DataFrame
        Orthonormal starting basis. DataFrame index gives variable labels.
    manip_var : int or str
        1-based variable number, or a variable label.
    cfg : TourConfig, optional
        Defaults to ``TourConfig()`` (radial, phi in [0, pi/2], 15 frames).
    **overrides
        Any TourConfig field, applied on top of ``cfg``.

    Returns
    -------
    TourPath
        First and last frames reproduce the input basis.

    Raises
    ------
    InvalidArgument
        On a malformed basis, unresolved manip_var, bad theta/manip_type, or
        when phi_min <= phi_start <= phi_max does not hold.
    """
    if cfg is None:
        cfg = TourConfig()
    if overrides:
        unknown = sorted(set(overrides) - {f.name for f in dataclasses.fields(TourConfig)})
        if unknown:
            raise InvalidArgument(f"Unknown manual_tour option(s): {unknown}.")
        cfg = dataclasses.replace(cfg, **overrides)

    B, k = _prepare(basis, manip_var, cfg.tol)
    Bv = B.values

    theta = resolve_theta(Bv, k, cfg.manip_type, cfg.theta)
    phi_start = phi_start_of(Bv, k)
    phi_min, phi_max = float(cfg.phi_min), float(cfg.phi_max)
    if not (phi_min <= phi_start <= phi_max):
        raise InvalidArgument(
            f"phi_min <= phi_start <= phi_max must hold; got phi_min={phi_min:.4f}, "
            f"phi_start={phi_start:.4f}, phi_max={phi_max:.4f}."
        )

    legs = [(phi_start, phi_min), (phi_min, phi_max), (phi_max, phi_start)]
    phis = cfg.policy.phi_path(legs)

    # rotating by phi moves the variable to phi_start - phi (along theta)
    sign = _direction_sign(Bv, k, theta)
    phi_rot = -sign * (phis - phi_start)

    M = manip_space_values(Bv, k)
    frames = _rotate_frames(M, theta, phi_rot, B.d)

    phis = np.array(phis, dtype=float)
    phis.setflags(write=False)
    return TourPath(
        frames=frames,
        manip_var=k,
        theta=theta,
        phi_start=phi_start,
        phis=phis,
        labels=B.labels,
    )


def radial_tour(
    basis,
    manip_var: ManipVar,
    *,
    theta: Optional[float] = None,
    phi_min: float = 0.0,
    phi_max: float = 0.5 * np.pi,
    angle: float = 0.05,
    tol: float = 1e-3,
) -> TourPath:
    """
    Angle-step manual tour: phi_start -> phi_min -> phi_max -> phi_start in
    steps of ``angle`` radians. Radial unless theta is given.
    """
    cfg = TourConfig(
        manip_type="radial",
        theta=theta,
        phi_min=phi_min,
        phi_max=phi_max,
        policy=FixedAngleStep(angle=angle),
        tol=tol,
    )
    return manual_tour(basis, manip_var, cfg)


def sweep_tour(
    basis,
    manip_var: ManipVar,
    *,
    manip_type: Optional[str] = "radial",
    theta: Optional[float] = None,
    phi_from: float = 0.0,
    phi_to: float = 2.0 * np.pi,
    n_slides: int = 15,
    tol: float = 1e-3,
) -> TourPath:
    """
    Absolute sweep: rotate the manipulation space by every phi in
    ``linspace(phi_from, phi_to, n_slides)``, with no shift to phi_start.

    phi = 0 reproduces the input basis, so the default sweep is a full turn
    that starts and ends there.
    """
    if isinstance(n_slides, bool) or not isinstance(n_slides, numbers.Integral) or int(n_slides) < 1:
        raise InvalidArgument(f"n_slides must be a positive integer; got {n_slides!r}.")
    if not (np.isfinite(phi_from) and np.isfinite(phi_to)):
        raise InvalidArgument("phi_from and phi_to must be finite.")

    B, k = _prepare(basis, manip_var, tol)
    Bv = B.values
    theta = resolve_theta(Bv, k, manip_type, theta)

    phis = np.linspace(float(phi_from), float(phi_to), int(n_slides))
    M = manip_space_values(Bv, k)
    frames = _rotate_frames(M, theta, phis, B.d)

    phis.setflags(write=False)
    return TourPath(
        frames=frames,
        manip_var=k,
        theta=theta,
        phi_start=phi_start_of(Bv, k),
        phis=phis,
        labels=B.labels,
    )
