# manual_tours/tours/angle_policies.py
"""
Angle policies: how a tour path walks phi along its legs.

A tour path is a concatenation of legs (start, end) in phi. A policy turns the
legs into the ordered array of target phi values, one per frame. Consecutive
legs share their boundary point, which appears once in the path.

- FixedFrameCount: exactly ``n_slides`` frames, steps split evenly across legs.
- FixedAngleStep: steps of a constant ``angle`` (radians); the last step of a
  leg is shortened so the leg ends exactly on its endpoint.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from ..errors import InvalidArgument

Leg = Tuple[float, float]

__all__ = ["Leg", "AnglePolicy", "FixedFrameCount", "FixedAngleStep"]


def _as_legs(legs: Sequence[Leg]) -> List[Leg]:
    out: List[Leg] = []
    for leg in legs:
        if len(leg) != 2:
            raise InvalidArgument(f"Each leg must be a (start, end) pair; got {leg!r}.")
        a, b = float(leg[0]), float(leg[1])
        if not (np.isfinite(a) and np.isfinite(b)):
            raise InvalidArgument(f"Leg endpoints must be finite; got {leg!r}.")
        out.append((a, b))
    if not out:
        raise InvalidArgument("A tour path needs at least one leg.")
    for (_, b0), (a1, _) in zip(out[:-1], out[1:]):
        if b0 != a1:
            raise InvalidArgument(f"Legs must be contiguous: a leg ends at {b0} but the next starts at {a1}.")
    return out


@dataclass(frozen=True)
class AnglePolicy:
    """Base class for phi-stepping strategies."""

    def phi_path(self, legs: Sequence[Leg]) -> np.ndarray:
        raise NotImplementedError


@dataclass(frozen=True)
class FixedFrameCount(AnglePolicy):
    """
    n_slides:
      total number of frames in the path (start and end included).

    The n_slides - 1 steps are divided as evenly as possible between the legs,
    earlier legs taking the remainder; each leg is linearly interpolated.
    """
    n_slides: int = 15

    def __post_init__(self) -> None:
        if isinstance(self.n_slides, bool) or not isinstance(self.n_slides, numbers.Integral):
            raise InvalidArgument(f"n_slides must be an integer; got {self.n_slides!r}.")
        if int(self.n_slides) < 2:
            raise InvalidArgument(f"n_slides must be >= 2; got {self.n_slides}.")

    def phi_path(self, legs: Sequence[Leg]) -> np.ndarray:
        legs = _as_legs(legs)
        n_steps = int(self.n_slides) - 1
        if n_steps < len(legs):
            raise InvalidArgument(
                f"n_slides={self.n_slides} is too small for {len(legs)} legs; "
                f"need at least {len(legs) + 1} frames."
            )

        base, extra = divmod(n_steps, len(legs))
        parts = []
        for i, (a, b) in enumerate(legs):
            k = base + (1 if i < extra else 0)
            parts.append(np.linspace(a, b, k + 1)[:-1])
        parts.append(np.array([legs[-1][1]], dtype=float))
        return np.concatenate(parts)


@dataclass(frozen=True)
class FixedAngleStep(AnglePolicy):
    """
    angle:
      target distance (radians) between consecutive frames.

    The number of frames depends on the leg lengths; a zero-length leg adds no
    frames.
    """
    angle: float = 0.05

    def __post_init__(self) -> None:
        a = float(self.angle)
        if not (np.isfinite(a) and a > 0):
            raise InvalidArgument(f"angle must be a positive, finite number of radians; got {self.angle!r}.")

    def _walk(self, start: float, end: float) -> np.ndarray:
        step = float(self.angle)
        dist = abs(end - start)
        if dist == 0.0:
            return np.array([start], dtype=float)

        sign = 1.0 if end > start else -1.0
        tol = 1e-9 * step
        n_full = int(np.floor(dist / step + 1e-9))
        path = start + sign * step * np.arange(n_full + 1, dtype=float)

        remainder = dist - n_full * step
        if abs(remainder) <= tol:
            path[-1] = end
        else:
            path = np.append(path, end)
        return path

    def phi_path(self, legs: Sequence[Leg]) -> np.ndarray:
        legs = _as_legs(legs)
        parts = [self._walk(*legs[0])]
        for a, b in legs[1:]:
            parts.append(self._walk(a, b)[1:])
        return np.concatenate(parts)
