# manual_tours/errors.py
"""
Error and warning types raised by manual_tours.

- InvalidArgument: malformed inputs (basis shape, manip_var, labels, phi ordering, ...).
  Subclasses ValueError so callers that already catch ValueError keep working.
- NumericDegenerate: diagnostic-only numerical problems (e.g. a basis that is
  not orthonormal within tolerance). Emitted with ``warnings.warn``.
"""

from __future__ import annotations

__all__ = ["InvalidArgument", "NumericDegenerate"]


class InvalidArgument(ValueError):
    """An argument is malformed, out of range, or inconsistent with the others."""


class NumericDegenerate(UserWarning):
    """A numerical input is degenerate, but the computation can still proceed."""
