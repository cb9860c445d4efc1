# manual_tours/__init__.py
from __future__ import annotations

"""
manual_tours: manual tours of multivariate data, as tour paths and long frame tables.

Recommended usage:
    import manual_tours as mt

Public API:
    - Curated user-facing symbols are re-exported from :mod:`manual_tours.api`.
    - The ``synthetic`` subpackage (demo datasets) is imported lazily as ``mt.synthetic``.
"""

import importlib
from typing import Any

from ._version import __version__
from .api import *  # noqa: F401,F403
from .api import __all__ as _api_all

_SUBPACKAGES = ("synthetic",)

__all__ = ["__version__", *_api_all, *_SUBPACKAGES]


def __getattr__(name: str) -> Any:
    if name in _SUBPACKAGES:
        return importlib.import_module(f"{__name__}.{name}")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    names = set(globals().keys())
    names.update(_SUBPACKAGES)
    return sorted(names)
