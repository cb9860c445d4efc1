"""
Synthetic datasets for demonstrations and tests.

Typical usage
-------------
>>> from manual_tours.synthetic import make_clusters
"""

from __future__ import annotations

from .clusters import make_clusters

__all__ = ["make_clusters"]
