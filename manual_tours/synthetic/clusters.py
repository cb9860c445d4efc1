# manual_tours/synthetic/clusters.py
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pandas as pd

from ..errors import InvalidArgument

__all__ = ["make_clusters"]


def make_clusters(
    n_per_cluster: int = 25,
    p: int = 6,
    n_clusters: int = 3,
    *,
    sep: float = 3.0,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[pd.DataFrame, np.ndarray]:
    """
    Gaussian clusters in R^p whose means differ in a few variables only.

    Cluster j has mean ``sep`` in variable (j mod p) + 1 and 0 elsewhere, so a
    manual tour of that variable separates it from the others.

    Returns
    -------
    data : DataFrame, shape (n_per_cluster * n_clusters, p), columns V1..Vp
    labels : (n,) ndarray of int cluster ids (0-based)
    """
    if int(n_per_cluster) < 1 or int(n_clusters) < 1:
        raise InvalidArgument("n_per_cluster and n_clusters must be >= 1.")
    if int(p) < 3:
        raise InvalidArgument(f"p must be >= 3; got {p}.")
    if rng is None:
        rng = np.random.default_rng()

    n_per_cluster, p, n_clusters = int(n_per_cluster), int(p), int(n_clusters)
    means = np.zeros((n_clusters, p), dtype=float)
    for j in range(n_clusters):
        means[j, j % p] = float(sep)

    X = np.concatenate([rng.standard_normal((n_per_cluster, p)) + means[j] for j in range(n_clusters)], axis=0)
    labels = np.repeat(np.arange(n_clusters), n_per_cluster)

    data = pd.DataFrame(X, columns=[f"V{i}" for i in range(1, p + 1)])
    return data, labels
