import numpy as np
import pandas as pd
import pytest

from manual_tours import basis_random


@pytest.fixture
def rng():
    return np.random.default_rng(2024)


@pytest.fixture
def basis(rng):
    """A random (6, 2) orthonormal basis."""
    return basis_random(6, 2, rng=rng)


@pytest.fixture
def data(rng):
    """A (10, 6) numeric data matrix."""
    return rng.standard_normal((10, 6))


@pytest.fixture
def labeled_basis(basis):
    return pd.DataFrame(basis, index=["tars1", "tars2", "head", "aede1", "aede2", "aede3"], columns=["x", "y"])

