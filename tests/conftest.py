"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyvecmat import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def abc_vectors():
    """a = [1, 2, 3], b = [4, 5, 6]."""
    return Vector([1, 2, 3]), Vector([4, 5, 6])


@pytest.fixture
def square_matrix():
    """M = [[1, 2], [3, 4]] (invertible, det = -2)."""
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def well_conditioned_matrices(rng):
    """Random square matrices shifted by n*I so they are safely invertible."""
    return [
        Matrix(rng.standard_normal((n, n)) + n * np.eye(n))
        for n in (1, 2, 3, 5, 8)
    ]
