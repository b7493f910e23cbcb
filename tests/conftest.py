"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinear import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_pair(rng):
    """Two equal-length int vectors."""
    a = Vector.from_values(rng.integers(-50, 50, size=6), dtype='int')
    b = Vector.from_values(rng.integers(-50, 50, size=6), dtype='int')
    return a, b


@pytest.fixture
def square_2x2():
    """The textbook [[1, 2], [3, 4]] matrix, det = -2."""
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def invertible_float(rng):
    """Random well-conditioned 2x2 float matrix."""
    while True:
        data = rng.standard_normal((2, 2))
        if abs(np.linalg.det(data)) > 0.1:
            return Matrix.from_rows(data, dtype='float')
