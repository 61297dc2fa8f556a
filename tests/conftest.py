"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg.core.protocols import Matrix
from pylinalg.matrix import from_table


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def textbook_table():
    """Classic 3x3 QR example with integer Q R factors."""
    return np.array([
        [12.0, -51.0, 4.0],
        [6.0, 167.0, -68.0],
        [-4.0, 24.0, -41.0],
    ])


@pytest.fixture
def symmetric_table():
    """Symmetric 3x3 matrix with well separated real eigenvalues."""
    return np.array([
        [17.0, 49.0, 25.0],
        [49.0, 3.0, -40.0],
        [25.0, -40.0, 0.0],
    ])


@pytest.fixture
def five_by_five_table():
    """Non-symmetric 5x5 matrix for QR reconstruction."""
    return np.array([
        [12.0, -51.0, 4.0, 0.0, 0.0],
        [6.0, 167.0, -68.0, 1.0, -12.0],
        [-4.0, 24.0, -41.0, 14.0, 24.0],
        [-16.0, 0.0, 0.0, 4.0, 56.0],
        [0.0, 13.0, 12.0, 70.0, 30.0],
    ])


@pytest.fixture
def symmetric_five_by_five(rng):
    """
    Symmetric 5x5 matrix with eigenvalues (16, 8, 4, 2, -1), built as
    V diag(w) V^T for a random orthogonal V.

    No eigenvalue sits at equal distance from two others, so shifted QR
    separates all of them.
    """
    eigenvalues = np.array([16.0, 8.0, 4.0, 2.0, -1.0])
    v, _ = np.linalg.qr(rng.standard_normal((5, 5)))
    table = v @ np.diag(eigenvalues) @ v.T
    return 0.5 * (table + table.T), eigenvalues


class CountingMatrix(Matrix):
    """Table-backed matrix counting row and column requests."""

    def __init__(self, table):
        self._inner = from_table(table)
        self.row_calls = 0
        self.column_calls = 0

    @property
    def row_size(self):
        return self._inner.row_size

    @property
    def col_size(self):
        return self._inner.col_size

    def get_row(self, index):
        self.row_calls += 1
        return self._inner.get_row(index)

    def get_column(self, index):
        self.column_calls += 1
        return self._inner.get_column(index)


@pytest.fixture
def counting_matrix():
    """Factory for table-backed matrices that count row / column requests."""
    return CountingMatrix
