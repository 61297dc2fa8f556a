"""
Coordinate-backed matrices.

A coordinate-backed matrix answers get_entry(row, col) in O(1), either by
looking it up in a dense table or by evaluating a formula. Because any
offset is directly addressable, the row and column views it hands out
support O(1) sub-viewing.
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.protocols import Matrix, View
from pylinalg.core.validation import check_index, check_non_negative
from pylinalg.matrix.views import ArrayView


class RowSlice(View):
    """
    Entries (index, skip) ... (index, skip + length - 1) of a Householder
    reflector, computed through its get_entry().
    """

    def __init__(self, matrix: 'HouseholderMatrix', index: int, skip: int, length: int):
        self._matrix = matrix
        self._index = index
        self._skip = skip
        self._length = length

    def __len__(self) -> int:
        return self._length

    def iterate(self) -> Iterator[float]:
        entry = self._matrix.get_entry
        index = self._index
        return (entry(index, c) for c in range(self._skip, self._skip + self._length))

    def sub_view(self, skip: int, length: int) -> View:
        check_non_negative(skip, "skip")
        check_non_negative(length, "length")
        length = min(length, max(self._length - skip, 0))
        return RowSlice(self._matrix, self._index, self._skip + skip, length)


class TableMatrix(Matrix):
    """
    Matrix backed by a dense, read-only 2-D table.

    Rows and columns are array views over slices of the table, so building
    them and sub-viewing them are both O(1). Use factory.from_table() to
    build one from user data; the constructor trusts its argument.
    """

    def __init__(self, table: NDArray[np.floating[Any]]):
        self._table = table

    @property
    def row_size(self) -> int:
        return self._table.shape[1]

    @property
    def col_size(self) -> int:
        return self._table.shape[0]

    def get_entry(self, row: int, col: int) -> float:
        return float(self._table[row, col])

    def get_row(self, index: int) -> View:
        check_index(index, self.col_size, "row")
        return ArrayView(self._table[index])

    def get_column(self, index: int) -> View:
        check_index(index, self.row_size, "column")
        return ArrayView(self._table[:, index])


class HouseholderMatrix(Matrix):
    """
    Householder reflector H = I - 2 v v^T for a unit vector v.

    Entries are computed on access; the k x k table is never built.
    H is symmetric, so a column is the row with the same index and
    transpose() returns the reflector itself.
    """

    def __init__(self, vector: NDArray[np.floating[Any]]):
        self._vector = vector

    @property
    def vector(self) -> NDArray[np.floating[Any]]:
        return self._vector

    @property
    def row_size(self) -> int:
        return self._vector.shape[0]

    @property
    def col_size(self) -> int:
        return self._vector.shape[0]

    def get_entry(self, row: int, col: int) -> float:
        v = self._vector
        return (1.0 if row == col else 0.0) - 2.0 * float(v[row]) * float(v[col])

    def get_row(self, index: int) -> View:
        check_index(index, self.col_size, "row")
        return RowSlice(self, index, 0, self.row_size)

    def get_column(self, index: int) -> View:
        check_index(index, self.row_size, "column")
        return RowSlice(self, index, 0, self.col_size)

    def transpose(self) -> Matrix:
        return self
