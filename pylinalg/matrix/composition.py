"""
Lazy matrix composition.

Named matrix types that compose other matrices by reference:

    TransposedMatrix  rows and columns swapped; transposes back to its source
    ProductMatrix     unmaterialized left . right
    CachedMatrix      per-index memo of rows and columns of a wrapped matrix
    EmbeddedMatrix    square block as the trailing block of an identity

Product evaluation rests on two identities only:

    col(A . B, i) = A . col(B, i)
    row(A . B, i) = B^T . row(A, i)        since (A B)^T = B^T A^T

Chaining products this way re-derives every factor on each query. Inside
a decomposition pass the partial products are therefore wrapped in
CachedMatrix, so each row and column of each partial product is computed
once per pass instead of once per query.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.protocols import Matrix, View
from pylinalg.core.validation import check_index
from pylinalg.matrix.views import ArrayView, OneHotView


class TransposedMatrix(Matrix):
    """
    Transpose of a matrix, by reference.

    row(A^T, i) = col(A, i) and col(A^T, i) = row(A, i). Transposing again
    returns the original matrix itself, never a second wrapper.
    """

    def __init__(self, matrix: Matrix):
        self._matrix = matrix

    @property
    def row_size(self) -> int:
        return self._matrix.col_size

    @property
    def col_size(self) -> int:
        return self._matrix.row_size

    def get_row(self, index: int) -> View:
        check_index(index, self.col_size, "row")
        return self._matrix.get_column(index)

    def get_column(self, index: int) -> View:
        check_index(index, self.row_size, "column")
        return self._matrix.get_row(index)

    def transpose(self) -> Matrix:
        return self._matrix


class ProductMatrix(Matrix):
    """
    Unmaterialized product left . right.

    Owns no data. dim(A . B) = (row_size(B), col_size(A)) in
    (row_size, col_size) terms, i.e. the usual (rows(A), cols(B)).
    """

    def __init__(self, left: Matrix, right: Matrix):
        if left.row_size != right.col_size:
            raise DimensionError(
                f"compose_left: inner dimensions differ, left is "
                f"({left.col_size}, {left.row_size}) and right is "
                f"({right.col_size}, {right.row_size})"
            )
        self._left = left
        self._right = right

    @property
    def left(self) -> Matrix:
        return self._left

    @property
    def right(self) -> Matrix:
        return self._right

    @property
    def row_size(self) -> int:
        return self._right.row_size

    @property
    def col_size(self) -> int:
        return self._left.col_size

    def get_column(self, index: int) -> View:
        check_index(index, self.row_size, "column")
        return self._left.apply(self._right.get_column(index))

    def get_row(self, index: int) -> View:
        check_index(index, self.col_size, "row")
        return self._right.transpose().apply(self._left.get_row(index))


class CachedMatrix(Matrix):
    """
    Wrapper remembering every row and column it has materialized.

    Meant to live inside a single decomposition pass: the QR engine wraps
    each partial product of its reflector chain, queries it, and drops the
    wrapper (and its memo) when the pass ends. Never handed to callers.
    """

    def __init__(self, matrix: Matrix):
        self._matrix = matrix
        self._rows: dict[int, NDArray[np.floating[Any]]] = {}
        self._columns: dict[int, NDArray[np.floating[Any]]] = {}

    @property
    def row_size(self) -> int:
        return self._matrix.row_size

    @property
    def col_size(self) -> int:
        return self._matrix.col_size

    def get_row(self, index: int) -> View:
        data = self._rows.get(index)
        if data is None:
            data = _frozen(self._matrix.get_row(index).to_array())
            self._rows[index] = data
        return ArrayView(data)

    def get_column(self, index: int) -> View:
        data = self._columns.get(index)
        if data is None:
            data = _frozen(self._matrix.get_column(index).to_array())
            self._columns[index] = data
        return ArrayView(data)


class EmbeddedMatrix(Matrix):
    """
    dim x dim operator equal to the identity except on its trailing
    k x k block, which is `block`.

    Rows and columns are one-hot views, optionally followed by a row or
    column of the block; no dim x dim table is ever allocated.
    """

    def __init__(self, block: Matrix, dim: int):
        self._block = block
        self._dim = dim

    @property
    def block(self) -> Matrix:
        return self._block

    @property
    def row_size(self) -> int:
        return self._dim

    @property
    def col_size(self) -> int:
        return self._dim

    def get_column(self, index: int) -> View:
        check_index(index, self._dim, "column")
        shift = self._dim - self._block.row_size
        if index < shift:
            return OneHotView(self._dim, index)
        head = OneHotView(self._dim - self._block.col_size, index)
        return head.then(self._block.get_column(index - shift))

    def get_row(self, index: int) -> View:
        check_index(index, self._dim, "row")
        shift = self._dim - self._block.col_size
        if index < shift:
            return OneHotView(self._dim, index)
        head = OneHotView(self._dim - self._block.row_size, index)
        return head.then(self._block.get_row(index - shift))


def _frozen(data: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    data.setflags(write=False)
    return data
