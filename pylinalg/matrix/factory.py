"""
Matrix construction.

Entry points that turn user data into Matrix objects, plus the two
operator builders the QR engine relies on:

    from_table   dense table -> TableMatrix (validated, read-only copy)
    as_matrix    Matrix passthrough, anything else through from_table
    householder  unit vector v -> formula-backed I - 2 v v^T
    embed        k x k block -> trailing block of a dim x dim identity
    mult         lazy product
    identity     n x n identity, from one-hot views only
    materialize  any matrix -> dense ndarray snapshot
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.protocols import Matrix
from pylinalg.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_non_empty,
    check_square,
    check_non_negative,
)
from pylinalg.matrix.composition import EmbeddedMatrix
from pylinalg.matrix.coordinates import TableMatrix, HouseholderMatrix


def from_table(table: ArrayLike) -> TableMatrix:
    """
    Build a matrix from a rectangular table of real numbers.

    The table is copied and the copy made read-only, so later changes to
    `table` are not visible through the matrix.

    Args:
        table: 2-D array-like, e.g. a list of equally long lists

    Returns:
        TableMatrix with col_size = len(table) and row_size = len(table[0])

    Raises:
        ValidationError: If the table is ragged, non-numeric or non-finite
        DimensionError: If the table is not 2-D or has an empty axis
    """
    data = check_array(table, "table")
    check_2d(data, "table")
    check_non_empty(data, "table")
    check_finite(data, "table")
    data = np.array(data, dtype=np.float64, copy=True)
    data.setflags(write=False)
    return TableMatrix(data)


def as_matrix(data: Matrix | ArrayLike) -> Matrix:
    """Pass Matrix objects through; build a TableMatrix from anything else."""
    if isinstance(data, Matrix):
        return data
    return from_table(data)


def householder(vector: ArrayLike) -> HouseholderMatrix:
    """
    Householder reflector H = I - 2 v v^T.

    `vector` is expected to be normalized already; it is not rescaled.
    For a unit vector H is symmetric, orthogonal and involutive. An empty
    vector gives the 0 x 0 reflector.

    Args:
        vector: 1-D array-like v

    Returns:
        HouseholderMatrix of size len(vector), entries computed on access
    """
    data = check_array(vector, "vector")
    check_1d(data, "vector")
    check_finite(data, "vector")
    data = np.array(data, dtype=np.float64, copy=True)
    data.setflags(write=False)
    return HouseholderMatrix(data)


def embed(block: Matrix, dim: int) -> EmbeddedMatrix:
    """
    Place a square block as the trailing principal block of a dim x dim
    operator whose leading (dim - k) rows and columns are the identity.

    Args:
        block: k x k matrix
        dim: Size of the result, dim >= k

    Returns:
        EmbeddedMatrix of size dim

    Raises:
        DimensionError: If block is not square or larger than dim
    """
    check_square(block, "block")
    check_non_negative(dim, "dim")
    if dim < block.row_size:
        raise DimensionError(
            f"dim: {dim} is smaller than the block size {block.row_size}"
        )
    return EmbeddedMatrix(block, dim)


def mult(left: Matrix, right: Matrix) -> Matrix:
    """Lazy product left . right; same as left.compose_left(right)."""
    return left.compose_left(right)


def identity(n: int) -> EmbeddedMatrix:
    """n x n identity: the empty reflector embedded in size n."""
    return embed(HouseholderMatrix(np.empty(0, dtype=np.float64)), n)


def materialize(matrix: Matrix) -> NDArray[np.floating[Any]]:
    """
    Dense snapshot of a matrix, evaluated row by row.

    Returns:
        New writable float64 array of shape (col_size, row_size)
    """
    data = np.empty((matrix.col_size, matrix.row_size), dtype=np.float64)
    for i in range(matrix.col_size):
        data[i] = matrix.get_row(i).to_array()
    return data
