"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)

if TYPE_CHECKING:
    from pylinalg.core.protocols import Matrix


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (ragged tables, mixed types or
    non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating a ragged table, "
            f"mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    # Complex input is outside what the solvers handle
    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_non_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every axis of the array has at least one element.

    Raises:
        DimensionError: If any axis has length zero
    """
    if 0 in array.shape:
        raise DimensionError(f"{name}: empty array with shape {array.shape}")


def check_square(matrix: 'Matrix', name: str) -> None:
    """
    Verify a matrix has as many rows as columns.

    Args:
        matrix: Matrix to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If the matrix is not square
    """
    if matrix.row_size != matrix.col_size:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape "
            f"({matrix.col_size}, {matrix.row_size})"
        )


def check_index(index: int, size: int, name: str) -> None:
    """
    Verify 0 <= index < size.

    Raises:
        IndexOutOfRangeError: If the index falls outside [0, size)
    """
    if not 0 <= index < size:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range [0, {size})",
            index=index,
            size=size,
        )


def check_non_negative(value: int, name: str) -> None:
    """
    Verify an integer count is >= 0.

    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")


def check_positive(value: float, name: str) -> None:
    """
    Verify a scalar is finite and strictly positive.

    Raises:
        ValidationError: If value is NaN, infinite or <= 0
    """
    if not (math.isfinite(value) and value > 0):
        raise ValidationError(f"{name}: must be a finite value > 0, got {value}")


def check_buffer_length(buffer: Any, expected: int, name: str) -> None:
    """
    Verify a caller-provided output buffer has exactly the expected length.

    Raises:
        DimensionError: If len(buffer) != expected
    """
    if len(buffer) != expected:
        raise DimensionError(
            f"{name}: buffer length {len(buffer)} does not match matrix size {expected}"
        )
