"""
Lazy vector views.

Every type here implements the View protocol: a restartable sequence of
floats. Views are cheap to build and hold only references to their
sources plus a little index state; no backing data is copied until
to_array() is called.

    ArrayView   array-backed, O(1) sub_view by slicing
    SubView     window over any view, O(skip) per traversal
    ConcatView  a followed by b (sub_view is not specialised)
    OneHotView  single 1.0 at a position, zeros elsewhere, O(1) sub_view
    ApplyView   lazy matrix-vector product
"""

from __future__ import annotations

import itertools
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.protocols import View
from pylinalg.core.validation import (
    check_array,
    check_1d,
    check_non_negative,
)

if TYPE_CHECKING:
    from pylinalg.core.protocols import Matrix


def _check_window(skip: int, length: int) -> None:
    check_non_negative(skip, "skip")
    check_non_negative(length, "length")


class ArrayView(View):
    """
    View over a 1-D float array.

    The array is referenced, not copied; callers that hand over data they
    may still mutate should go through view_of().
    """

    def __init__(self, data: NDArray[np.floating[Any]]):
        self._data = data

    def __len__(self) -> int:
        return self._data.shape[0]

    def iterate(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def to_array(self) -> NDArray[np.floating[Any]]:
        return np.array(self._data, dtype=np.float64, copy=True)

    def sub_view(self, skip: int, length: int) -> View:
        _check_window(skip, length)
        return ArrayView(self._data[skip:skip + length])


class SubView(View):
    """
    Window of at most `length` elements after `skip` elements of a source.

    The source may not support random access, so each traversal consumes
    the first `skip` elements of a fresh source traversal.
    """

    def __init__(self, source: View, skip: int, length: int):
        _check_window(skip, length)
        self._source = source
        self._skip = skip
        self._length = length

    def iterate(self) -> Iterator[float]:
        return itertools.islice(
            self._source.iterate(), self._skip, self._skip + self._length
        )

    def sub_view(self, skip: int, length: int) -> View:
        # sub_view(sub_view(v, s1, l1), s2, l2) == sub_view(v, s1 + s2, l2)
        # whenever s2 + l2 <= l1; otherwise the inner window still bounds it.
        _check_window(skip, length)
        length = min(length, max(self._length - skip, 0))
        return self._source.sub_view(self._skip + skip, length)


class ConcatView(View):
    """Concatenation of two views; each traversal restarts both parts."""

    def __init__(self, first: View, second: View):
        self._first = first
        self._second = second

    def iterate(self) -> Iterator[float]:
        # The second traversal only starts once the first is exhausted.
        return itertools.chain.from_iterable((self._first, self._second))


class OneHotView(View):
    """
    `length` entries, all zero except a 1.0 at `position`.

    A position outside [0, length) yields the zero vector. These are the
    identity slices used to glue an identity block onto a smaller matrix.
    """

    def __init__(self, length: int, position: int):
        check_non_negative(length, "length")
        self._length = length
        self._position = position

    def __len__(self) -> int:
        return self._length

    def iterate(self) -> Iterator[float]:
        position = self._position
        return (1.0 if i == position else 0.0 for i in range(self._length))

    def to_array(self) -> NDArray[np.floating[Any]]:
        data = np.zeros(self._length, dtype=np.float64)
        if 0 <= self._position < self._length:
            data[self._position] = 1.0
        return data

    def sub_view(self, skip: int, length: int) -> View:
        _check_window(skip, length)
        length = min(length, max(self._length - skip, 0))
        return OneHotView(length, self._position - skip)


class ApplyView(View):
    """
    Lazy product matrix . vector.

    Each traversal materializes the vector once, then yields one dot
    product per row of the matrix, pulling rows on demand.
    """

    def __init__(self, matrix: Matrix, vector: View):
        self._matrix = matrix
        self._vector = vector

    def __len__(self) -> int:
        return self._matrix.col_size

    def iterate(self) -> Iterator[float]:
        vec = self._vector.to_array()
        if vec.shape[0] != self._matrix.row_size:
            raise DimensionError(
                f"vector: length {vec.shape[0]} does not match matrix row size "
                f"{self._matrix.row_size}"
            )
        return self._dot_rows(vec)

    def _dot_rows(self, vec: NDArray[np.floating[Any]]) -> Iterator[float]:
        matrix = self._matrix
        for i in range(matrix.col_size):
            yield float(np.dot(matrix.get_row(i).to_array(), vec))


def view_of(values: ArrayLike) -> ArrayView:
    """
    Build a view over a copy of `values`.

    Args:
        values: 1-D array-like of real numbers

    Returns:
        ArrayView over a read-only float64 copy

    Raises:
        ValidationError: If values are not numeric
        DimensionError: If values are not 1-D
    """
    data = check_array(values, "values")
    check_1d(data, "values")
    data = np.array(data, dtype=np.float64, copy=True)
    data.setflags(write=False)
    return ArrayView(data)
