"""
Core protocols for PyLinalg.

These define structural interfaces that domain-specific implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.

View and Matrix also carry default method bodies. Concrete types in
pylinalg.matrix subclass exactly one of them to inherit those defaults
and override what they can do better (O(1) sub-views, self-transposition);
the defaults themselves only build the named lazy types of
pylinalg.matrix, so there is no deeper hierarchy than that single level.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Lazy by default: nothing here materializes more than one row or column
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Iterator, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class View(Protocol):
    """
    Lazy, restartable sequence of floats.

    A view does not necessarily know its length. Every call to iterate()
    (or iter(view)) starts a fresh traversal from the first element, so the
    same view can be consumed any number of times.
    """

    def iterate(self) -> Iterator[float]:
        """Return a fresh iterator positioned on the first element."""
        ...

    def __iter__(self) -> Iterator[float]:
        return self.iterate()

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Materialize a new float64 array; later changes cannot leak in."""
        return np.fromiter(self.iterate(), dtype=np.float64)

    def sub_view(self, skip: int, length: int) -> 'View':
        """
        View of at most `length` elements starting after `skip` elements.

        The default consumes the leading elements on each traversal, so it
        costs O(skip). Random-access views override it with an O(1) slice.
        """
        from pylinalg.matrix.views import SubView
        return SubView(self, skip, length)

    def then(self, other: 'View') -> 'View':
        """Concatenation: this view to exhaustion, then `other`."""
        from pylinalg.matrix.views import ConcatView
        return ConcatView(self, other)


@runtime_checkable
class Matrix(Protocol):
    """
    Immutable real matrix exposed through row and column views.

    Size convention (kept throughout the package):
        row_size: number of entries in a row, i.e. the number of columns
        col_size: number of entries in a column, i.e. the number of rows

    shape returns (col_size, row_size), the NumPy (rows, columns) order.
    """

    @property
    def row_size(self) -> int:
        ...

    @property
    def col_size(self) -> int:
        ...

    def get_row(self, index: int) -> View:
        """Row `index`, a view of length row_size; 0 <= index < col_size."""
        ...

    def get_column(self, index: int) -> View:
        """Column `index`, a view of length col_size; 0 <= index < row_size."""
        ...

    @property
    def shape(self) -> tuple[int, int]:
        return (self.col_size, self.row_size)

    def transpose(self) -> 'Matrix':
        """
        Lazy transpose.

        m.transpose().transpose() is m: the wrapper unwraps instead of
        nesting, however many times it is applied.
        """
        from pylinalg.matrix.composition import TransposedMatrix
        return TransposedMatrix(self)

    def apply(self, vector: View) -> View:
        """Lazy matrix-vector product: y_i = row_i . vector."""
        from pylinalg.matrix.views import ApplyView
        return ApplyView(self, vector)

    def compose_left(self, right: 'Matrix') -> 'Matrix':
        """
        Lazy product self . right.

        Nothing is multiplied here; rows and columns of the product are
        derived from the factors when queried.
        """
        from pylinalg.matrix.composition import ProductMatrix
        return ProductMatrix(self, right)


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design and produce
    a domain-specific parameter payload.

    Backends are stateless—all configuration is passed via the design
    or at construction time. This makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_householder', 'cpu_shifted_qr'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Domain-specific, validated input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ValidationError: If design is invalid for this backend
        """
        ...
