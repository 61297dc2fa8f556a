"""
Lazy matrix and vector views.

Public API:
    from_table()   — dense table to matrix
    as_matrix()    — accept a Matrix or a table
    householder()  — formula-backed Householder reflector
    embed()        — identity augmentation of a square block
    mult()         — lazy product
    identity()     — identity operator
    materialize()  — dense snapshot of any matrix
    view_of()      — vector view over a copy of some values
"""

from pylinalg.matrix.factory import (
    from_table,
    as_matrix,
    householder,
    embed,
    mult,
    identity,
    materialize,
)
from pylinalg.matrix.views import (
    ArrayView,
    SubView,
    ConcatView,
    OneHotView,
    ApplyView,
    view_of,
)
from pylinalg.matrix.coordinates import TableMatrix, HouseholderMatrix, RowSlice
from pylinalg.matrix.composition import (
    TransposedMatrix,
    ProductMatrix,
    CachedMatrix,
    EmbeddedMatrix,
)

__all__ = [
    # Factory
    "from_table",
    "as_matrix",
    "householder",
    "embed",
    "mult",
    "identity",
    "materialize",
    # Views
    "ArrayView",
    "SubView",
    "ConcatView",
    "OneHotView",
    "ApplyView",
    "view_of",
    # Matrices
    "TableMatrix",
    "HouseholderMatrix",
    "RowSlice",
    "TransposedMatrix",
    "ProductMatrix",
    "CachedMatrix",
    "EmbeddedMatrix",
]
