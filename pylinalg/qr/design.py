"""
Design class for Householder QR.

QRDesign wraps the matrix to factorize. Immutable, validated at
construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from numpy.typing import ArrayLike

from pylinalg.core.protocols import Matrix
from pylinalg.core.validation import check_square
from pylinalg.matrix.factory import as_matrix


@dataclass(frozen=True)
class QRDesign:
    """
    Frozen design for a QR factorization.

    Attributes:
        matrix: Square matrix A, possibly lazy
    """
    matrix: Matrix

    @classmethod
    def for_matrix(cls, matrix: Matrix | ArrayLike) -> QRDesign:
        """
        Create a QR design with validation.

        Args:
            matrix: Matrix object, or a 2-D array-like table

        Returns:
            Validated QRDesign.

        Raises:
            DimensionError: If the matrix is not square
            ValidationError: If a table is not numeric and finite
        """
        m = as_matrix(matrix)
        check_square(m, "matrix")
        return cls(matrix=m)

    @property
    def n(self) -> int:
        return self.matrix.row_size

    @property
    def metadata(self) -> dict[str, Any]:
        return {'n': self.n, 'matrix_type': type(self.matrix).__name__}
