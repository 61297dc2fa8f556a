"""
Design class for the eigen solver.

EigenDesign encapsulates all inputs needed by backends to run the
shifted QR iteration. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import Matrix
from pylinalg.core.validation import (
    check_square,
    check_non_negative,
    check_positive,
)
from pylinalg.eigen.shifts import ShiftFunction
from pylinalg.matrix.factory import as_matrix


@dataclass(frozen=True)
class EigenDesign:
    """
    Frozen design for the shifted QR eigenvalue iteration.

    Attributes:
        matrix: Square matrix A, possibly lazy
        iteration_bound: Maximum number of QR steps
        sensitivity: Threshold below which strictly-lower entries count as zero
        shift: Shift heuristic, table -> float
    """
    matrix: Matrix
    iteration_bound: int
    sensitivity: float
    shift: ShiftFunction

    @classmethod
    def for_matrix(
        cls,
        matrix: Matrix | ArrayLike,
        iteration_bound: int,
        sensitivity: float,
        shift: ShiftFunction,
    ) -> EigenDesign:
        """
        Create an eigen design with validation.

        Args:
            matrix: Square Matrix, or a 2-D array-like table
            iteration_bound: Maximum number of QR steps, >= 0
            sensitivity: Convergence threshold, finite and > 0
            shift: Callable mapping the working table to a scalar

        Returns:
            Validated EigenDesign.

        Raises:
            DimensionError: If the matrix is not square
            ValidationError: If any other input is invalid
        """
        m = as_matrix(matrix)
        check_square(m, "matrix")

        if isinstance(iteration_bound, bool) or not isinstance(
            iteration_bound, (int, np.integer)
        ):
            raise ValidationError(
                f"iteration_bound: expected an integer, got {type(iteration_bound).__name__}"
            )
        check_non_negative(int(iteration_bound), "iteration_bound")
        check_positive(float(sensitivity), "sensitivity")

        if not callable(shift):
            raise ValidationError(
                f"shift: expected a callable, got {type(shift).__name__}"
            )

        return cls(
            matrix=m,
            iteration_bound=int(iteration_bound),
            sensitivity=float(sensitivity),
            shift=shift,
        )

    @property
    def n(self) -> int:
        return self.matrix.row_size

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'n': self.n,
            'iteration_bound': self.iteration_bound,
            'sensitivity': self.sensitivity,
            'shift': getattr(self.shift, '__name__', type(self.shift).__name__),
        }
