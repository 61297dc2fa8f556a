"""
Solver dispatch for the eigen solver.

Public API:
    eigvals()  — eigenvalue estimates as an EigenSolution
    solve()    — same iteration, writing into a caller-provided buffer
"""

from __future__ import annotations

import warnings
from typing import Any, MutableSequence

from numpy.typing import ArrayLike

from pylinalg.core.compute.tolerances import (
    DEFAULT_ITERATION_BOUND,
    DEFAULT_SENSITIVITY,
)
from pylinalg.core.protocols import Matrix
from pylinalg.core.validation import check_buffer_length
from pylinalg.eigen.backends.cpu import CPUShiftedQRBackend
from pylinalg.eigen.design import EigenDesign
from pylinalg.eigen.shifts import ShiftFunction, wilkinson_shift
from pylinalg.eigen.solution import EigenSolution


def solve(
    matrix: Matrix | ArrayLike,
    iteration_bound: int,
    sensitivity: float,
    shift: ShiftFunction,
    out: MutableSequence[Any],
) -> int:
    """
    Estimate the eigenvalues of a square matrix by shifted QR iteration.

    Args:
        matrix: Square Matrix, or a 2-D array-like table, size n
        iteration_bound: Maximum number of QR steps
        sensitivity: Convergence threshold on strictly-lower entries
        shift: Shift heuristic, e.g. wilkinson_shift
        out: Buffer of length n, overwritten with the estimates sorted by
            decreasing absolute value

    Returns:
        Remaining iteration budget. Positive when convergence was detected
        before the budget ran out; 0 when the budget is spent (the
        estimates are then a best-effort result unless the last step
        happened to reach the sensitivity).

    Raises:
        DimensionError: If the matrix is not square or len(out) != n
        ValidationError: If another argument is invalid
    """
    design = EigenDesign.for_matrix(
        matrix,
        iteration_bound=iteration_bound,
        sensitivity=sensitivity,
        shift=shift,
    )
    check_buffer_length(out, design.n, "out")

    result = CPUShiftedQRBackend().solve(design)
    out[:] = result.params.eigenvalues.tolist()
    return result.params.remaining_iterations


def eigvals(
    matrix: Matrix | ArrayLike,
    *,
    iteration_bound: int = DEFAULT_ITERATION_BOUND,
    sensitivity: float = DEFAULT_SENSITIVITY,
    shift: ShiftFunction = wilkinson_shift,
) -> EigenSolution:
    """
    Eigenvalues of a square real matrix by shifted QR iteration.

    Only real eigenvalues are recovered. A RuntimeWarning is emitted when
    the iteration budget runs out before convergence; call
    raise_if_not_converged() on the result to turn that into an error.

    Parameters
    ----------
    matrix : Matrix or array-like
        Square matrix.
    iteration_bound : int
        Maximum number of QR steps.
    sensitivity : float
        Strictly-lower entries below this magnitude count as zero.
    shift : callable
        Shift heuristic mapping the working table to a scalar.

    Returns
    -------
    EigenSolution
    """
    design = EigenDesign.for_matrix(
        matrix,
        iteration_bound=iteration_bound,
        sensitivity=sensitivity,
        shift=shift,
    )
    result = CPUShiftedQRBackend().solve(design)

    if not result.params.converged:
        warnings.warn(
            f"Shifted QR iteration did not converge after {result.params.iterations} "
            f"iterations (largest sub-diagonal entry "
            f"{result.params.max_subdiagonal:.3e}).",
            RuntimeWarning,
            stacklevel=2,
        )

    return EigenSolution(_result=result, _design=design)
