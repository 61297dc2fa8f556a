"""
Solution wrapper for eigenvalue results.

EigenSolution wraps Result[EigenParams] and provides convenient
accessors, convergence handling and a short text summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import ConvergenceError
from pylinalg.core.result import Result
from pylinalg.eigen._common import EigenParams

if TYPE_CHECKING:
    from pylinalg.eigen.design import EigenDesign


@dataclass
class EigenSolution:
    """
    User-facing eigenvalue estimates from shifted QR iteration.

    Meaningful for matrices with real eigenvalues only; for a real matrix
    with complex eigenvalues the iteration cannot converge and the
    diagonal carries no eigenvalue information.
    """
    _result: Result[EigenParams]
    _design: 'EigenDesign'

    # --- Estimates ---

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        """Eigenvalue estimates sorted by decreasing absolute value, shape (n,)."""
        return self._result.params.eigenvalues

    @property
    def diagonal(self) -> NDArray[np.floating[Any]]:
        """Diagonal of the final working table, unsorted."""
        return self._result.params.diagonal

    @property
    def table(self) -> NDArray[np.floating[Any]]:
        """Final working table, (quasi-)upper triangular on convergence."""
        return self._result.params.table

    @property
    def strength(self) -> NDArray[np.floating[Any]]:
        """
        Cumulative share of the absolute eigenvalue mass.

        strength[k] is sum(|w[:k+1]|) / sum(|w|) for the sorted estimates w;
        the last entry is 1 (all zeros for the zero matrix).
        """
        magnitudes = np.abs(self.eigenvalues)
        total = magnitudes.sum()
        if total == 0:
            return np.zeros_like(magnitudes)
        return np.cumsum(magnitudes) / total

    # --- Convergence ---

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def remaining_iterations(self) -> int:
        """Unused iteration budget; 0 means the budget ran out."""
        return self._result.params.remaining_iterations

    @property
    def shifts(self) -> tuple[float, ...]:
        return self._result.params.shifts

    @property
    def max_subdiagonal(self) -> float:
        return self._result.params.max_subdiagonal

    def raise_if_not_converged(self) -> None:
        """
        Raise ConvergenceError unless the iteration converged.

        Raises:
            ConvergenceError: With iterations, residual and threshold attached
        """
        if self.converged:
            return
        raise ConvergenceError(
            f"Shifted QR iteration did not converge in {self.iterations} "
            f"iterations (largest sub-diagonal entry {self.max_subdiagonal:.3e}, "
            f"sensitivity {self._design.sensitivity:g})",
            iterations=self.iterations,
            final_change=self.max_subdiagonal,
            reason='max_iterations',
            threshold=self._design.sensitivity,
        )

    # --- Metadata ---

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Display ---

    def summary(self) -> str:
        """
        Text summary of the estimates.

        Produces:
            Shifted QR eigenvalue iteration (converged in 14 of 50 iterations)

                 eigenvalue   strength
            1    156.136701     0.7565
            2    -34.196675     0.9222
            3     16.059974     1.0000
        """
        if self.converged:
            status = (
                f"converged in {self.iterations} of "
                f"{self._design.iteration_bound} iterations"
            )
        else:
            status = (
                f"NOT converged after {self.iterations} iterations, "
                f"largest sub-diagonal entry {self.max_subdiagonal:.3e}"
            )

        lines = [f"Shifted QR eigenvalue iteration ({status})", ""]
        lines.append(f"{'':4s}{'eigenvalue':>12s}{'strength':>11s}")
        for i, (value, share) in enumerate(zip(self.eigenvalues, self.strength), 1):
            lines.append(f"{i:<4d}{value:12.6f}{share:11.4f}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EigenSolution(n={self.n}, converged={self.converged}, "
            f"iterations={self.iterations})"
        )
