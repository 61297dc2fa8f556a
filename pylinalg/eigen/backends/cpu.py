"""
CPU backend for the shifted QR eigenvalue iteration.

States: iterating -> converged | exhausted. Each iteration checks the
working table for convergence, asks the shift heuristic for s, runs one
shifted QR step and replaces the table with the result. Running out of
iterations is not an error; it is reported through the remaining budget,
the converged flag and a warning string on the Result. A table that
meets the sensitivity only after the last allowed step is converged with
no budget left.
"""

from __future__ import annotations

import math

import numpy as np

from pylinalg.core.exceptions import NumericalError
from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.eigen._common import EigenParams
from pylinalg.eigen._iteration import (
    is_upper_triangular,
    max_subdiagonal,
    shifted_qr_step,
    sort_by_magnitude,
)
from pylinalg.eigen.design import EigenDesign
from pylinalg.matrix.factory import materialize


class CPUShiftedQRBackend:
    """CPU backend running shifted QR iteration on a dense working table."""

    @property
    def name(self) -> str:
        return 'cpu_shifted_qr'

    def solve(self, design: EigenDesign) -> Result[EigenParams]:
        """Run the iteration and return Result[EigenParams]."""
        timer = Timer()
        timer.start()

        with timer.section('materialize'):
            table = materialize(design.matrix)

        bound = design.iteration_bound
        sensitivity = design.sensitivity
        iterations = 0
        converged = False
        shifts: list[float] = []

        while iterations < bound:
            if is_upper_triangular(table, sensitivity):
                converged = True
                break

            with timer.section('shift'):
                snapshot = table.view()
                snapshot.setflags(write=False)
                s = float(design.shift(snapshot))
            if not math.isfinite(s):
                raise NumericalError(
                    f"shift function returned a non-finite value ({s}) "
                    f"at iteration {iterations}"
                )
            shifts.append(s)

            with timer.section('qr_step'):
                table = shifted_qr_step(table, s)
            iterations += 1

            if not np.all(np.isfinite(table)):
                raise NumericalError(
                    f"working table became non-finite at iteration {iterations}"
                )

        # The last step may have reached the sensitivity; the budget stays spent
        if not converged:
            converged = is_upper_triangular(table, sensitivity)

        with timer.section('extract'):
            diagonal = np.diagonal(table).copy()
            eigenvalues = sort_by_magnitude(diagonal)

        timer.stop()

        residual = max_subdiagonal(table)
        warnings_list: list[str] = []
        if not converged:
            warnings_list.append(
                f"Shifted QR iteration did not reach sensitivity {sensitivity:g} "
                f"within {bound} iterations (largest sub-diagonal entry "
                f"{residual:.3e})"
            )

        params = EigenParams(
            eigenvalues=eigenvalues,
            diagonal=diagonal,
            table=table,
            converged=converged,
            iterations=iterations,
            remaining_iterations=bound - iterations,
            shifts=tuple(shifts),
            max_subdiagonal=residual,
        )

        return Result(
            params=params,
            info={
                'method': 'shifted_qr',
                'n': design.n,
                'converged': converged,
                'iterations': iterations,
                'iteration_bound': bound,
                'sensitivity': sensitivity,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
