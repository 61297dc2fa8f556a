"""
Common data types for the eigen solver.

EigenParams is the frozen parameter payload that goes inside Result[P]
envelopes and is exposed through EigenSolution.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for a shifted QR eigenvalue iteration.

    - eigenvalues: diagonal of the final table, sorted by decreasing |.|
    - diagonal: the same values in table order
    - table: final working table
    - converged: every strictly-lower entry of the final table is below
      the sensitivity
    - iterations: QR steps performed
    - remaining_iterations: budget left; 0 when it ran out
    - shifts: shift used at each step
    - max_subdiagonal: largest |entry| below the diagonal of the final table
    """
    eigenvalues: NDArray[np.floating[Any]]     # (n,)
    diagonal: NDArray[np.floating[Any]]        # (n,)
    table: NDArray[np.floating[Any]]           # (n, n)
    converged: bool
    iterations: int
    remaining_iterations: int
    shifts: tuple[float, ...]
    max_subdiagonal: float
