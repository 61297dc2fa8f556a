"""
Common data types for Householder QR.

QRParams is the frozen parameter payload that goes inside Result[P]
envelopes and is exposed through QRSolution.
"""

from dataclasses import dataclass

from pylinalg.core.protocols import Matrix


@dataclass(frozen=True)
class QRParams:
    """
    Parameter payload for a Householder QR factorization A = QR.

    - reflectors: H_0 ... H_{n-2}, each n x n and non-trivial only on its
      trailing (n - rank) block
    - q: (H_{n-2} ... H_1 H_0)^T, lazy transpose of the reduced table
    - r: Q^T . A, lazy; R is never stored on its own
    - degenerate_steps: steps whose column was already reduced, so the
      reflector collapsed to the identity
    """
    reflectors: tuple[Matrix, ...]
    q: Matrix
    r: Matrix
    degenerate_steps: int
