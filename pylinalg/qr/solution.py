"""
Solution wrapper for QR results.

QRSolution wraps Result[QRParams] and provides accessors for the lazy
factors plus dense snapshots on request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.protocols import Matrix
from pylinalg.core.result import Result
from pylinalg.matrix.factory import materialize
from pylinalg.qr._common import QRParams

if TYPE_CHECKING:
    from pylinalg.qr.design import QRDesign


@dataclass
class QRSolution:
    """
    User-facing QR factorization A = QR.

    q and r are lazy matrices; q_table() and r_table() evaluate them.
    """
    _result: Result[QRParams]
    _design: 'QRDesign'

    @property
    def q(self) -> Matrix:
        """Orthogonal factor Q = (H_{n-2} ... H_0)^T."""
        return self._result.params.q

    @property
    def r(self) -> Matrix:
        """Upper triangular factor R = Q^T A."""
        return self._result.params.r

    @property
    def reflectors(self) -> tuple[Matrix, ...]:
        """Householder reflectors H_0 ... H_{n-2}, each n x n."""
        return self._result.params.reflectors

    @property
    def degenerate_steps(self) -> int:
        return self._result.params.degenerate_steps

    @property
    def matrix(self) -> Matrix:
        """The factorized matrix A."""
        return self._design.matrix

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

    def q_table(self) -> NDArray[np.floating[Any]]:
        """Dense copy of Q."""
        return materialize(self.q)

    def r_table(self) -> NDArray[np.floating[Any]]:
        """Dense copy of R."""
        return materialize(self.r)

    def reconstruction(self) -> Matrix:
        """Lazy Q . R, equal to A up to rounding."""
        return self.q.compose_left(self.r)

    def summary(self) -> str:
        """Short description of the factorization."""
        lines = [
            "Householder QR decomposition",
            f"  size:              {self.n} x {self.n}",
            f"  reflectors:        {len(self.reflectors)}",
            f"  degenerate steps:  {self.degenerate_steps}",
            f"  backend:           {self.backend_name}",
        ]
        if self.timing is not None:
            lines.append(f"  elapsed:           {self.timing['total_seconds']:.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"QRSolution(n={self.n}, reflectors={len(self.reflectors)})"
