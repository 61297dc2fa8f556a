"""
CPU backend for Householder QR.

Builds the reflector chain lazily, reduces it factor by factor into the
dense table Q^T = H_{n-2} ... H_0, and derives Q and R from that table.
R stays the lazy product Q^T . A, so a full R costs O(n^3).
"""

from __future__ import annotations

from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.qr._common import QRParams
from pylinalg.qr._householder import householder_chain, q_from_chain
from pylinalg.qr.design import QRDesign


class CPUHouseholderBackend:
    """CPU backend computing A = QR through Householder reflections."""

    @property
    def name(self) -> str:
        return 'cpu_householder'

    def solve(self, design: QRDesign) -> Result[QRParams]:
        """Factorize design.matrix and return Result[QRParams]."""
        timer = Timer()
        timer.start()

        with timer.section('reflector_chain'):
            chain, degenerate_steps = householder_chain(design.matrix)

        with timer.section('compose_q'):
            q = q_from_chain(chain, design.n)
            # R = Q^T A; Q^T unwraps to the reduced table itself
            r = q.transpose().compose_left(design.matrix)

        timer.stop()

        params = QRParams(
            reflectors=tuple(chain),
            q=q,
            r=r,
            degenerate_steps=degenerate_steps,
        )

        return Result(
            params=params,
            info={
                'method': 'householder',
                'n': design.n,
                'steps': len(chain),
                'degenerate_steps': degenerate_steps,
            },
            timing=timer.result(),
            backend_name=self.name,
        )
