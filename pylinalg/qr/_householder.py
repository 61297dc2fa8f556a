"""
Householder QR kernels.

For a square A of size n, step `rank` (0 <= rank <= n - 2) takes column
`rank` of the current working matrix, restricted to rows rank..n-1, turns
it into the unit vector of a reflector that zeroes its sub-diagonal part,
and embeds that reflector into size n. The working matrix is then
left-multiplied by the new reflector.

Working matrices are CachedMatrix wrappers local to householder_chain();
their memo dies with the call.

References:
    Golub, G. H. & Van Loan, C. F. (2013). Matrix Computations, 4th ed.,
    section 5.1.2.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.protocols import Matrix
from pylinalg.matrix.composition import CachedMatrix
from pylinalg.matrix.coordinates import TableMatrix
from pylinalg.matrix.factory import embed, householder, identity, materialize


def _table(data: NDArray[np.floating[Any]]) -> TableMatrix:
    data.setflags(write=False)
    return TableMatrix(data)


def cancelling_vector(x: NDArray[np.floating[Any]]) -> bool:
    """
    Turn x, in place, into the unit vector v of the reflector I - 2 v v^T
    mapping x onto a multiple of e_0.

    The sign of the update of x[0] is opposite to x[0], which avoids
    cancellation when x is already close to a multiple of e_0.

    Args:
        x: Column slice, modified in place

    Returns:
        True when the norm of the updated vector has no finite reciprocal.
        x is then left as is (zero), which yields the identity reflector.
    """
    tail = float(np.linalg.norm(x[1:]))
    head = float(x[0])
    head += math.hypot(head, tail) * (1.0 if head < 0.0 else -1.0)
    x[0] = head

    norm = math.hypot(head, tail)
    with np.errstate(divide='ignore', over='ignore'):
        scale = np.float64(1.0) / np.float64(norm)
    if not np.isfinite(scale):
        return True

    x *= scale
    return False


def householder_step(working: Matrix, rank: int) -> tuple[Matrix, bool]:
    """
    Reflector H_rank for the current working matrix, embedded in size n.

    Returns:
        (H_rank, degenerate) where degenerate reports an identity step
    """
    n = working.col_size
    x = working.get_column(rank).sub_view(rank, n - rank).to_array()
    degenerate = cancelling_vector(x)
    return embed(householder(x), n), degenerate


def householder_chain(matrix: Matrix) -> tuple[list[Matrix], int]:
    """
    Reflectors [H_0, ..., H_{n-2}] triangularizing a square matrix.

    H_{n-2} ... H_1 H_0 A is upper triangular. A 1 x 1 matrix needs no
    reflector.

    Args:
        matrix: Square matrix A (not validated here)

    Returns:
        (chain, degenerate_steps)
    """
    n = matrix.col_size
    chain: list[Matrix] = []
    degenerate_steps = 0

    working: Matrix = CachedMatrix(matrix)
    for rank in range(n - 1):
        step, degenerate = householder_step(working, rank)
        chain.append(step)
        degenerate_steps += degenerate
        working = CachedMatrix(step.compose_left(working))

    return chain, degenerate_steps


def reduce_chain(chain: list[Matrix]) -> TableMatrix:
    """
    Q' = H_{k} ... H_1 H_0 for chain = [H_0, ..., H_k] (non-empty), reduced
    one factor at a time.

    Each partial product is materialized before the next reflector is
    applied, so no lazy chain deeper than one reflector is ever evaluated
    and the reduction costs O(k n^2) dot products of length n.
    """
    product = _table(materialize(chain[0]))
    for step in chain[1:]:
        product = _table(materialize(step.compose_left(product)))
    return product


def q_from_chain(chain: list[Matrix], n: int) -> Matrix:
    """
    Orthogonal factor Q = (H_{n-2} ... H_0)^T; the identity when n == 1.

    Q is the lazy transpose of the reduced table, so Q^T unwraps to that
    table and R = Q^T . A is a single product over it.
    """
    if not chain:
        return identity(n)
    return reduce_chain(chain).transpose()
