"""
Building blocks of the shifted QR iteration.

One step on the working table C with shift s:

    C - sI = QR,  Q = (H_{n-2} ... H_0)^T
    next   = RQ + sI = Q' (C - sI) Q'^T + sI,  Q' = H_{n-2} ... H_0

Q' is reduced factor by factor (qr._householder.reduce_chain), each
partial product materialized as a table.

Only real eigenvalues are recovered: the iteration drives C towards
upper triangular form, which a real matrix with complex eigenvalues
never reaches.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.matrix.coordinates import TableMatrix
from pylinalg.matrix.factory import materialize
from pylinalg.qr._householder import householder_chain, reduce_chain


def _table(data: NDArray[np.floating[Any]]) -> TableMatrix:
    data.setflags(write=False)
    return TableMatrix(data)


def is_upper_triangular(table: NDArray[np.floating[Any]], sensitivity: float) -> bool:
    """True when every strictly-lower entry has magnitude < sensitivity."""
    return bool(np.all(np.abs(np.tril(table, k=-1)) < sensitivity))


def max_subdiagonal(table: NDArray[np.floating[Any]]) -> float:
    """Largest magnitude below the diagonal (0.0 for a 1 x 1 table)."""
    return float(np.max(np.abs(np.tril(table, k=-1)), initial=0.0))


def shifted_qr_step(
    table: NDArray[np.floating[Any]],
    shift: float,
) -> NDArray[np.floating[Any]]:
    """
    One shifted QR step; returns a new table, `table` is left untouched.
    """
    n = table.shape[0]
    shifted = table - shift * np.eye(n)
    if n == 1:
        return shifted + shift

    shifted_matrix = _table(shifted)
    chain, _ = householder_chain(shifted_matrix)
    q_bis = reduce_chain(chain)

    r = _table(materialize(q_bis.compose_left(shifted_matrix)))
    result = materialize(r.compose_left(q_bis.transpose()))
    result[np.diag_indices(n)] += shift
    return result


def sort_by_magnitude(values: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Values sorted by decreasing absolute value; ties keep their order."""
    order = np.argsort(-np.abs(values), kind='stable')
    return values[order]
