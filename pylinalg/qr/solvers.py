"""
Solver dispatch for Householder QR.

Public API:
    qr()                 — full factorization as a QRSolution
    reflector_chain()    — the Householder reflectors H_0 ... H_{n-2}
    orthogonal_factor()  — the orthogonal factor Q
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pylinalg.core.protocols import Matrix
from pylinalg.qr._householder import householder_chain, q_from_chain
from pylinalg.qr.backends.cpu import CPUHouseholderBackend
from pylinalg.qr.design import QRDesign
from pylinalg.qr.solution import QRSolution


def _ensure_design(matrix: Matrix | ArrayLike | QRDesign) -> QRDesign:
    """Convert raw input to QRDesign if needed."""
    if isinstance(matrix, QRDesign):
        return matrix
    return QRDesign.for_matrix(matrix)


def reflector_chain(matrix: Matrix | ArrayLike) -> list[Matrix]:
    """
    Householder reflectors triangularizing a square matrix.

    Args:
        matrix: Square Matrix, or a 2-D array-like table

    Returns:
        [H_0, ..., H_{n-2}], each n x n; empty for a 1 x 1 matrix.
        H_{n-2} ... H_0 A is upper triangular.

    Raises:
        DimensionError: If the matrix is not square
    """
    design = _ensure_design(matrix)
    chain, _ = householder_chain(design.matrix)
    return chain


def orthogonal_factor(matrix: Matrix | ArrayLike) -> Matrix:
    """
    Orthogonal factor Q of A = QR, as a lazy matrix.

    R is not returned; it is Q^T . A, i.e.
    orthogonal_factor(A).transpose().compose_left(A).

    Raises:
        DimensionError: If the matrix is not square
    """
    design = _ensure_design(matrix)
    chain, _ = householder_chain(design.matrix)
    return q_from_chain(chain, design.n)


def qr(matrix: Matrix | ArrayLike | QRDesign) -> QRSolution:
    """
    QR decomposition through Householder reflections.

    Parameters
    ----------
    matrix : Matrix, array-like or QRDesign
        Square matrix A.

    Returns
    -------
    QRSolution with lazy q and r, the reflector chain and timing.
    """
    design = _ensure_design(matrix)
    result = CPUHouseholderBackend().solve(design)
    return QRSolution(_result=result, _design=design)
