"""
Householder QR decomposition.

Public API:
    qr()                 — factorize A = QR, returns QRSolution
    reflector_chain()    — Householder reflectors H_0 ... H_{n-2}
    orthogonal_factor()  — lazy orthogonal factor Q
    QRSolution           — result wrapper
"""

from pylinalg.qr.solvers import qr, reflector_chain, orthogonal_factor
from pylinalg.qr.solution import QRSolution
from pylinalg.qr.design import QRDesign

__all__ = [
    "qr",
    "reflector_chain",
    "orthogonal_factor",
    "QRSolution",
    "QRDesign",
]
