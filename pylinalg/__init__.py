"""
PyLinalg: lazy matrices, Householder QR and shifted QR eigenvalues.

Matrices and vectors are lazy views that compose by reference: products,
transposes and Householder reflectors are evaluated one row or column at
a time, on demand.

Submodules:
    matrix: Views, lazy matrices and their construction
    qr: Householder QR decomposition
    eigen: Eigenvalues by shifted QR iteration
"""

__version__ = "0.1.0"

from pylinalg import matrix
from pylinalg import qr
from pylinalg import eigen

__all__ = [
    "__version__",
    "matrix",
    "qr",
    "eigen",
]
