"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different results the package
produces:
- direct factorizations (QR) reproduce hand-derived values to 1e-6
- iterative eigenvalue estimates match published references to 1e-3
- identities (Q^T Q = I, H H = I) hold to near machine precision

Used by the test suite and as documented defaults for callers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Direct Householder QR against hand-derived factors
QR_EXACT = ToleranceTier(
    rtol=0.0,
    atol=1e-6,
    name='qr_exact',
    description='Householder QR factors against exact rational values',
)

# Algebraic identities of orthogonal operators
ORTHOGONAL_IDENTITY = ToleranceTier(
    rtol=0.0,
    atol=1e-10,
    name='orthogonal_identity',
    description='Q^T Q = I and H H = I in double precision',
)

# Shifted QR iteration stopped at sensitivity 1e-4
EIGEN_REFERENCE = ToleranceTier(
    rtol=0.0,
    atol=1e-3,
    name='eigen_reference',
    description='Eigenvalue estimates against published reference values',
)

# Default strict-lower-triangle threshold for eigvals()
DEFAULT_SENSITIVITY = 1e-8

# Default iteration budget for eigvals()
DEFAULT_ITERATION_BOUND = 500
