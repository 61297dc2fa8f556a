"""
Eigenvalues by shifted QR iteration.

Public API:
    eigvals()         — eigenvalue estimates, returns EigenSolution
    solve()           — estimates written into a caller buffer
    wilkinson_shift() — reference shift heuristic
    rayleigh_shift()  — trailing diagonal entry
    zero_shift()      — unshifted iteration
    PerturbedShift    — seedable randomized shift
    EigenSolution     — result wrapper
"""

from pylinalg.eigen.solvers import eigvals, solve
from pylinalg.eigen.solution import EigenSolution
from pylinalg.eigen.design import EigenDesign
from pylinalg.eigen.shifts import (
    wilkinson_shift,
    rayleigh_shift,
    zero_shift,
    PerturbedShift,
)

__all__ = [
    "eigvals",
    "solve",
    "EigenSolution",
    "EigenDesign",
    "wilkinson_shift",
    "rayleigh_shift",
    "zero_shift",
    "PerturbedShift",
]
