"""
Shared compute infrastructure for PyLinalg.

This module provides timing utilities and tolerance tiers that are
shared across the QR and eigen backends.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance tiers and solver defaults
"""

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    QR_EXACT,
    ORTHOGONAL_IDENTITY,
    EIGEN_REFERENCE,
    DEFAULT_SENSITIVITY,
    DEFAULT_ITERATION_BOUND,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "QR_EXACT",
    "ORTHOGONAL_IDENTITY",
    "EIGEN_REFERENCE",
    "DEFAULT_SENSITIVITY",
    "DEFAULT_ITERATION_BOUND",
]
