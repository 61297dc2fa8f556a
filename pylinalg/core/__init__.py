"""
Core infrastructure for PyLinalg.

This module provides shared abstractions and utilities used by all
domain-specific submodules (matrix, qr, eigen).

Key components:
    protocols: View, Matrix, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pylinalg.core.protocols import View, Matrix, Backend
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "View",
    "Matrix",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "NumericalError",
    "ConvergenceError",
]
