"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix or vector dimensions are incorrect or inconsistent.

    Raised when a square matrix is required but a rectangular one is given,
    when the inner dimensions of a product disagree, or when an output
    buffer does not have the expected length.
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row or column index outside [0, size).

    Attributes:
        index: The offending index
        size: The exclusive upper bound that was violated
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        size: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.size = size


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    A vanishing Householder norm is handled in place (identity reflector)
    and never raised.
    """
    pass


class ConvergenceError(PyLinalgError):
    """
    Iterative algorithm failed to converge.

    The eigen solver reports non-convergence through its remaining
    iteration budget; this exception is raised only when a caller asks
    for it explicitly (EigenSolution.raise_if_not_converged).

    Attributes:
        iterations: Number of iterations completed
        final_change: Largest remaining sub-diagonal magnitude, if known
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
