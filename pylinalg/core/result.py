"""
Generic result container for all PyLinalg computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing and diagnostics while
allowing domains to define their own parameter structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, iterations, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear algebra computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (reflectors, eigenvalues, etc.)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct method (no convergence notion)
        >>> Result(
        ...     params=QRParams(reflectors=chain, q=q, r=r, degenerate_steps=0),
        ...     info={'method': 'householder', 'n': 3},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_householder'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=EigenParams(eigenvalues=w, ...),
        ...     info={'method': 'shifted_qr', 'converged': True, 'iterations': 9},
        ...     timing={'total_seconds': 0.05, 'qr_step': 0.03},
        ...     backend_name='cpu_shifted_qr'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
