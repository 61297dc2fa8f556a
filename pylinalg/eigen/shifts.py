"""
Shift heuristics for the shifted QR iteration.

A shift function maps the current working table (read-only n x n array)
to the scalar subtracted from its diagonal before the next QR step.
Any callable with that signature can be passed to the solvers.

Randomized shifts take their generator as a constructor argument, never
from global state, so runs are reproducible from a seed.
"""

from __future__ import annotations

import math
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import ValidationError

ShiftFunction = Callable[[NDArray[np.floating[Any]]], float]


def wilkinson_shift(table: NDArray[np.floating[Any]]) -> float:
    """
    Wilkinson's shift from the trailing 2 x 2 block.

    With a, c the two trailing diagonal entries, b the average of the two
    trailing off-diagonal entries and d = (a - c) / 2:

        shift = c - sign(d) b^2 / (|d| + hypot(d, b))

    i.e. the eigenvalue of [[a, b], [b, c]] closest to c. sign(0) is +1.
    A 1 x 1 table returns its only entry; b = 0 returns c.
    """
    n = table.shape[0]
    c = float(table[n - 1, n - 1])
    if n == 1:
        return c
    a = float(table[n - 2, n - 2])
    b = 0.5 * (float(table[n - 2, n - 1]) + float(table[n - 1, n - 2]))
    if b == 0.0:
        return c
    d = 0.5 * (a - c)
    return c - math.copysign(1.0, d) * b * b / (abs(d) + math.hypot(d, b))


def rayleigh_shift(table: NDArray[np.floating[Any]]) -> float:
    """Rayleigh quotient shift: the trailing diagonal entry."""
    return float(table[-1, -1])


def zero_shift(table: NDArray[np.floating[Any]]) -> float:
    """No shift: plain (unshifted) QR iteration."""
    return 0.0


class PerturbedShift:
    """
    Base shift plus bounded uniform noise.

    Noise in [-amplitude, amplitude] breaks the symmetric stagnation of
    the iteration on blocks whose eigenvalues sit at equal distance from
    the shift.

    Args:
        rng: Source of randomness, e.g. np.random.default_rng(seed)
        amplitude: Noise bound, >= 0
        base: Deterministic shift to perturb (Wilkinson by default)
    """

    def __init__(
        self,
        rng: np.random.Generator,
        amplitude: float = 1e-3,
        base: ShiftFunction = wilkinson_shift,
    ):
        if not (math.isfinite(amplitude) and amplitude >= 0):
            raise ValidationError(
                f"amplitude: must be a finite value >= 0, got {amplitude}"
            )
        self._rng = rng
        self._amplitude = amplitude
        self._base = base

    @classmethod
    def from_seed(
        cls,
        seed: int | None,
        amplitude: float = 1e-3,
        base: ShiftFunction = wilkinson_shift,
    ) -> PerturbedShift:
        """Perturbed shift drawing from np.random.default_rng(seed)."""
        return cls(np.random.default_rng(seed), amplitude=amplitude, base=base)

    @property
    def amplitude(self) -> float:
        return self._amplitude

    def __call__(self, table: NDArray[np.floating[Any]]) -> float:
        noise = self._rng.uniform(-self._amplitude, self._amplitude)
        return float(self._base(table)) + float(noise)
