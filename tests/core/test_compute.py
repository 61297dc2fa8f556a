"""
Tests for timing and tolerance utilities.
"""

import pytest

from pylinalg.core.compute import (
    DEFAULT_ITERATION_BOUND,
    DEFAULT_SENSITIVITY,
    EIGEN_REFERENCE,
    ORTHOGONAL_IDENTITY,
    QR_EXACT,
    Timer,
)
from pylinalg.eigen import eigvals


class TestTimer:
    """Accumulating section timer."""

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('step'):
            pass
        with timer.section('step'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'step'}
        assert result['step'] >= 0.0

    def test_section_recorded_on_error(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('failing'):
                raise ValueError("boom")
        timer.stop()
        assert 'failing' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()


class TestTolerances:
    """Tier ordering and solver defaults."""

    def test_tiers_ordered_by_strictness(self):
        assert ORTHOGONAL_IDENTITY.atol < QR_EXACT.atol < EIGEN_REFERENCE.atol

    def test_defaults_used_by_eigvals(self):
        info = eigvals([[2.0, 0.0], [0.0, 1.0]]).info
        assert info['sensitivity'] == DEFAULT_SENSITIVITY
        assert info['iteration_bound'] == DEFAULT_ITERATION_BOUND
