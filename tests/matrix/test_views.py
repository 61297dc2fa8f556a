"""
Tests for lazy vector views.

Validates:
    - Views are restartable: every traversal starts from the first element
    - sub_view windows, including empty and over-long windows
    - Concatenation with empty parts
    - One-hot views and their O(1) windows
    - Lazy matrix-vector products
    - view_of() copies its input
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.protocols import View
from pylinalg.matrix import (
    ApplyView,
    ArrayView,
    ConcatView,
    OneHotView,
    SubView,
    from_table,
    view_of,
)


@pytest.fixture
def nine():
    """View over 1 ... 9."""
    return view_of([1, 2, 3, 4, 5, 6, 7, 8, 9])


class CountingView(View):
    """Forward-only view over 1 ... n that counts traversals."""

    def __init__(self, n):
        self.n = n
        self.traversals = 0

    def iterate(self):
        self.traversals += 1
        return iter(float(i) for i in range(1, self.n + 1))


# ═══════════════════════════════════════════════════════════════════════
# Restartability
# ═══════════════════════════════════════════════════════════════════════


class TestRestartable:
    """Each traversal of a view yields the same sequence."""

    def test_array_view_twice(self, nine):
        assert list(nine) == list(nine)

    def test_iterate_is_fresh(self, nine):
        it = nine.iterate()
        next(it)
        next(it)
        assert next(nine.iterate()) == 1.0

    def test_generic_view_to_array(self):
        view = CountingView(4)
        np.testing.assert_array_equal(view.to_array(), [1.0, 2.0, 3.0, 4.0])
        np.testing.assert_array_equal(view.to_array(), [1.0, 2.0, 3.0, 4.0])
        assert view.traversals == 2

    def test_to_array_is_a_copy(self, nine):
        data = nine.to_array()
        data[0] = 100.0
        assert list(nine)[0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# sub_view
# ═══════════════════════════════════════════════════════════════════════


class TestSubView:
    """Windows of `length` elements after `skip` elements."""

    def test_leading_window(self, nine):
        assert list(nine.sub_view(0, 3)) == [1.0, 2.0, 3.0]

    def test_empty_window(self, nine):
        assert list(nine.sub_view(1, 0)) == []

    def test_nested_window(self, nine):
        assert list(nine.sub_view(0, 8).sub_view(2, 6)) == [3.0, 4.0, 5.0, 6.0, 7.0, 8.0]

    def test_inner_window(self, nine):
        assert list(nine.sub_view(2, 5)) == [3.0, 4.0, 5.0, 6.0, 7.0]

    def test_window_past_the_end_is_truncated(self, nine):
        assert list(nine.sub_view(7, 10)) == [8.0, 9.0]

    def test_skip_past_the_end_is_empty(self, nine):
        assert list(nine.sub_view(20, 3)) == []

    def test_generic_view_uses_sub_view_type(self):
        window = CountingView(9).sub_view(2, 5)
        assert isinstance(window, SubView)
        assert list(window) == [3.0, 4.0, 5.0, 6.0, 7.0]

    def test_generic_nested_window_composes(self):
        window = CountingView(9).sub_view(1, 6).sub_view(2, 3)
        assert list(window) == [4.0, 5.0, 6.0]

    def test_nested_window_bounded_by_outer(self):
        window = CountingView(9).sub_view(1, 3).sub_view(1, 10)
        assert list(window) == [3.0, 4.0]

    def test_sub_view_does_not_copy(self):
        data = np.array([1.0, 2.0, 3.0])
        window = ArrayView(data).sub_view(1, 2)
        data[2] = 30.0
        assert list(window) == [2.0, 30.0]

    @pytest.mark.parametrize("skip, length", [(-1, 2), (0, -2)])
    def test_negative_arguments_rejected(self, nine, skip, length):
        with pytest.raises(ValidationError):
            nine.sub_view(skip, length)


# ═══════════════════════════════════════════════════════════════════════
# Concatenation
# ═══════════════════════════════════════════════════════════════════════


class TestConcat:
    """then() yields the first view to exhaustion, then the second."""

    def test_concat_with_empty_parts(self):
        empty = view_of(np.empty(0))
        joined = empty.then(view_of([5, 4, 3])).then(view_of([2, 1])).then(empty)
        assert list(joined) == [5.0, 4.0, 3.0, 2.0, 1.0]

    def test_concat_type(self, nine):
        assert isinstance(nine.then(nine), ConcatView)

    def test_concat_restartable(self):
        joined = view_of([1, 2]).then(view_of([3]))
        assert list(joined) == list(joined) == [1.0, 2.0, 3.0]

    def test_sub_view_of_concat(self):
        joined = view_of([1, 2, 3]).then(view_of([4, 5, 6]))
        assert list(joined.sub_view(2, 3)) == [3.0, 4.0, 5.0]


# ═══════════════════════════════════════════════════════════════════════
# One-hot views
# ═══════════════════════════════════════════════════════════════════════


class TestOneHot:
    """Zeros everywhere except a 1.0 at one position."""

    def test_entries(self):
        assert list(OneHotView(4, 2)) == [0.0, 0.0, 1.0, 0.0]

    def test_to_array_matches_iteration(self):
        view = OneHotView(5, 0)
        np.testing.assert_array_equal(view.to_array(), list(view))

    def test_position_outside_is_zero_vector(self):
        assert list(OneHotView(3, 5)) == [0.0, 0.0, 0.0]
        np.testing.assert_array_equal(OneHotView(3, -1).to_array(), np.zeros(3))

    def test_window_keeps_the_one(self):
        window = OneHotView(6, 3).sub_view(2, 3)
        assert isinstance(window, OneHotView)
        assert list(window) == [0.0, 1.0, 0.0]

    def test_window_without_the_one(self):
        assert list(OneHotView(6, 0).sub_view(2, 3)) == [0.0, 0.0, 0.0]

    def test_zero_length(self):
        assert list(OneHotView(0, 0)) == []


# ═══════════════════════════════════════════════════════════════════════
# Matrix-vector products
# ═══════════════════════════════════════════════════════════════════════


class TestApply:
    """apply() yields one dot product per row."""

    def test_values(self):
        m = from_table([[1, 2], [3, 4], [5, 6]])
        result = m.apply(view_of([1, -1]))
        assert isinstance(result, ApplyView)
        assert len(result) == 3
        assert list(result) == [-1.0, -1.0, -1.0]

    def test_matches_numpy(self, rng):
        table = rng.standard_normal((4, 3))
        vector = rng.standard_normal(3)
        result = from_table(table).apply(view_of(vector)).to_array()
        np.testing.assert_allclose(result, table @ vector, atol=1e-12)

    def test_length_mismatch_raises_on_traversal(self):
        result = from_table([[1, 2], [3, 4]]).apply(view_of([1, 2, 3]))
        with pytest.raises(DimensionError):
            list(result)


# ═══════════════════════════════════════════════════════════════════════
# view_of
# ═══════════════════════════════════════════════════════════════════════


class TestViewOf:
    """view_of() copies and validates its input."""

    def test_copies_input(self):
        data = np.array([1.0, 2.0])
        view = view_of(data)
        data[0] = 10.0
        assert list(view) == [1.0, 2.0]

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            view_of([[1.0, 2.0]])

    def test_rejects_strings(self):
        with pytest.raises(ValidationError):
            view_of(["a"])
