"""
Tests for table-backed, formula-backed and composed matrices.

Validates:
    - Size convention: row_size = entries per row, col_size = entries per column
    - Transposition unwraps instead of nesting
    - Householder reflectors: entries, symmetry, orthogonality
    - Lazy products against hand-computed values and NumPy
    - Identity augmentation of square blocks
    - Per-index memo of CachedMatrix
"""

import numpy as np
import pytest

from pylinalg.core.compute.tolerances import ORTHOGONAL_IDENTITY
from pylinalg.core.exceptions import DimensionError, IndexOutOfRangeError
from pylinalg.matrix import (
    CachedMatrix,
    EmbeddedMatrix,
    HouseholderMatrix,
    ProductMatrix,
    TableMatrix,
    TransposedMatrix,
    embed,
    from_table,
    householder,
    materialize,
    mult,
)
from pylinalg.qr._householder import householder_chain


@pytest.fixture
def a_table():
    return np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])


@pytest.fixture
def b_table():
    return np.array([[0.0, 1.0, 0.0, 3.0, 1.0], [1.0, 2.0, 4.0, -5.0, 0.0]])


# ═══════════════════════════════════════════════════════════════════════
# Table-backed matrices
# ═══════════════════════════════════════════════════════════════════════


class TestTableMatrix:
    """from_table() and the row / column views of TableMatrix."""

    def test_sizes(self, a_table):
        m = from_table(a_table)
        assert isinstance(m, TableMatrix)
        assert m.row_size == 2
        assert m.col_size == 3
        assert m.shape == (3, 2)

    def test_rows_and_columns(self, a_table):
        m = from_table(a_table)
        assert list(m.get_row(1)) == [3.0, 4.0]
        assert list(m.get_column(1)) == [2.0, 4.0, 6.0]
        assert m.get_entry(2, 0) == 5.0

    def test_table_is_copied(self, a_table):
        m = from_table(a_table)
        a_table[0, 0] = 100.0
        assert list(m.get_row(0)) == [1.0, 2.0]

    @pytest.mark.parametrize("index", [-1, 3])
    def test_row_out_of_range(self, a_table, index):
        with pytest.raises(IndexOutOfRangeError):
            from_table(a_table).get_row(index)

    def test_column_out_of_range(self, a_table):
        with pytest.raises(IndexOutOfRangeError):
            from_table(a_table).get_column(2)

    def test_column_window(self):
        m = from_table([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert list(m.get_column(0).sub_view(1, 2)) == [4.0, 7.0]

    def test_materialize_roundtrip(self, a_table):
        data = materialize(from_table(a_table))
        np.testing.assert_array_equal(data, a_table)
        data[0, 0] = -1.0  # writable copy


# ═══════════════════════════════════════════════════════════════════════
# Transposition
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:
    """Lazy transpose that unwraps."""

    def test_sizes_swap(self, a_table):
        t = from_table(a_table).transpose()
        assert isinstance(t, TransposedMatrix)
        assert t.row_size == 3
        assert t.col_size == 2

    def test_rows_are_columns(self, a_table):
        t = from_table(a_table).transpose()
        assert list(t.get_row(0)) == [1.0, 3.0, 5.0]
        assert list(t.get_column(2)) == [5.0, 6.0]

    def test_row_index_checked_on_own_axis(self, a_table):
        t = from_table(a_table).transpose()
        with pytest.raises(IndexOutOfRangeError, match="row") as exc_info:
            t.get_row(2)
        assert exc_info.value.size == 2

    def test_column_index_checked_on_own_axis(self, a_table):
        t = from_table(a_table).transpose()
        with pytest.raises(IndexOutOfRangeError, match="column") as exc_info:
            t.get_column(3)
        assert exc_info.value.size == 3

    def test_double_transpose_is_identity(self, a_table):
        m = from_table(a_table)
        assert m.transpose().transpose() is m

    def test_repeated_transpose_does_not_nest(self, a_table):
        m = from_table(a_table)
        t = m
        for _ in range(100_000):
            t = t.transpose()
        assert t is m
        assert isinstance(m.transpose().transpose().transpose(), TransposedMatrix)

    def test_double_transpose_of_product(self, a_table, b_table):
        p = from_table(a_table).compose_left(from_table(b_table))
        assert p.transpose().transpose() is p

    def test_materialized_transpose(self, a_table):
        np.testing.assert_array_equal(
            materialize(from_table(a_table).transpose()), a_table.T
        )


# ═══════════════════════════════════════════════════════════════════════
# Householder reflectors
# ═══════════════════════════════════════════════════════════════════════


class TestHouseholder:
    """Formula-backed reflectors I - 2 v v^T."""

    def test_entries_unnormalized_vector(self):
        h = householder([1.0, 2.0, -1.0])
        assert isinstance(h, HouseholderMatrix)
        assert list(h.get_row(1)) == [-4.0, -7.0, 4.0]

    def test_transpose_is_self(self):
        h = householder([1.0, 2.0, -1.0])
        assert h.transpose() is h

    def test_symmetric(self):
        h = householder([1.0, 2.0, -1.0])
        for i in range(3):
            assert list(h.get_row(i)) == list(h.get_column(i))

    def test_orthogonal_and_involutive(self, rng):
        v = rng.standard_normal(4)
        v /= np.linalg.norm(v)
        h = householder(v)
        np.testing.assert_allclose(
            materialize(mult(h, h)), np.eye(4), atol=ORTHOGONAL_IDENTITY.atol
        )

    def test_row_window(self):
        h = householder([1.0, 2.0, -1.0])
        assert list(h.get_row(1).sub_view(1, 2)) == [-7.0, 4.0]

    def test_vector_is_copied(self):
        v = np.array([0.6, 0.8])
        h = householder(v)
        v[0] = 0.0
        np.testing.assert_allclose(materialize(h), np.eye(2) - 2 * np.outer([0.6, 0.8], [0.6, 0.8]))

    def test_empty_reflector(self):
        h = householder(np.empty(0))
        assert h.shape == (0, 0)

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            householder([[1.0, 0.0]])


# ═══════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════


class TestProduct:
    """Lazy products evaluated row or column at a time."""

    def test_sizes(self, a_table, b_table):
        p = mult(from_table(a_table), from_table(b_table))
        assert isinstance(p, ProductMatrix)
        assert p.row_size == 5
        assert p.col_size == 3

    def test_row_and_column(self, a_table, b_table):
        p = from_table(a_table).compose_left(from_table(b_table))
        assert list(p.get_row(0)) == [2.0, 5.0, 8.0, -7.0, 1.0]
        assert list(p.get_column(1)) == [5.0, 11.0, 17.0]

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((4, 3))
        b = rng.standard_normal((3, 2))
        c = rng.standard_normal((2, 5))
        p = from_table(a).compose_left(from_table(b)).compose_left(from_table(c))
        np.testing.assert_allclose(materialize(p), a @ b @ c, atol=1e-12)

    def test_transposed_product(self, a_table, b_table):
        p = from_table(a_table).compose_left(from_table(b_table))
        np.testing.assert_allclose(
            materialize(p.transpose()), (a_table @ b_table).T, atol=1e-12
        )

    def test_inner_dimension_mismatch(self, a_table):
        with pytest.raises(DimensionError, match="inner dimensions"):
            from_table(a_table).compose_left(from_table(a_table))

    def test_factors_are_referenced(self, a_table, b_table):
        a = from_table(a_table)
        b = from_table(b_table)
        p = a.compose_left(b)
        assert p.left is a
        assert p.right is b

    def test_row_out_of_range(self, a_table, b_table):
        p = from_table(a_table).compose_left(from_table(b_table))
        with pytest.raises(IndexOutOfRangeError):
            p.get_row(3)


# ═══════════════════════════════════════════════════════════════════════
# Identity augmentation
# ═══════════════════════════════════════════════════════════════════════


class TestEmbed:
    """Square block as the trailing block of an identity."""

    def test_entries(self):
        block = from_table([[1, 2], [3, 4]])
        m = embed(block, 4)
        assert isinstance(m, EmbeddedMatrix)
        expected = np.eye(4)
        expected[2:, 2:] = [[1, 2], [3, 4]]
        np.testing.assert_array_equal(materialize(m), expected)
        np.testing.assert_array_equal(materialize(m.transpose()), expected.T)

    def test_same_size_is_the_block(self):
        block = from_table([[1, 2], [3, 4]])
        np.testing.assert_array_equal(materialize(embed(block, 2)), [[1, 2], [3, 4]])

    def test_empty_block_is_identity(self):
        m = embed(householder(np.empty(0)), 3)
        np.testing.assert_array_equal(materialize(m), np.eye(3))

    def test_embedded_reflector_orthogonal(self, rng):
        v = rng.standard_normal(3)
        v /= np.linalg.norm(v)
        m = embed(householder(v), 5)
        np.testing.assert_allclose(
            materialize(mult(m.transpose(), m)), np.eye(5), atol=ORTHOGONAL_IDENTITY.atol
        )

    def test_rejects_rectangular_block(self, a_table):
        with pytest.raises(DimensionError):
            embed(from_table(a_table), 4)

    def test_rejects_small_dim(self):
        with pytest.raises(DimensionError, match="smaller"):
            embed(from_table([[1, 2], [3, 4]]), 1)


# ═══════════════════════════════════════════════════════════════════════
# Memoization
# ═══════════════════════════════════════════════════════════════════════


class TestCachedMatrix:
    """Each row and column of the wrapped matrix is requested once."""

    def test_rows_memoized(self, a_table, counting_matrix):
        inner = counting_matrix(a_table)
        cached = CachedMatrix(inner)
        first = cached.get_row(1).to_array()
        second = cached.get_row(1).to_array()
        np.testing.assert_array_equal(first, second)
        assert inner.row_calls == 1

    def test_columns_memoized(self, a_table, counting_matrix):
        inner = counting_matrix(a_table)
        cached = CachedMatrix(inner)
        for _ in range(3):
            assert list(cached.get_column(0)) == [1.0, 3.0, 5.0]
        assert inner.column_calls == 1

    def test_same_values_as_wrapped(self, a_table, b_table):
        p = from_table(a_table).compose_left(from_table(b_table))
        np.testing.assert_array_equal(materialize(CachedMatrix(p)), materialize(p))

    @pytest.mark.parametrize("n", [2, 5, 8])
    def test_decomposition_pass_fetches_each_column_once(self, rng, counting_matrix, n):
        # Step r needs column r of the r-th partial product, which reaches
        # the base matrix through one memo per partial product.
        base = counting_matrix(rng.standard_normal((n, n)))
        chain, _ = householder_chain(base)
        assert len(chain) == n - 1
        assert base.row_calls == 0
        assert base.column_calls == n - 1

    def test_decomposition_pass_over_lazy_input(self, rng, counting_matrix):
        n = 6
        base = counting_matrix(rng.standard_normal((n, n)))
        householder_chain(base.transpose())
        assert base.column_calls == 0
        assert base.row_calls == n - 1
