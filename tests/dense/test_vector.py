"""
Tests for Vector construction and vector operators.

Covers:
    - Construction, copying semantics, dtype handling
    - +, -, inner product, scaling, compound assignment
    - Unsupported operand combinations raise TypeError
    - Engine errors (shape mismatch) pass through unchanged
"""

import numpy as np
import pytest

from pyvecmat import DimensionError, ValidationError, Vector
from pyvecmat.backends import CPU_ENGINE


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_list(self):
        v = Vector([1, 2, 3])
        assert v.dtype == np.float64
        assert v.size == 3
        assert len(v) == 3
        assert v.shape == (3,)
        assert v.engine is CPU_ENGINE
        assert not v.is_view

    def test_copies_input(self):
        arr = np.array([1.0, 2.0])
        v = Vector(arr)
        arr[0] = 99.0
        assert v[0] == 1.0

    def test_from_native_shares_memory(self):
        arr = np.array([1.0, 2.0])
        v = Vector.from_native(arr)
        arr[0] = 99.0
        assert v[0] == 99.0
        assert v.engine is CPU_ENGINE

    def test_from_vector_copies(self):
        v = Vector([1, 2])
        w = Vector(v)
        w[0] = 5.0
        assert v[0] == 1.0

    def test_float32_preserved(self):
        v = Vector(np.array([1, 2], dtype=np.float32))
        assert v.dtype == np.float32

    def test_dtype_argument(self):
        assert Vector([1, 2], dtype=np.float32).dtype == np.float32

    def test_zeros_and_ones(self):
        np.testing.assert_array_equal(Vector.zeros(3).native, [0.0, 0.0, 0.0])
        np.testing.assert_array_equal(Vector.ones(2).native, [1.0, 1.0])
        assert Vector.zeros(0).size == 0

    def test_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            Vector([[1, 2], [3, 4]])

    def test_rejects_scalar(self):
        with pytest.raises(DimensionError):
            Vector(3.0)

    def test_rejects_strings(self):
        with pytest.raises(ValidationError):
            Vector(["a", "b"])

    def test_from_native_rejects_2d(self):
        with pytest.raises(DimensionError):
            Vector.from_native(np.zeros((2, 2)))

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            Vector([1, 2], backend='quantum')


# ═══════════════════════════════════════════════════════════════════════
# Element access and text
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_getitem_setitem(self):
        v = Vector([1, 2, 3])
        v[1] = 7.0
        assert v[1] == 7.0
        np.testing.assert_array_equal(v[1:], [7.0, 3.0])

    def test_iter_and_tolist(self):
        v = Vector([1, 2])
        assert list(v) == [1.0, 2.0]
        assert v.tolist() == [1.0, 2.0]

    def test_str_is_engine_text(self):
        v = Vector([1, 2, 3])
        assert str(v) == str(np.array([1.0, 2.0, 3.0]))

    def test_repr(self):
        assert repr(Vector([1, 2])) == "Vector([1.0, 2.0])"

    def test_copy_is_independent(self):
        v = Vector([1, 2])
        c = v.copy()
        c[0] = 10.0
        assert v[0] == 1.0
        assert isinstance(c, Vector)


# ═══════════════════════════════════════════════════════════════════════
# Operators
# ═══════════════════════════════════════════════════════════════════════


class TestOperators:

    def test_add(self, abc_vectors):
        a, b = abc_vectors
        result = a + b
        assert isinstance(result, Vector)
        np.testing.assert_array_equal(result.native, [5.0, 7.0, 9.0])

    def test_sub(self, abc_vectors):
        a, b = abc_vectors
        np.testing.assert_array_equal((b - a).native, [3.0, 3.0, 3.0])

    def test_inner_product(self, abc_vectors):
        a, b = abc_vectors
        assert a * b == 32.0

    def test_matmul_is_inner_product(self, abc_vectors):
        a, b = abc_vectors
        assert a @ b == 32.0

    def test_scale_right_and_left(self, abc_vectors):
        a, _ = abc_vectors
        np.testing.assert_array_equal((a * 2).native, [2.0, 4.0, 6.0])
        np.testing.assert_array_equal((2 * a).native, [2.0, 4.0, 6.0])

    def test_numpy_scalar(self, abc_vectors):
        a, _ = abc_vectors
        np.testing.assert_array_equal((a * np.float64(0.5)).native, [0.5, 1.0, 1.5])

    def test_zero_dim_array_is_scalar(self, abc_vectors):
        a, _ = abc_vectors
        half = np.array(0.5)
        np.testing.assert_array_equal((a * half).native, [0.5, 1.0, 1.5])
        np.testing.assert_array_equal((half * a).native, [0.5, 1.0, 1.5])
        np.testing.assert_array_equal((a / np.array(2.0)).native, [0.5, 1.0, 1.5])

    def test_divide(self, abc_vectors):
        a, _ = abc_vectors
        np.testing.assert_allclose((a / 4).native, [0.25, 0.5, 0.75])

    def test_operands_unchanged(self, abc_vectors):
        a, b = abc_vectors
        _ = a + b
        _ = a * 3.0
        np.testing.assert_array_equal(a.native, [1.0, 2.0, 3.0])

    def test_float32_scaling_keeps_dtype(self):
        v = Vector([1, 2], dtype=np.float32)
        assert (v * 2.0).dtype == np.float32


class TestCompoundAssignment:

    def test_iadd_in_place(self, abc_vectors):
        a, b = abc_vectors
        ref = a
        original = a.native
        a += b
        assert a is ref
        assert a.native is original
        np.testing.assert_array_equal(a.native, [5.0, 7.0, 9.0])

    def test_isub(self, abc_vectors):
        a, b = abc_vectors
        b -= a
        np.testing.assert_array_equal(b.native, [3.0, 3.0, 3.0])

    def test_imul_idiv(self, abc_vectors):
        a, _ = abc_vectors
        a *= 3.0
        a /= 2.0
        np.testing.assert_allclose(a.native, [1.5, 3.0, 4.5])


class TestUnsupported:
    """Combinations outside the operator vocabulary raise TypeError."""

    def test_vector_plus_scalar(self, abc_vectors):
        a, _ = abc_vectors
        with pytest.raises(TypeError):
            a + 1.0

    def test_scalar_over_vector(self, abc_vectors):
        a, _ = abc_vectors
        with pytest.raises(TypeError):
            1.0 / a

    def test_vector_over_vector(self, abc_vectors):
        a, b = abc_vectors
        with pytest.raises(TypeError):
            a / b

    def test_vector_times_list(self, abc_vectors):
        a, _ = abc_vectors
        with pytest.raises(TypeError):
            a * [1, 2, 3]

    def test_vector_times_1d_ndarray(self, abc_vectors):
        a, _ = abc_vectors
        with pytest.raises(TypeError):
            a * np.array([1.0, 2.0, 3.0])

    def test_ndarray_does_not_broadcast_over_vector(self, abc_vectors):
        a, _ = abc_vectors
        with pytest.raises(TypeError):
            np.array([1.0, 2.0, 3.0]) + a

    def test_isub_scalar(self, abc_vectors):
        a, _ = abc_vectors
        with pytest.raises(TypeError):
            a -= 1.0


class TestEngineErrorsPassThrough:
    """Shape problems are reported by numpy, not by this layer."""

    def test_add_length_mismatch(self):
        with pytest.raises(ValueError):
            Vector([1, 2, 3]) + Vector([1, 2])

    def test_inner_product_length_mismatch(self):
        with pytest.raises(ValueError):
            Vector([1, 2, 3]) * Vector([1, 2])

    def test_divide_by_zero_scalar(self):
        with pytest.warns(RuntimeWarning):
            result = Vector([1.0, 0.0]) / 0.0
        assert np.isinf(result[0])
        assert np.isnan(result[1])
