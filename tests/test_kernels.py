"""Tests for the numba kernels operating on raw component buffers."""
import numpy as np
import pytest

from fixedvec import kernels


class TestReductions:

    def test_dot(self):
        a = np.array([1.0, 2.0, 3.0])
        b = np.array([4.0, -5.0, 6.0])
        assert kernels.dot(a, b) == 12.0

    def test_norm(self):
        assert kernels.norm2(np.array([3.0, 4.0])) == 25.0
        assert kernels.norm(np.array([3.0, 4.0])) == 5.0

    def test_integer_norm_is_a_float(self):
        assert kernels.norm(np.array([1, 1], dtype=np.int32)) == pytest.approx(2 ** 0.5)

    def test_distance(self):
        a = np.array([1, 2, 3, 4], dtype=np.int16)
        b = np.array([1, 2, 6, 8], dtype=np.int16)
        assert kernels.distance(a, b) == 5.0


class TestTruncatedDivide:

    @pytest.mark.parametrize("dtype", [np.int8, np.int32, np.int64])
    def test_rounds_toward_zero(self, dtype):
        a = np.array([7, -7, 7, -7, 6, 0], dtype=dtype)
        b = np.array([2, 2, -2, -2, 3, 5], dtype=dtype)
        out = np.empty_like(a)
        kernels.truncated_divide(a, b, out)
        assert out.tolist() == [3, -3, -3, 3, 2, 0]

    def test_unsigned(self):
        a = np.array([255, 9], dtype=np.uint8)
        b = np.array([2, 10], dtype=np.uint8)
        out = np.empty_like(a)
        kernels.truncated_divide(a, b, out)
        assert out.tolist() == [127, 0]

    def test_zero_divisor(self):
        a = np.array([1, 2], dtype=np.int32)
        b = np.array([1, 0], dtype=np.int32)
        with pytest.raises(ZeroDivisionError):
            kernels.truncated_divide(a, b, np.empty_like(a))
