"""
Tests for scalar kinds and their arithmetic semantics.

Integer kind must behave like C integer arithmetic: truncation toward
zero on division, truncated square roots. Float kind is plain float64.
"""

import numpy as np
import pytest

from pylinear.core import scalar
from pylinear.core.exceptions import TruncationWarning, ValidationError


class TestResolveDtype:

    @pytest.mark.parametrize("request_, expected", [
        (None, np.int64),
        ('int', np.int64),
        ('float', np.float64),
        (np.int32, np.int64),
        (np.uint8, np.int64),
        (np.float32, np.float64),
        (int, np.int64),
        (float, np.float64),
    ])
    def test_normalises(self, request_, expected):
        assert scalar.resolve_dtype(request_) == np.dtype(expected)

    @pytest.mark.parametrize("bad", [bool, np.complex128, 'str', 'double-ish'])
    def test_rejects_non_real(self, bad):
        with pytest.raises(ValidationError):
            scalar.resolve_dtype(bad)

    def test_kind_of(self):
        assert scalar.kind_of(scalar.INT_DTYPE) == 'int'
        assert scalar.kind_of(scalar.FLOAT_DTYPE) == 'float'


@pytest.mark.parametrize("dtype, expected", [
    (scalar.INT_DTYPE, np.int64),
    (scalar.FLOAT_DTYPE, np.float64),
])
def test_zero_matches_kind(dtype, expected):
    value = scalar.zero(dtype)
    assert value == 0
    assert isinstance(value, expected)


class TestCoerce:

    def test_int_value_into_int(self):
        value = scalar.coerce(7, scalar.INT_DTYPE)
        assert value == 7
        assert isinstance(value, np.int64)

    def test_float_truncated_into_int(self):
        with pytest.warns(TruncationWarning):
            assert scalar.coerce(-2.9, scalar.INT_DTYPE) == -2

    def test_int_into_float(self):
        assert isinstance(scalar.coerce(3, scalar.FLOAT_DTYPE), np.float64)

    @pytest.mark.parametrize("bad", ["1", None, True, 1 + 1j])
    def test_rejects_non_real(self, bad):
        with pytest.raises(ValidationError, match="real number"):
            scalar.coerce(bad, scalar.INT_DTYPE)

    def test_rejects_inf_for_int(self):
        with pytest.raises(ValidationError):
            scalar.coerce(float('inf'), scalar.INT_DTYPE)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
    def test_rejects_non_finite_for_float(self, bad):
        with pytest.raises(ValidationError, match="finite"):
            scalar.coerce(bad, scalar.FLOAT_DTYPE)

    @pytest.mark.parametrize("big", [2**63, -(2**63) - 1, 2**70, 10**20])
    def test_rejects_int_outside_int64(self, big):
        with pytest.raises(ValidationError, match="out of range"):
            scalar.coerce(big, scalar.INT_DTYPE)

    def test_int64_bounds_accepted(self):
        assert scalar.coerce(2**63 - 1, scalar.INT_DTYPE) == np.iinfo(np.int64).max
        assert scalar.coerce(-(2**63), scalar.INT_DTYPE) == np.iinfo(np.int64).min

    def test_huge_float_rejected_for_int(self):
        with pytest.raises(ValidationError, match="out of range"):
            scalar.coerce(1e30, scalar.INT_DTYPE)

    def test_int_too_large_for_float(self):
        with pytest.raises(ValidationError, match="out of range"):
            scalar.coerce(10**400, scalar.FLOAT_DTYPE)


class TestDivide:
    """Integer division truncates toward zero, not toward -inf."""

    @pytest.mark.parametrize("num, den, expected, truncated", [
        (7, 2, 3, True),
        (-7, 2, -3, True),
        (7, -2, -3, True),
        (-7, -2, 3, True),
        (6, 3, 2, False),
        (0, 5, 0, False),
    ])
    def test_int_scalars(self, num, den, expected, truncated):
        dtype = scalar.INT_DTYPE
        q, was_truncated = scalar.divide(dtype.type(num), dtype.type(den), dtype)
        assert q == expected
        assert was_truncated is truncated

    def test_int_array(self):
        dtype = scalar.INT_DTYPE
        num = np.array([[6, -7], [-2, 4]], dtype=dtype)
        q, truncated = scalar.divide(num, dtype.type(10), dtype)
        np.testing.assert_array_equal(q, [[0, 0], [0, 0]])
        assert truncated

    def test_float(self):
        dtype = scalar.FLOAT_DTYPE
        q, truncated = scalar.divide(dtype.type(-7), dtype.type(2), dtype)
        assert q == -3.5
        assert not truncated


class TestSqrt:

    def test_int_exact(self):
        root, truncated = scalar.sqrt(scalar.INT_DTYPE.type(25), scalar.INT_DTYPE)
        assert root == 5
        assert not truncated

    def test_int_truncated(self):
        root, truncated = scalar.sqrt(scalar.INT_DTYPE.type(8), scalar.INT_DTYPE)
        assert root == 2
        assert truncated

    def test_float(self):
        root, truncated = scalar.sqrt(scalar.FLOAT_DTYPE.type(2.0), scalar.FLOAT_DTYPE)
        assert root == pytest.approx(np.sqrt(2.0))
        assert not truncated


def test_to_python_unwraps_numpy_scalars():
    assert type(scalar.to_python(np.int64(3))) is int
    assert type(scalar.to_python(np.float64(0.5))) is float
    assert scalar.to_python(4) == 4
