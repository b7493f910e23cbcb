"""
Scalar type capabilities.

Every Vector and Matrix stores a single scalar kind:

    'int'   -> numpy int64, C-style semantics: division truncates toward
               zero and square roots are truncated before further use
    'float' -> numpy float64

This module is the one place that knows how each kind divides, takes a
square root and coerces incoming values. Containers and kernels call
through here instead of branching on dtype themselves.
"""

from __future__ import annotations

import math
import numbers
import warnings
from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray

from pylinear.core.exceptions import TruncationWarning, ValidationError


ScalarKind = Literal['int', 'float']

INT_DTYPE = np.dtype(np.int64)
FLOAT_DTYPE = np.dtype(np.float64)

DEFAULT_KIND: ScalarKind = 'int'

_KIND_TO_DTYPE = {
    'int': INT_DTYPE,
    'float': FLOAT_DTYPE,
}


def resolve_dtype(dtype: ScalarKind | np.dtype | type | None = None) -> np.dtype:
    """
    Normalise a scalar type request to int64 or float64.

    Args:
        dtype: 'int', 'float', None (default kind), or any numpy integer /
            floating dtype or type

    Returns:
        np.dtype('int64') or np.dtype('float64')

    Raises:
        ValidationError: If the request names neither an integer nor a
            floating type
    """
    if dtype is None:
        return _KIND_TO_DTYPE[DEFAULT_KIND]
    if isinstance(dtype, str) and dtype in _KIND_TO_DTYPE:
        return _KIND_TO_DTYPE[dtype]
    try:
        requested = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: cannot interpret {dtype!r}: {e}") from e

    if requested.kind == 'b':
        raise ValidationError("dtype: bool is not a numeric scalar type")
    if np.issubdtype(requested, np.integer):
        return INT_DTYPE
    if np.issubdtype(requested, np.floating):
        return FLOAT_DTYPE
    raise ValidationError(
        f"dtype: expected 'int', 'float' or a numpy integer/floating type, got {requested}"
    )


def kind_of(dtype: np.dtype) -> ScalarKind:
    """Return the scalar kind name for a resolved dtype."""
    return 'int' if is_integer(dtype) else 'float'


def is_integer(dtype: np.dtype) -> bool:
    return bool(np.issubdtype(dtype, np.integer))


def zero(dtype: np.dtype) -> np.generic:
    """Additive identity of the scalar kind."""
    return dtype.type(0)


def to_python(value: Any) -> int | float | complex:
    """Convert a numpy scalar to the matching builtin Python scalar."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def warn_truncation(operation: str) -> None:
    warnings.warn(
        f"{operation}: integer arithmetic truncated a non-integral value",
        TruncationWarning,
        stacklevel=3,
    )


def coerce(value: Any, dtype: np.dtype, name: str = "value") -> np.generic:
    """
    Validate a single scalar and convert it to the container's dtype.

    A non-integral float stored into an integer container is truncated
    toward zero and a TruncationWarning is issued.

    Args:
        value: Incoming scalar
        dtype: Resolved container dtype
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not a real number, is NaN/Inf, or
            does not fit the container dtype
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )

    if not is_integer(dtype):
        try:
            as_float = float(value)
        except OverflowError as e:
            raise ValidationError(f"{name}: {value} is out of range for {dtype}") from e
        if not math.isfinite(as_float):
            raise ValidationError(f"{name}: {as_float} is not a finite number")
        return dtype.type(as_float)

    if isinstance(value, numbers.Integral):
        as_int = int(value)
    else:
        as_float = float(value)
        if not math.isfinite(as_float):
            raise ValidationError(f"{name}: {as_float} cannot be stored as an integer")
        as_int = math.trunc(as_float)
        if as_int != as_float:
            warn_truncation(name)

    bounds = np.iinfo(dtype)
    if not bounds.min <= as_int <= bounds.max:
        raise ValidationError(
            f"{name}: {as_int} is out of range for {dtype} "
            f"({bounds.min}..{bounds.max})"
        )
    return dtype.type(as_int)


def divide(
    numerator: NDArray[Any] | np.generic,
    denominator: np.generic,
    dtype: np.dtype,
) -> tuple[Any, bool]:
    """
    Divide with the scalar kind's semantics.

    Integer division truncates toward zero (C semantics), not toward
    negative infinity as Python's // does.

    Args:
        numerator: Scalar or array of the container dtype
        denominator: Non-zero scalar of the container dtype
        dtype: Resolved container dtype

    Returns:
        Tuple of (quotient in dtype, whether any element was truncated)
    """
    if not is_integer(dtype):
        return np.true_divide(numerator, denominator).astype(dtype), False

    num = np.asarray(numerator, dtype=dtype)
    den = dtype.type(denominator)
    magnitude = np.abs(num) // np.abs(den)
    sign = np.sign(num) * np.sign(den)
    quotient = (magnitude * sign).astype(dtype)
    truncated = bool(np.any(num % den != 0))
    if quotient.ndim == 0:
        return quotient[()], truncated
    return quotient, truncated


def sqrt(value: np.generic, dtype: np.dtype) -> tuple[np.generic, bool]:
    """
    Square root with the scalar kind's semantics.

    For integers the exact floor square root is used, which is what a
    truncating conversion of the real root gives for non-negative input.

    Args:
        value: Non-negative scalar of the container dtype
        dtype: Resolved container dtype

    Returns:
        Tuple of (root in dtype, whether it was truncated)
    """
    if not is_integer(dtype):
        return dtype.type(np.sqrt(value)), False

    n = int(value)
    root = math.isqrt(n)
    return dtype.type(root), root * root != n
