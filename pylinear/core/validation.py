"""
Input validation utilities for PyLinear.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently truncating,
wrapping negative indices or guessing at user intent.

Design principles:
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation/parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    UnsupportedShapeError,
    ValidationError,
)
from pylinear.core.scalar import (
    ScalarKind,
    is_integer,
    resolve_dtype,
    warn_truncation,
)


def check_array(
    values: ArrayLike,
    name: str,
    ndim: int,
    dtype: ScalarKind | np.dtype | type | None = None,
) -> NDArray[Any]:
    """
    Validate array-like input and convert it to a container dtype.

    When dtype is None the scalar kind is inferred: integer input stays
    'int', anything else becomes 'float'. Non-integral floats converted to
    an integer dtype are truncated toward zero with a TruncationWarning.

    Args:
        values: Nested sequences or numpy array
        name: Parameter name for error messages
        ndim: Required number of dimensions (1 for vectors, 2 for matrices)
        dtype: Target scalar kind, or None to infer

    Returns:
        A fresh numpy array owned by the caller

    Raises:
        ValidationError: If input is ragged, non-numeric or contains NaN/Inf
        DimensionError: If input has the wrong number of dimensions
    """
    try:
        array = np.array(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if array.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )
    if array.dtype.kind == 'b' or not np.issubdtype(array.dtype, np.number):
        raise ValidationError(f"{name}: non-numeric dtype {array.dtype}, expected numbers")
    if np.issubdtype(array.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    if array.size == 0 and array.ndim < ndim:
        array = array.reshape((0,) * ndim)
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D input, got {array.ndim}D with shape {array.shape}"
        )

    if not np.all(np.isfinite(array)):
        raise ValidationError(f"{name}: contains NaN/Inf, expected finite numbers")

    target = resolve_dtype(dtype if dtype is not None else array.dtype)
    if is_integer(target) and not np.issubdtype(array.dtype, np.integer):
        truncated = np.trunc(array)
        if np.any(truncated != array):
            warn_truncation(name)
        array = truncated
    return array.astype(target)


def check_size(size: int, name: str) -> int:
    """
    Verify a container dimension is a non-negative integer.

    Args:
        size: Requested length, row count or column count
        name: Parameter name for error messages

    Returns:
        size as a builtin int

    Raises:
        ValidationError: If size is not an integer or is negative
    """
    if isinstance(size, (bool, np.bool_)) or not isinstance(size, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(size).__name__} {size!r}"
        )
    if size < 0:
        raise ValidationError(f"{name}: expected a non-negative integer, got {size}")
    return int(size)


def check_index(index: int, bound: int, name: str, shape: tuple[int, ...]) -> int:
    """
    Verify 0 <= index < bound.

    Negative indices are rejected rather than wrapped.

    Args:
        index: Index to check
        bound: Exclusive upper bound
        name: Axis name for error messages ('index', 'row', 'col')
        shape: Container shape, carried on the raised error

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is outside [0, bound)
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(index).__name__} {index!r}"
        )
    if not 0 <= index < bound:
        raise IndexOutOfRangeError(
            f"{name} {index} out of range for shape {shape} (valid: 0..{bound - 1})"
            if bound > 0 else f"{name} {index} out of range for empty shape {shape}",
            index=int(index),
            shape=shape,
        )
    return int(index)


def check_same_dtype(left: np.dtype, right: np.dtype, operation: str) -> None:
    """
    Verify both operands use the same scalar type.

    Raises:
        ValidationError: If dtypes differ
    """
    if left != right:
        raise ValidationError(
            f"{operation}: operands must share a scalar type, got {left} and {right}"
        )


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify both operands have identical shapes.

    Raises:
        DimensionError: If shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: operand dimensions must match, got {left} and {right}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimension(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify columns of the left operand equal rows of the right operand.

    Raises:
        DimensionError: If left cols != right rows
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"{operation}: number of columns in first matrix ({left[1]}) must match "
            f"number of rows in second matrix ({right[0]}); got {left} and {right}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_two_by_two(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix is exactly 2x2.

    Raises:
        UnsupportedShapeError: If shape is not (2, 2)
    """
    if shape != (2, 2):
        raise UnsupportedShapeError(
            f"{operation}: only supported for 2x2 matrices, got {shape[0]}x{shape[1]}",
            operation=operation,
            shape=shape,
            required_shape=(2, 2),
        )
