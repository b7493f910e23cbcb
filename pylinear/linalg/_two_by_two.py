"""
Closed-form kernels for 2x2 matrices.

Determinant, inverse and eigenvalues are only defined for 2x2 input.
Callers (Matrix) check the shape; these functions assume it.

For [[a, b], [c, d]]:
    det        = a*d - b*c
    inverse    = [[d, -b], [-c, a]] / det
    disc       = (a+d)^2 - 4*(a*d - b*c)
    eigenvalues = ((a+d) + sqrt(disc)) / 2, ((a+d) - sqrt(disc)) / 2

Division and square root follow the scalar kind (core.scalar), so integer
matrices truncate toward zero. Each kernel reports whether truncation
happened so the caller can warn.
"""

from __future__ import annotations

import cmath
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinear.core import scalar
from pylinear.core.exceptions import DomainError, SingularMatrixError, ValidationError


def determinant(data: NDArray[Any]) -> np.generic:
    """a*d - b*c, in the dtype of data."""
    (a, b), (c, d) = data
    return a * d - b * c


def discriminant(data: NDArray[Any]) -> np.generic:
    """(a+d)^2 - 4*(a*d - b*c), the term under the eigenvalue square root."""
    trace = data[0, 0] + data[1, 1]
    return trace * trace - 4 * determinant(data)


def inverse(data: NDArray[Any]) -> tuple[NDArray[Any], bool]:
    """
    Inverse of a 2x2 matrix via the adjugate.

    Returns:
        Tuple of (inverse array in data's dtype, whether any element was
        truncated by integer division)

    Raises:
        SingularMatrixError: If the determinant is exactly zero
    """
    det = determinant(data)
    if det == 0:
        raise SingularMatrixError(
            "inverse: matrix is singular (determinant is 0), cannot be inverted",
            matrix_name="matrix",
            determinant=scalar.to_python(det),
        )

    (a, b), (c, d) = data
    adjugate = np.array([[d, -b], [-c, a]], dtype=data.dtype)
    return scalar.divide(adjugate, det, data.dtype)


def eigenvalues(
    data: NDArray[Any],
    allow_complex: bool = False,
) -> tuple[list[Any], bool]:
    """
    Both eigenvalues of a 2x2 matrix, larger-root branch first.

    Args:
        data: 2x2 array
        allow_complex: Return a complex conjugate pair instead of raising
            when the discriminant is negative. Float matrices only.

    Returns:
        Tuple of ([lambda1, lambda2], whether truncation occurred)

    Raises:
        DomainError: If the discriminant is not finite, or is negative and
            allow_complex is False
        ValidationError: If allow_complex is requested on an int matrix
    """
    dtype = data.dtype
    if allow_complex and scalar.is_integer(dtype):
        raise ValidationError(
            "eigenvalues: allow_complex requires a 'float' matrix; "
            "integer eigenvalues are truncated and have no complex form"
        )

    trace = data[0, 0] + data[1, 1]
    with np.errstate(over='ignore', invalid='ignore'):
        disc = discriminant(data)

    if not np.isfinite(disc):
        raise DomainError(
            f"eigenvalues: discriminant is not finite ({scalar.to_python(disc)})",
            discriminant=scalar.to_python(disc),
        )
    if disc < 0:
        if not allow_complex:
            raise DomainError(
                f"eigenvalues: discriminant is negative ({scalar.to_python(disc)}), "
                f"eigenvalues are complex",
                discriminant=scalar.to_python(disc),
            )
        root = cmath.sqrt(float(disc))
        t = float(trace)
        return [(t + root) / 2, (t - root) / 2], False

    root, root_truncated = scalar.sqrt(disc, dtype)
    lambda1, trunc1 = scalar.divide(trace + root, dtype.type(2), dtype)
    lambda2, trunc2 = scalar.divide(trace - root, dtype.type(2), dtype)
    values = [scalar.to_python(lambda1), scalar.to_python(lambda2)]
    return values, root_truncated or trunc1 or trunc2
