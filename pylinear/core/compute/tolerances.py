"""
Tolerance tiers for approximate comparison.

Integer containers compare exactly. Float containers compare with a
relative/absolute tolerance, used by allclose() and by the test suite
(e.g. A @ inverse(A) against the identity).
"""

from dataclasses import dataclass

import numpy as np

from pylinear.core.scalar import is_integer


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer arithmetic is exact; any difference is a real difference
INT_EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='int_exact',
    description='int64 arithmetic, exact comparison',
)

# Double precision, a few ulps of slack for the 2x2 closed forms
FLOAT_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float_fp64',
    description='float64 arithmetic, machine-precision comparison',
)


def select_tolerance(dtype: np.dtype) -> ToleranceTier:
    """Select the tolerance tier for a container dtype."""
    if is_integer(dtype):
        return INT_EXACT
    return FLOAT_FP64
