"""
Vector and matrix containers with basic linear-algebra operations.

Public API:
    Vector      - add, subtract, inner_product
    Matrix      - add, subtract, scalar_multiply, multiply, transpose, norm,
                  and 2x2-only determinant, inverse, eigenvalues
    evaluate()  - run a named operation, returning Success / Failure
"""

from pylinear.linalg.vector import Vector
from pylinear.linalg.matrix import Matrix
from pylinear.linalg.solvers import (
    MATRIX_OPERATIONS,
    VECTOR_OPERATIONS,
    OperationParams,
    evaluate,
)

__all__ = [
    "Vector",
    "Matrix",
    "evaluate",
    "OperationParams",
    "VECTOR_OPERATIONS",
    "MATRIX_OPERATIONS",
]
