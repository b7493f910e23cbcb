"""
PyLinear: small linear-algebra toolkit with an interactive console.

Vectors and matrices over 'int' (C-style truncating) or 'float' scalars,
with the usual element-wise operations, matrix products, Frobenius norm
and closed-form 2x2 determinant, inverse and eigenvalues.

Submodules:
    core: Exceptions, scalar semantics, validation, result envelopes
    linalg: Vector, Matrix and the evaluate() dispatcher
    cli: Interactive menu program (python -m pylinear)
"""

__version__ = "0.1.0"

from pylinear.core import (
    DimensionError,
    DomainError,
    ErrorKind,
    Failure,
    IndexOutOfRangeError,
    NumericalError,
    PyLinearError,
    Result,
    SingularMatrixError,
    Success,
    TruncationWarning,
    UnsupportedShapeError,
    ValidationError,
)
from pylinear.linalg import (
    MATRIX_OPERATIONS,
    VECTOR_OPERATIONS,
    Matrix,
    OperationParams,
    Vector,
    evaluate,
)

__all__ = [
    "__version__",
    # Containers
    "Vector",
    "Matrix",
    # Dispatch
    "evaluate",
    "OperationParams",
    "VECTOR_OPERATIONS",
    "MATRIX_OPERATIONS",
    "Result",
    "Success",
    "Failure",
    "ErrorKind",
    # Exceptions
    "PyLinearError",
    "ValidationError",
    "DimensionError",
    "UnsupportedShapeError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "DomainError",
    "TruncationWarning",
]
