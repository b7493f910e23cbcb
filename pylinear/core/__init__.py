"""
Core infrastructure for PyLinear.

Shared abstractions used by the vector and matrix containers and by the
dispatch layer.

Key components:
    exceptions: Exception hierarchy
    scalar: Scalar kinds ('int', 'float') and their arithmetic semantics
    validation: Input validators
    result: Generic Result[P] envelope
    outcome: Success / Failure tagged values with ErrorKind
    compute: Timing and tolerance tiers
"""

from pylinear.core.result import Result
from pylinear.core.outcome import ErrorKind, Failure, Outcome, Success
from pylinear.core.exceptions import (
    PyLinearError,
    ValidationError,
    DimensionError,
    UnsupportedShapeError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    DomainError,
    TruncationWarning,
)

__all__ = [
    # Result
    "Result",
    # Outcome
    "ErrorKind",
    "Failure",
    "Outcome",
    "Success",
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
