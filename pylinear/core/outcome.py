"""
Tagged success/failure values for callers that prefer not to unwind.

The linear-algebra core raises the exceptions in core.exceptions. The
dispatch layer (linalg.solvers) converts them into an Outcome so an
interactive caller can branch on ErrorKind and keep going:

    outcome = evaluate('inverse', m)
    if isinstance(outcome, Failure):
        if outcome.kind is ErrorKind.SINGULAR_MATRIX:
            ...
    else:
        show(outcome.value)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from pylinear.core.exceptions import (
    DimensionError,
    DomainError,
    IndexOutOfRangeError,
    PyLinearError,
    SingularMatrixError,
    UnsupportedShapeError,
)
from pylinear.core.result import Result

P = TypeVar('P')


class ErrorKind(Enum):
    """Failure categories reported by the dispatch layer."""
    DIMENSION_MISMATCH = 'dimension_mismatch'
    UNSUPPORTED_SHAPE = 'unsupported_shape'
    SINGULAR_MATRIX = 'singular_matrix'
    INDEX_OUT_OF_RANGE = 'index_out_of_range'
    DOMAIN_ERROR = 'domain_error'
    INVALID_INPUT = 'invalid_input'


# Most specific first: UnsupportedShapeError and DimensionError are both
# ValidationErrors, which fall through to INVALID_INPUT.
_KIND_BY_EXCEPTION: tuple[tuple[type[PyLinearError], ErrorKind], ...] = (
    (DimensionError, ErrorKind.DIMENSION_MISMATCH),
    (UnsupportedShapeError, ErrorKind.UNSUPPORTED_SHAPE),
    (IndexOutOfRangeError, ErrorKind.INDEX_OUT_OF_RANGE),
    (SingularMatrixError, ErrorKind.SINGULAR_MATRIX),
    (DomainError, ErrorKind.DOMAIN_ERROR),
)


def error_kind(error: PyLinearError) -> ErrorKind:
    """Map a PyLinear exception to its ErrorKind."""
    for exc_type, kind in _KIND_BY_EXCEPTION:
        if isinstance(error, exc_type):
            return kind
    return ErrorKind.INVALID_INPUT


@dataclass(frozen=True)
class Success(Generic[P]):
    """A completed operation and its Result envelope."""
    result: Result[P]

    @property
    def ok(self) -> bool:
        return True

    @property
    def value(self):
        """Shortcut for result.params.value."""
        return self.result.params.value

    def unwrap(self) -> Result[P]:
        return self.result


@dataclass(frozen=True)
class Failure:
    """
    A failed operation.

    Attributes:
        kind: Failure category
        message: Human-readable description, suitable for display
        error: The original exception, kept for re-raising and diagnostics
    """
    kind: ErrorKind
    message: str
    error: PyLinearError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        """Re-raise the original exception."""
        raise self.error

    @classmethod
    def from_error(cls, error: PyLinearError) -> Failure:
        return cls(kind=error_kind(error), message=str(error), error=error)


Outcome = Union[Success[P], Failure]
