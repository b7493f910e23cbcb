"""
Operation dispatch for vectors and matrices.

evaluate() runs one named operation and reports the outcome as a value
instead of raising: Success wraps a Result envelope, Failure carries an
ErrorKind and the original exception. This is the entry point the
interactive console uses, and any caller that wants to branch on the
kind of failure rather than unwind.

    >>> outcome = evaluate('determinant', Matrix.from_rows([[1, 2], [3, 4]]))
    >>> outcome.value
    -2
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Callable

from pylinear.core.compute.timing import Timer
from pylinear.core.exceptions import PyLinearError, ValidationError
from pylinear.core.outcome import Failure, Outcome, Success
from pylinear.core.result import Result
from pylinear.linalg.matrix import Matrix
from pylinear.linalg.vector import Vector


VECTOR_OPERATIONS = ('add', 'subtract', 'inner_product')

MATRIX_OPERATIONS = (
    'add',
    'subtract',
    'scalar_multiply',
    'multiply',
    'transpose',
    'norm',
    'determinant',
    'inverse',
    'eigenvalues',
)

# Operations that need a second container of the same type
_BINARY = frozenset({'add', 'subtract', 'inner_product', 'multiply'})

BACKEND_NAME = 'cpu_reference'


@dataclass(frozen=True)
class OperationParams:
    """
    Payload of a successful operation.

    value is a Vector or Matrix for container-valued operations, a Python
    int/float for inner_product, norm and determinant, and a two-element
    list for eigenvalues.
    """
    value: Any


def _call(left, operation: str, right, scalar, options: dict[str, Any]) -> Any:
    """Invoke the named method on left with the operands it needs."""
    if operation in _BINARY:
        if right is None:
            raise ValidationError(f"{operation}: requires a second operand")
        if type(right) is not type(left):
            raise ValidationError(
                f"{operation}: operands must both be {type(left).__name__}, "
                f"got {type(right).__name__}"
            )
        return getattr(left, operation)(right)

    if operation == 'scalar_multiply':
        if scalar is None:
            raise ValidationError("scalar_multiply: requires a scalar")
        return left.scalar_multiply(scalar)

    method: Callable[..., Any] = getattr(left, operation)
    return method(**options)


def _supported(left) -> tuple[str, ...]:
    if isinstance(left, Vector):
        return VECTOR_OPERATIONS
    if isinstance(left, Matrix):
        return MATRIX_OPERATIONS
    raise ValidationError(
        f"left operand must be a Vector or Matrix, got {type(left).__name__}"
    )


def evaluate(
    operation: str,
    left: Vector | Matrix,
    right: Vector | Matrix | None = None,
    *,
    scalar: int | float | None = None,
    **options: Any,
) -> Outcome[OperationParams]:
    """
    Run one named operation and return its outcome.

    Parameters
    ----------
    operation : str
        One of VECTOR_OPERATIONS (for a Vector left operand) or
        MATRIX_OPERATIONS (for a Matrix).
    left : Vector or Matrix
        The operand the operation is applied to.
    right : Vector or Matrix, optional
        Second operand for add, subtract, inner_product and multiply.
    scalar : int or float, optional
        Factor for scalar_multiply.
    **options
        Extra keyword arguments for the operation, e.g.
        ``allow_complex=True`` for eigenvalues.

    Returns
    -------
    Success wrapping Result[OperationParams], or Failure.
    Integer truncation is recorded in Result.warnings rather than emitted.
    Exceptions outside the PyLinear hierarchy propagate.
    """
    timer = Timer()
    timer.start()

    try:
        with timer.section('validate'):
            supported = _supported(left)
            if operation not in supported:
                raise ValidationError(
                    f"Unknown {type(left).__name__.lower()} operation: {operation!r}. "
                    f"Must be one of {', '.join(supported)}."
                )
            if right is not None and operation not in _BINARY:
                raise ValidationError(f"{operation}: takes no second operand")
            if scalar is not None and operation != 'scalar_multiply':
                raise ValidationError(f"{operation}: takes no scalar")
            if options and operation != 'eigenvalues':
                raise ValidationError(
                    f"{operation}: unexpected options {sorted(options)}"
                )

        with timer.section('compute'), warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            value = _call(left, operation, right, scalar, options)
    except PyLinearError as e:
        return Failure.from_error(e)
    finally:
        timer.stop()

    info: dict[str, Any] = {
        'operation': operation,
        'dtype': left.kind,
        'left_shape': left.shape,
    }
    if right is not None:
        info['right_shape'] = right.shape
    if scalar is not None:
        info['scalar'] = scalar

    return Success(Result(
        params=OperationParams(value=value),
        info=info,
        timing=timer.result(),
        backend_name=BACKEND_NAME,
        warnings=tuple(str(w.message) for w in caught),
    ))
