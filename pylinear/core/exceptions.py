"""
Exception hierarchy for PyLinear.

All exceptions inherit from PyLinearError to allow catching any
library-specific error. Shape and index problems are ValidationErrors;
problems that only show up once the arithmetic is done are NumericalErrors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinearError(Exception):
    """Base exception for all PyLinear errors."""
    pass


class ValidationError(PyLinearError):
    """
    Input validation failed.

    Raised when user-provided inputs (sizes, scalar types, values) fail
    validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes violate the relation an operation requires.

    Equal length for vector add/subtract/inner product, equal shape for
    matrix add/subtract, matching inner dimension for matrix multiply.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class UnsupportedShapeError(ValidationError):
    """
    Operation is only defined for a specific matrix shape.

    Raised by determinant, inverse and eigenvalues on anything but 2x2.

    Attributes:
        operation: Name of the operation that was attempted
        shape: Actual shape of the matrix
        required_shape: Shape the operation supports
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, ...] | None = None,
        required_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape
        self.required_shape = required_shape


class IndexOutOfRangeError(ValidationError):
    """
    Element access outside the container bounds.

    Attributes:
        index: The offending index (int or (row, col) tuple)
        shape: Shape of the container that was accessed
    """

    def __init__(
        self,
        message: str,
        index: int | tuple[int, ...] | None = None,
        shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(PyLinearError):
    """
    Numerical computation failed.

    Base class for errors arising from the values themselves rather than
    from operand shapes.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular (zero determinant) and cannot be inverted.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was found, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant


class DomainError(NumericalError):
    """
    Value lies outside the real domain of a computation.

    Raised by 2x2 eigenvalues when the discriminant is negative, i.e. the
    eigenvalues form a complex conjugate pair.

    Attributes:
        discriminant: The negative discriminant (a+d)^2 - 4(ad-bc)
    """

    def __init__(self, message: str, discriminant: float | None = None):
        super().__init__(message)
        self.discriminant = discriminant


class TruncationWarning(UserWarning):
    """Integer arithmetic truncated a non-integral intermediate or result."""
    pass
