"""
Matrix: fixed-size rectangular numeric container.

A Matrix is created zero-filled at a fixed rows x cols shape and populated
element by element. Every operation except set() returns a new value and
leaves its operands untouched.

Determinant, inverse and eigenvalues are defined for 2x2 matrices only;
see linalg._two_by_two for the closed forms.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core import scalar
from pylinear.core.compute.tolerances import ToleranceTier, select_tolerance
from pylinear.core.scalar import ScalarKind
from pylinear.core.validation import (
    check_array,
    check_index,
    check_inner_dimension,
    check_same_dtype,
    check_same_shape,
    check_size,
    check_two_by_two,
)
from pylinear.linalg import _two_by_two


class Matrix:
    """
    Fixed rows x cols grid of 'int' or 'float' scalars.

    Construction:
        Matrix(2, 3)                            # 2x3 zeros, int
        Matrix(2, 2, dtype='float')
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.identity(3)

    Operators:
        a + b, a - b        element-wise (same shape)
        a * 3, 3 * a        scalar multiplication
        a @ b               matrix product (a.cols == b.rows)
        a.T                 transpose
    """

    __slots__ = ('_data',)

    # Keep numpy scalars from broadcasting over the container: 2 * m and
    # np.int64(2) * m both dispatch to __rmul__.
    __array_ufunc__ = None

    def __init__(
        self,
        rows: int,
        cols: int,
        dtype: ScalarKind | np.dtype | type | None = None,
    ):
        rows = check_size(rows, "rows")
        cols = check_size(cols, "cols")
        self._data: NDArray[Any] = np.zeros((rows, cols), dtype=scalar.resolve_dtype(dtype))

    @classmethod
    def from_rows(
        cls,
        rows: ArrayLike,
        dtype: ScalarKind | np.dtype | type | None = None,
    ) -> Matrix:
        """
        Build a Matrix from a sequence of equal-length rows.

        Args:
            rows: 2D nested sequence or numpy array of real numbers
            dtype: 'int', 'float', or None to infer from the values

        Raises:
            ValidationError: If rows are ragged or non-numeric
        """
        return cls._wrap(check_array(rows, "rows", ndim=2, dtype=dtype))

    @classmethod
    def identity(cls, n: int, dtype: ScalarKind | np.dtype | type | None = None) -> Matrix:
        n = check_size(n, "n")
        return cls._wrap(np.eye(n, dtype=scalar.resolve_dtype(dtype)))

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Matrix:
        """Adopt an array the caller no longer references."""
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    # --- Shape & element access ---

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def kind(self) -> ScalarKind:
        """Scalar kind name, 'int' or 'float'."""
        return scalar.kind_of(self._data.dtype)

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    def rows(self) -> int:
        return self._data.shape[0]

    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def is_square(self) -> bool:
        return self.rows() == self.cols()

    def _check_position(self, row: int, col: int) -> tuple[int, int]:
        row = check_index(row, self.rows(), "row", self.shape)
        col = check_index(col, self.cols(), "col", self.shape)
        return row, col

    def get(self, row: int, col: int) -> int | float:
        row, col = self._check_position(row, col)
        return scalar.to_python(self._data[row, col])

    def set(self, row: int, col: int, value: int | float) -> None:
        row, col = self._check_position(row, col)
        self._data[row, col] = scalar.coerce(value, self.dtype, "value")

    def __getitem__(self, position: tuple[int, int]) -> int | float:
        row, col = position
        return self.get(row, col)

    def __setitem__(self, position: tuple[int, int], value: int | float) -> None:
        row, col = position
        self.set(row, col, value)

    # --- Element-wise operations ---

    def _check_operand(
        self,
        other: Matrix,
        operation: str,
        check_shapes: Callable[[tuple[int, int], tuple[int, int], str], None],
    ) -> None:
        """Type, then shape, then scalar kind."""
        if not isinstance(other, Matrix):
            raise TypeError(f"{operation}: expected a Matrix, got {type(other).__name__}")
        check_shapes(self.shape, other.shape, operation)
        check_same_dtype(self.dtype, other.dtype, operation)

    def add(self, other: Matrix) -> Matrix:
        """
        Element-wise sum.

        Raises:
            DimensionError: If shapes differ
        """
        self._check_operand(other, "matrix addition", check_same_shape)
        return Matrix._wrap(self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix:
        """
        Element-wise difference self - other.

        Raises:
            DimensionError: If shapes differ
        """
        self._check_operand(other, "matrix subtraction", check_same_shape)
        return Matrix._wrap(self._data - other._data)

    def scalar_multiply(self, factor: int | float) -> Matrix:
        """
        Multiply every element by factor.

        The factor is converted to the matrix's scalar kind first, so a
        float factor on an int matrix is truncated toward zero.
        """
        factor = scalar.coerce(factor, self.dtype, "scalar")
        return Matrix._wrap(self._data * factor)

    # --- Products & reshaping ---

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other, shape (self.rows, other.cols).

        Each cell accumulates from zero over the inner index k in order,
        so float results round exactly as the i, j, k triple loop does.

        Raises:
            DimensionError: If self.cols != other.rows
        """
        self._check_operand(other, "matrix multiplication", check_inner_dimension)

        result = np.zeros((self.rows(), other.cols()), dtype=self.dtype)
        for k in range(self.cols()):
            result += np.outer(self._data[:, k], other._data[k, :])
        return Matrix._wrap(result)

    def transpose(self) -> Matrix:
        """cols x rows matrix with result[j][i] = self[i][j]."""
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def norm(self) -> int | float:
        """
        Frobenius norm: square root of the sum of squared elements.

        Truncated to an integer for 'int' matrices.
        """
        total = np.sum(self._data * self._data, dtype=self.dtype)
        root, truncated = scalar.sqrt(total, self.dtype)
        if truncated:
            scalar.warn_truncation("norm")
        return scalar.to_python(root)

    # --- 2x2-only operations ---

    def determinant(self) -> int | float:
        """
        a*d - b*c.

        Raises:
            UnsupportedShapeError: If the matrix is not 2x2
        """
        check_two_by_two(self.shape, "determinant")
        return scalar.to_python(_two_by_two.determinant(self._data))

    def inverse(self) -> Matrix:
        """
        Inverse via [[d, -b], [-c, a]] / det.

        For 'int' matrices each element is truncated toward zero, so e.g.
        [[4, 7], [2, 6]] inverts to all zeros.

        Raises:
            UnsupportedShapeError: If the matrix is not 2x2
            SingularMatrixError: If the determinant is zero
        """
        check_two_by_two(self.shape, "inverse")
        result, truncated = _two_by_two.inverse(self._data)
        if truncated:
            scalar.warn_truncation("inverse")
        return Matrix._wrap(result)

    def eigenvalues(self, *, allow_complex: bool = False) -> list[Any]:
        """
        Both eigenvalues, ((a+d) + disc) / 2 first, then ((a+d) - disc) / 2.

        Args:
            allow_complex: For 'float' matrices, return a complex conjugate
                pair instead of raising when the discriminant is negative.

        Raises:
            UnsupportedShapeError: If the matrix is not 2x2
            DomainError: If the discriminant is negative and allow_complex
                is False
        """
        check_two_by_two(self.shape, "eigenvalues")
        values, truncated = _two_by_two.eigenvalues(self._data, allow_complex=allow_complex)
        if truncated:
            scalar.warn_truncation("eigenvalues")
        return values

    # --- Operators ---

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: int | float) -> Matrix:
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return self.scalar_multiply(factor)

    __rmul__ = __mul__

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # --- Comparison & export ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.dtype == other.dtype
            and self.shape == other.shape
            and bool(np.array_equal(self._data, other._data))
        )

    __hash__ = None  # mutable

    def allclose(self, other: Matrix, tier: ToleranceTier | None = None) -> bool:
        """Element-wise comparison within the dtype's tolerance tier."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        tier = tier or select_tolerance(self.dtype)
        return bool(np.allclose(self._data, other._data, rtol=tier.rtol, atol=tier.atol))

    def to_list(self) -> list[list[int | float]]:
        return self._data.tolist()

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the underlying storage."""
        return self._data.copy()

    def render(self) -> list[list[str]]:
        """One list of printable tokens per row."""
        return [[str(value) for value in row] for row in self._data.tolist()]

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.render())

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()}, dtype='{self.kind}')"
