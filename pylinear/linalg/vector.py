"""
Vector: fixed-length numeric container.

A Vector is created zero-filled at a fixed length and populated element
by element. Binary operations never mutate their operands; they return a
new Vector or a scalar.
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.compute.tolerances import ToleranceTier, select_tolerance
from pylinear.core.exceptions import DimensionError
from pylinear.core.scalar import (
    ScalarKind,
    coerce,
    kind_of,
    resolve_dtype,
    to_python,
    zero,
)
from pylinear.core.validation import (
    check_array,
    check_index,
    check_same_dtype,
    check_size,
)


class Vector:
    """
    Fixed-length ordered sequence of 'int' or 'float' scalars.

    Construction:
        Vector(3)                          # [0, 0, 0], int
        Vector(3, dtype='float')           # [0.0, 0.0, 0.0]
        Vector.from_values([1, 2, 3])

    Elements are read and written with get/set (or v[i], v[i] = x).
    Indices must satisfy 0 <= i < length(); negative indices are rejected.
    """

    __slots__ = ('_data',)
    __array_ufunc__ = None

    def __init__(self, length: int, dtype: ScalarKind | np.dtype | type | None = None):
        length = check_size(length, "length")
        self._data: NDArray[Any] = np.zeros(length, dtype=resolve_dtype(dtype))

    @classmethod
    def from_values(
        cls,
        values: ArrayLike,
        dtype: ScalarKind | np.dtype | type | None = None,
    ) -> Vector:
        """
        Build a Vector from a 1D sequence.

        Args:
            values: 1D sequence or numpy array of real numbers
            dtype: 'int', 'float', or None to infer from values
        """
        return cls._wrap(check_array(values, "values", ndim=1, dtype=dtype))

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Vector:
        """Adopt an array the caller no longer references."""
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    # --- Element access ---

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def kind(self) -> ScalarKind:
        """Scalar kind name, 'int' or 'float'."""
        return kind_of(self._data.dtype)

    @property
    def shape(self) -> tuple[int]:
        return (self._data.shape[0],)

    def length(self) -> int:
        return self._data.shape[0]

    def get(self, index: int) -> int | float:
        index = check_index(index, self.length(), "index", self.shape)
        return to_python(self._data[index])

    def set(self, index: int, value: int | float) -> None:
        index = check_index(index, self.length(), "index", self.shape)
        self._data[index] = coerce(value, self.dtype, "value")

    def __len__(self) -> int:
        return self.length()

    def __getitem__(self, index: int) -> int | float:
        return self.get(index)

    def __setitem__(self, index: int, value: int | float) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[int | float]:
        return iter(self.to_list())

    # --- Operations ---

    def _check_operand(self, other: Vector, operation: str) -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"{operation}: expected a Vector, got {type(other).__name__}")
        if self.length() != other.length():
            raise DimensionError(
                f"{operation}: vector dimensions must match, "
                f"got lengths {self.length()} and {other.length()}",
                operation=operation,
                left_shape=self.shape,
                right_shape=other.shape,
            )
        check_same_dtype(self.dtype, other.dtype, operation)

    def add(self, other: Vector) -> Vector:
        """
        Element-wise sum.

        Raises:
            DimensionError: If lengths differ
        """
        self._check_operand(other, "vector addition")
        return Vector._wrap(self._data + other._data)

    def subtract(self, other: Vector) -> Vector:
        """
        Element-wise difference self - other.

        Raises:
            DimensionError: If lengths differ
        """
        self._check_operand(other, "vector subtraction")
        return Vector._wrap(self._data - other._data)

    def inner_product(self, other: Vector) -> int | float:
        """
        Sum of a[i] * b[i], starting from the zero of the scalar kind.

        An empty pair of vectors has inner product 0.

        Raises:
            DimensionError: If lengths differ
        """
        self._check_operand(other, "inner product")
        total = zero(self.dtype)
        for a, b in zip(self._data, other._data):
            total += a * b
        return to_python(total)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    # --- Comparison & export ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (
            self.dtype == other.dtype
            and self.shape == other.shape
            and bool(np.array_equal(self._data, other._data))
        )

    __hash__ = None  # mutable

    def allclose(self, other: Vector, tier: ToleranceTier | None = None) -> bool:
        """Element-wise comparison within the dtype's tolerance tier."""
        if not isinstance(other, Vector) or self.shape != other.shape:
            return False
        tier = tier or select_tolerance(self.dtype)
        return bool(np.allclose(self._data, other._data, rtol=tier.rtol, atol=tier.atol))

    def to_list(self) -> list[int | float]:
        return self._data.tolist()

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the underlying storage."""
        return self._data.copy()

    def render(self) -> list[str]:
        """Elements in order as printable tokens."""
        return [str(value) for value in self._data.tolist()]

    def __str__(self) -> str:
        return " ".join(self.render())

    def __repr__(self) -> str:
        return f"Vector({self.to_list()}, dtype='{self.kind}')"
