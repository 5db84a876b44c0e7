"""Dense row-major matrices of floats and the basic operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from numbers import Real
from typing import Iterable, Sequence


class ConvergenceError(RuntimeError):
    """Raised when an iterative method fails to reach the requested tolerance."""


def _format_float(value: float) -> str:
    """Shortest positional representation of a float, without exponent."""
    if value != value:
        return "NaN"
    if value == float("inf"):
        return "+Inf"
    if value == float("-inf"):
        return "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


@dataclass
class Matrix:
    """A rows x columns matrix stored as one flat list in row-major order."""

    rows: int
    columns: int
    data: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < 0 or self.columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.data = [float(v) for v in self.data]
        if len(self.data) != self.rows * self.columns:
            raise ValueError(
                "length of data does not match "
                f"{self.rows} rows and {self.columns} columns"
            )

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        """Return a rows x columns matrix of zeros."""
        return cls(rows, columns, [0.0] * (rows * columns))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """Return the n x n identity matrix."""
        result = cls.zeros(n, n)
        for i in range(n):
            result.data[i * n + i] = 1.0
        return result

    @classmethod
    def from_vector(cls, values: Iterable[float]) -> Matrix:
        """Build a column vector from a sequence of numbers."""
        items = list(values)
        return cls(len(items), 1, items)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        if not rows:
            raise ValueError("at least one row is required")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("all rows must have the same length")
        return cls(len(rows), width, [v for r in rows for v in r])

    def to_vector(self) -> list[float]:
        """Return the entries of a column vector as a list."""
        if self.columns != 1:
            raise ValueError("matrix is not a column vector")
        return list(self.data)

    def to_rows(self) -> list[list[float]]:
        """Return the matrix as a list of row lists."""
        return [self.row(i) for i in range(self.rows)]

    def _index(self, key: object) -> int:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be (row, column) pairs")
        r, c = key
        if not (0 <= r < self.rows and 0 <= c < self.columns):
            raise IndexError("matrix index out of range")
        return r * self.columns + c

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self.data[self._index(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.data[self._index(key)] = float(value)

    def row(self, i: int) -> list[float]:
        """Return a copy of row i."""
        if not 0 <= i < self.rows:
            raise IndexError("row index out of range")
        start = i * self.columns
        return self.data[start:start + self.columns]

    def column(self, j: int) -> list[float]:
        """Return a copy of column j."""
        if not 0 <= j < self.columns:
            raise IndexError("column index out of range")
        return self.data[j::self.columns] if self.rows else []

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        return Matrix(
            self.columns,
            self.rows,
            [v for j in range(self.columns) for v in self.column(j)],
        )

    def append_row(self, row: Sequence[float]) -> Matrix:
        """Return a new matrix with one row added at the bottom."""
        if len(row) != self.columns:
            raise ValueError("row length does not match the number of columns")
        return Matrix(self.rows + 1, self.columns, self.data + list(row))

    def append_column(self, column: Sequence[float]) -> Matrix:
        """Return a new matrix with one column added on the right."""
        if len(column) != self.rows:
            raise ValueError("column length does not match the number of rows")
        data = [
            v
            for i, extra in enumerate(column)
            for v in (*self.row(i), extra)
        ]
        return Matrix(self.rows, self.columns + 1, data)

    def _check_same_shape(self, other: Matrix) -> None:
        if (self.rows, self.columns) != (other.rows, other.columns):
            raise ValueError("matrix shapes do not match")

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            self.rows, self.columns, [a + b for a, b in zip(self.data, other.data)]
        )

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            self.rows, self.columns, [a - b for a, b in zip(self.data, other.data)]
        )

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.columns != other.rows:
            raise ValueError("inner matrix dimensions do not match")
        cols = [other.column(j) for j in range(other.columns)]
        data = [
            sum(a * b for a, b in zip(self.row(i), col))
            for i in range(self.rows)
            for col in cols
        ]
        return Matrix(self.rows, other.columns, data)

    def __mul__(self, factor: object) -> Matrix:
        if isinstance(factor, bool) or not isinstance(factor, Real):
            return NotImplemented
        return Matrix(self.rows, self.columns, [factor * v for v in self.data])

    def __rmul__(self, factor: object) -> Matrix:
        return self.__mul__(factor)

    def __str__(self) -> str:
        return "\n".join(
            "[" + " ".join(_format_float(v) for v in self.row(i)) + "]"
            for i in range(self.rows)
        )


def cross(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Cross product of two three-dimensional vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("vectors must have length 3")
    return [
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ]