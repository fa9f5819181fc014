"""Dense matrices of floats with arithmetic, determinants and inverses."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator

_TOLERANCE = 1e-7


class MatrixError(Exception):
    """Base class for matrix errors."""


class InputError(MatrixError, ValueError):
    """An argument is not a usable matrix or value."""


class CalculationError(MatrixError, ArithmeticError):
    """The operation is undefined for the given operands or overflows."""


class Matrix:
    """A rectangular matrix of floats with at least one row and one column."""

    __slots__ = ("_rows", "_columns", "_data")

    def __init__(self, rows: int, columns: int) -> None:
        if not isinstance(rows, int) or not isinstance(columns, int):
            raise InputError("dimensions must be integers")
        if rows < 1 or columns < 1:
            raise InputError(f"invalid dimensions {rows}x{columns}")
        self._rows = rows
        self._columns = columns
        self._data = [[0.0] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        try:
            data = [[float(value) for value in row] for row in rows]
        except (TypeError, ValueError) as exc:
            raise InputError(f"invalid matrix data: {exc}") from exc
        if not data or not data[0]:
            raise InputError("a matrix needs at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise InputError("rows differ in length")
        result = cls(len(data), width)
        result._data = data
        return result

    @classmethod
    def linspace(cls, rows: int, columns: int, low: float, high: float) -> Matrix:
        """Fill a matrix row by row with values evenly spaced from low to high."""
        result = cls(rows, columns)
        count = rows * columns
        if count > 1:
            step = (high - low) / (count - 1)
            for pos in range(count):
                result._data[pos // columns][pos % columns] = low + step * pos
        else:
            result._data[0][0] = float(low)
        return result

    @property
    def shape(self) -> tuple[int, int]:
        """The pair (rows, columns)."""
        return self._rows, self._columns

    def to_list(self) -> list[list[float]]:
        """Return a copy of the values as a list of row lists."""
        return [list(row) for row in self._data]

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, column = index
            return self._data[row][column]
        return tuple(self._data[index])

    def __setitem__(self, index, value) -> None:
        if not isinstance(index, tuple):
            raise TypeError("matrix elements are addressed as [row, column]")
        row, column = index
        self._data[row][column] = float(value)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        for row in self._data:
            yield tuple(row)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_list()!r})"

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def equals(self, other) -> bool:
        """True when other has the same shape and every element is within 1e-7."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return all(
            abs(a - b) < _TOLERANCE
            for row_a, row_b in zip(self._data, other._data)
            for a, b in zip(row_a, row_b)
        )

    def _elementwise(self, other, operation) -> Matrix:
        if not isinstance(other, Matrix):
            raise InputError("operand is not a matrix")
        if self.shape != other.shape:
            raise CalculationError(
                f"shapes differ: {self.shape} and {other.shape}"
            )
        return Matrix.from_rows(
            [operation(a, b) for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        )._finite()

    def _finite(self) -> Matrix:
        if not all(math.isfinite(value) for row in self._data for value in row):
            raise CalculationError("result contains non-finite values")
        return self

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum."""
        return self._elementwise(other, lambda a, b: a + b)

    def subtract(self, other: Matrix) -> Matrix:
        """Element-wise difference."""
        return self._elementwise(other, lambda a, b: a - b)

    def scale(self, number: float) -> Matrix:
        """Multiply every element by a number."""
        if isinstance(number, bool) or not isinstance(number, numbers.Real):
            raise InputError("scale factor must be a real number")
        if not math.isfinite(number):
            raise CalculationError("scale factor is not finite")
        return Matrix.from_rows(
            [value * number for value in row] for row in self._data
        )._finite()

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product self x other."""
        if not isinstance(other, Matrix):
            raise InputError("operand is not a matrix")
        if self._columns != other._rows:
            raise CalculationError(
                f"cannot multiply {self.shape} by {other.shape}"
            )
        other_columns = list(zip(*other._data))
        product = []
        for row in self._data:
            out_row = []
            for column in other_columns:
                total = 0.0
                for a, b in zip(row, column):
                    total += a * b
                out_row.append(total)
            product.append(out_row)
        return Matrix.from_rows(product)._finite()

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        return Matrix.from_rows(zip(*self._data))

    def minor(self, row: int, column: int) -> Matrix:
        """Return the matrix with the given row and column removed."""
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise InputError(f"position ({row}, {column}) is out of range")
        if self._rows < 2 or self._columns < 2:
            raise InputError("minor of a single row or column is empty")
        return Matrix.from_rows(
            [value for x, value in enumerate(values) if x != column]
            for y, values in enumerate(self._data)
            if y != row
        )

    def determinant(self) -> float:
        """Determinant by expansion along the first row."""
        if self._rows != self._columns:
            raise CalculationError("determinant needs a square matrix")
        data = self._data
        if self._rows == 1:
            return data[0][0]
        if self._rows == 2:
            return data[0][0] * data[1][1] - data[0][1] * data[1][0]
        result = 0.0
        for x, value in enumerate(data[0]):
            sign = -1 if x % 2 else 1
            result += value * self.minor(0, x).determinant() * sign
        return result

    def complements(self) -> Matrix:
        """Matrix of algebraic complements (cofactors)."""
        if self._rows == 1 or self._columns == 1:
            raise CalculationError("complements need at least a 2x2 matrix")
        result = Matrix(self._rows, self._columns)
        for y in range(self._rows):
            for x in range(self._columns):
                det = self.minor(y, x).determinant()
                if not math.isfinite(det):
                    raise CalculationError("minor determinant is not finite")
                result._data[y][x] = det * (-1 if (x + y) % 2 else 1)
        return result

    def inverse(self) -> Matrix:
        """Inverse matrix; raises CalculationError when it does not exist."""
        det = self.determinant()
        if det == 0:
            raise CalculationError("matrix is singular")
        if self._rows == 1:
            return Matrix.from_rows([[1 / det]])
        return self.complements().transpose().scale(1 / det)