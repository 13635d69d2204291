#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Matrix - dense matrix of exact scalars with a fixed shape.

The matrix is generic over its scalar type: fracmatrix Fraction by default,
but any type offering + - * /, unary minus, equality and construction from
small integers works (fractions.Fraction, sympy.Rational, float). Values are
stored in one flat list in row-major order.

Each matrix owns its storage exclusively. Values are converted and copied on
the way in and copied on the way out, so no caller ever holds a reference
into a matrix's storage, and in-place operations only ever change the
receiver.
"""

import numbers
import operator
from typing import Iterator, List, Optional, Sequence

import numpy as np

from .. import names
from ..errors import DimensionError
from ..names import COFACTOR, DETERMINANT_METHODS, METHOD, check_option
from .fraction import Fraction
from .number_operations import N, NumberOperations
from .readable_matrix import MatrixBase


class MatrixRow:
    """Writable view of one matrix row, so that matrix[row][col] reads and writes the matrix"""

    __slots__ = ('_matrix', '_row')

    def __init__(self, matrix: 'Matrix', row: int):
        self._matrix = matrix
        self._row = row

    def __getitem__(self, col: int):
        return self._matrix.get_value_at(self._row, col)

    def __setitem__(self, col: int, value) -> None:
        self._matrix.set_value_at(self._row, col, value)

    def __len__(self) -> int:
        return self._matrix.cols

    def __iter__(self):
        for col in range(self._matrix.cols):
            yield self._matrix.get_value_at(self._row, col)

    def __repr__(self) -> str:
        return "[" + " ".join(str(value) for value in self) + "]"


class Matrix(MatrixBase[N]):
    """
    Dense rows x cols matrix with exact arithmetic.

    Supported constructions:
    - Matrix(rows, cols) - zero matrix
    - Matrix(rows, cols, fill) - every cell set to (a copy of) fill
    - Matrix.from_rows([[...], [...]]) - from a row-major literal
    - Matrix.identity(order), Matrix.zeros(rows, cols), matrix.copy()
    """

    def __init__(self, rows: int, cols: int, fill=None, scalar_type: type = Fraction):
        self._rows = self._check_dimension(rows, "row")
        self._cols = self._check_dimension(cols, "column")
        self._ops = NumberOperations.for_type(scalar_type)
        value = self._ops.zero() if fill is None else self._ops.value_of(fill)
        self._values = [self._ops.copy(value) for _ in range(self._rows * self._cols)]

    @staticmethod
    def _check_dimension(count: int, label: str) -> int:
        if not isinstance(count, numbers.Integral):
            raise TypeError(f"{label} count must be an integer, got {type(count).__name__}")
        if count < 0:
            raise DimensionError(f"negative {label} count: {count}")
        return int(count)

    @classmethod
    def _new(cls, rows: int, cols: int, values: list, ops: NumberOperations) -> 'Matrix':
        """Wrap freshly computed values that no other matrix refers to"""
        matrix = cls.__new__(cls)
        matrix._rows = rows
        matrix._cols = cols
        matrix._ops = ops
        matrix._values = values
        return matrix

    @classmethod
    def from_rows(cls, data: Sequence[Sequence], scalar_type: type = Fraction) -> 'Matrix':
        """
        Create a matrix from a row-major 2D literal.

        Args:
            data: Rows of values (ints, Fractions, strings like "1/2", or
                values of scalar_type)
            scalar_type: Scalar type of the new matrix (default Fraction)

        Raises:
            DimensionError: If data is empty or its rows differ in length
        """
        rows = [list(row) for row in data]
        if not rows or not rows[0]:
            raise DimensionError("data must not be empty")
        col_count = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != col_count:
                raise DimensionError(f"row {index} has {len(row)} values, expected {col_count}")
        ops = NumberOperations.for_type(scalar_type)
        return cls._new(len(rows), col_count, [ops.value_of(value) for row in rows for value in row], ops)

    @classmethod
    def zeros(cls, rows: int, cols: int, scalar_type: type = Fraction) -> 'Matrix':
        return cls(rows, cols, scalar_type=scalar_type)

    @classmethod
    def identity(cls, rows: int, cols: Optional[int] = None, scalar_type: type = Fraction) -> 'Matrix':
        """
        Identity matrix: one on the diagonal, zero elsewhere.

        Raises:
            DimensionError: If cols is given and differs from rows
        """
        if cols is not None and cols != rows:
            raise DimensionError(f"identity is only defined for square matrices, got {rows}x{cols}")
        matrix = cls(rows, rows, scalar_type=scalar_type)
        for i in range(matrix._rows):
            matrix._values[i * matrix._rows + i] = matrix._ops.one()
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def scalar_type(self) -> type:
        return self._ops.number_class

    @property
    def number_operations(self) -> NumberOperations:
        return self._ops

    # Element access
    def _check_row(self, row: int) -> int:
        row = operator.index(row)
        if not 0 <= row < self._rows:
            raise IndexError(f"row index {row} out of range for {self._rows}x{self._cols} matrix")
        return row

    def _check_col(self, col: int) -> int:
        col = operator.index(col)
        if not 0 <= col < self._cols:
            raise IndexError(f"column index {col} out of range for {self._rows}x{self._cols} matrix")
        return col

    def get_value_at(self, row: int, col: int) -> N:
        return self._ops.copy(self._values[self._check_row(row) * self._cols + self._check_col(col)])

    def set_value_at(self, row: int, col: int, value) -> None:
        """Set the value at the specified position, converted to the scalar type"""
        self._values[self._check_row(row) * self._cols + self._check_col(col)] = self._ops.value_of(value)

    def get_row(self, row: int) -> List[N]:
        start = self._check_row(row) * self._cols
        return [self._ops.copy(value) for value in self._values[start:start + self._cols]]

    def get_column(self, col: int) -> List[N]:
        col = self._check_col(col)
        return [self._ops.copy(self._values[row * self._cols + col]) for row in range(self._rows)]

    def __getitem__(self, key):
        if isinstance(key, tuple):
            if len(key) != 2:
                raise IndexError(f"matrix index needs (row, col), got {len(key)} values")
            return self.get_value_at(key[0], key[1])
        return MatrixRow(self, self._check_row(key))

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise IndexError(f"matrix index needs (row, col), got {len(key)} values")
            self.set_value_at(key[0], key[1], value)
            return
        row = self._check_row(key)
        values = list(value)
        if len(values) != self._cols:
            raise DimensionError(f"row needs {self._cols} values, got {len(values)}")
        for col, item in enumerate(values):
            self.set_value_at(row, col, item)

    def __len__(self) -> int:
        return self._rows

    def __iter__(self) -> Iterator[List[N]]:
        for row in range(self._rows):
            yield self.get_row(row)

    # Structure
    def copy(self) -> 'Matrix':
        return Matrix._new(self._rows, self._cols, [self._ops.copy(value) for value in self._values], self._ops)

    __copy__ = copy

    def __deepcopy__(self, memo) -> 'Matrix':
        return self.copy()

    def transpose(self) -> 'Matrix':
        """Return the cols x rows matrix with result[j][i] = self[i][j]"""
        values = [self._ops.copy(self._values[row * self._cols + col])
                  for col in range(self._cols)
                  for row in range(self._rows)]
        return Matrix._new(self._cols, self._rows, values, self._ops)

    def sub_matrix(self, row_start: int, row_end: int, col_start: int, col_end: int) -> 'Matrix':
        """Extract rows row_start..row_end-1 and columns col_start..col_end-1"""
        if not 0 <= row_start <= row_end <= self._rows:
            raise IndexError(f"row range {row_start}:{row_end} out of range for {self._rows} rows")
        if not 0 <= col_start <= col_end <= self._cols:
            raise IndexError(f"column range {col_start}:{col_end} out of range for {self._cols} columns")
        values = [self._ops.copy(self._values[row * self._cols + col])
                  for row in range(row_start, row_end)
                  for col in range(col_start, col_end)]
        return Matrix._new(row_end - row_start, col_end - col_start, values, self._ops)

    def minor(self, row: int, col: int) -> 'Matrix':
        """Matrix without the given row and column"""
        row = self._check_row(row)
        col = self._check_col(col)
        values = [self._ops.copy(self._values[r * self._cols + c])
                  for r in range(self._rows) if r != row
                  for c in range(self._cols) if c != col]
        return Matrix._new(self._rows - 1, self._cols - 1, values, self._ops)

    def augment(self, other: 'Matrix') -> 'Matrix':
        """Horizontal concatenation [self | other]"""
        if other.rows != self._rows:
            raise DimensionError(f"Can only augment matrices with the same row count, got "
                                 f"{self._rows}x{self._cols} and {other.rows}x{other.cols}")
        right = other._values
        values = []
        for row in range(self._rows):
            values.extend(self._ops.copy(value) for value in self._values[row * self._cols:(row + 1) * self._cols])
            values.extend(self._ops.value_of(value) for value in right[row * other.cols:(row + 1) * other.cols])
        return Matrix._new(self._rows, self._cols + other.cols, values, self._ops)

    # Elementary row operations
    def swap_rows(self, row_a: int, row_b: int) -> None:
        """Exchange two full rows in place"""
        row_a = self._check_row(row_a)
        row_b = self._check_row(row_b)
        if row_a == row_b:
            return
        cols = self._cols
        values = self._values
        for col in range(cols):
            idx_a = row_a * cols + col
            idx_b = row_b * cols + col
            values[idx_a], values[idx_b] = values[idx_b], values[idx_a]

    def scale_row(self, row: int, factor) -> None:
        """Multiply every value of the row by factor, in place"""
        start = self._check_row(row) * self._cols
        factor = self._ops.value_of(factor)
        for idx in range(start, start + self._cols):
            self._values[idx] = self._values[idx] * factor

    def add_scaled_row(self, target_row: int, source_row: int, factor) -> None:
        """target[i] += factor * source[i] for every column i, in place"""
        target = self._check_row(target_row) * self._cols
        source = self._check_row(source_row) * self._cols
        factor = self._ops.value_of(factor)
        values = self._values
        for col in range(self._cols):
            values[target + col] = values[target + col] + factor * values[source + col]

    # Arithmetic
    def _scalar(self, value):
        """value converted to the scalar type, None if it is not a number"""
        if isinstance(value, (numbers.Number, Fraction, self._ops.number_class)):
            return self._ops.value_of(value)
        return None

    def _check_operand(self, other: 'Matrix', operation: str) -> list:
        self.check_same_shape(other, operation)
        return other._values

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        right = self._check_operand(other, "sum")
        return Matrix._new(self._rows, self._cols, [a + b for a, b in zip(self._values, right)], self._ops)

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        right = self._check_operand(other, "sum")
        self._values = [a + b for a, b in zip(self._values, right)]
        return self

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        right = self._check_operand(other, "difference")
        return Matrix._new(self._rows, self._cols, [a - b for a, b in zip(self._values, right)], self._ops)

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        right = self._check_operand(other, "difference")
        self._values = [a - b for a, b in zip(self._values, right)]
        return self

    def __neg__(self) -> 'Matrix':
        return Matrix._new(self._rows, self._cols, [-value for value in self._values], self._ops)

    def _matmul(self, other: 'Matrix') -> 'Matrix':
        if self._cols != other.rows:
            raise DimensionError(f"Left matrix's cols must be the same as right matrix's rows in matrix-matrix "
                                 f"product, got {self._rows}x{self._cols} and {other.rows}x{other.cols}")
        right = other._values
        inner = self._cols
        out_cols = other.cols
        values = []
        for row in range(self._rows):
            for col in range(out_cols):
                total = self._ops.zero()
                for k in range(inner):
                    total = total + self._values[row * inner + k] * right[k * out_cols + col]
                values.append(total)
        return Matrix._new(self._rows, out_cols, values, self._ops)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._matmul(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self._matmul(other)
        value = self._scalar(other)
        if value is None:
            return NotImplemented
        return Matrix._new(self._rows, self._cols, [a * value for a in self._values], self._ops)

    def __rmul__(self, other):
        value = self._scalar(other)
        if value is None:
            return NotImplemented
        return Matrix._new(self._rows, self._cols, [value * a for a in self._values], self._ops)

    def __imul__(self, other):
        if isinstance(other, Matrix):
            if other.rows != self._cols or other.cols != self._cols:
                raise DimensionError(f"Matrix product and assign needs a square right matrix of order "
                                     f"{self._cols}, got {other.rows}x{other.cols}")
            self._values = self._matmul(other)._values
            return self
        value = self._scalar(other)
        if value is None:
            return NotImplemented
        self._values = [a * value for a in self._values]
        return self

    def __truediv__(self, other):
        """Divide by a scalar, DomainError if the scalar is zero"""
        value = self._scalar(other)
        if value is None:
            return NotImplemented
        return Matrix._new(self._rows, self._cols, [self._ops.divide(a, value) for a in self._values], self._ops)

    def __itruediv__(self, other):
        value = self._scalar(other)
        if value is None:
            return NotImplemented
        self._values = [self._ops.divide(a, value) for a in self._values]
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(a == b for a, b in zip(self._values, other._values))

    __hash__ = None

    # Linear algebra
    def determinant(self, method: Optional[str] = None) -> N:
        """
        Determinant of this square matrix.

        Args:
            method: ROW_REDUCTION (default, O(n^3) elimination) or COFACTOR
                (Laplace expansion, O(n!), meant for cross-checking small orders)

        Raises:
            DimensionError: If the matrix is not square
        """
        method = check_option(METHOD, method or names.DEFAULT_DETERMINANT_METHOD, DETERMINANT_METHODS)
        if method == COFACTOR:
            from .laplace import laplace_determinant
            return laplace_determinant(self)
        from .gauss import Gauss
        return Gauss.get_instance().determinant(self)

    def inverse(self, singular_policy: Optional[str] = None) -> 'Matrix':
        """
        Inverse of this square matrix by Gauss-Jordan elimination.

        Args:
            singular_policy: RAISE (default) raises SingularMatrixError for a
                singular matrix, ZERO_MATRIX returns the zero matrix instead

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the matrix is singular and the policy is RAISE
        """
        from .gauss import Gauss
        return Gauss.get_instance().invert(self, singular_policy)

    def rank(self) -> int:
        from .gauss import Gauss
        return Gauss.get_instance().rank(self)

    def to_numpy(self) -> np.ndarray:
        """Float approximation of this matrix as a rows x cols numpy array"""
        return np.array([float(value) for value in self._values], dtype=float).reshape(self._rows, self._cols)

    # String representation
    def __str__(self) -> str:
        lines = []
        for row in range(self._rows):
            start = row * self._cols
            lines.append("[" + " ".join(str(value) for value in self._values[start:start + self._cols]) + "]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(str(value) for value in row) + "]" for row in self)
        return f"Matrix({self._rows}x{self._cols}, {self.scalar_type.__name__}, [{rows}])"
