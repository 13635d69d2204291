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
Gauss operations - matrix operations based on Gaussian elimination.

Key operations are the determinant (forward elimination to triangular form),
the inverse (Gauss-Jordan elimination of the augmented matrix [A | I]) and
the rank. All of them run on a private copy of their argument, so callers
never see a half-reduced matrix, and with exact scalars no pivot is ever
lost to rounding: a pivot is simply the first non-zero value in its column.
"""

import logging
from typing import Optional

from .. import names
from ..errors import SingularMatrixError
from ..names import SINGULAR_POLICIES, SINGULAR_POLICY, ZERO_MATRIX, check_option
from .matrix import Matrix
from .number_operations import N

LOG = logging.getLogger(__name__)


class Gauss:
    """
    Elimination-based operations on matrices of any exact scalar type.

    Use the shared instance from get_instance(); the class holds no state
    between calls.
    """

    _instance = None

    @classmethod
    def get_instance(cls) -> 'Gauss':
        """Get the shared Gauss instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def determinant(self, matrix: Matrix) -> N:
        """
        Determinant by row reduction.

        Drives a copy of the matrix to upper triangular form column by column.
        Every row swap flips the sign of the accumulated scale, and every pivot
        row is divided by its pivot (so the pivot becomes one) after
        multiplying the scale by that pivot. Once all columns are processed the
        diagonal holds only ones and the scale is the determinant. A column
        without pivot means the matrix is singular and the determinant zero.

        Args:
            matrix: Square matrix

        Returns:
            The determinant, zero for the empty 0x0 matrix

        Raises:
            DimensionError: If matrix is not square
        """
        matrix.check_square("determinant")
        ops = matrix.number_operations
        order = matrix.rows
        if order == 0:
            return ops.zero()

        work = matrix.copy()
        scale = ops.one()
        for col in range(order):
            pivot_row = self._find_pivot_row(work, col, col)
            if pivot_row == -1:
                LOG.debug("No pivot in column %d, determinant is zero", col)
                return ops.zero()

            if pivot_row != col:
                work.swap_rows(pivot_row, col)
                scale = -scale

            pivot = work.get_value_at(col, col)
            scale = scale * pivot
            work.scale_row(col, ops.invert(pivot))
            self._eliminate_column(work, col, col, reduced=False)

        return scale

    def invert(self, matrix: Matrix, singular_policy: Optional[str] = None) -> Matrix:
        """
        Compute the inverse of a square matrix using Gauss-Jordan elimination.

        The method computes the reduced row-echelon form of [A | I] to get
        [I | A^-1]: each pivot column is eliminated in every other row, above
        and below the pivot.

        Args:
            matrix: Square matrix to invert
            singular_policy: RAISE or ZERO_MATRIX, see fracmatrix.names
                (default names.DEFAULT_SINGULAR_POLICY)

        Returns:
            The inverse matrix, or the zero matrix of the same order for a
            singular matrix under the ZERO_MATRIX policy

        Raises:
            DimensionError: If matrix is not square
            SingularMatrixError: If matrix is singular under the RAISE policy
        """
        policy = check_option(SINGULAR_POLICY, singular_policy or names.DEFAULT_SINGULAR_POLICY, SINGULAR_POLICIES)
        matrix.check_square("inverse")
        ops = matrix.number_operations
        order = matrix.rows

        augmented = matrix.augment(Matrix.identity(order, scalar_type=matrix.scalar_type))
        for col in range(order):
            pivot_row = self._find_pivot_row(augmented, col, col)
            if pivot_row == -1:
                LOG.warning("Matrix is singular: no pivot in column %d of %dx%d matrix", col, order, order)
                if policy == ZERO_MATRIX:
                    return Matrix.zeros(order, order, scalar_type=matrix.scalar_type)
                raise SingularMatrixError(f"Matrix is singular: column {col} has no non-zero pivot")

            if pivot_row != col:
                LOG.debug("Swapping rows %d and %d", col, pivot_row)
                augmented.swap_rows(pivot_row, col)

            pivot = augmented.get_value_at(col, col)
            if not ops.is_one(pivot):
                augmented.scale_row(col, ops.invert(pivot))
            self._eliminate_column(augmented, col, col, reduced=True)

        return augmented.sub_matrix(0, order, order, 2 * order)

    def rank(self, matrix: Matrix) -> int:
        """
        Compute the rank of the given matrix (number of pivots of its row echelon form).

        Args:
            matrix: Input matrix of any shape

        Returns:
            The rank of the matrix
        """
        work = matrix.copy()
        ops = work.number_operations
        current_row = 0
        for col in range(work.cols):
            if current_row >= work.rows:
                break
            pivot_row = self._find_pivot_row(work, current_row, col)
            if pivot_row == -1:
                continue
            work.swap_rows(pivot_row, current_row)
            work.scale_row(current_row, ops.invert(work.get_value_at(current_row, col)))
            self._eliminate_column(work, current_row, col, reduced=False)
            current_row += 1
        return current_row

    def _find_pivot_row(self, matrix: Matrix, start_row: int, col: int) -> int:
        """
        Find the pivot row in the given column: the first row from start_row
        on with a non-zero value.

        Returns:
            Row index of the pivot, or -1 if no suitable pivot found
        """
        ops = matrix.number_operations
        for row in range(start_row, matrix.rows):
            if not ops.is_zero(matrix.get_value_at(row, col)):
                return row
        return -1

    def _eliminate_column(self, matrix: Matrix, pivot_row: int, col: int, reduced: bool) -> None:
        """
        Eliminate the column using the pivot row, whose pivot must be one.

        Args:
            matrix: The matrix (modified in place)
            pivot_row: Row containing the pivot
            col: Column to eliminate
            reduced: If True, eliminate above and below; if False, only below
        """
        ops = matrix.number_operations
        rows = range(matrix.rows) if reduced else range(pivot_row + 1, matrix.rows)
        for row in rows:
            if row == pivot_row:
                continue
            multiplier = matrix.get_value_at(row, col)
            if not ops.is_zero(multiplier):
                matrix.add_scaled_row(row, pivot_row, -multiplier)
