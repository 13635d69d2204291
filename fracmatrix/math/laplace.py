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
Determinant by cofactor (Laplace) expansion along the first row.

Factorial running time, so this is a cross-check for the row-reduction
determinant on small orders and not something to call on a hot path.
"""

from .matrix import Matrix
from .number_operations import N


def laplace_determinant(matrix: Matrix) -> N:
    """
    Calculates matrix determinant by Laplace method.

    Orders 0, 1 and 2 are computed directly (order 0 gives zero). From order 3
    on, the determinant is the sum over the first row of
    entry * (-1)^col * det(minor), skipping zero entries.

    Raises:
        DimensionError: If matrix is not square
    """
    matrix.check_square("determinant")
    ops = matrix.number_operations
    order = matrix.rows

    if order == 0:
        return ops.zero()
    if order == 1:
        return matrix.get_value_at(0, 0)
    if order == 2:
        return (matrix.get_value_at(0, 0) * matrix.get_value_at(1, 1)
                - matrix.get_value_at(0, 1) * matrix.get_value_at(1, 0))

    det = ops.zero()
    for col in range(order):
        entry = matrix.get_value_at(0, col)
        if ops.is_zero(entry):
            continue
        term = entry * laplace_determinant(matrix.minor(0, col))
        det = det - term if col & 1 else det + term
    return det
