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
"""Conversions between fracmatrix values and numpy, sympy and the standard library"""

import fractions
from typing import Union

import numpy as np
from sympy import Matrix as SympyMatrix
from sympy import Rational

from .errors import DimensionError
from .math.fraction import Fraction
from .math.matrix import Matrix

# Type alias for numeric types that can be converted to Fraction
Numeric = Union[int, float, str, fractions.Fraction, Rational, Fraction]


def to_fraction(value: Numeric) -> Fraction:
    """
    Convert a numeric value to a Fraction.

    Args:
        value: An int, float, str, fractions.Fraction, sympy.Rational or
            numpy scalar (floats are approximated with limit_denominator())

    Returns:
        Fraction representation of the value
    """
    if isinstance(value, Rational):
        return Fraction(int(value.p), int(value.q))
    if isinstance(value, np.integer):
        return Fraction(int(value))
    if isinstance(value, np.floating):
        return Fraction.value_of(float(value))
    return Fraction.value_of(value)


def to_sympy_rational(value: Numeric) -> Rational:
    """Convert a Fraction (or any value to_fraction accepts) to a sympy Rational"""
    if isinstance(value, Rational):
        return value
    frac = to_fraction(value)
    return Rational(frac.numerator, frac.denominator)


def from_numpy(array: np.ndarray, scalar_type: type = Fraction) -> Matrix:
    """
    Create a Matrix from a 2D numpy array.

    Float entries are approximated by the nearest fraction with a small
    denominator (0.1 becomes 1/10).

    Raises:
        DimensionError: If array is not two-dimensional
    """
    array = np.asarray(array)
    if array.ndim != 2:
        raise DimensionError(f"Expected a 2D array, got {array.ndim} dimensions")
    rows, cols = array.shape
    matrix = Matrix(rows, cols, scalar_type=scalar_type)
    for i in range(rows):
        for j in range(cols):
            matrix[i, j] = to_fraction(array[i, j])
    return matrix


def to_sympy(matrix: Matrix) -> SympyMatrix:
    """Exact sympy copy of a matrix, with sympy.Rational entries"""
    values = [to_sympy_rational(value) for row in matrix for value in row]
    return SympyMatrix(matrix.rows, matrix.cols, values)


def from_sympy(sympy_matrix: SympyMatrix, scalar_type: type = Fraction) -> Matrix:
    """Create a Matrix from a sympy matrix of rational entries"""
    rows, cols = sympy_matrix.shape
    matrix = Matrix(rows, cols, scalar_type=scalar_type)
    for i in range(rows):
        for j in range(cols):
            matrix[i, j] = to_fraction(sympy_matrix[i, j])
    return matrix
