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
"""Exceptions raised by exact scalar and matrix operations"""


class DomainError(ArithmeticError):
    """A scalar operation left its mathematical domain.

    Raised for a zero denominator, the reciprocal of zero and any
    division by zero.
    """
    pass


class DimensionError(ValueError):
    """Operand shapes are incompatible, or a square-only operation got a non-square matrix."""
    pass


class SingularMatrixError(ArithmeticError):
    """Elimination found no pivot in a column, so the matrix has no inverse."""
    pass
