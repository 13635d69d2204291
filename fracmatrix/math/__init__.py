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
Mathematical infrastructure of fracmatrix:
- Exact rational arithmetic with Fraction
- Matrices over any field-like scalar type
- Determinant, inverse and rank by Gaussian elimination
- Cofactor expansion as an independent determinant for cross-checks

All operations are exact when the scalar type is exact.
"""

from .fraction import Fraction, gcd
from .number_operations import NumberOperations
from .readable_matrix import MatrixBase
from .matrix import Matrix, MatrixRow
from .gauss import Gauss as GaussianElimination
from .laplace import laplace_determinant

__all__ = [
    'Fraction',
    'gcd',
    'NumberOperations',
    'MatrixBase',
    'Matrix',
    'MatrixRow',
    'GaussianElimination',
    'laplace_determinant',
]
