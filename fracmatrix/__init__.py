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
"""fracmatrix: exact rational arithmetic and fixed-shape matrices over exact scalars"""

import logging

from .names import *
from .errors import DomainError, DimensionError, SingularMatrixError


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .math import (
    Fraction,
    gcd,
    NumberOperations,
    MatrixBase,
    Matrix,
    GaussianElimination,
    laplace_determinant,
)
from .convert import (
    to_fraction,
    to_sympy_rational,
    from_numpy,
    to_sympy,
    from_sympy,
)

__version__ = "1.0.0"
