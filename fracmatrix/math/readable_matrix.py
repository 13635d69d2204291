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
Matrix interface shared by all matrix implementations.

MatrixBase fixes the read side of a matrix (shape, element access, transpose,
copy, rendering) and carries the shape checks every binary or square-only
operation performs before it touches any data.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Tuple

from ..errors import DimensionError
from .number_operations import N


class MatrixBase(ABC, Generic[N]):
    """Readable matrix of scalar type N with a fixed shape"""

    @property
    @abstractmethod
    def rows(self) -> int:
        """Number of rows"""
        pass

    @property
    @abstractmethod
    def cols(self) -> int:
        """Number of columns"""
        pass

    @abstractmethod
    def get_value_at(self, row: int, col: int) -> N:
        """Get (a copy of) the value at the specified position"""
        pass

    @abstractmethod
    def copy(self) -> 'MatrixBase[N]':
        """Create a deep copy of this matrix"""
        pass

    @abstractmethod
    def transpose(self) -> 'MatrixBase[N]':
        """Return transposed version of this matrix"""
        pass

    @abstractmethod
    def __str__(self) -> str:
        pass

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def is_square(self) -> bool:
        return self.rows == self.cols

    def to_list(self) -> List[List[N]]:
        """All rows as a 2D list of (copied) values"""
        return [[self.get_value_at(row, col) for col in range(self.cols)] for row in range(self.rows)]

    def check_square(self, operation: str) -> None:
        """Raise DimensionError unless this matrix is square"""
        if not self.is_square():
            raise DimensionError(f"{operation} is only defined for square matrices, got {self.rows}x{self.cols}")

    def check_same_shape(self, other: 'MatrixBase', operation: str) -> None:
        """Raise DimensionError unless other has the same shape as this matrix"""
        if self.shape != other.shape:
            raise DimensionError(f"Matrix {operation} must be between same order matrices, got "
                                 f"{self.rows}x{self.cols} and {other.rows}x{other.cols}")
