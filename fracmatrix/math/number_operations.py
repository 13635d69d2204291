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
Number operations for the scalar types a matrix can hold.

A matrix only relies on its scalar type for + - * /, unary minus, equality
and construction from small integers. NumberOperations wraps one such type
and adds the few field operations the elimination algorithms need on top:
the identities, a zero test, and an inverse that fails with DomainError
instead of whatever the scalar type does on division by zero.

One instance is cached per scalar type (see for_type()).
"""

from typing import Dict, Generic, TypeVar

from ..errors import DomainError
from .fraction import Fraction

# Type variable for number types (Fraction, fractions.Fraction, sympy.Rational, ...)
N = TypeVar('N')


class NumberOperations(Generic[N]):
    """Field operations for one scalar type, shared by all matrices of that type"""

    _instances: Dict[type, 'NumberOperations'] = {}

    def __init__(self, number_class: type):
        self.number_class = number_class
        self._zero = self.value_of(0)
        self._one = self.value_of(1)

    @classmethod
    def for_type(cls, number_class: type) -> 'NumberOperations':
        """Return the cached operations instance for number_class"""
        ops = cls._instances.get(number_class)
        if ops is None:
            ops = cls(number_class)
            cls._instances[number_class] = ops
        return ops

    def value_of(self, value) -> N:
        """
        Convert value to the scalar type.

        Values already of the scalar type are copied. A Fraction going into
        another scalar type is rebuilt as numerator / denominator in that type.
        """
        if self.number_class is Fraction:
            return Fraction.value_of(value)
        if isinstance(value, self.number_class):
            return self.copy(value)
        if isinstance(value, Fraction):
            return self.number_class(value.numerator) / self.number_class(value.denominator)
        return self.number_class(value)

    def zero(self) -> N:
        """Additive identity (a new value on every call)"""
        return self.copy(self._zero)

    def one(self) -> N:
        """Multiplicative identity (a new value on every call)"""
        return self.copy(self._one)

    def copy(self, value: N) -> N:
        """Independent copy of value. Fraction is the only mutable scalar type."""
        if isinstance(value, Fraction):
            return value.copy()
        return value

    def is_zero(self, value: N) -> bool:
        return value == self._zero

    def is_one(self, value: N) -> bool:
        return value == self._one

    def divide(self, num_a: N, num_b: N) -> N:
        """
        Divide num_a by num_b.

        Raises:
            DomainError: If num_b is zero
        """
        if self.is_zero(num_b):
            raise DomainError(f"Can't divide {num_a} by zero")
        return num_a / num_b

    def invert(self, number: N) -> N:
        """Return multiplicative inverse, DomainError for zero"""
        if self.is_zero(number):
            raise DomainError("Zero has no multiplicative inverse")
        return self._one / number

    def __repr__(self) -> str:
        return f"NumberOperations({self.number_class.__name__})"
