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
Exact rational numbers with automatic reduction.

A Fraction holds an integer numerator and a non-zero integer denominator.
Every arithmetic operation that changes the value re-derives numerator and
denominator with the cross-multiplication identities of rational arithmetic
and then reduces the result, so operands stay small along long expression
chains and the sign always sits on the numerator.

Construction keeps the given numerator and denominator as they are; 2/4 stays
2/4 until the next arithmetic step or an explicit reduce(). Equality and
ordering use cross-multiplication and therefore never depend on reduction.

Python ints have arbitrary precision, so cross-multiplication never wraps
around the way fixed-width integers would.
"""

import fractions
import math
import numbers
from typing import Sequence, Union

from ..errors import DomainError


def gcd(a: int, b: int) -> int:
    """Greatest common divisor, never negative. gcd(0, b) is abs(b)."""
    return math.gcd(a, b)


class Fraction:
    """
    Exact rational number with numerator and denominator kept as Python ints.

    In-place operators (+=, -=, *=, /=) mutate the receiver and return it.
    The binary operators work on a copy, so the operands are never changed.
    Right-hand operators accept an int on the left (3 - Fraction(1, 2)).
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: int, denominator: int = 1):
        """
        Args:
            numerator: Integer numerator
            denominator: Integer denominator, must not be zero (default 1)

        Raises:
            TypeError: If numerator or denominator is not an integer
            DomainError: If denominator is zero
        """
        if not isinstance(numerator, numbers.Integral) or not isinstance(denominator, numbers.Integral):
            raise TypeError(f"Fraction needs integer numerator and denominator, got "
                            f"{type(numerator).__name__} and {type(denominator).__name__}")
        if denominator == 0:
            raise DomainError(f"Denominator can't be zero ({numerator}/0)")
        self._numerator = int(numerator)
        self._denominator = int(denominator)

    @classmethod
    def from_pair(cls, pair: Sequence[int]) -> 'Fraction':
        """Create a fraction from a (numerator, denominator) sequence"""
        if len(pair) != 2:
            raise ValueError(f"Expected (numerator, denominator), got {len(pair)} values")
        return cls(pair[0], pair[1])

    @classmethod
    def value_of(cls, value: Union['Fraction', int, float, str, numbers.Rational]) -> 'Fraction':
        """
        Factory method to create a Fraction from various types.

        Fractions are copied as they are, ints become n/1, other rationals
        (e.g. fractions.Fraction) keep their numerator and denominator, floats
        are approximated with limit_denominator(), and strings may be "n",
        "n/d" or a decimal literal such as "-0.125".
        """
        if isinstance(value, Fraction):
            return cls(value._numerator, value._denominator)
        if isinstance(value, numbers.Integral):
            return cls(int(value))
        if isinstance(value, numbers.Rational):
            return cls(int(value.numerator), int(value.denominator))
        if isinstance(value, float):
            if not math.isfinite(value):
                raise DomainError(f"Can't represent {value} as a fraction")
            approx = fractions.Fraction(value).limit_denominator()
            return cls(approx.numerator, approx.denominator)
        if isinstance(value, str):
            text = value.strip()
            if '/' in text:
                parts = text.split('/')
                if len(parts) != 2:
                    raise ValueError(f"Invalid fraction format: {value}")
                return cls(int(parts[0]), int(parts[1]))
            parsed = fractions.Fraction(text)
            return cls(parsed.numerator, parsed.denominator)
        raise TypeError(f"Cannot convert {type(value).__name__} to Fraction")

    @property
    def numerator(self) -> int:
        return self._numerator

    @numerator.setter
    def numerator(self, value: int) -> None:
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"numerator must be an integer, got {type(value).__name__}")
        self._numerator = int(value)

    @property
    def denominator(self) -> int:
        return self._denominator

    @denominator.setter
    def denominator(self, value: int) -> None:
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"denominator must be an integer, got {type(value).__name__}")
        if value == 0:
            raise DomainError("Denominator can't be zero")
        self._denominator = int(value)

    def copy(self) -> 'Fraction':
        return Fraction(self._numerator, self._denominator)

    __copy__ = copy

    def __deepcopy__(self, memo) -> 'Fraction':
        return self.copy()

    def reduce(self) -> 'Fraction':
        """
        Reduce to lowest terms and move the sign to the numerator.

        Idempotent. Zero reduces to 0/1. Returns self so calls can be chained.
        """
        divisor = gcd(self._numerator, self._denominator)
        self._numerator //= divisor
        self._denominator //= divisor
        if self._denominator < 0:
            self._numerator = -self._numerator
            self._denominator = -self._denominator
        return self

    def inverse(self) -> 'Fraction':
        """
        Multiplicative inverse (denominator/numerator), reduced.

        Raises:
            DomainError: If the numerator is zero
        """
        if self._numerator == 0:
            raise DomainError("Zero has no reciprocal")
        return Fraction(self._denominator, self._numerator).reduce()

    def evaluate(self) -> float:
        """Nearest float to numerator/denominator"""
        return self._numerator / self._denominator

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self._numerator == 0:
            return 0
        return 1 if (self._numerator > 0) == (self._denominator > 0) else -1

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == self._denominator

    def is_integer(self) -> bool:
        return self._numerator % self._denominator == 0

    # In-place arithmetic. Both components are computed from the old values in
    # one assignment, so `f op= f` works.
    def __iadd__(self, other):
        if isinstance(other, Fraction):
            self._numerator, self._denominator = (
                self._numerator * other._denominator + self._denominator * other._numerator,
                self._denominator * other._denominator)
        elif isinstance(other, numbers.Integral):
            self._numerator += self._denominator * int(other)
        else:
            return NotImplemented
        return self.reduce()

    def __isub__(self, other):
        if isinstance(other, Fraction):
            self._numerator, self._denominator = (
                self._numerator * other._denominator - self._denominator * other._numerator,
                self._denominator * other._denominator)
        elif isinstance(other, numbers.Integral):
            self._numerator -= self._denominator * int(other)
        else:
            return NotImplemented
        return self.reduce()

    def __imul__(self, other):
        if isinstance(other, Fraction):
            self._numerator, self._denominator = (
                self._numerator * other._numerator,
                self._denominator * other._denominator)
        elif isinstance(other, numbers.Integral):
            self._numerator *= int(other)
        else:
            return NotImplemented
        return self.reduce()

    def __itruediv__(self, other):
        if isinstance(other, Fraction):
            if other._numerator == 0:
                raise DomainError("Can't divide by fraction with numerator zero")
            self._numerator, self._denominator = (
                self._numerator * other._denominator,
                self._denominator * other._numerator)
        elif isinstance(other, numbers.Integral):
            if other == 0:
                raise DomainError("Can't divide by literal zero")
            self._denominator *= int(other)
        else:
            return NotImplemented
        return self.reduce()

    @staticmethod
    def _is_operand(other) -> bool:
        return isinstance(other, (Fraction, numbers.Integral))

    def __add__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __truediv__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        result = self.copy()
        result /= other
        return result

    def __radd__(self, other):
        if not isinstance(other, numbers.Integral):
            return NotImplemented
        return self + other

    def __rsub__(self, other):
        if not isinstance(other, numbers.Integral):
            return NotImplemented
        return Fraction(int(other)) - self

    def __rmul__(self, other):
        if not isinstance(other, numbers.Integral):
            return NotImplemented
        return self * other

    def __rtruediv__(self, other):
        if not isinstance(other, numbers.Integral):
            return NotImplemented
        return Fraction(int(other)) / self

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        exponent = int(exponent)
        if exponent < 0:
            return self.inverse() ** -exponent
        return Fraction(self._numerator ** exponent, self._denominator ** exponent).reduce()

    def __neg__(self) -> 'Fraction':
        return Fraction(-self._numerator, self._denominator)

    def __pos__(self) -> 'Fraction':
        return self.copy()

    def __abs__(self) -> 'Fraction':
        return Fraction(abs(self._numerator), abs(self._denominator))

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __float__(self) -> float:
        return self.evaluate()

    def __int__(self) -> int:
        """Truncate toward zero"""
        quotient = abs(self._numerator) // abs(self._denominator)
        return quotient if self.signum() >= 0 else -quotient

    # Comparisons by cross-multiplication: a/b == c/d iff a*d == c*b
    def __eq__(self, other) -> bool:
        if isinstance(other, Fraction):
            return self._numerator * other._denominator == other._numerator * self._denominator
        if isinstance(other, numbers.Integral):
            return self._numerator == int(other) * self._denominator
        return NotImplemented

    def _compare(self, other) -> int:
        """Sign of (self - other), valid for negative denominators as well"""
        if isinstance(other, Fraction):
            num, den = other._numerator, other._denominator
        else:
            num, den = int(other), 1
        diff = (self._numerator * den - num * self._denominator) * (self._denominator * den)
        return (diff > 0) - (diff < 0)

    def __lt__(self, other) -> bool:
        if not self._is_operand(other):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other) -> bool:
        if not self._is_operand(other):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not self._is_operand(other):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other) -> bool:
        if not self._is_operand(other):
            return NotImplemented
        return self._compare(other) >= 0

    __hash__ = None

    def __str__(self) -> str:
        if self._denominator == 1 or self._numerator == 0:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"
