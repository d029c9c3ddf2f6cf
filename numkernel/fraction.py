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
"""Exact rational scalar with 64-bit numerator and denominator

Fractions are an alternative to floating point numbers wherever comparisons
with zero have to be exact, e.g. when Gauss-Jordan elimination decides
whether a system has a unique solution. Unlike Python's fractions.Fraction,
numerator and denominator are bounded to the signed 64-bit range; results
that do not fit raise OverflowError instead of growing silently.

Equality between two Fractions compares the reduced (num, den) pairs
exactly. All other comparisons, and equality with other number types, go
through a conversion to float.
"""

import fractions
import math
import numbers
from typing import Union

from sympy import Rational

from numkernel.names import INT64_MIN, INT64_MAX, MSG_ZERO_DENOMINATOR, MSG_DIVIDE_BY_ZERO
from numkernel.errors import ErrorKind, ZeroDenominatorError
from numkernel.result import Result

Numeric = Union[int, float, 'Fraction', fractions.Fraction, Rational]


def _check_range(value: int) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise OverflowError(f"Fraction component {value} does not fit into 64 bits.")
    return value


class Fraction:
    """A rational number in reduced ``num/den`` form

    The denominator is always positive, the sign is kept in the numerator and
    zero is stored as 0/1. Once constructed, a Fraction cannot be changed;
    arithmetic always returns a new reduced Fraction.

    Arithmetic is defined between Fractions and between a Fraction and an
    integral value. Floats are rejected (TypeError) since mixing them in would
    give up exactness without the caller noticing.

    Example:
        >>> Fraction(18, 24)
        Fraction(3, 4)
        >>> Fraction(1, 2) + 1
        Fraction(3, 2)

    Args:
        num (int):
            The numerator. A Fraction may be passed to make a copy.

        den (int):
            The denominator (default: 1). Must not be 0.

    Raises:
        ZeroDenominatorError: if ``den`` is 0.
        OverflowError: if the reduced numerator or denominator exceed 64 bits.
    """

    __slots__ = ('_num', '_den')

    def __init__(self, num=0, den=1):
        if isinstance(num, Fraction) and den == 1:
            self._num = num._num
            self._den = num._den
            return
        if not isinstance(num, numbers.Integral) or not isinstance(den, numbers.Integral):
            raise TypeError(f"Fraction requires integral numerator and denominator, got "
                            f"{type(num).__name__} and {type(den).__name__}.")
        num = int(num)
        den = int(den)
        if den == 0:
            raise ZeroDenominatorError(MSG_ZERO_DENOMINATOR)
        if num == 0:
            den = 1
        else:
            gcd = math.gcd(num, den)
            num //= gcd
            den //= gcd
            if den < 0:
                num, den = -num, -den
        self._num = _check_range(num)
        self._den = _check_range(den)

    @classmethod
    def try_new(cls, num: int, den: int) -> Result['Fraction']:
        """Construct a Fraction, reporting a zero denominator as an ERR result instead of raising"""
        if den == 0:
            return Result.err(ErrorKind.ZERO_DENOMINATOR, MSG_ZERO_DENOMINATOR)
        return Result.ok(cls(num, den))

    @classmethod
    def from_string(cls, text: str) -> 'Fraction':
        """Parse 'num/den' or 'num'"""
        parts = text.strip().split('/')
        if len(parts) == 1:
            return cls(int(parts[0]))
        if len(parts) == 2:
            return cls(int(parts[0]), int(parts[1]))
        raise ValueError(f"Invalid fraction format: {text}")

    @property
    def num(self) -> int:
        return self._num

    @property
    def den(self) -> int:
        return self._den

    # aliases matching numbers.Rational / fractions.Fraction
    numerator = num
    denominator = den

    def signum(self) -> int:
        return (self._num > 0) - (self._num < 0)

    def is_zero(self) -> bool:
        return self._num == 0

    def invert(self) -> 'Fraction':
        if self._num == 0:
            raise ZeroDenominatorError(MSG_DIVIDE_BY_ZERO)
        return Fraction(self._den, self._num)

    # Conversion

    def __float__(self) -> float:
        return self._num / self._den

    def __int__(self) -> int:
        # truncates towards zero
        if self._num < 0:
            return -(-self._num // self._den)
        return self._num // self._den

    def __bool__(self) -> bool:
        return self._num != 0

    def __str__(self) -> str:
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"Fraction({self._num}, {self._den})"

    def __hash__(self) -> int:
        return hash(float(self))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # Arithmetic

    @staticmethod
    def _coerce(other):
        if isinstance(other, Fraction):
            return other
        if isinstance(other, numbers.Integral):
            return Fraction(int(other))
        return None

    def __add__(self, other):
        other = Fraction._coerce(other)
        if other is None:
            return NotImplemented
        return Fraction(self._num * other._den + other._num * self._den, self._den * other._den)

    __radd__ = __add__

    def __sub__(self, other):
        other = Fraction._coerce(other)
        if other is None:
            return NotImplemented
        return Fraction(self._num * other._den - other._num * self._den, self._den * other._den)

    def __rsub__(self, other):
        other = Fraction._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = Fraction._coerce(other)
        if other is None:
            return NotImplemented
        return Fraction(self._num * other._num, self._den * other._den)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = Fraction._coerce(other)
        if other is None:
            return NotImplemented
        if other._num == 0:
            raise ZeroDenominatorError(MSG_DIVIDE_BY_ZERO)
        return Fraction(self._num * other._den, self._den * other._num)

    def __rtruediv__(self, other):
        other = Fraction._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        if exponent < 0:
            return self.invert() ** -exponent
        return Fraction(self._num ** exponent, self._den ** exponent)

    def __neg__(self) -> 'Fraction':
        return Fraction(-self._num, self._den)

    def __pos__(self) -> 'Fraction':
        return self

    def __abs__(self) -> 'Fraction':
        return Fraction(abs(self._num), self._den)

    # Comparison

    def __eq__(self, other) -> bool:
        if isinstance(other, Fraction):
            return self._num == other._num and self._den == other._den
        if isinstance(other, numbers.Real):
            return float(self) == float(other)
        return NotImplemented

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other) -> bool:
        if not isinstance(other, (Fraction, numbers.Real)):
            return NotImplemented
        return float(self) < float(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, (Fraction, numbers.Real)):
            return NotImplemented
        return float(self) <= float(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, (Fraction, numbers.Real)):
            return NotImplemented
        return float(self) > float(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, (Fraction, numbers.Real)):
            return NotImplemented
        return float(self) >= float(other)


ZERO = Fraction(0)
ONE = Fraction(1)
MINUS_ONE = Fraction(-1)


def to_fraction(value: Numeric) -> Fraction:
    """Convert a numeric value to a Fraction

    Args:
        value: An int, float, Fraction, fractions.Fraction or sympy.Rational.
            Floats are approximated with the closest fraction of bounded
            denominator (fractions.Fraction.limit_denominator).

    Returns:
        Fraction representation of the value
    """
    if isinstance(value, Fraction):
        return value
    elif isinstance(value, Rational):
        return Fraction(int(value.p), int(value.q))
    elif isinstance(value, fractions.Fraction):
        return Fraction(value.numerator, value.denominator)
    elif isinstance(value, numbers.Integral):
        return Fraction(int(value))
    elif isinstance(value, numbers.Real):
        approx = fractions.Fraction(float(value)).limit_denominator()
        return Fraction(approx.numerator, approx.denominator)
    else:
        raise TypeError(f"Cannot convert {type(value)} to Fraction")
