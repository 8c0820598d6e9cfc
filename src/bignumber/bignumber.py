# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Immutable fractions of arbitrary-precision integers."""

from __future__ import annotations

from numbers import Integral
from typing import Any, Optional, Union

from .integers import (
    InvalidArgumentError, NullArgumentError, as_integer, gcd, is_zero, signum)


__all__ = ['BigNumber']


class BigNumber:

    """Exact rational number with arbitrary-precision numerator and
    denominator.

    Instances are immutable: every operation returns a new instance. The sign
    of the number is always carried by the numerator, the denominator is
    always positive.

    The constructors only move the sign into the numerator, they do not
    reduce the fraction. Results of the arithmetic operations are always in
    lowest terms.

    Args:
        value (Union[BigNumber, Integral]): number to be copied, integer
            value or numerator (if `denominator` is given)
        denominator (Optional[Integral]): denominator of the fraction

    Raises:
        NullArgumentError: `value` is None
        InvalidArgumentError: `denominator` is 0
        TypeError: `value` or `denominator` has an unsupported type

    Examples:
        >>> str(BigNumber(1, 2).add(BigNumber(1, 3)))
        '5 / 6'
        >>> str(BigNumber(-3, -6))
        '3 / 6'
    """

    __slots__ = ('_numerator', '_denominator')

    def __new__(cls, value: Union[BigNumber, Integral],
                denominator: Optional[Integral] = None) -> BigNumber:
        if denominator is None:
            if isinstance(value, BigNumber):
                return cls.copy(value)
            return cls.from_integer(value)
        return cls.from_fraction(value, denominator)

    @classmethod
    def _new(cls, numerator: int, denominator: int) -> BigNumber:
        # caller guarantees denominator > 0
        num = object.__new__(cls)
        object.__setattr__(num, '_numerator', numerator)
        object.__setattr__(num, '_denominator', denominator)
        return num

    @classmethod
    def from_integer(cls, value: Integral) -> BigNumber:
        """Return BigNumber equal to integer `value`."""
        return cls._new(as_integer(value, "value"), 1)

    @classmethod
    def from_fraction(cls, numerator: Integral,
                      denominator: Integral) -> BigNumber:
        """Return BigNumber equal to `numerator` / `denominator`.

        A negative denominator is made positive by negating both numerator
        and denominator. The fraction is not reduced.

        Raises:
            NullArgumentError: `numerator` or `denominator` is None
            InvalidArgumentError: `denominator` is 0
            TypeError: `numerator` or `denominator` is not integral
        """
        num = as_integer(numerator, "numerator")
        den = as_integer(denominator, "denominator")
        if is_zero(den):
            raise InvalidArgumentError("denominator cannot be 0")
        if den < 0:
            return cls._new(-num, -den)
        return cls._new(num, den)

    @classmethod
    def copy(cls, other: BigNumber) -> BigNumber:
        """Return new BigNumber with numerator and denominator of `other`."""
        if other is None:
            raise NullArgumentError("BigNumber cannot be None")
        if not isinstance(other, BigNumber):
            raise TypeError(f"Can't copy a {type(other).__name__!r}.")
        return cls.from_fraction(other._numerator, other._denominator)

    @property
    def numerator(self) -> int:
        """Numerator of `self` (carrying its sign)."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator of `self` (always > 0)."""
        return self._denominator

    def is_positive(self) -> bool:
        """Return True if `self` > 0, False otherwise (0 is not positive)."""
        return signum(self._numerator) > 0

    def negate(self) -> BigNumber:
        """Return `self` with its sign flipped."""
        return self._new(-self._numerator, self._denominator)

    def add(self, other: Union[BigNumber, Integral]) -> BigNumber:
        """Return `self` + `other`, reduced to lowest terms.

        Raises:
            NullArgumentError: `other` is None
            TypeError: `other` is neither BigNumber nor integral
        """
        other = _as_big_number(other)
        if self._denominator == other._denominator:
            num = self._numerator + other._numerator
            den = self._denominator
        else:
            num = (self._numerator * other._denominator +
                   other._numerator * self._denominator)
            den = self._denominator * other._denominator
        return _simplify(num, den)

    def subtract(self, other: Union[BigNumber, Integral]) -> BigNumber:
        """Return `self` - `other`, reduced to lowest terms.

        Raises:
            NullArgumentError: `other` is None
            TypeError: `other` is neither BigNumber nor integral
        """
        return self.add(_as_big_number(other).negate())

    def multiply(self, other: Union[BigNumber, Integral]) -> BigNumber:
        """Return `self` * `other`, reduced to lowest terms.

        Raises:
            NullArgumentError: `other` is None
            TypeError: `other` is neither BigNumber nor integral
        """
        other = _as_big_number(other)
        return _simplify(self._numerator * other._numerator,
                         self._denominator * other._denominator)

    def divide(self, other: Union[BigNumber, Integral]) -> BigNumber:
        """Return `self` / `other`, reduced to lowest terms.

        Raises:
            NullArgumentError: `other` is None
            InvalidArgumentError: `other` is 0
            TypeError: `other` is neither BigNumber nor integral
        """
        if not isinstance(other, BigNumber):
            divisor = as_integer(other, "other")
            if is_zero(divisor):
                raise InvalidArgumentError("divisor cannot be 0")
            other = self.from_integer(divisor)
        elif is_zero(other._numerator):
            raise InvalidArgumentError("divisor cannot be 0")
        return self.multiply(self.from_fraction(other._denominator,
                                                other._numerator))

    def __copy__(self) -> BigNumber:
        """Return self (BigNumber is immutable)."""
        return self

    def __deepcopy__(self, memo: Any) -> BigNumber:
        """Return self (BigNumber is immutable)."""
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __str__(self) -> str:
        """str(self)"""
        return f"{self._numerator} / {self._denominator}"

    def __repr__(self) -> str:
        """repr(self)"""
        return (f"{type(self).__name__}({self._numerator}, "
                f"{self._denominator})")

    def __pos__(self) -> BigNumber:
        """+self"""
        return self

    def __neg__(self) -> BigNumber:
        """-self"""
        return self.negate()

    def __add__(self, other: Any) -> BigNumber:
        """self + other"""
        if isinstance(other, (BigNumber, Integral)):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: Any) -> BigNumber:
        """other + self"""
        if isinstance(other, Integral):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> BigNumber:
        """self - other"""
        if isinstance(other, (BigNumber, Integral)):
            return self.subtract(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> BigNumber:
        """other - self"""
        if isinstance(other, Integral):
            return self.from_integer(other).subtract(self)
        return NotImplemented

    def __mul__(self, other: Any) -> BigNumber:
        """self * other"""
        if isinstance(other, (BigNumber, Integral)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> BigNumber:
        """other * self"""
        if isinstance(other, Integral):
            return self.multiply(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> BigNumber:
        """self / other"""
        if isinstance(other, (BigNumber, Integral)):
            return self.divide(other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> BigNumber:
        """other / self"""
        if isinstance(other, Integral):
            return self.from_integer(other).divide(self)
        return NotImplemented


def _as_big_number(value: Union[BigNumber, Integral]) -> BigNumber:
    if isinstance(value, BigNumber):
        return value
    return BigNumber._new(as_integer(value, "other"), 1)


def _simplify(numerator: int, denominator: int) -> BigNumber:
    # denominator != 0 guaranteed by caller
    # gcd(0, d) == |d|, so a zero numerator ends up as 0 / 1
    div = gcd(numerator, denominator)
    return BigNumber.from_fraction(numerator // div, denominator // div)
