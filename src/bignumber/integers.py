# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Arbitrary-precision integer operations used by BigNumber."""

from __future__ import annotations

import math
from numbers import Integral
from typing import Any


__all__ = ['NullArgumentError', 'InvalidArgumentError',
           'as_integer', 'gcd', 'is_zero', 'signum']


class NullArgumentError(TypeError):
    """A required argument is missing (None)."""


class InvalidArgumentError(ValueError):
    """An argument has a value the operation can not deal with."""


def as_integer(value: Any, name: str) -> int:
    """Return `value` as int.

    Args:
        value (Integral): value to be converted
        name (str): name of the argument, used in error messages

    Raises:
        NullArgumentError: `value` is None
        TypeError: `value` is not an integral number
    """
    if value is None:
        raise NullArgumentError(f"{name} cannot be None")
    if isinstance(value, Integral):
        return int(value)
    raise TypeError(f"{name} must be an integral number, "
                    f"not {type(value).__name__!r}")


def gcd(a: int, b: int) -> int:
    """Return greatest common divisor of `a` and `b`.

    The result is never negative; gcd(0, n) == abs(n), gcd(0, 0) == 0.
    """
    return math.gcd(a, b)


def is_zero(a: int) -> bool:
    """Return True if `a` is 0."""
    return a == 0


def signum(a: int) -> int:
    """Return -1, 0 or 1 according to the sign of `a`."""
    return (a > 0) - (a < 0)
