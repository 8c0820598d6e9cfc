# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Shared pytest fixtures and hypothesis strategies."""

from fractions import Fraction

import pytest
from hypothesis import strategies

from bignumber import BigNumber


compact_num = 174
small_num = -123456789012345678901234567890
large_num = 294898 * 10 ** 2453 + 1498953
large_den = 7 ** 1234


SAMPLES = ((compact_num, 10),
           (small_num, 10 ** 20),
           (large_num, -large_den),
           (-8290, -10000),
           (0, 17))
SAMPLE_IDS = ("compact", "small", "large", "neg/neg", "zero")


@pytest.fixture(params=SAMPLES, ids=SAMPLE_IDS)
def sample(request) -> BigNumber:
    return BigNumber(*request.param)


@pytest.fixture(params=[s for s in SAMPLES if s[0] != 0],
                ids=[i for s, i in zip(SAMPLES, SAMPLE_IDS) if s[0] != 0])
def non_zero_sample(request) -> BigNumber:
    return BigNumber(*request.param)


def as_fraction(num: BigNumber) -> Fraction:
    return Fraction(num.numerator, num.denominator)


def is_reduced(num: BigNumber) -> bool:
    f = as_fraction(num)
    return (num.numerator, num.denominator) == (f.numerator, f.denominator)


big_integers = strategies.integers(min_value=-10 ** 40, max_value=10 ** 40)
non_zero_integers = big_integers.filter(lambda i: i != 0)
big_numbers = strategies.builds(BigNumber, big_integers, non_zero_integers)
non_zero_big_numbers = strategies.builds(BigNumber, non_zero_integers,
                                         non_zero_integers)
