# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Exact rational number arithmetic based on arbitrary-precision integers."""

from .bignumber import BigNumber
from .integers import InvalidArgumentError, NullArgumentError
from .version import version_tuple as __version__  # noqa: F401

# define public namespace
__all__ = [
    'BigNumber',
    'InvalidArgumentError',
    'NullArgumentError',
]
