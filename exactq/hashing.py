#!/usr/bin/env python3
##############################################################################
##                                                                          ##
##                                EXACTQ                                    ##
##                                                                          ##
##              Copyright (C) 2019-2026, Florian Schanda                    ##
##                                                                          ##
##  This file is part of ExactQ.                                            ##
##                                                                          ##
##  ExactQ is free software: you can redistribute it and/or modify          ##
##  it under the terms of the GNU General Public License as published by    ##
##  the Free Software Foundation, either version 3 of the License, or       ##
##  (at your option) any later version.                                     ##
##                                                                          ##
##  ExactQ is distributed in the hope that it will be useful,               ##
##  but WITHOUT ANY WARRANTY; without even the implied warranty of          ##
##  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the           ##
##  GNU General Public License for more details.                            ##
##                                                                          ##
##  You should have received a copy of the GNU General Public License       ##
##  along with ExactQ. If not, see <http://www.gnu.org/licenses/>.          ##
##                                                                          ##
##############################################################################

"""
Deterministic hash combinator.

Folds integers into a composite 64-bit hash code. The fold only
depends on the integers themselves (Python does not randomise hashes
of ints), so the same fields always produce the same code, in every
process.
"""

HASH_SEED = 0x84222325
HASH_MASK = 2 ** 64 - 1

# Fractional part of the golden ratio, as used by boost::hash_combine
HASH_GOLDEN = 0x9E3779B97F4A7C15

def hash_combine(seed, value):
    """Fold *value* into *seed*

    Both arguments must be integers; the result is an integer
    :math:`0 \\le h < 2^{64}`.
    """
    assert isinstance(seed, int)
    assert isinstance(value, int)

    h = hash(value) & HASH_MASK
    seed ^= (h + HASH_GOLDEN + (seed << 6) + (seed >> 2)) & HASH_MASK
    return seed & HASH_MASK

def hash_fields(*fields):
    """Fold all *fields*, in order, starting from :data:`HASH_SEED`"""
    rv = HASH_SEED
    for field in fields:
        rv = hash_combine(rv, field)
    return rv
