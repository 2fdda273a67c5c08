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
This module converts between rationals and :class:`decimal.Decimal`.

Reading a finite decimal is always exact, since a decimal is just an
integer mantissa scaled by a power of ten. Going the other way is
exact only when the fraction terminates within the requested number of
significant digits; otherwise the quotient is rounded once, using one
of the IEEE-754 rounding modes.
"""

import decimal
import logging

from .errors import Unrepresentable_Value
from .rationals import (Rational, q_from_scaled,
                        RM_RNE, RM_RNA, RM_RTP, RM_RTN, RM_RTZ,
                        ROUNDING_MODES)

logger = logging.getLogger(__name__)

DEFAULT_DECIMAL_PRECISION = 28

DECIMAL_ROUNDING = {
    RM_RNE : decimal.ROUND_HALF_EVEN,
    RM_RNA : decimal.ROUND_HALF_UP,
    RM_RTP : decimal.ROUND_CEILING,
    RM_RTN : decimal.ROUND_FLOOR,
    RM_RTZ : decimal.ROUND_DOWN,
}

def q_from_decimal(value):
    """Exact rational value of a :class:`decimal.Decimal`

    Raises :class:`.Unrepresentable_Value` for infinities and NaN.
    The exponent is applied exactly, so Decimal("1E+999999999")
    builds a billion-digit integer.
    """
    if not isinstance(value, decimal.Decimal):
        raise TypeError("expected a Decimal, not %s" % type(value).__name__)
    if not value.is_finite():
        raise Unrepresentable_Value("%s has no rational value" % value)

    sign, digits, exponent = value.as_tuple()
    mantissa = 0
    for digit in digits:
        mantissa = mantissa * 10 + digit
    if sign:
        mantissa = -mantissa

    return q_from_scaled(mantissa, -exponent)

def q_to_decimal(q, precision=DEFAULT_DECIMAL_PRECISION, rm=RM_RNE):
    """Round *q* to a decimal with *precision* significant digits

    No decimal signal is trapped: a quotient beyond the exponent
    range of the context gives the decimal's own overflow result
    (Infinity, or the largest finite value for directed rounding
    towards zero).
    """
    assert isinstance(q, Rational)
    assert isinstance(precision, int) and precision >= 1
    assert rm in ROUNDING_MODES

    context = decimal.Context(prec     = precision,
                              rounding = DECIMAL_ROUNDING[rm],
                              traps    = [])
    rv = context.divide(decimal.Decimal(q.numerator),
                        decimal.Decimal(q.denominator))

    if context.flags[decimal.Overflow]:
        logger.debug("%s overflows the decimal context, got %s", q, rv)
    elif context.flags[decimal.Inexact]:
        logger.debug("%s is not exact in %u digits, rounding %s",
                     q, precision, rm)

    return rv
