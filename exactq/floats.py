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
This module converts between rationals and IEEE-754 binary floats.

Floats are held as bitvectors in the binary interchange format, the
same layout the hardware uses. Converting a float to a rational reads
sign, exponent, and significand straight from the bits, so the result
is the exact value of the float; there is never a detour through
decimal strings.

Converting a rational to a float is where precision is lost: the
result is the representable value selected by one of the five
IEEE-754 rounding modes (round to nearest, ties to even by default).
"""

import logging
import struct

from .errors import Unrepresentable_Value
from .rationals import (Rational, q_pow2,
                        RM_RNE, RM_RNA, RM_RTP, RM_RTN, RM_RTZ,
                        ROUNDING_MODES, ROUNDING_MODES_NEAREST)

logger = logging.getLogger(__name__)

# (eb, sb) of the standard binary interchange formats
FLOAT16  = (5, 11)
FLOAT32  = (8, 24)
FLOAT64  = (11, 53)
FLOAT128 = (15, 113)

class Binary_Float:
    """IEEE-754 binary float of arbitrary precision

    *eb* is the number of bits for the exponent.

    *sb* is the number of bits for the significand.

    This includes the "hidden bit", so for example to create a
    single-precision floating point number we use:

    >>> x = Binary_Float(8, 24)

    By default the created float is +0, however *bitvec* can be used
    to set the initial value. The expected format is an integer
    :math:`0 \\le bitvec < 2^{eb+sb}` corresponding to the binary
    interchange format. For example the single precision float
    representing +1:

    >>> Binary_Float(8, 24, 0x3f800000).to_rational()
    Rational(1)

    """

    def __init__(self, eb, sb, bitvec=0):
        # Naming of the internals follows IEEE-754 (k, p, w, t, emax,
        # emin).
        assert eb >= 2
        assert sb >= 2
        assert 0 <= bitvec < 2 ** (eb + sb)

        self.k    = eb + sb

        self.p    = sb
        self.w    = self.k - self.p
        self.t    = self.p - 1
        self.emax = (2 ** (self.w - 1)) - 1
        self.emin = 1 - self.emax
        self.bias = self.emax

        self.bv   = bitvec

    def __repr__(self):
        return "Binary_Float(%u, %u, 0x%x)" % (self.w, self.p, self.bv)

    def __str__(self):
        rv = self.format_name() + "("

        S, E, T = self.unpack()

        if E == 2 ** self.w - 1:
            # Infinity (T = 0) or NaN (T != 0)
            if T == 0:
                rv += "-oo" if S else "+oo"
            else:
                rv += "NaN"
        elif 1 <= E or T != 0:
            rv += "0x%0*X [%s]" % ((self.k + 3) // 4, self.bv,
                                   self.to_rational())
        else:
            rv += "-zero" if S else "+zero"

        rv += ")"
        return rv

    def format_name(self):
        """Name of the format

        Returns "Float16", "Float32", "Float64", or "Float128" if
        possible, and "FloatingPoint(eb, sb)" otherwise.
        """
        names = {
            FLOAT16  : "Float16",
            FLOAT32  : "Float32",
            FLOAT64  : "Float64",
            FLOAT128 : "Float128",
        }
        return names.get((self.w, self.p),
                         "FloatingPoint(%u, %u)" % (self.w, self.p))

    ######################################################################
    # Bit level access

    def unpack(self):
        """Unpack into sign, exponent, and significand

        Returns a tuple of integers (S, E, T) where *S* is the sign
        bit, *E* is the biased exponent, and *T* is the trailing
        significand.

        This is the inverse of :func:`pack`.
        """
        S = self.bv >> (self.w + self.t)
        E = (self.bv >> self.t) & (2 ** self.w - 1)
        T = self.bv & (2 ** self.t - 1)
        return (S, E, T)

    def pack(self, S, E, T):
        """Pack sign, exponent, and significand

        This is the inverse of :func:`unpack`.
        """
        assert 0 <= S <= 1
        assert 0 <= E <= 2 ** self.w - 1
        assert 0 <= T <= 2 ** self.t - 1

        self.bv  = S << (self.w + self.t)
        self.bv |= E << self.t
        self.bv |= T

    ######################################################################
    # Setters

    def set_zero(self, sign):
        """Set value to zero with the given sign bit"""
        assert 0 <= sign <= 1
        self.pack(sign, 0, 0)

    def set_infinite(self, sign):
        """Set value to infinite with the given sign bit"""
        assert 0 <= sign <= 1
        self.pack(sign, 2 ** self.w - 1, 0)

    def set_nan(self):
        """Set value to NaN"""
        self.pack(1, 2 ** self.w - 1, 2 ** self.t - 1)

    def set_max_finite(self, sign):
        """Set value to the largest finite magnitude with the given sign"""
        assert 0 <= sign <= 1
        self.pack(sign, 2 ** self.w - 2, 2 ** self.t - 1)

    ######################################################################
    # Queries

    def isZero(self):
        """Test if value is zero"""
        S, E, T = self.unpack()
        return E == 0 and T == 0

    def isSubnormal(self):
        """Test if value is subnormal"""
        S, E, T = self.unpack()
        return E == 0 and T != 0

    def isNormal(self):
        """Test if value is normal"""
        S, E, T = self.unpack()
        return 1 <= E <= 2 ** self.w - 2

    def isNaN(self):
        """Test if value is not a number"""
        S, E, T = self.unpack()
        return E == 2 ** self.w - 1 and T != 0

    def isInfinite(self):
        """Test if value is infinite"""
        S, E, T = self.unpack()
        return E == 2 ** self.w - 1 and T == 0

    def isNegative(self):
        """Test if the sign bit is set

        Returns always false for NaN.
        """
        S, E, T = self.unpack()
        return not self.isNaN() and S == 1

    def isFinite(self):
        """Test if value is finite

        Returns true for zero, subnormals, or normal numbers.
        """
        return self.isZero() or self.isSubnormal() or self.isNormal()

    ######################################################################
    # Conversion

    def to_rational(self):
        """Convert to :class:`.Rational`

        This is exact. Both zeros give Rational(0). Raises
        :class:`.Unrepresentable_Value` for infinities or NaN.
        """
        S, E, T = self.unpack()

        if E == 2 ** self.w - 1:
            if T == 0:
                raise Unrepresentable_Value(
                    "%sinfinity has no rational value" % ("-" if S else "+"))
            else:
                raise Unrepresentable_Value("NaN has no rational value")
        elif 1 <= E or T != 0:
            v = q_pow2(1 - self.p) * Rational(T)
            if 1 <= E:
                # normal -1^S * 2^(E-bias) * (1 + 2^(1-p) * T)
                v = q_pow2(E - self.bias) * (Rational(1) + v)
            else:
                # subnormal -1^S * 2^emin * (0 + 2^(1-p) * T)
                v = q_pow2(self.emin) * v
            if S == 1:
                v = -v
        else:
            # zero
            v = Rational(0)

        return v

    def from_rational(self, rm, q):
        """Convert from rational

        Sets the value to the nearest representable floating-point
        value described by *q*, rounded according to *rm*. Magnitudes
        that do not fit give an infinity, or the largest finite
        value under directed rounding towards zero, as in IEEE-754
        section 7.4.
        """
        assert rm in ROUNDING_MODES
        assert isinstance(q, Rational)

        if q.isZero():
            # Converting 0 always gives +0
            self.set_zero(0)
            return

        sign = 1 if q.isNegative() else 0
        n    = abs(q.numerator)
        d    = q.denominator

        # e = floor(log2(n / d)), but no smaller than emin since
        # subnormals share the scale of the smallest normal binade
        e = n.bit_length() - d.bit_length()
        if (n << max(0, -e)) < (d << max(0, e)):
            e -= 1
        e = max(e, self.emin)

        # Scale so that the significand m has its leading bit at
        # position t; the remainder decides the rounding
        shift = e - self.t
        if shift >= 0:
            d = d << shift
        else:
            n = n << (-shift)
        m, r = divmod(n, d)

        if r != 0:
            logger.debug("%s is not exact in %s, rounding %s",
                         q, self.format_name(), rm)
            if self.round_away(rm, sign, m, r, d):
                m += 1
                if m == 2 ** self.p:
                    # carry into the next binade
                    m = m >> 1
                    e += 1

        if e > self.emax:
            logger.debug("%s overflows %s, rounding %s",
                         q, self.format_name(), rm)
            if (rm in ROUNDING_MODES_NEAREST or
                (rm == RM_RTP and not sign) or
                (rm == RM_RTN and sign)):
                self.set_infinite(sign)
            else:
                self.set_max_finite(sign)
        elif m < 2 ** self.t:
            # subnormal (or zero after rounding down)
            assert e == self.emin
            self.pack(sign, 0, m)
        else:
            self.pack(sign, e + self.bias, m - 2 ** self.t)

    @staticmethod
    def round_away(rm, sign, m, r, d):
        """Decide if the magnitude m + r/d is rounded up to m + 1

        *r* is the (non-zero) remainder over *d*, *sign* the sign of
        the original value.
        """
        assert 0 < r < d
        if rm in ROUNDING_MODES_NEAREST:
            if 2 * r > d:
                return True
            elif 2 * r < d:
                return False
            elif rm == RM_RNE:
                # tie, choose the even significand
                return m % 2 == 1
            else:
                assert rm == RM_RNA
                return True
        elif rm == RM_RTP:
            return not sign
        elif rm == RM_RTN:
            return bool(sign)
        else:
            assert rm == RM_RTZ
            return False

##############################################################################
# Rational <-> float
##############################################################################

def q_from_binary(eb, sb, bits):
    """Exact rational value of a float in binary interchange format

    Raises :class:`.Unrepresentable_Value` for infinities and NaN.
    """
    return Binary_Float(eb, sb, bits).to_rational()

def q_to_binary(q, eb, sb, rm=RM_RNE):
    """Round *q* to the binary interchange format (eb, sb)

    Returns the bit pattern as an integer.
    """
    rv = Binary_Float(eb, sb)
    rv.from_rational(rm, q)
    return rv.bv

def q_from_float(value):
    """Exact rational value of a Python float

    Python floats are binary64, so every finite float has an exact
    rational value; for example 0.1 is 3602879701896397/36028797018963968.
    Raises :class:`.Unrepresentable_Value` for infinities and NaN.
    """
    if not isinstance(value, float):
        raise TypeError("expected a float, not %s" % type(value).__name__)
    bits, = struct.unpack(">Q", struct.pack(">d", value))
    return q_from_binary(*FLOAT64, bits)

def q_to_float(q, rm=RM_RNE):
    """Round *q* to a Python float under rounding mode *rm*"""
    bits = q_to_binary(q, *FLOAT64, rm)
    rv, = struct.unpack(">d", struct.pack(">Q", bits))
    return rv
