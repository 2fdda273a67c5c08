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
This module defines the exact :class:`Rational` number type.

A Rational is always kept in canonical form: the denominator is
strictly positive, numerator and denominator are coprime, and zero is
represented as 0/1. Canonical form makes equality a simple comparison
of the two fields, and it is what the hash is built from.

Numerator and denominator are Python integers, so no operation can
overflow. Long chains of operations will grow the number of digits;
that is the price of exactness.
"""

import math
import numbers
import re

from .errors import Division_By_Zero, Unrepresentable_Value, Malformed_Input
from .hashing import hash_fields

RM_RNE = "RNE"
RM_RNA = "RNA"
RM_RTP = "RTP"
RM_RTN = "RTN"
RM_RTZ = "RTZ"

ROUNDING_MODES          = (RM_RNE, RM_RNA, RM_RTP, RM_RTN, RM_RTZ)
ROUNDING_MODES_NEAREST  = (RM_RNE, RM_RNA)

LESS    = "less"
EQUAL   = "equal"
GREATER = "greater"

def as_rational(value):
    """Coerce *value* for use as an operand

    Rationals are returned as they are, integers are converted
    exactly. Returns None for anything else (in particular floats,
    which have to be converted explicitly with
    :func:`exactq.floats.q_from_float`).
    """
    if isinstance(value, Rational):
        return value
    elif isinstance(value, numbers.Integral):
        return Rational(int(value))
    else:
        return None

class Rational:
    """Rational number

    *numerator* and *denominator* must be integers. The constructor
    normalises the fraction, so for example:

    >>> Rational(-4, -6)
    Rational(2, 3)

    A zero *denominator* raises :class:`.Division_By_Zero`. Instances
    are immutable.
    """
    __slots__ = ("numerator", "denominator")

    def __init__(self, numerator=0, denominator=1):
        if not isinstance(numerator, numbers.Integral):
            raise TypeError("numerator must be an integer, not %s" %
                            type(numerator).__name__)
        if not isinstance(denominator, numbers.Integral):
            raise TypeError("denominator must be an integer, not %s" %
                            type(denominator).__name__)
        a = int(numerator)
        b = int(denominator)

        if b == 0:
            raise Division_By_Zero("zero denominator")
        elif a == 0:
            b = 1
        else:
            g = math.gcd(a, b)
            a = a // g
            b = b // g
            if b < 0:
                a = -a
                b = -b

        assert b > 0
        object.__setattr__(self, "numerator", a)
        object.__setattr__(self, "denominator", b)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    def __delattr__(self, name):
        raise AttributeError("Rational is immutable")

    def __reduce__(self):
        return (Rational, (self.numerator, self.denominator))

    def fields(self):
        """Canonical (numerator, denominator) pair

        Equal rationals always return identical pairs.
        """
        return (self.numerator, self.denominator)

    ######################################################################
    # Arithmetic

    def __add__(self, other):
        """Addition"""
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return Rational(self.numerator * other.denominator +
                        other.numerator * self.denominator,
                        self.denominator * other.denominator)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        """Substraction"""
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return other + (-self)

    def __mul__(self, other):
        """Multiplication"""
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return Rational(self.numerator * other.numerator,
                        self.denominator * other.denominator)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Division

        Raises :class:`.Division_By_Zero` if *other* is zero.
        """
        other = as_rational(other)
        if other is None:
            return NotImplemented
        if other.isZero():
            raise Division_By_Zero("division by zero")
        return Rational(self.numerator * other.denominator,
                        self.denominator * other.numerator)

    def __rtruediv__(self, other):
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return other / self

    def __floordiv__(self, other):
        """Floor division, returns a Python int"""
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return q_round_rtn(self / other).numerator

    def __rfloordiv__(self, other):
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return other // self

    def __mod__(self, other):
        """Remainder of floor division, with the sign of *other*"""
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return self - other * (self // other)

    def __rmod__(self, other):
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return other % self

    def __divmod__(self, other):
        other = as_rational(other)
        if other is None:
            return NotImplemented
        q = self // other
        return (q, self - other * q)

    def __pow__(self, other):
        """Exponentiation

        The exponent must be an integer or an integral Rational,
        otherwise TypeError is raised. Anything to the power of zero
        is one, this includes zero itself (0 ** 0 == 1). Negative
        exponents raise :class:`.Division_By_Zero` for zero.
        """
        if isinstance(other, Rational):
            if not other.isIntegral():
                raise TypeError("exponent %s is not integral" % other)
            k = other.numerator
        elif isinstance(other, numbers.Integral):
            k = int(other)
        else:
            return NotImplemented

        if k == 0:
            return Rational(1)
        elif k > 0:
            return Rational(self.numerator ** k,
                            self.denominator ** k)
        else:
            return self.reciprocal() ** -k

    def __rpow__(self, other):
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return other ** self

    def __abs__(self):
        """Absolute value"""
        return Rational(abs(self.numerator), self.denominator)

    def __neg__(self):
        """Negation"""
        return Rational(-self.numerator, self.denominator)

    def __pos__(self):
        return self

    def reciprocal(self):
        """Multiplicative inverse

        Raises :class:`.Division_By_Zero` for zero.
        """
        if self.isZero():
            raise Division_By_Zero("zero has no reciprocal")
        return Rational(self.denominator, self.numerator)

    ######################################################################
    # Comparison

    def __lt__(self, other):
        """<"""
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return (self.numerator * other.denominator <
                other.numerator * self.denominator)

    def __le__(self, other):
        """<="""
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return (self.numerator * other.denominator <=
                other.numerator * self.denominator)

    def __gt__(self, other):
        """>"""
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return (self.numerator * other.denominator >
                other.numerator * self.denominator)

    def __ge__(self, other):
        """>="""
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return (self.numerator * other.denominator >=
                other.numerator * self.denominator)

    def __eq__(self, other):
        """Equality

        Both sides are canonical, so this compares the fields.
        """
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return (self.numerator == other.numerator and
                self.denominator == other.denominator)

    def __ne__(self, other):
        """Inequality"""
        rv = self.__eq__(other)
        if rv is NotImplemented:
            return rv
        return not rv

    def __hash__(self):
        # Whole numbers must hash like the int they compare equal to
        if self.denominator == 1:
            return hash(self.numerator)
        else:
            return hash_fields(self.numerator, self.denominator)

    ######################################################################
    # Queries

    def isZero(self):
        """Test if zero"""
        return self.numerator == 0

    def isNegative(self):
        """Test if negative

        Returns false for 0.
        """
        return self.numerator < 0

    def isPositive(self):
        """Test if positive

        Returns false for 0.
        """
        return self.numerator > 0

    def isIntegral(self):
        """Test if integral"""
        return self.denominator == 1

    def sign(self):
        """Returns -1, 0, or 1"""
        if self.numerator < 0:
            return -1
        elif self.numerator > 0:
            return 1
        else:
            return 0

    def __bool__(self):
        return self.numerator != 0

    ######################################################################
    # Conversion

    def __int__(self):
        return self.__trunc__()

    def __trunc__(self):
        return q_round_rtz(self).numerator

    def __floor__(self):
        return q_round_rtn(self).numerator

    def __ceil__(self):
        return q_round_rtp(self).numerator

    def __round__(self, ndigits=None):
        """Round to nearest, ties to even

        Without *ndigits* a Python int is returned, otherwise a
        Rational rounded to *ndigits* decimal places (which may be
        negative).
        """
        if ndigits is None:
            return q_round_rne(self).numerator
        scale = Rational(10) ** ndigits
        return q_round_rne(self * scale) / scale

    def __float__(self):
        return self.to_python_float()

    def to_python_int(self):
        """Convert to python int

        Raises :class:`.Unrepresentable_Value` if not integral.
        """
        if not self.isIntegral():
            raise Unrepresentable_Value("%s is not integral" % self)
        return self.numerator

    def to_python_float(self, rm=RM_RNE):
        """Convert to python float

        The result is the binary64 value nearest to the rational
        under rounding mode *rm*. This is not exact in general: for
        example Rational(1, 3) gives the double closest to 1/3.
        Magnitudes beyond the range of binary64 give an infinity (or
        the largest finite double under directed rounding).
        """
        from .floats import q_to_float
        return q_to_float(self, rm)

    def to_decimal_string(self):
        """Convert to decimal string

        If the fraction does not terminate (e.g. for 1 / 3), then
        :class:`.Unrepresentable_Value` is raised.
        """
        if self.denominator > 2:
            b = self.denominator
            while b > 1:
                if b % 2 == 0:
                    b = b // 2
                elif b % 5 == 0:
                    b = b // 5
                else:
                    raise Unrepresentable_Value(
                        "decimal for %s will not terminate" % self)

        rv = str(abs(self.numerator) // self.denominator)

        a = abs(self.numerator) % self.denominator
        b = self.denominator

        if a > 0:
            rv += "."
            while a > 0:
                a *= 10
                rv += str(a // b)
                a = a % b
        else:
            rv += ".0"

        if self.isNegative():
            return "-" + rv
        else:
            return rv

    ######################################################################
    # Text

    def __repr__(self):
        if self.denominator == 1:
            return "Rational(%i)" % self.numerator
        else:
            return "Rational(%i, %i)" % (self.numerator, self.denominator)

    def __str__(self):
        return self.to_string()

    def to_string(self, whole_suffix=True):
        """Canonical text form, e.g. "-3/4"

        Whole numbers are written as "5/1", or as "5" when
        *whole_suffix* is false. :func:`q_from_string` reads both.

        Like str() of an int, this (and repr()) raises ValueError when
        numerator or denominator has more digits than the interpreter
        allows for int conversion, 4300 by default; see
        :func:`sys.set_int_max_str_digits`.
        """
        if self.denominator == 1 and not whole_suffix:
            return "%i" % self.numerator
        else:
            return "%i/%i" % (self.numerator, self.denominator)

def q_compare(a, b):
    """Three-way comparison

    Returns :data:`LESS`, :data:`EQUAL`, or :data:`GREATER`. Never
    fails for rationals or integers.
    """
    a = as_rational(a)
    b = as_rational(b)
    if a is None or b is None:
        raise TypeError("q_compare requires rationals or integers")

    delta = a.numerator * b.denominator - b.numerator * a.denominator
    if delta < 0:
        return LESS
    elif delta > 0:
        return GREATER
    else:
        return EQUAL

def q_pow2(number):
    """Create rational for 2^number

    *number* can be negative
    """
    assert isinstance(number, int)
    if number >= 0:
        return Rational(2 ** number)
    else:
        return Rational(1, 2 ** (-number))

def q_round_to_nearest(n, tiebreak):
    """Round to nearest integer

    Round *n* to the nearest integer

    Calls the *tiebreak*(lower, upper) function with the two
    alternatives if *n* is precisely between two integers.

    """
    assert isinstance(n, Rational)
    lower = (n.numerator - (n.numerator % n.denominator)) // n.denominator
    upper = lower + 1
    assert Rational(lower) <= n <= Rational(upper)

    if n - Rational(lower) < Rational(upper) - n:
        return Rational(lower)
    elif n - Rational(lower) > Rational(upper) - n:
        return Rational(upper)
    else:
        return Rational(tiebreak(lower, upper))

def q_round_rne(n):
    """Round to nearest even integer"""
    def tiebreak(lower, upper):
        if lower % 2 == 0:
            return lower
        else:
            assert upper % 2 == 0
            return upper
    return q_round_to_nearest(n, tiebreak)

def q_round_rna(n):
    """Round to nearest integer, away from zero"""
    def tiebreak(lower, upper):
        if abs(lower) > abs(upper):
            return lower
        else:
            return upper
    return q_round_to_nearest(n, tiebreak)

def q_round_rtz(n):
    """Round to nearest integer, towards zero"""
    i = Rational(abs(n.numerator) // n.denominator)
    if n.isNegative():
        return -i
    else:
        return i

def q_round_rtp(n):
    """Round to nearest integer, towards positive"""
    if n.isIntegral():
        return n
    i = abs(n.numerator) // n.denominator
    if n.isNegative():
        return Rational(-i)
    else:
        return Rational(i + 1)

def q_round_rtn(n):
    """Round to nearest integer, towards negative"""
    if n.isIntegral():
        return n
    i = abs(n.numerator) // n.denominator
    if n.isNegative():
        return Rational(-i - 1)
    else:
        return Rational(i)

def q_round(rm, n):
    """Round to integer according to rounding mode *rm*"""
    assert rm in ROUNDING_MODES
    return {
        RM_RNE: q_round_rne,
        RM_RNA: q_round_rna,
        RM_RTP: q_round_rtp,
        RM_RTN: q_round_rtn,
        RM_RTZ: q_round_rtz,
    }[rm](n)

##############################################################################
# Construction
##############################################################################

def q_from_int(value):
    """Create rational from an integer"""
    if not isinstance(value, numbers.Integral):
        raise TypeError("expected an integer, not %s" % type(value).__name__)
    return Rational(int(value), 1)

def q_from_scaled(mantissa, scale):
    """Create rational from a fixed-scale decimal

    The value is *mantissa* / 10^*scale*, so (12345, 2) is 123.45.
    *scale* may be negative.
    """
    assert isinstance(mantissa, int)
    assert isinstance(scale, int)
    if scale >= 0:
        return Rational(mantissa, 10 ** scale)
    else:
        return Rational(mantissa * 10 ** (-scale))

RATIONAL_LITERAL = re.compile(r"([-+]?)([0-9]+)(?:/([0-9]+))?")

DECIMAL_LITERAL = re.compile(r"([-+]?)([0-9]*)(\.[0-9]*)?(?:[eE]([-+]?[0-9]+))?")

def q_from_string(text):
    """Parse the canonical text form

    Accepts "n/d" and plain integers "n", where n may carry a sign
    and d may not. The fraction does not need to be in lowest
    terms. Raises :class:`.Malformed_Input` for anything else,
    including a zero denominator and parts longer than the
    interpreter's limit for int conversion (see
    :func:`sys.set_int_max_str_digits`).
    """
    if not isinstance(text, str):
        raise TypeError("expected a string, not %s" % type(text).__name__)

    match = RATIONAL_LITERAL.fullmatch(text)
    if match is None:
        raise Malformed_Input(text, "not of the form n/d")
    sign, numerator, denominator = match.groups()

    try:
        a = int(numerator, 10)
        b = 1 if denominator is None else int(denominator, 10)
    except ValueError as err:
        raise Malformed_Input(text, str(err)) from err
    if sign == "-":
        a = -a

    if denominator is None:
        return Rational(a)
    if b == 0:
        raise Malformed_Input(text, "zero denominator")
    return Rational(a, b)

def q_from_decimal_fragments(sign, integer_part, fraction_part, exp_part):
    """Build a rational from string fragments of a decimal number.

    E.g. for "1.23E-1" we have fragments for
       sign          =   ""
       integer_part  =  "1"
       fraction_part = "23"
       exp_part      = "-1"
    """
    assert sign          is None or (isinstance(sign, str) and
                                     len(sign) <= 1)
    assert integer_part  is None or isinstance(integer_part, str)
    assert fraction_part is None or isinstance(fraction_part, str)
    assert exp_part      is None or isinstance(exp_part, str)

    if integer_part:
        q = Rational(int(integer_part, 10))
    else:
        q = Rational(0)

    if fraction_part:
        if fraction_part.startswith("."):
            fraction_part = fraction_part[1:]
        if fraction_part:
            q += q_from_scaled(int(fraction_part, 10), len(fraction_part))

    if exp_part:
        if exp_part.startswith("+"):
            exp_part = exp_part[1:]
        if exp_part.startswith("-"):
            exp_part = exp_part[1:]
            q *= Rational(1, 10 ** int(exp_part, 10))
        else:
            q *= Rational(10 ** int(exp_part, 10))

    if sign is not None and sign == "-":
        q = -q

    return q

def q_from_decimal_string(text):
    """Parse a decimal literal exactly

    Accepts literals such as "42", "-0.125", ".5" or "1.23E-1".
    Raises :class:`.Malformed_Input` for anything else, including
    digit strings beyond the interpreter's int conversion limit.

    The exponent is applied exactly, so "1e999999999" builds a
    billion-digit integer; callers reading untrusted text should
    bound it first.
    """
    if not isinstance(text, str):
        raise TypeError("expected a string, not %s" % type(text).__name__)

    match = DECIMAL_LITERAL.fullmatch(text)
    if match is None:
        raise Malformed_Input(text, "not a decimal literal")
    sign, integer_part, fraction_part, exp_part = match.groups()
    if not integer_part and (fraction_part or ".") == ".":
        raise Malformed_Input(text, "no digits")

    try:
        return q_from_decimal_fragments(sign, integer_part,
                                        fraction_part, exp_part)
    except ValueError as err:
        raise Malformed_Input(text, str(err)) from err
