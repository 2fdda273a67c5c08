import math
import struct
import sys

import pytest

from exactq.errors import Unrepresentable_Value
from exactq.floats import (Binary_Float, FLOAT16, FLOAT32,
                           q_from_float, q_to_float,
                           q_from_binary, q_to_binary)
from exactq.rationals import (Rational, q_pow2,
                              RM_RNE, RM_RNA, RM_RTP, RM_RTN, RM_RTZ)

def float_bits(f):
    return struct.unpack(">Q", struct.pack(">d", f))[0]

def random_finite_float(rng):
    while True:
        f = struct.unpack(">d", struct.pack(">Q", rng.getrandbits(64)))[0]
        if math.isfinite(f):
            return f

##############################################################################
# float -> rational
##############################################################################

def test_point_one_is_exact():
    q = q_from_float(0.1)
    assert q == Rational(3602879701896397, 36028797018963968)
    assert q != Rational(1, 10)
    assert float_bits(q_to_float(q)) == float_bits(0.1)

def test_from_float_matches_integer_ratio(rng):
    for _ in range(500):
        f = random_finite_float(rng)
        assert q_from_float(f).fields() == f.as_integer_ratio()

def test_round_trip_is_bit_exact(rng):
    for _ in range(500):
        f = random_finite_float(rng)
        if f == 0:
            continue
        assert float_bits(q_to_float(q_from_float(f))) == float_bits(f)

def test_zeros():
    assert q_from_float(0.0) == Rational(0)
    assert q_from_float(-0.0) == Rational(0)
    assert float_bits(q_to_float(Rational(0))) == 0

def test_subnormals():
    assert q_from_float(5e-324) == q_pow2(-1074)
    assert q_from_float(sys.float_info.min) == q_pow2(-1022)
    assert q_from_float(sys.float_info.max) == \
        (Rational(2) - q_pow2(-52)) * q_pow2(1023)

@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite(value):
    with pytest.raises(Unrepresentable_Value):
        q_from_float(value)
    with pytest.raises(ValueError):
        q_from_float(value)

def test_from_float_requires_float():
    with pytest.raises(TypeError):
        q_from_float(1)

##############################################################################
# rational -> float
##############################################################################

def test_one_third_is_correctly_rounded():
    f = float(Rational(1, 3))
    assert f == 1 / 3
    assert q_from_float(f) != Rational(1, 3)

def test_correct_rounding(samples):
    for q in samples:
        # int / int is correctly rounded in CPython
        assert q.to_python_float() == q.numerator / q.denominator

def test_directed_rounding_brackets_value():
    q = Rational(1, 3)
    low  = q_to_float(q, RM_RTN)
    high = q_to_float(q, RM_RTP)
    assert q_from_float(low) < q < q_from_float(high)
    assert float_bits(high) == float_bits(low) + 1
    assert q_to_float(q, RM_RTZ) == low
    assert q_to_float(-q, RM_RTZ) == -low
    assert q_to_float(-q, RM_RTP) == -low
    assert q_to_float(-q, RM_RTN) == -high

def test_ties():
    # 1 + 2^-53 is exactly between 1 and the next double
    tie = Rational(1) + q_pow2(-53)
    assert q_to_float(tie, RM_RNE) == 1.0
    assert q_to_float(tie, RM_RNA) == 1.0 + 2 ** -52
    # 1 + 3 * 2^-53 ties between two odd and even neighbours
    tie = Rational(1) + 3 * q_pow2(-53)
    assert q_to_float(tie, RM_RNE) == 1.0 + 2 * 2 ** -52

def test_underflow():
    assert q_to_float(q_pow2(-1075)) == 0.0
    assert q_to_float(3 * q_pow2(-1075)) == 2 * 5e-324
    assert q_to_float(q_pow2(-1075), RM_RTP) == 5e-324
    tiny = q_to_float(-q_pow2(-2000), RM_RTZ)
    assert tiny == 0.0
    assert math.copysign(1.0, tiny) == -1.0

def test_overflow_saturates():
    huge = Rational(2) ** 1024
    assert q_to_float(huge) == math.inf
    assert q_to_float(-huge) == -math.inf
    assert q_to_float(huge, RM_RTZ) == sys.float_info.max
    assert q_to_float(huge, RM_RTN) == sys.float_info.max
    assert q_to_float(-huge, RM_RTP) == -sys.float_info.max
    assert q_to_float(-huge, RM_RTN) == -math.inf

def test_overflow_boundary():
    # halfway between the largest double and 2^1024 rounds to infinity
    boundary = q_pow2(1024) - q_pow2(970)
    assert q_to_float(boundary) == math.inf
    assert q_to_float(boundary - 1) == sys.float_info.max

##############################################################################
# other binary formats
##############################################################################

@pytest.mark.parametrize("fmt, q, bits", [
    (FLOAT32, Rational(1),      0x3f800000),
    (FLOAT32, Rational(-2),     0xc0000000),
    (FLOAT32, Rational(1, 10),  0x3dcccccd),
    (FLOAT16, Rational(1, 3),   0x3555),
    (FLOAT16, Rational(65504),  0x7bff),
    (FLOAT16, Rational(65519),  0x7bff),
    (FLOAT16, Rational(65520),  0x7c00),
    (FLOAT16, q_pow2(-24),      0x0001),
])
def test_to_binary(fmt, q, bits):
    assert q_to_binary(q, *fmt) == bits

def test_from_binary():
    assert q_from_binary(8, 24, 0x3f800000) == Rational(1)
    assert q_from_binary(5, 11, 0x3c00) == Rational(1)
    assert q_from_binary(5, 11, 0x8001) == -q_pow2(-24)
    with pytest.raises(Unrepresentable_Value):
        q_from_binary(8, 24, 0x7f800000)

def test_binary_float_round_trip(rng):
    # every finite single precision value survives the round trip
    for _ in range(300):
        x = Binary_Float(*FLOAT32)
        x.pack(rng.getrandbits(1),
               rng.randrange(0, 2 ** x.w - 1),
               rng.randrange(0, 2 ** x.t))
        if x.isZero():
            continue
        assert q_to_binary(x.to_rational(), *FLOAT32) == x.bv

def test_binary_float_classification():
    x = Binary_Float(*FLOAT32)
    assert x.isZero() and x.isFinite() and not x.isNegative()
    x.set_infinite(1)
    assert x.isInfinite() and x.isNegative() and not x.isFinite()
    x.set_nan()
    assert x.isNaN() and not x.isNegative()
    with pytest.raises(Unrepresentable_Value):
        x.to_rational()
    x.pack(0, 0, 1)
    assert x.isSubnormal()
    x.set_max_finite(0)
    assert x.isNormal()
    assert x.to_rational() == (Rational(2) - q_pow2(-23)) * q_pow2(127)

def test_binary_float_text():
    assert str(Binary_Float(8, 24, 0x3f800000)) == "Float32(0x3F800000 [1/1])"
    assert str(Binary_Float(8, 24, 0x80000000)) == "Float32(-zero)"
    assert str(Binary_Float(5, 11, 0x7c00)) == "Float16(+oo)"
    assert repr(Binary_Float(11, 53)) == "Binary_Float(11, 53, 0x0)"
    assert Binary_Float(4, 4).format_name() == "FloatingPoint(4, 4)"

def test_wide_exponent_max_finite():
    x = Binary_Float(20, 10)
    x.set_max_finite(0)
    q = x.to_rational()
    assert q == (Rational(2) - q_pow2(-9)) * q_pow2(2 ** 19 - 1)
    assert q_to_binary(q, 20, 10) == x.bv
    assert q_from_binary(20, 10, x.bv) == q

    tiny = Binary_Float(20, 10, 1)
    assert tiny.to_rational() == q_pow2(2 - 2 ** 19 - 9)

@pytest.mark.parametrize("k", [1100, 200000, -200000])
def test_pow2_unbounded(k):
    q = q_pow2(k)
    assert q * q_pow2(-k) == Rational(1)
