import sys

import pytest

from exactq.errors import Malformed_Input, Division_By_Zero
from exactq.rationals import (Rational, q_from_string,
                              q_from_decimal_string)

@pytest.mark.parametrize("q, text", [
    (Rational(3, 4),   "3/4"),
    (Rational(-6, 8),  "-3/4"),
    (Rational(5),      "5/1"),
    (Rational(0),      "0/1"),
    (Rational(-7),     "-7/1"),
])
def test_canonical_text(q, text):
    assert str(q) == text
    assert q.to_string() == text

def test_whole_numbers_without_suffix():
    assert Rational(5).to_string(whole_suffix=False) == "5"
    assert Rational(-5, 2).to_string(whole_suffix=False) == "-5/2"

@pytest.mark.parametrize("text, q", [
    ("3/4",     Rational(3, 4)),
    ("-3/4",    Rational(-3, 4)),
    ("+3/4",    Rational(3, 4)),
    ("2/4",     Rational(1, 2)),
    ("007/014", Rational(1, 2)),
    ("-0/5",    Rational(0)),
    ("5",       Rational(5)),
    ("-12",     Rational(-12)),
])
def test_parse(text, q):
    assert q_from_string(text) == q

@pytest.mark.parametrize("text", [
    "", "7/0", "-7/00", "1/-2", "a/b", "1.5/2", " 1/2", "1/2 ", "1/2\n",
    "1//2", "/2", "1/", "--1/2", "1/2/3", "١/٢", "0x10",
])
def test_parse_malformed(text):
    with pytest.raises(Malformed_Input):
        q_from_string(text)

def test_zero_denominator_is_malformed():
    with pytest.raises(Malformed_Input) as excinfo:
        q_from_string("7/0")
    assert not isinstance(excinfo.value, Division_By_Zero)
    assert excinfo.value.text == "7/0"
    assert isinstance(excinfo.value, ValueError)

def test_parse_requires_string():
    with pytest.raises(TypeError):
        q_from_string(b"1/2")

def test_text_round_trip(samples):
    for q in samples:
        assert q_from_string(str(q)) == q
        assert q_from_string(q.to_string(whole_suffix=False)) == q

@pytest.mark.parametrize("text, q", [
    ("0.1",      Rational(1, 10)),
    ("-1.25E-3", Rational(-1, 800)),
    (".5",       Rational(1, 2)),
    ("5.",       Rational(5)),
    ("1e3",      Rational(1000)),
    ("+2",       Rational(2)),
    ("0.000",    Rational(0)),
])
def test_parse_decimal(text, q):
    assert q_from_decimal_string(text) == q

@pytest.mark.parametrize("text", [
    "", ".", "e5", "1.2.3", "1e", "0x10", "1/2", "- 1", "inf", "nan",
])
def test_parse_decimal_malformed(text):
    with pytest.raises(Malformed_Input):
        q_from_decimal_string(text)

def int_digit_limit():
    # 0 means unlimited, or an interpreter without the limit
    return getattr(sys, "get_int_max_str_digits", lambda: 0)()

def test_parse_beyond_int_digit_limit():
    limit = int_digit_limit()
    if limit == 0:
        pytest.skip("no limit on int conversion digits")
    digits = "1" * (limit + 1)
    with pytest.raises(Malformed_Input):
        q_from_string(digits + "/3")
    with pytest.raises(Malformed_Input):
        q_from_string("3/" + digits)
    with pytest.raises(Malformed_Input):
        q_from_decimal_string(digits)
    with pytest.raises(Malformed_Input):
        q_from_decimal_string("0." + digits)

def test_format_beyond_int_digit_limit():
    limit = int_digit_limit()
    if limit == 0:
        pytest.skip("no limit on int conversion digits")
    q = Rational(10 ** (limit + 1) + 1, 3)
    with pytest.raises(ValueError):
        str(q)
