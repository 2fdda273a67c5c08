import random

import pytest

from exactq.rationals import Rational

def random_rational(rng, bits):
    a = rng.randint(-(2 ** bits), 2 ** bits)
    b = rng.randint(1, 2 ** bits)
    return Rational(a, b)

@pytest.fixture
def rng():
    return random.Random(20190607)

@pytest.fixture
def samples(rng):
    """A mix of special and random rationals of varying size"""
    rv = [Rational(0),
          Rational(1),
          Rational(-1),
          Rational(1, 3),
          Rational(-7, 2),
          Rational(2 ** 100 + 1, 3 ** 50)]
    for bits in (4, 16, 64, 200):
        rv += [random_rational(rng, bits) for _ in range(10)]
    return rv
