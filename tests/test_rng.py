"""Tests for the seedable random source."""

from core import rng
from core.polynomial import Polynomial


def test_seed_reproducible():
    rng.set_seed(99)
    first = [rng.randbelow(1000) for _ in range(10)]
    rng.set_seed(99)
    assert [rng.randbelow(1000) for _ in range(10)] == first


def test_randint_bounds():
    rng.set_seed(1)
    values = {rng.randint(-2, 2) for _ in range(200)}
    assert values == {-2, -1, 0, 1, 2}


def test_unseeded_randbelow():
    rng.set_seed(None)
    assert all(0 <= rng.randbelow(5) < 5 for _ in range(20))


def test_random_polynomials_reproducible():
    rng.set_seed(4)
    a = Polynomial.random(5)
    rng.set_seed(4)
    assert Polynomial.random(5) == a
