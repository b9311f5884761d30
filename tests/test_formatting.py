"""Tests for polynomial output formatting."""

import pytest

from calculator.formatting import format_plain, format_pretty
from core.polynomial import Polynomial


def test_plain():
    assert format_plain(Polynomial([5, -1, 0, 2])) == "2,0,-1,5"
    assert format_plain(Polynomial([7])) == "7"


def test_plain_zero():
    assert format_plain(Polynomial()) == "0"


@pytest.mark.parametrize("coeffs, expected", [
    ([5, -1, 0, 2], "2x^3-x+5"),
    ([], "0"),
    ([-3], "-3"),
    ([0, 1], "x"),
    ([0, -1], "-x"),
    ([1, 1], "x+1"),
    ([-1, 0, -4], "-4x^2-1"),
    ([0, 0, 1], "x^2"),
    ([13, -16], "-16x+13"),
    ([2, -1, 1], "x^2-x+2"),
])
def test_pretty(coeffs, expected):
    assert format_pretty(Polynomial(coeffs)) == expected
