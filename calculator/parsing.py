"""Parse comma-separated coefficient lists into polynomials.

Input lists are written highest degree first ("2,0,-1,5" = 2x^3-x+5) and
reversed into the ascending order Polynomial stores.
"""

import argparse
import re

from core.errors import ScalarShapeError
from core.polynomial import Polynomial

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """A coefficient token is not a 32-bit signed integer."""

    pass


def parse_coefficient(token: str) -> int:
    token = token.strip()
    if not _INTEGER.fullmatch(token):
        raise ParseError(f"invalid coefficient {token!r}")
    value = int(token)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ParseError(f"coefficient {token!r} out of 32-bit range")
    return value


def parse_polynomial(text: str) -> Polynomial:
    """Parse a descending-degree comma list into a Polynomial."""
    coeffs = [parse_coefficient(token) for token in text.split(",")]
    coeffs.reverse()
    return Polynomial(coeffs)


def scalar_of(poly: Polynomial) -> int:
    """Single coefficient of a constant, non-zero polynomial."""
    if len(poly) != 1:
        raise ScalarShapeError(
            f"invalid scalar: expected exactly one coefficient, got {poly.to_list()}")
    return poly.coeffs[0]


def parse_scalar(text: str) -> int:
    return scalar_of(parse_polynomial(text))


def polynomial_arg(text: str) -> Polynomial:
    """argparse type= adapter for parse_polynomial."""
    try:
        return parse_polynomial(text)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
