"""Core primitives: integer polynomial arithmetic, errors, deterministic RNG."""

from core.polynomial import Polynomial
from core.errors import (
    PolynomialError, ZeroPolynomialDivisionError,
    UnsupportedOperationError, ScalarShapeError,
)
from core import rng
