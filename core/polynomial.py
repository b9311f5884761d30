"""Dense polynomials with exact coefficient arithmetic and long division."""

import logging

from core import rng
from core import coefficients
from core.coefficients import ZERO, divide
from core.errors import (UnsupportedOperationError,
                         ZeroPolynomialDivisionError)

_logger = logging.getLogger(__name__)


class Polynomial:
    """Polynomial with coeffs[0] = constant term, kept without trailing zeros.

    The empty coefficient tuple is the zero polynomial. Instances are values:
    every operation returns a new Polynomial.
    """

    __slots__ = ('coeffs',)

    def __init__(self, coeffs=()):
        self.coeffs = tuple(Polynomial.normalize(coeffs))

    @staticmethod
    def normalize(coeffs) -> list:
        """Copy of coeffs with trailing zero coefficients stripped."""
        result = list(coeffs)
        while result and result[-1] == ZERO:
            result.pop()
        return result

    @property
    def degree(self) -> int | None:
        """Degree, or None for the zero polynomial."""
        if not self.coeffs:
            return None
        return len(self.coeffs) - 1

    @property
    def leading(self):
        return coefficients.leading(self.coeffs)

    def is_zero(self) -> bool:
        return not self.coeffs

    def to_list(self) -> list:
        return list(self.coeffs)

    def __len__(self):
        return len(self.coeffs)

    def __iter__(self):
        return iter(self.coeffs)

    def __bool__(self):
        return bool(self.coeffs)

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self.coeffs == other.coeffs
        return NotImplemented

    def __hash__(self):
        return hash(self.coeffs)

    def __repr__(self):
        return f"Polynomial({list(self.coeffs)})"

    # Termwise arithmetic

    @staticmethod
    def _aligned(a: 'Polynomial', b: 'Polynomial'):
        """Pairs of coefficients with the shorter operand zero-padded."""
        n = max(len(a.coeffs), len(b.coeffs))
        left = list(a.coeffs) + [ZERO] * (n - len(a.coeffs))
        right = list(b.coeffs) + [ZERO] * (n - len(b.coeffs))
        return zip(left, right)

    def add(self, other: 'Polynomial') -> 'Polynomial':
        return Polynomial(x + y for x, y in Polynomial._aligned(self, other))

    def sub(self, other: 'Polynomial') -> 'Polynomial':
        return Polynomial(x - y for x, y in Polynomial._aligned(self, other))

    def mul_scalar(self, k) -> 'Polynomial':
        return Polynomial(c * k for c in self.coeffs)

    def __add__(self, other):
        if isinstance(other, Polynomial):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Polynomial):
            return self.sub(other)
        return NotImplemented

    def __neg__(self):
        return self.mul_scalar(-1)

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            raise UnsupportedOperationError(
                "polynomial multiplication is not implemented")
        return self.mul_scalar(other)

    def __rmul__(self, other):
        return self.mul_scalar(other)

    # Division

    def div_rem(self, divisor: 'Polynomial') -> tuple['Polynomial', 'Polynomial']:
        """Long division: returns (quotient, remainder).

        Each step divides the leading coefficients with the coefficient
        type's native division (truncating for integers) and stops as soon
        as the divisor is longer than the remainder or the step coefficient
        is zero. The result is exact only when every step divides evenly.
        """
        if not divisor.coeffs:
            raise ZeroPolynomialDivisionError(
                "division by the zero polynomial")

        remainder = self
        quotient = [ZERO] * max(len(self.coeffs) - len(divisor.coeffs) + 1, 0)
        for _ in range(len(self.coeffs)):
            coefficient = divide(remainder.leading, divisor.leading)
            if len(divisor.coeffs) > len(remainder.coeffs) or coefficient == ZERO:
                break

            grade = len(remainder.coeffs) - len(divisor.coeffs)
            subtrahend = Polynomial(
                [ZERO] * grade + divisor.mul_scalar(coefficient).to_list())
            remainder = remainder.sub(subtrahend)
            # steps can skip degrees when several leading terms cancel at once
            quotient[grade] = coefficient
            _logger.debug("div_rem step: coefficient=%s grade=%d remainder=%s",
                          coefficient, grade, remainder.to_list())

        return Polynomial(quotient), remainder

    def div(self, divisor: 'Polynomial') -> 'Polynomial':
        return self.div_rem(divisor)[0]

    def rem(self, divisor: 'Polynomial') -> 'Polynomial':
        return self.div_rem(divisor)[1]

    def __divmod__(self, other):
        if isinstance(other, Polynomial):
            return self.div_rem(other)
        return NotImplemented

    def __floordiv__(self, other):
        if isinstance(other, Polynomial):
            return self.div(other)
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, Polynomial):
            return self.rem(other)
        return NotImplemented

    @staticmethod
    def random(degree: int, bound: int = 10, monic: bool = False) -> 'Polynomial':
        """Random polynomial of given degree, coefficients in [-bound, bound].

        The leading coefficient is non-zero; with monic=True it is 1.
        """
        coeffs = [rng.randint(-bound, bound) for _ in range(degree)]
        if monic:
            lead = 1
        else:
            lead = rng.randint(1, bound)
            if rng.randbelow(2):
                lead = -lead
        coeffs.append(lead)
        return Polynomial(coeffs)
