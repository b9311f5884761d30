"""Coefficient contract: additive identity and native division.

Coefficients are duck-typed. A coefficient type needs + - * and ==, and its
additive identity must compare equal to the integer 0.
"""

ZERO = 0


def divide(a, b):
    """Native coefficient division.

    Integers divide like 32-bit machine integers: the quotient is truncated
    toward zero, so divide(-3, 2) == -1 where -3 // 2 == -2.
    """
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return a / b


def leading(coeffs):
    """Highest-degree coefficient, or ZERO for an empty sequence."""
    return coeffs[-1] if coeffs else ZERO
