"""Exception hierarchy for polynomial arithmetic faults."""


class PolynomialError(Exception):
    """Base class for all polynomial arithmetic faults."""

    pass


class ZeroPolynomialDivisionError(PolynomialError, ZeroDivisionError):
    """Division by the zero polynomial.

    Long division has no meaningful output for an empty divisor, so the
    computation is aborted before any work is done.
    """

    pass


class UnsupportedOperationError(PolynomialError, NotImplementedError):
    """Operation that is declared but not supported (full multiplication)."""

    pass


class ScalarShapeError(PolynomialError, ValueError):
    """Scalar operand does not reduce to exactly one coefficient."""

    pass
