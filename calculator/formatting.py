"""Render polynomials as coefficient lists or readable expressions."""

from core.polynomial import Polynomial


def format_plain(poly: Polynomial) -> str:
    """Descending-degree comma list: 2,0,-1,5. The zero polynomial is "0"."""
    if poly.is_zero():
        return "0"
    return ",".join(str(c) for c in reversed(poly.coeffs))


def _term(coeff: int, power: int) -> str:
    magnitude = abs(coeff)
    if power == 0:
        return str(magnitude)
    body = "x" if power == 1 else f"x^{power}"
    if magnitude == 1:
        return body
    return f"{magnitude}{body}"


def format_pretty(poly: Polynomial) -> str:
    """Readable expression, highest degree first: 2x^3-x+5.

    Zero coefficients are omitted, unit coefficients are shown as a bare x,
    and x^1 / x^0 carry no exponent.
    """
    parts = []
    for power in range(len(poly) - 1, -1, -1):
        coeff = poly.coeffs[power]
        if coeff == 0:
            continue
        if coeff < 0:
            parts.append("-")
        elif parts:
            parts.append("+")
        parts.append(_term(coeff, power))
    return "".join(parts) or "0"
