"""Polynomial calculator — Entry Point.

Operands are comma-separated integer coefficients, highest degree first:
2,0,-1,5 = 2x^3-x+5. Operands starting with '-' must follow a '--'.
"""

import argparse
import logging
import sys

from calculator.formatting import format_plain, format_pretty
from calculator.operations import Operation, apply
from calculator.parsing import polynomial_arg
from core.errors import PolynomialError

_logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polycalc",
        description="Calculates simple operations between polynomials.",
        epilog="Example: polycalc -o div -p -- 1,0,2,1,-1 1,1,1")
    parser.add_argument("-o", "--operation", required=True, type=Operation,
                        choices=list(Operation), metavar="OPERATION",
                        help="Operation to perform: " +
                             ", ".join(op.value for op in Operation))
    parser.add_argument("-p", "--pretty-print", action="store_true",
                        help="Pretty print output (2x^3-x+5 instead of 2,0,-1,5)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log intermediate steps to stderr")
    parser.add_argument("op1", type=polynomial_arg,
                        help="First polynomial (format: 2,0,-1,5 = 2x^3-x+5)")
    parser.add_argument("op2", type=polynomial_arg,
                        help="Second polynomial, or integer for mul-scalar")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=LOG_FORMAT)

    try:
        result = apply(args.operation, args.op1, args.op2)
    except PolynomialError as e:
        _logger.debug("%s failed", args.operation, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.pretty_print:
        print(format_pretty(result))
    else:
        print(format_plain(result))
    return EXIT_OK


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
