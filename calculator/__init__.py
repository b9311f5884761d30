"""Command-line calculator layer: parsing, formatting, operation dispatch."""

from calculator.parsing import ParseError, parse_polynomial, parse_scalar
from calculator.formatting import format_plain, format_pretty
from calculator.operations import Operation, apply
