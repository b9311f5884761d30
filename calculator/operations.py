"""Selectable calculator operations."""

import logging
from enum import Enum

from calculator.parsing import scalar_of
from core.errors import UnsupportedOperationError
from core.polynomial import Polynomial

_logger = logging.getLogger(__name__)


class Operation(Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    MUL_SCALAR = "mul-scalar"
    DIV = "div"
    REM = "rem"

    def __str__(self):
        return self.value


def apply(operation: Operation, op1: Polynomial, op2: Polynomial) -> Polynomial:
    """Apply operation to the two operands.

    MUL raises UnsupportedOperationError. MUL_SCALAR requires op2 to be a
    single coefficient and raises ScalarShapeError otherwise.
    """
    _logger.debug("%s %s %s", operation, op1.to_list(), op2.to_list())
    if operation is Operation.ADD:
        return op1 + op2
    if operation is Operation.SUB:
        return op1 - op2
    if operation is Operation.MUL:
        raise UnsupportedOperationError("mul is not implemented")
    if operation is Operation.MUL_SCALAR:
        return op1.mul_scalar(scalar_of(op2))
    if operation is Operation.DIV:
        return op1 // op2
    if operation is Operation.REM:
        return op1 % op2
    raise ValueError(f"Unsupported operation: {operation}")
