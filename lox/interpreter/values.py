"""
Runtime value rules.

Every type check an operator performs goes through the helpers here, so the
coercion rules of the language live in one place:
- Numbers are Python floats (never bool, never int)
- nil and false are falsy, everything else is truthy
- Equality requires matching types
"""

from typing import Callable

import numpy as np

from lox.errors import InternalError, LoxRuntimeError
from lox.lexer import Token
from lox.syntax_tree.nodes import LoxValue

DEFAULT_PRECISION = 6


def is_number(value: LoxValue) -> bool:
    return isinstance(value, float)


def is_string(value: LoxValue) -> bool:
    return isinstance(value, str)


def is_truthy(value: LoxValue) -> bool:
    """Return False for nil and false, True for every other value."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left: LoxValue, right: LoxValue) -> bool:
    """Type-sensitive equality: 0 is not false, "1" is not 1."""
    return type(left) is type(right) and left == right


def check_number_operand(operator: Token, operand: LoxValue) -> float:
    if is_number(operand):
        return operand  # type: ignore[return-value]
    raise LoxRuntimeError(operator, "Operand must be a number.")


def check_number_operands(
    operator: Token, left: LoxValue, right: LoxValue
) -> tuple[float, float]:
    """Check both operands are numbers, left first."""
    if is_number(left) and is_number(right):
        return left, right  # type: ignore[return-value]
    raise LoxRuntimeError(operator, "Operands must be numbers.")


def check_string_operand(operator: Token, operand: LoxValue) -> str:
    if is_string(operand):
        return operand  # type: ignore[return-value]
    raise LoxRuntimeError(operator, "Operand must be a string.")


def float_arithmetic(
    op: Callable[[np.float64, np.float64], np.float64], left: float, right: float
) -> float:
    """
    Apply a numpy ufunc with IEEE-754 semantics.

    Division by zero gives +/-inf or nan instead of raising.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(op(np.float64(left), np.float64(right)))


def stringify(value: LoxValue, precision: int = DEFAULT_PRECISION) -> str:
    """Render a runtime value for display."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:.{precision}f}"
    if isinstance(value, str):
        return value
    raise InternalError(f"Not a Lox value: {value!r}")
