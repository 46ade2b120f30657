"""
Evaluator - Tree-walking evaluation of Lox expressions.

Supports:
- Arithmetic: +, -, *, / (IEEE-754, division by zero is not an error)
- String concatenation: "a" + "b"
- Comparison: >, >=, <, <=
- Equality: ==, != (type-sensitive)
- Logical not: !
- Comma operator: left is evaluated and discarded
- Conditional: cond ? a : b (only the selected branch is evaluated)
"""

import logging
import operator as op
from typing import TYPE_CHECKING

import numpy as np

from lox.errors import InternalError, LoxRuntimeError
from lox.interpreter.values import (
    DEFAULT_PRECISION,
    check_number_operand,
    check_number_operands,
    check_string_operand,
    float_arithmetic,
    is_equal,
    is_number,
    is_string,
    is_truthy,
    stringify,
)
from lox.lexer import Token, TokenType
from lox.syntax_tree.nodes import (
    Binary,
    Expr,
    Grouping,
    Literal,
    LoxValue,
    Ternary,
    Unary,
)

if TYPE_CHECKING:
    from lox.reporter import ErrorReporter

logger = logging.getLogger(__name__)


class Evaluator:
    """
    Evaluator for expression trees.

    Usage:
        value = Evaluator().evaluate(expr)
        text = Evaluator().interpret(expr, reporter)
    """

    # Number-only binary operators
    ARITHMETIC = {
        TokenType.MINUS: np.subtract,
        TokenType.SLASH: np.divide,
        TokenType.STAR: np.multiply,
    }

    COMPARISONS = {
        TokenType.GREATER: op.gt,
        TokenType.GREATER_EQUAL: op.ge,
        TokenType.LESS: op.lt,
        TokenType.LESS_EQUAL: op.le,
    }

    def __init__(self, precision: int = DEFAULT_PRECISION):
        self.precision = precision

    def interpret(self, expr: Expr, reporter: "ErrorReporter") -> str | None:
        """
        Evaluate a tree and render the result.

        Runtime errors are forwarded to the reporter and yield None. Any other
        exception is a bug and propagates.
        """
        try:
            value = self.evaluate(expr)
        except LoxRuntimeError as e:
            reporter.runtime_error(e)
            return None
        return stringify(value, self.precision)

    def evaluate(self, expr: Expr) -> LoxValue:
        """Evaluate an expression, raising LoxRuntimeError on a type error or too deep a tree."""
        try:
            return self._evaluate(expr)
        except RecursionError:
            raise LoxRuntimeError(
                _anchor_token(expr), "Expression nesting too deep."
            ) from None

    def _evaluate(self, expr: Expr) -> LoxValue:
        if isinstance(expr, Literal):
            return expr.value
        elif isinstance(expr, Grouping):
            return self._evaluate(expr.expression)
        elif isinstance(expr, Unary):
            return self._evaluate_unary(expr)
        elif isinstance(expr, Binary):
            return self._evaluate_binary(expr)
        elif isinstance(expr, Ternary):
            return self._evaluate_ternary(expr)
        raise InternalError(f"Unhandled expression node: {type(expr).__name__}")

    def _evaluate_unary(self, expr: Unary) -> LoxValue:
        right = self._evaluate(expr.right)

        if expr.operator.type == TokenType.MINUS:
            return -check_number_operand(expr.operator, right)
        if expr.operator.type == TokenType.BANG:
            return not is_truthy(right)

        raise InternalError(f"Unexpected unary operator {expr.operator.lexeme!r}")

    def _evaluate_binary(self, expr: Binary) -> LoxValue:
        # Left operand strictly before right
        left = self._evaluate(expr.left)
        right = self._evaluate(expr.right)
        operator = expr.operator
        token_type = operator.type

        if token_type in self.ARITHMETIC:
            left_num, right_num = check_number_operands(operator, left, right)
            return float_arithmetic(self.ARITHMETIC[token_type], left_num, right_num)

        if token_type in self.COMPARISONS:
            left_num, right_num = check_number_operands(operator, left, right)
            return self.COMPARISONS[token_type](left_num, right_num)

        if token_type == TokenType.PLUS:
            return self._evaluate_plus(expr, left, right)

        if token_type == TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if token_type == TokenType.BANG_EQUAL:
            return not is_equal(left, right)

        if token_type == TokenType.COMMA:
            return right

        raise InternalError(f"Unexpected binary operator {operator.lexeme!r}")

    def _evaluate_plus(self, expr: Binary, left: LoxValue, right: LoxValue) -> LoxValue:
        """String concatenation when left is a string, addition when it is a number."""
        if is_string(left):
            return left + check_string_operand(expr.operator, right)  # type: ignore[operator]
        if is_number(left):
            right_num = check_number_operand(expr.operator, right)
            return float_arithmetic(np.add, left, right_num)  # type: ignore[arg-type]

        raise LoxRuntimeError(
            expr.operator,
            "Expected two strings or two numbers but got "
            f"{stringify(left, self.precision)} + {stringify(right, self.precision)}.",
        )

    def _evaluate_ternary(self, expr: Ternary) -> LoxValue:
        condition = self._evaluate(expr.condition)

        if is_truthy(condition):
            return self._evaluate(expr.then_branch)
        return self._evaluate(expr.else_branch)


def _anchor_token(expr: Expr) -> Token:
    """Outermost operator token of a tree, used to place tree-wide errors."""
    while True:
        if isinstance(expr, (Unary, Binary)):
            return expr.operator
        if isinstance(expr, Grouping):
            expr = expr.expression
        elif isinstance(expr, Ternary):
            expr = expr.condition
        else:
            return Token(TokenType.EOF, "", None, 1)


def evaluate(expr: Expr) -> LoxValue:
    """Evaluate an expression tree; raises LoxRuntimeError on a type error."""
    value = Evaluator().evaluate(expr)
    logger.debug("Evaluated %s expression to %r", type(expr).__name__, value)
    return value
