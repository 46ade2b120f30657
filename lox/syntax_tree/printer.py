"""
Printers for converting expression trees back to text.

Provides two renderings:
- AstPrinter: fully parenthesized prefix notation, for debugging
- SourcePrinter: fully parenthesized infix Lox, which the parser accepts again
"""

import numpy as np

from lox.errors import InternalError
from lox.syntax_tree.nodes import (
    Binary,
    Expr,
    Grouping,
    Literal,
    LoxValue,
    Ternary,
    Unary,
)


def format_literal(value: LoxValue) -> str:
    """
    Render a literal value the way it would be written in source.

    Numbers use the shortest positional form (no exponent) so that the
    output stays inside the digit-only number grammar.
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return np.format_float_positional(value, trim="-")
    if isinstance(value, str):
        return f'"{value}"'
    raise InternalError(f"Unexpected literal value: {value!r}")


class AstPrinter:
    """
    Renders a tree in prefix notation.

    Usage:
        AstPrinter().print(expr)  # e.g. "(+ 1 (group (* 2 3)))"
    """

    def print(self, expr: Expr) -> str:
        if isinstance(expr, Literal):
            return format_literal(expr.value)
        elif isinstance(expr, Grouping):
            return self._parenthesize("group", expr.expression)
        elif isinstance(expr, Unary):
            return self._parenthesize(expr.operator.lexeme, expr.right)
        elif isinstance(expr, Binary):
            return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)
        elif isinstance(expr, Ternary):
            return self._parenthesize(
                "?:", expr.condition, expr.then_branch, expr.else_branch
            )
        raise InternalError(f"Unhandled expression node: {type(expr).__name__}")

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [self.print(e) for e in exprs]
        return "(" + " ".join(parts) + ")"


class SourcePrinter:
    """
    Renders a tree as fully parenthesized infix source.

    Every compound node gets its own parentheses, so the text re-parses to a
    tree that evaluates identically regardless of precedence.
    """

    def print(self, expr: Expr) -> str:
        if isinstance(expr, Literal):
            return self._format_literal(expr.value)
        elif isinstance(expr, Grouping):
            return f"({self.print(expr.expression)})"
        elif isinstance(expr, Unary):
            return f"({expr.operator.lexeme}{self.print(expr.right)})"
        elif isinstance(expr, Binary):
            left = self.print(expr.left)
            right = self.print(expr.right)
            if expr.operator.lexeme == ",":
                return f"({left}, {right})"
            return f"({left} {expr.operator.lexeme} {right})"
        elif isinstance(expr, Ternary):
            condition = self.print(expr.condition)
            then_branch = self.print(expr.then_branch)
            else_branch = self.print(expr.else_branch)
            return f"({condition} ? {then_branch} : {else_branch})"
        raise InternalError(f"Unhandled expression node: {type(expr).__name__}")

    def _format_literal(self, value: LoxValue) -> str:
        # No literal syntax for inf or nan; spell them as divisions
        if isinstance(value, float) and not np.isfinite(value):
            if np.isnan(value):
                return "(0/0)"
            return "(1/0)" if value > 0 else "(-1/0)"
        return format_literal(value)


def render(expr: Expr) -> str:
    """Render a tree in prefix notation."""
    return AstPrinter().print(expr)


def render_source(expr: Expr) -> str:
    """Render a tree as re-parseable infix source."""
    return SourcePrinter().print(expr)
