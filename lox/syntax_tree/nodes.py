"""
Expression tree node definitions.

The node set is closed: every consumer (evaluator, printers) handles exactly
these five variants. Nodes are frozen; children are owned by their parent.
"""

from dataclasses import dataclass
from typing import Union

from lox.lexer import Token

# Runtime values: number, string, boolean or nil
LoxValue = Union[float, str, bool, None]


@dataclass(frozen=True)
class Literal:
    """Represents a literal value (number, string, boolean or nil)."""

    value: LoxValue

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"


@dataclass(frozen=True)
class Grouping:
    """Represents a parenthesized expression."""

    expression: "Expr"

    def __repr__(self) -> str:
        return f"Grouping({self.expression!r})"


@dataclass(frozen=True)
class Unary:
    """Represents a prefix operation (e.g., -x, !x)."""

    operator: Token
    right: "Expr"

    def __repr__(self) -> str:
        return f"Unary({self.operator.lexeme} {self.right!r})"


@dataclass(frozen=True)
class Binary:
    """Represents an infix operation, including the comma operator (e.g., a + b, a, b)."""

    left: "Expr"
    operator: Token
    right: "Expr"

    def __repr__(self) -> str:
        return f"Binary({self.left!r} {self.operator.lexeme} {self.right!r})"


@dataclass(frozen=True)
class Ternary:
    """Represents a conditional expression (cond ? then : else)."""

    condition: "Expr"
    then_branch: "Expr"
    else_branch: "Expr"

    def __repr__(self) -> str:
        return f"Ternary({self.condition!r} ? {self.then_branch!r} : {self.else_branch!r})"


Expr = Union[Literal, Grouping, Unary, Binary, Ternary]
