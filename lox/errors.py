"""
Error types for the Lox expression pipeline.

Lexical and syntax problems are reported through the error reporter rather
than raised to callers. The exceptions here are the signals that cross
component boundaries:

- ParseError: unwinds an abandoned parse, caught inside the parser
- LoxRuntimeError: a type error during evaluation, caught by the driver
- InternalError: a broken invariant; never caught by the pipeline
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lox.lexer import Token


class LoxError(Exception):
    """Base class for recoverable Lox errors."""


class ParseError(LoxError):
    """Raised to abandon the current parse after a syntax error was reported."""


class LoxRuntimeError(LoxError):
    """Exception raised when an operator is applied to values of the wrong type."""

    def __init__(self, token: "Token", message: str):
        self.token = token
        self.message = message
        super().__init__(message)

    @property
    def line(self) -> int:
        return self.token.line


class InternalError(Exception):
    """
    A violated internal invariant.

    Deliberately not a LoxError: handlers for recoverable errors must never
    swallow it.
    """
