"""
Expression Parser - Recursive descent parser for Lox expressions.

Each precedence level is one method; lower levels call higher ones. On the
first syntax error the parser reports it and unwinds the whole parse, so a
failed parse never yields a partial tree.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lox.errors import ParseError
from lox.lexer import Token, TokenType
from lox.syntax_tree.nodes import (
    Binary,
    Expr,
    Grouping,
    Literal,
    Ternary,
    Unary,
)

if TYPE_CHECKING:
    from lox.reporter import ErrorReporter

logger = logging.getLogger(__name__)

# Keywords that begin a statement; synchronize() stops in front of them
STATEMENT_KEYWORDS = frozenset({
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a top-level parse: the tree, or nothing on a syntax error."""

    expression: Expr | None

    @property
    def success(self) -> bool:
        return self.expression is not None


class ExpressionParser:
    """
    Parser for Lox expressions.

    Grammar (lowest to highest precedence):
        expression     := comma
        comma          := ternary ("," ternary)*
        ternary        := equality ("?" expression ":" expression)?
        equality       := comparison (("==" | "!=") comparison)*
        comparison     := addition ((">" | ">=" | "<" | "<=") addition)*
        addition       := multiplication (("+" | "-") multiplication)*
        multiplication := unary (("*" | "/") unary)*
        unary          := ("!" | "-") unary | primary
        primary        := NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"
    """

    def __init__(self, tokens: list[Token], reporter: "ErrorReporter"):
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("Token sequence must end with an EOF token")
        self.tokens = tokens
        self.reporter = reporter
        self.pos = 0

    def parse(self) -> ParseResult:
        """Parse the token sequence as exactly one expression."""
        try:
            expr = self._parse_expression()
            if not self._is_at_end():
                raise self._error(self._current_token(), "Expect end of expression.")
        except RecursionError:
            # Reported only once the stack has unwound
            self._error(self._current_token(), "Expression nesting too deep.")
            return ParseResult(expression=None)
        except ParseError:
            logger.debug("Parse abandoned after syntax error")
            return ParseResult(expression=None)

        logger.debug("Parsed expression from %d tokens", len(self.tokens))
        return ParseResult(expression=expr)

    # Grammar rules

    def _parse_expression(self) -> Expr:
        return self._parse_comma()

    def _parse_comma(self) -> Expr:
        """Parse comma: ternary ("," ternary)*"""
        expr = self._parse_ternary()

        while self._match(TokenType.COMMA):
            operator = self._previous_token()
            right = self._parse_ternary()
            expr = Binary(left=expr, operator=operator, right=right)

        return expr

    def _parse_ternary(self) -> Expr:
        """Parse ternary: equality ("?" expression ":" expression)?"""
        expr = self._parse_equality()

        if self._match(TokenType.QUESTION):
            then_branch = self._parse_expression()
            self._consume(
                TokenType.COLON,
                "Expect ':' after then branch of conditional expression.",
            )
            else_branch = self._parse_expression()
            expr = Ternary(condition=expr, then_branch=then_branch, else_branch=else_branch)

        return expr

    def _parse_equality(self) -> Expr:
        """Parse equality: comparison (("==" | "!=") comparison)*"""
        expr = self._parse_comparison()

        while self._match(TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL):
            operator = self._previous_token()
            right = self._parse_comparison()
            expr = Binary(left=expr, operator=operator, right=right)

        return expr

    def _parse_comparison(self) -> Expr:
        """Parse comparison: addition ((">" | ">=" | "<" | "<=") addition)*"""
        expr = self._parse_addition()

        while self._match(
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
        ):
            operator = self._previous_token()
            right = self._parse_addition()
            expr = Binary(left=expr, operator=operator, right=right)

        return expr

    def _parse_addition(self) -> Expr:
        """Parse addition: multiplication (("+" | "-") multiplication)*"""
        expr = self._parse_multiplication()

        while self._match(TokenType.MINUS, TokenType.PLUS):
            operator = self._previous_token()
            right = self._parse_multiplication()
            expr = Binary(left=expr, operator=operator, right=right)

        return expr

    def _parse_multiplication(self) -> Expr:
        """Parse multiplication: unary (("*" | "/") unary)*"""
        expr = self._parse_unary()

        while self._match(TokenType.STAR, TokenType.SLASH):
            operator = self._previous_token()
            right = self._parse_unary()
            expr = Binary(left=expr, operator=operator, right=right)

        return expr

    def _parse_unary(self) -> Expr:
        """Parse unary: ("!" | "-") unary | primary"""
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous_token()
            right = self._parse_unary()
            return Unary(operator=operator, right=right)

        return self._parse_primary()

    def _parse_primary(self) -> Expr:
        """Parse primary: literal | (expr)"""
        if self._match(TokenType.FALSE):
            return Literal(False)
        if self._match(TokenType.TRUE):
            return Literal(True)
        if self._match(TokenType.NIL):
            return Literal(None)

        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous_token().literal)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._parse_expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise self._error(self._current_token(), "Expect expression.")

    # Cursor helpers

    def _current_token(self) -> Token:
        return self.tokens[self.pos]

    def _previous_token(self) -> Token:
        return self.tokens[self.pos - 1]

    def _is_at_end(self) -> bool:
        return self._current_token().type == TokenType.EOF

    def _advance(self) -> Token:
        """Advance and return the consumed token; never moves past EOF."""
        if not self._is_at_end():
            self.pos += 1
        return self._previous_token()

    def _check(self, token_type: TokenType) -> bool:
        if self._is_at_end():
            return False
        return self._current_token().type == token_type

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it matches any of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Expect a specific token type, report and unwind if not found."""
        if self._check(token_type):
            return self._advance()
        raise self._error(self._current_token(), message)

    # Error recovery

    def _error(self, token: Token, message: str) -> ParseError:
        if token.type == TokenType.EOF:
            self.reporter.report(token.line, " at end", message)
        else:
            self.reporter.report(token.line, f" at '{token.lexeme}'", message)
        return ParseError(message)

    def synchronize(self) -> None:
        """
        Discard tokens until a likely statement boundary.

        Stops just after a semicolon, in front of a statement keyword, or at
        EOF. Expression-only parsing never calls this; it is the recovery
        point for a statement layer.
        """
        self._advance()

        while not self._is_at_end():
            if self._previous_token().type == TokenType.SEMICOLON:
                return
            if self._current_token().type in STATEMENT_KEYWORDS:
                return
            self._advance()


def parse(tokens: list[Token], reporter: "ErrorReporter") -> Expr | None:
    """
    Parse tokens into an expression tree.

    Args:
        tokens: Token list ending with EOF
        reporter: Sink for syntax diagnostics

    Returns:
        The expression tree, or None if a syntax error was reported
    """
    return ExpressionParser(tokens, reporter).parse().expression
