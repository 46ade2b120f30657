"""
Lexer module for tokenizing Lox expression source.

This module turns raw source text into a flat list of tokens. Lexical
errors are reported through the error reporter and scanning carries on,
so a single pass always reaches the end of the input.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, TYPE_CHECKING

from lox.errors import InternalError

if TYPE_CHECKING:
    from lox.reporter import ErrorReporter

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types for the Lox lexer."""

    # Single-character tokens
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *
    QUESTION = auto()  # ?
    COLON = auto()  # :

    # One or two character tokens
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()  # multi-line, kept verbatim
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # Special
    EOF = auto()


# Keywords mapping
KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
    "?": TokenType.QUESTION,
    ":": TokenType.COLON,
}

# char -> (type when followed by "=", type otherwise)
ONE_OR_TWO_CHAR_TOKENS = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


@dataclass(frozen=True)
class Token:
    """Represents a single token from the lexer."""

    type: TokenType
    lexeme: str
    literal: Any
    line: int

    def __str__(self) -> str:
        literal = "" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}".rstrip()

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, line={self.line})"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Lexer:
    """
    Tokenizer for Lox expression source.

    Handles:
    - Single and double character operators (! != = == < <= > >=)
    - Line comments starting with //
    - Multi-line string literals
    - Numbers (integers and decimals, always stored as float)
    - Identifiers and reserved keywords

    Unexpected characters and unterminated strings are reported to the
    reporter; neither stops the scan.
    """

    def __init__(self, source: str | bytes, reporter: "ErrorReporter"):
        if isinstance(source, bytes):
            source = source.decode("utf-8", errors="replace")
        self.source = source
        self.reporter = reporter
        self.tokens: list[Token] = []
        self.start = 0  # first character of the lexeme being scanned
        self.current = 0  # character under the cursor
        self.line = 1
        self.length = len(source)

    def scan_tokens(self) -> list[Token]:
        """Tokenize the entire source string, ending with an EOF token."""
        while not self._is_at_end():
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        logger.debug("Scanned %d tokens over %d line(s)", len(self.tokens), self.line)
        return self.tokens

    def _is_at_end(self) -> bool:
        return self.current >= self.length

    def _advance(self) -> str:
        """Advance position and return the consumed character."""
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= self.length:
            return "\0"
        return self.source[self.current + 1]

    def _add_token(self, token_type: TokenType, literal: Any = None) -> None:
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    def _scan_token(self) -> None:
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
            return

        if char in ONE_OR_TWO_CHAR_TOKENS:
            with_equal, alone = ONE_OR_TWO_CHAR_TOKENS[char]
            self._add_token(with_equal if self._match("=") else alone)
            return

        if char == "/":
            if self._match("/"):
                # The newline is left for the main loop to count.
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
            return

        if char in " \r\t":
            return

        if char == "\n":
            self.line += 1
            return

        if char == '"':
            self._read_string()
            return

        if _is_digit(char):
            self._read_number()
            return

        if _is_alpha(char):
            self._read_identifier()
            return

        self.reporter.error(self.line, "Unexpected character.")

    def _read_string(self) -> None:
        """Read a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            self.reporter.error(self.line, "Unterminated string.")
            return

        self._advance()  # closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _read_number(self) -> None:
        """Read a numeric literal (integer or decimal)."""
        while _is_digit(self._peek()):
            self._advance()

        # A trailing dot without a digit after it is not part of the number
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        text = self.source[self.start:self.current]
        try:
            value = float(text)
        except ValueError as e:
            raise InternalError(f"Scanned malformed number literal {text!r}") from e
        self._add_token(TokenType.NUMBER, value)

    def _read_identifier(self) -> None:
        """Read an identifier or keyword."""
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan(source: str | bytes, reporter: "ErrorReporter") -> list[Token]:
    """
    Scan source into tokens.

    Args:
        source: Lox source text (bytes are decoded as UTF-8)
        reporter: Sink for lexical diagnostics

    Returns:
        The token list, always terminated by an EOF token
    """
    return Lexer(source, reporter).scan_tokens()
