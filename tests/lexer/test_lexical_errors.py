"""
Tests for the lexer - error reporting and resynchronisation.
"""

import pytest

from lox import lexer as lexer_module
from lox.errors import InternalError
from lox.lexer import Lexer, TokenType


class TestUnexpectedCharacter:
    """Unrecognised characters are reported and skipped."""

    def test_single_bad_character(self, tokenize, reporter):
        tokens = tokenize("@")
        assert [t.type for t in tokens] == [TokenType.EOF]
        assert reporter.messages == ["[line 1] Error: Unexpected character."]
        assert reporter.had_error

    def test_scanning_continues_after_error(self, tokenize, reporter):
        tokens = tokenize("1 # 2 $ 3")
        assert [t.literal for t in tokens if t.type == TokenType.NUMBER] == [1.0, 2.0, 3.0]
        assert reporter.error_count == 2

    def test_error_reports_current_line(self, tokenize, reporter):
        tokenize("1\n\n@")
        assert reporter.messages == ["[line 3] Error: Unexpected character."]

    def test_non_ascii_letters_are_unexpected(self, tokenize, reporter):
        tokenize("é")
        assert reporter.error_count == 1


class TestUnterminatedString:
    """A string without a closing quote is reported and dropped."""

    def test_unterminated_string(self, tokenize, reporter):
        tokens = tokenize('1 "abc')
        assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.EOF]
        assert reporter.messages == ["[line 1] Error: Unterminated string."]

    def test_unterminated_multiline_string_reports_last_line(self, tokenize, reporter):
        tokens = tokenize('"a\nb\n')
        assert reporter.messages == ["[line 3] Error: Unterminated string."]
        assert tokens[-1].line == 3


class TestNoErrors:
    def test_valid_source_reports_nothing(self, tokenize, reporter):
        tokenize('(1 + 2) * "x" ? true : nil // fine')
        assert reporter.messages == []
        assert not reporter.had_error


class TestMalformedNumber:
    """A number the digit grammar accepted but float() rejects is an internal fault."""

    def test_internal_error(self, reporter, monkeypatch):
        lexer = Lexer("12", reporter)

        def bad_float(_text):
            raise ValueError("boom")

        monkeypatch.setattr(lexer_module, "float", bad_float, raising=False)
        with pytest.raises(InternalError):
            lexer.scan_tokens()


class TestUndecodableBytes:
    """Invalid UTF-8 becomes an unexpected character instead of a crash."""

    def test_invalid_byte_is_reported(self, reporter):
        tokens = Lexer(b"1 + \xff", reporter).scan_tokens()
        assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.PLUS, TokenType.EOF]
        assert reporter.messages == ["[line 1] Error: Unexpected character."]

    def test_valid_bytes_decode(self, reporter):
        tokens = Lexer('"caf\u00e9"'.encode("utf-8"), reporter).scan_tokens()
        assert tokens[0].literal == "caf\u00e9"
        assert reporter.messages == []
