"""
Tests for the error reporters.
"""

import io

from lox.errors import LoxRuntimeError
from lox.lexer import Token, TokenType
from lox.reporter import CollectingErrorReporter, StateErrorReporter


def _runtime_error(line=4):
    return LoxRuntimeError(Token(TokenType.MINUS, "-", None, line), "Operand must be a number.")


class TestStateErrorReporter:
    """Diagnostics are printed in the fixed text format."""

    def test_error_format(self):
        stream = io.StringIO()
        reporter = StateErrorReporter(stream)
        reporter.error(3, "Unexpected character.")
        assert stream.getvalue() == "[line 3] Error: Unexpected character.\n"

    def test_report_with_location(self):
        stream = io.StringIO()
        reporter = StateErrorReporter(stream)
        reporter.report(1, " at end", "Expect expression.")
        assert stream.getvalue() == "[line 1] Error at end: Expect expression.\n"

    def test_runtime_error_format(self):
        stream = io.StringIO()
        reporter = StateErrorReporter(stream)
        reporter.runtime_error(_runtime_error())
        assert stream.getvalue() == "Operand must be a number.\n[line 4]\n"

    def test_defaults_to_stderr(self, capsys):
        StateErrorReporter().error(1, "oops")
        assert capsys.readouterr().err == "[line 1] Error: oops\n"


class TestFlags:
    """The two flags are independent and sticky."""

    def test_initial_state(self):
        reporter = CollectingErrorReporter()
        assert not reporter.had_error
        assert not reporter.had_runtime_error
        assert reporter.error_count == 0

    def test_syntax_flag_only(self):
        reporter = CollectingErrorReporter()
        reporter.error(1, "bad")
        assert reporter.had_error
        assert not reporter.had_runtime_error

    def test_runtime_flag_only(self):
        reporter = CollectingErrorReporter()
        reporter.runtime_error(_runtime_error())
        assert reporter.had_runtime_error
        assert not reporter.had_error
        assert reporter.error_count == 0

    def test_flags_stay_set(self):
        reporter = CollectingErrorReporter()
        reporter.error(1, "bad")
        reporter.runtime_error(_runtime_error())
        reporter.error(2, "worse")
        assert reporter.had_error
        assert reporter.had_runtime_error
        assert reporter.error_count == 2
        assert reporter.messages[0] == "[line 1] Error: bad"
        assert reporter.messages[1] == "Operand must be a number.\n[line 4]"
