"""
Error reporters for diagnostics raised while scanning, parsing and evaluating.

All components share one reporter per host run. The reporter records two
sticky flags the host uses to choose an exit code.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import TextIO

from lox.errors import LoxRuntimeError

logger = logging.getLogger(__name__)


class ErrorReporter(ABC):
    """
    Abstract base class for diagnostic sinks.

    Subclasses implement:
    - report(line, where, message): a lexical or syntax error
    - runtime_error(error): an evaluation error

    Flags are set-only for the lifetime of the reporter.
    """

    def __init__(self) -> None:
        self._had_error = False
        self._had_runtime_error = False
        self._error_count = 0

    @property
    def had_error(self) -> bool:
        """Whether a lexical or syntax error was reported."""
        return self._had_error

    @property
    def had_runtime_error(self) -> bool:
        """Whether a runtime error was reported."""
        return self._had_runtime_error

    @property
    def error_count(self) -> int:
        """Number of lexical and syntax errors reported so far."""
        return self._error_count

    def error(self, line: int, message: str) -> None:
        """Report an error with no location detail beyond the line."""
        self.report(line, "", message)

    def report(self, line: int, where: str, message: str) -> None:
        self._had_error = True
        self._error_count += 1
        logger.debug("Syntax error on line %d%s: %s", line, where, message)
        self._emit_error(line, where, message)

    def runtime_error(self, error: LoxRuntimeError) -> None:
        self._had_runtime_error = True
        logger.debug("Runtime error on line %d: %s", error.line, error.message)
        self._emit_runtime_error(error)

    @abstractmethod
    def _emit_error(self, line: int, where: str, message: str) -> None:
        pass

    @abstractmethod
    def _emit_runtime_error(self, error: LoxRuntimeError) -> None:
        pass


class StateErrorReporter(ErrorReporter):
    """
    Reporter that prints diagnostics to a text stream.

    Usage:
        reporter = StateErrorReporter()
        ...
        if reporter.had_error:
            sys.exit(65)
    """

    def __init__(self, stream: TextIO | None = None):
        super().__init__()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected stderr (pytest capsys, CliRunner) is honoured
        return self._stream if self._stream is not None else sys.stderr

    def _emit_error(self, line: int, where: str, message: str) -> None:
        print(f"[line {line}] Error{where}: {message}", file=self.stream)

    def _emit_runtime_error(self, error: LoxRuntimeError) -> None:
        print(f"{error.message}\n[line {error.line}]", file=self.stream)


class CollectingErrorReporter(ErrorReporter):
    """Reporter that keeps formatted diagnostics in memory instead of printing them."""

    def __init__(self) -> None:
        super().__init__()
        self.messages: list[str] = []

    def _emit_error(self, line: int, where: str, message: str) -> None:
        self.messages.append(f"[line {line}] Error{where}: {message}")

    def _emit_runtime_error(self, error: LoxRuntimeError) -> None:
        self.messages.append(f"{error.message}\n[line {error.line}]")
