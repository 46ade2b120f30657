"""
Executors - Entry point for running Lox source.

This module provides the Executor class that the host interacts with
to scan, parse and evaluate one piece of source.
"""

import logging
from dataclasses import dataclass

from lox.config import LoxConfig
from lox.errors import LoxRuntimeError
from lox.interpreter.evaluator import Evaluator
from lox.interpreter.values import stringify
from lox.lexer import Token, scan
from lox.parser.expression_parser import ExpressionParser
from lox.reporter import ErrorReporter, StateErrorReporter
from lox.syntax_tree.nodes import Expr, LoxValue
from lox.syntax_tree.printer import render

logger = logging.getLogger(__name__)


@dataclass
class ExecutionResult:
    """What one run produced; all fields are None when the run failed."""

    expression: Expr | None = None
    value: LoxValue = None
    output: str | None = None


class Executor:
    """
    Parse-then-evaluate driver for one input.

    Usage:
        reporter = StateErrorReporter()
        result = Executor("1 + 2 * 3", reporter).execute()
        print(result.output)  # 7.000000
    """

    def __init__(
        self,
        source: str | bytes,
        reporter: ErrorReporter | None = None,
        config: LoxConfig | None = None,
    ):
        """
        Initialize the executor.

        Args:
            source: The Lox source to run
            reporter: Diagnostic sink, shared across inputs by the host
            config: Host settings (number rendering precision)
        """
        self.source = source
        self.reporter = reporter or StateErrorReporter()
        self.config = config or LoxConfig()
        self._tokens: list[Token] | None = None
        self._expression: Expr | None = None
        self._parsed = False

    def scan(self) -> list[Token]:
        """Scan the source into tokens (cached)."""
        if self._tokens is None:
            self._tokens = scan(self.source, self.reporter)
        return self._tokens

    def parse(self) -> Expr | None:
        """
        Parse the source into a tree (cached).

        Returns:
            The tree, or None when a lexical or syntax error was reported
            while scanning or parsing this source
        """
        if not self._parsed:
            errors_before = self.reporter.error_count
            tokens = self.scan()
            result = ExpressionParser(tokens, self.reporter).parse()
            if self.reporter.error_count > errors_before:
                self._expression = None
            else:
                self._expression = result.expression
            self._parsed = True
        return self._expression

    def execute(self) -> ExecutionResult:
        """
        Scan, parse and evaluate the source.

        Returns:
            The result; runtime errors go to the reporter
        """
        expr = self.parse()
        if expr is None:
            return ExecutionResult()

        try:
            value = Evaluator().evaluate(expr)
        except LoxRuntimeError as e:
            self.reporter.runtime_error(e)
            return ExecutionResult(expression=expr)

        output = stringify(value, self.config.number_precision)
        logger.debug("Evaluated %s expression to %s", type(expr).__name__, output)
        return ExecutionResult(expression=expr, value=value, output=output)

    def print_ast(self) -> str | None:
        """Render the parsed tree in prefix notation, or None on any error."""
        expr = self.parse()
        if expr is None:
            return None
        try:
            return render(expr)
        except RecursionError:
            self.reporter.error(self.scan()[0].line, "Expression nesting too deep.")
            return None


def run_source(source: str | bytes, reporter: ErrorReporter | None = None) -> str | None:
    """
    Convenience function to run source and return its rendered value.

    Args:
        source: The Lox source
        reporter: Diagnostic sink (a stderr reporter by default)

    Returns:
        The rendered value, or None on any error
    """
    return Executor(source, reporter).execute().output
