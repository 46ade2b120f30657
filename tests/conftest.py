"""
Pytest configuration and shared fixtures for Lox tests.

This module provides:
- An in-memory reporter per test
- Helpers that run source through one or more pipeline stages
"""

import pytest

from lox.interpreter.evaluator import Evaluator
from lox.lexer import scan
from lox.parser.expression_parser import ExpressionParser
from lox.reporter import CollectingErrorReporter


@pytest.fixture
def reporter() -> CollectingErrorReporter:
    """Fresh reporter that keeps diagnostics in memory."""
    return CollectingErrorReporter()


@pytest.fixture
def tokenize(reporter):
    """Scan source and return the tokens."""
    def _tokenize(source):
        return scan(source, reporter)
    return _tokenize


@pytest.fixture
def parse_expr(reporter):
    """Scan and parse source, returning the tree (or None)."""
    def _parse(source):
        tokens = scan(source, reporter)
        return ExpressionParser(tokens, reporter).parse().expression
    return _parse


@pytest.fixture
def evaluate_source(parse_expr, reporter):
    """Scan, parse and evaluate source; the source must parse cleanly."""
    def _evaluate(source):
        expr = parse_expr(source)
        assert expr is not None, f"Failed to parse {source!r}: {reporter.messages}"
        return Evaluator().evaluate(expr)
    return _evaluate
