"""
Parser module for expression syntax analysis.

This module provides the recursive descent parser that converts
a token list into an expression tree.
"""

from .expression_parser import ExpressionParser, ParseResult, parse

__all__ = [
    "ExpressionParser",
    "ParseResult",
    "parse",
]
