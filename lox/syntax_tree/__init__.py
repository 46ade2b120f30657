"""
Syntax tree module for expression representation.

This module defines the expression node types produced by the parser
and the printers that render them back to text.
"""

from .nodes import (
    Binary,
    Expr,
    Grouping,
    Literal,
    LoxValue,
    Ternary,
    Unary,
)
from .printer import AstPrinter, SourcePrinter, render, render_source

__all__ = [
    "AstPrinter",
    "Binary",
    "Expr",
    "Grouping",
    "Literal",
    "LoxValue",
    "SourcePrinter",
    "Ternary",
    "Unary",
    "render",
    "render_source",
]
