"""
Interpreter module for evaluating expression trees.
"""

from .evaluator import Evaluator, evaluate
from .values import is_equal, is_truthy, stringify

__all__ = [
    "Evaluator",
    "evaluate",
    "is_equal",
    "is_truthy",
    "stringify",
]
