"""
Lox expressions - scanner, parser and tree-walking evaluator.

This package turns Lox expression source into tokens, parses the tokens
into an expression tree and evaluates the tree to a runtime value.

Usage:
    from lox import Executor, StateErrorReporter

    reporter = StateErrorReporter()
    result = Executor('"a" + "b"', reporter).execute()
    print(result.output)  # ab
"""

__version__ = "0.1.0"


# Lazy imports to avoid circular import issues
def __getattr__(name: str):
    if name in ("Executor", "ExecutionResult", "run_source"):
        from lox import executors
        return getattr(executors, name)
    if name in ("scan", "Lexer", "Token", "TokenType"):
        from lox import lexer
        return getattr(lexer, name)
    if name in ("parse", "ExpressionParser"):
        from lox import parser
        return getattr(parser, name)
    if name in ("evaluate", "Evaluator"):
        from lox import interpreter
        return getattr(interpreter, name)
    if name in ("render", "render_source"):
        from lox import syntax_tree
        return getattr(syntax_tree, name)
    if name in ("ErrorReporter", "StateErrorReporter", "CollectingErrorReporter"):
        from lox import reporter
        return getattr(reporter, name)
    if name in ("LoxError", "LoxRuntimeError", "InternalError"):
        from lox import errors
        return getattr(errors, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CollectingErrorReporter",
    "ErrorReporter",
    "Evaluator",
    "ExecutionResult",
    "Executor",
    "ExpressionParser",
    "InternalError",
    "Lexer",
    "LoxError",
    "LoxRuntimeError",
    "StateErrorReporter",
    "Token",
    "TokenType",
    "evaluate",
    "parse",
    "render",
    "render_source",
    "run_source",
    "scan",
]
