"""
Lox CLI - Entry point.

Runs a script file, or starts an interactive prompt when no file is given.

Exit codes follow sysexits: 64 usage error, 65 lexical or syntax error,
66 unreadable script, 70 runtime error.
"""

import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError

from lox import __version__
from lox.config import LoxConfig
from lox.executors import Executor
from lox.reporter import ErrorReporter, StateErrorReporter

EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="lox",
    help="Scan, parse and evaluate Lox expressions.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lox-expr {__version__}")
        raise typer.Exit()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _run(
    source: str | bytes,
    reporter: ErrorReporter,
    config: LoxConfig,
    print_ast: bool,
    show_tokens: bool,
) -> None:
    executor = Executor(source, reporter, config)

    if show_tokens:
        for token in executor.scan():
            typer.echo(str(token))

    if print_ast:
        rendered = executor.print_ast()
        if rendered is not None:
            typer.echo(rendered)
        return

    result = executor.execute()
    if result.output is not None:
        typer.echo(result.output)


def run_file(
    path: Path,
    config: LoxConfig,
    print_ast: bool = False,
    show_tokens: bool = False,
) -> int:
    """Run a script file and return the process exit code."""
    try:
        source = path.read_bytes()
    except OSError as e:
        typer.echo(f"Could not read {path}: {e.strerror}", err=True)
        return EX_NOINPUT

    reporter = StateErrorReporter()
    _run(source, reporter, config, print_ast, show_tokens)

    if reporter.had_error:
        return EX_DATAERR
    if reporter.had_runtime_error:
        return EX_SOFTWARE
    return 0


def run_prompt(
    config: LoxConfig,
    print_ast: bool = False,
    show_tokens: bool = False,
) -> int:
    """Read and run lines until end of input; errors never end the session."""
    reporter = StateErrorReporter()

    while True:
        typer.echo(config.prompt, nl=False)
        line = sys.stdin.readline()
        if not line:
            typer.echo()
            break
        _run(line, reporter, config, print_ast, show_tokens)

    return 0


@app.command()
def main(
    scripts: list[Path] | None = typer.Argument(  # noqa: B008
        None,
        help="Script to run. Starts an interactive prompt when omitted.",
        show_default=False,
    ),
    print_ast: bool = typer.Option(
        False, "--print-ast", help="Print the parsed tree instead of evaluating it."
    ),
    show_tokens: bool = typer.Option(
        False, "--tokens", help="Print the token stream before parsing."
    ),
    precision: int | None = typer.Option(
        None, "--precision", help="Decimal places used when printing numbers."
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (overrides LOX_LOG_LEVEL)."
    ),
    version: bool | None = typer.Option(  # noqa: B008
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Run a Lox script, or start the interactive prompt."""
    try:
        settings = LoxConfig.from_env().model_dump()
        if precision is not None:
            settings["number_precision"] = precision
        if log_level is not None:
            settings["log_level"] = log_level
        config = LoxConfig(**settings)
    except ValidationError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=EX_USAGE) from e

    _configure_logging(config.log_level)

    scripts = scripts or []
    if len(scripts) > 1:
        typer.echo("Usage: lox [script]", err=True)
        raise typer.Exit(code=EX_USAGE)

    if scripts:
        logger.debug("Running file %s", scripts[0])
        code = run_file(scripts[0], config, print_ast, show_tokens)
    else:
        code = run_prompt(config, print_ast, show_tokens)

    if code:
        raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
