"""
astcalc CLI - Entry point.

    astcalc "sen(54)"
    astcalc "(1+2)*3" --strict
    astcalc "2*3*4" --precision 2 --verbose
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from astcalc._version import get_version
from astcalc.core.calc_lang import evaluate, parse
from astcalc.core.config import CalculatorConfig, resolve_config
from astcalc.core.errors import ConfigError, EvaluationError
from astcalc.core.results import Err

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Evaluate arithmetic and trigonometric expressions (angles in degrees).",
    add_completion=False,
)

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"astcalc version {get_version()}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _format_value(value: float, precision: int | None) -> str:
    if precision is None:
        return repr(value)
    return f"{value:.{precision}f}"


# Expressions such as "-7%3" start with a dash; pass them through as the argument.
@app.command(context_settings={"ignore_unknown_options": True})
def calc(
    expression: str = typer.Argument(
        ...,
        help="Expression to evaluate, e.g. 'sen(54)' or '-7%3' (or put it after '--')",
    ),
    strict: bool | None = typer.Option(
        None,
        "--strict/--permissive",
        help="Reject input left over after the expression (default from config: permissive)",
    ),
    precision: int | None = typer.Option(
        None, "--precision", "-p", min=0, help="Decimal places to show in the result"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to astcalc.toml (default: nearest one, if any)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Parse EXPRESSION, print the reconstructed expression and its value."""
    try:
        config = resolve_config(config_path)
    except ConfigError as e:
        err_console.print(f"Error: {escape(e.message)}")
        raise typer.Exit(code=1)

    _configure_logging("DEBUG" if verbose else config.log_level)
    _run(expression, config, strict=strict, precision=precision, verbose=verbose)


def _run(
    expression: str,
    config: CalculatorConfig,
    *,
    strict: bool | None,
    precision: int | None,
    verbose: bool,
) -> None:
    use_strict = config.strict if strict is None else strict
    digits = config.precision if precision is None else precision

    result = parse(expression, strict=use_strict)
    if isinstance(result, Err):
        detail = result.describe() if verbose else result.message
        err_console.print(f"Error parsing expression: {escape(detail)}")
        raise typer.Exit(code=1)

    tree = result.value
    if result.rest:
        logger.info("Ignoring trailing input %r", result.rest)

    if config.show_expression:
        console.print(f"Expression: {escape(str(tree))}")

    try:
        value = evaluate(tree)
    except EvaluationError as e:
        err_console.print(f"Error evaluating expression: {escape(e.message)}")
        raise typer.Exit(code=2)

    console.print(f"Result: {_format_value(value, digits)}")


def main() -> None:
    app()
