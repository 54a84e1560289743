"""Typer-based CLI for `say_hello`."""

from __future__ import annotations

import json
import logging
from typing import Optional

import typer
from rich.console import Console

from .__about__ import __version__
from .config import get_settings
from .errors import NotAStringError
from .greeter import greet
from .logging import configure_logging
from .type_names import type_name_of

logger = logging.getLogger(__name__)

app = typer.Typer(help="Greet a value, refusing anything that is not a string.")
console = Console()

JSON_OPTION_HELP = "Decode VALUE as a JSON literal before use."


def version_callback(value: bool) -> None:
    """Print the package version and exit if requested."""
    if value:
        console.print(f"say_hello {__version__}")
        raise typer.Exit()


def parse_value(raw: str, as_json: bool) -> object:
    """Return ``raw`` unchanged, or decoded as JSON when ``as_json`` is set.

    Raises:
        typer.BadParameter: If ``raw`` is not valid JSON.
    """
    if not as_json:
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"Invalid JSON literal: {e.msg}", param_hint="VALUE") from e


@app.callback()
def main(
    version: Optional[bool] = typer.Option(  # noqa: UP007
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    log_level: Optional[str] = typer.Option(  # noqa: UP007
        None, "--log-level", help="Logging level, overrides SAY_HELLO_LOG_LEVEL."
    ),
) -> None:
    """Configure logging before any subcommand runs."""
    settings = get_settings()
    try:
        configure_logging(log_level or settings.log_level, color=settings.color)
    except ValueError as e:
        hint = "--log-level" if log_level else "SAY_HELLO_LOG_LEVEL"
        raise typer.BadParameter(str(e), param_hint=hint) from e


@app.command()
def hello(
    value: str = typer.Argument(..., help="Value to greet"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Greet VALUE, failing if it is not a string."""
    parsed = parse_value(value, as_json)
    try:
        message = greet(parsed)
    except NotAStringError as e:
        logger.debug("Rejected %r (%s)", e.value, e.type_name)
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e
    typer.echo(message)


@app.command("type-name")
def type_name(
    value: str = typer.Argument(..., help="Value to inspect"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Print the display type name of VALUE."""
    typer.echo(type_name_of(parse_value(value, as_json)))


if __name__ == "__main__":  # pragma: no cover
    app()
