# src/propcheck/cli.py
"""CLI for propcheck.

Prints samples of the built-in arbitraries, which is handy for eyeballing
what a generator produces and for reproducing a value from a reported seed.

Usage:
    # Ten values of the default structured arbitrary
    propcheck sample anything

    # Reproducible JSON documents, nested at most one level
    propcheck sample json --seed=42 --max-depth=1 --count=5

    # Settings from a YAML file (CLI flags take precedence)
    propcheck sample object --config=propcheck.yaml

    # List the names accepted by `sample`
    propcheck arbitraries
"""

from __future__ import annotations

import time
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from propcheck.arbitrary import (
    Arbitrary,
    anything,
    boolean,
    double,
    integer,
    json_,
    object_,
    string,
    unicode_json,
    unicode_string,
)
from propcheck.core.config import load_settings
from propcheck.core.logging import configure_logging, get_logger
from propcheck.rng.generator import MASK_32
from propcheck.runner import sample as draw_samples

# Builders receive the configured max_depth (None for the default)
REGISTRY: dict[str, Callable[[int | None], Arbitrary[Any]]] = {
    "boolean": lambda _depth: boolean(),
    "integer": lambda _depth: integer(),
    "double": lambda _depth: double(),
    "string": lambda _depth: string(),
    "unicode-string": lambda _depth: unicode_string(),
    "anything": lambda depth: anything(max_depth=depth),
    "object": lambda depth: object_(max_depth=depth),
    "json": json_,
    "unicode-json": unicode_json,
}

# Arbitraries whose values are already text to print verbatim
TEXT_OUTPUT = frozenset({"json", "unicode-json"})

app = typer.Typer(
    name="propcheck",
    help="propcheck: Property-based value generation and shrinking.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from propcheck import __version__

        typer.echo(f"propcheck {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """propcheck: Property-based value generation and shrinking."""


@app.command()
def sample(
    name: Annotated[
        str,
        typer.Argument(help="Arbitrary to sample. Use 'propcheck arbitraries' to list them."),
    ],
    count: Annotated[
        int,
        typer.Option(
            "--count",
            "-n",
            help="Number of values to print.",
            min=0,
        ),
    ] = 10,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            "-s",
            help="Seed for reproducible output. A time-derived seed is used (and printed to stderr) when omitted.",
        ),
    ] = None,
    max_depth: Annotated[
        int | None,
        typer.Option(
            "--max-depth",
            "-d",
            help="Nesting bound for structured arbitraries (anything, object, json, unicode-json).",
            min=0,
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to YAML settings file.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    json_logs: Annotated[
        bool,
        typer.Option(
            "--json-logs",
            help="Emit logs as JSON.",
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Log level (DEBUG, INFO, WARNING, ERROR).",
        ),
    ] = "WARNING",
) -> None:
    """Print generated values, one per line.

    JSON arbitraries print their text as-is; everything else prints its
    Python repr.

    Configuration precedence (highest to lowest):
    1. Command-line flags
    2. Config file (--config)
    3. Built-in defaults
    """
    configure_logging(json_output=json_logs, level=log_level)
    logger = get_logger(__name__)

    builder = REGISTRY.get(name)
    if builder is None:
        typer.secho(
            f"Unknown arbitrary {name!r}. Available: {', '.join(REGISTRY)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(1)

    try:
        settings = load_settings(
            config_file=config_file,
            overrides={"seed": seed, "max_depth": max_depth},
        )
        arbitrary = builder(settings.max_depth)
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e
    except (ValidationError, ValueError) as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e

    if settings.seed is not None:
        run_seed = settings.seed
    else:
        run_seed = time.time_ns() & MASK_32
        typer.echo(f"Seed: {run_seed}", err=True)
    logger.info("sampling", arbitrary=name, seed=run_seed, count=count)

    for value in draw_samples(arbitrary, count, run_seed):
        typer.echo(value if name in TEXT_OUTPUT else repr(value))


@app.command()
def arbitraries() -> None:
    """List the arbitraries `propcheck sample` accepts."""
    typer.secho("Available arbitraries:", fg=typer.colors.GREEN)
    for name in REGISTRY:
        typer.echo(f"  - {name}")


def main() -> None:
    """Entry point for propcheck CLI."""
    app()


if __name__ == "__main__":
    main()
