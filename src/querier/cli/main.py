"""querier main entry point and command registration."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from querier.__about__ import __version__
from querier.cli.commands.render import formats_command, render_command
from querier.core.exceptions import QuerierError
from querier.core.logging import setup_logging

app = typer.Typer(
    help="querier - render query results as table, csv, json, xlsx and more",
    no_args_is_help=True,
)

app.command("render")(render_command)
app.command("formats")(formats_command)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"querier {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable verbose logging"),
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config file"),
    ] = None,
) -> None:
    """querier - render query results in many output formats."""
    setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_file"] = config_file


def run() -> None:
    """Entry point with global error handling."""
    try:
        app()
    except QuerierError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise SystemExit(e.exit_code) from None
    except SystemExit:
        raise
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None
