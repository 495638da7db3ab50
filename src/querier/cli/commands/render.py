from __future__ import annotations

import sys
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from querier.cli.output import write_output
from querier.core.config import load_config, resolve_config
from querier.core.exceptions import InputError
from querier.core.exit_codes import ExitCode
from querier.core.formats import OutputFormat  # noqa: TC001
from querier.core.logging import get_logger
from querier.core.result_source import load_result, resolve_result_source
from querier.render import RenderOptions, render


def render_command(
    ctx: typer.Context,
    file: Annotated[
        str | None,
        typer.Argument(help="JSON result dump to render ('-' for stdin)"),
    ] = None,
    format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file instead of stdout"),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option("--no-header", help="Suppress the header row"),
    ] = False,
    indent: Annotated[
        int | None,
        typer.Option("--indent", help="Indent JSON output by N spaces"),
    ] = None,
    max_width: Annotated[
        int | None,
        typer.Option("--max-width", help="Truncate table cells to N characters"),
    ] = None,
    wide_columns: Annotated[
        bool,
        typer.Option("--wide-columns", help="Write xlsx columns past Z (AA, AB, ...)"),
    ] = False,
    statement: Annotated[
        str | None,
        typer.Option("--statement", help="Query text for the XML statement attribute"),
    ] = None,
) -> None:
    """Render a JSON result dump from file or stdin."""
    try:
        is_tty = sys.stdin.isatty()
    except (ValueError, AttributeError):
        is_tty = False
    if file is None and is_tty:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    try:
        text = resolve_result_source(file)
    except InputError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(ExitCode.INPUT_ERROR) from exc

    obj = ctx.ensure_object(dict)
    resolved = resolve_config(
        load_config(obj.get("config_file")),
        format=format.value if format else None,
        include_header=False if no_header else None,
        indent=indent,
        max_width=max_width,
        wide_columns=True if wide_columns else None,
    )
    log = get_logger(__name__)
    log.debug("config resolved", sources=resolved.sources)

    result = load_result(text, statement=statement)
    options = RenderOptions(
        include_header=resolved.include_header,
        indent=resolved.indent,
        max_width=resolved.max_width,
        wide_columns=resolved.wide_columns,
    )
    data = render(result, resolved.format, options)
    write_output(data, output)


def formats_command() -> None:
    """List the available output formats."""
    import querier.formatters  # noqa: F401
    from querier.formatters.base import registry

    for name in registry.available:
        typer.echo(name)
