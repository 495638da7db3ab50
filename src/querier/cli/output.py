"""Writing rendered output to a file or stdout."""

from __future__ import annotations

from pathlib import Path

import typer

from querier.core.exceptions import OutputError


def write_output(data: bytes, output: Path | None = None) -> None:
    """Write rendered bytes verbatim to output, or stdout when None."""
    if output is None:
        typer.echo(data, nl=False)
        return
    try:
        output.write_bytes(data)
    except OSError as e:
        msg = f"Cannot write output file {output}: {e.strerror}"
        raise OutputError(msg) from e
