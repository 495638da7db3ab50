"""Single entry point: render a ResultSet in a named format."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError

from querier.core.exceptions import InputError
from querier.core.formats import OutputFormat
from querier.core.logging import get_logger

if TYPE_CHECKING:
    from querier.core.models import ResultSet
    from querier.formatters.base import Formatter


class RenderOptions(BaseModel):
    """Options understood by the formatters; each takes what it needs."""

    include_header: bool = True
    indent: int | None = Field(default=None, ge=0)
    max_width: int | None = Field(default=None, ge=1)
    wide_columns: bool = False
    statement: str | None = None


def get_formatter(format_name: str, options: RenderOptions | None = None) -> Formatter:
    """Build and return the formatter registered under format_name."""
    # Import here to trigger registry population from formatter modules.
    import querier.formatters  # noqa: F401
    from querier.formatters.base import registry

    if options is None:
        options = RenderOptions()
    return registry.get(format_name, **options.model_dump())


def render(
    result: ResultSet,
    format: str = OutputFormat.TABLE,
    options: RenderOptions | Mapping[str, Any] | None = None,
) -> bytes:
    """Render result in the given format.

    Raises UnsupportedFormatError for an unknown format and
    EncodingError when a value cannot be represented; no output is
    produced in either case.
    """
    if options is not None and not isinstance(options, RenderOptions):
        try:
            options = RenderOptions.model_validate(dict(options))
        except ValidationError as e:
            msg = f"Invalid render options: {e}"
            raise InputError(msg) from e
    formatter = get_formatter(str(format), options)
    data = formatter.render(result)
    get_logger(__name__).debug(
        "render",
        format=str(format),
        rows=result.row_count,
        columns=len(result.columns),
        bytes=len(data),
    )
    return data
