"""querier - render relational query results in many output formats."""

from querier.__about__ import __version__
from querier.core.exceptions import (
    EncodingError,
    MalformedRowError,
    QuerierError,
    UnsupportedFormatError,
)
from querier.core.models import Column, ResultSet, build
from querier.core.projector import project
from querier.formatters.plain import render_plain
from querier.formatters.tabular import render_tabular
from querier.formatters.xlsx import render_sheet
from querier.core.formats import OutputFormat
from querier.render import RenderOptions, render

__all__ = [
    "Column",
    "EncodingError",
    "MalformedRowError",
    "OutputFormat",
    "QuerierError",
    "RenderOptions",
    "ResultSet",
    "UnsupportedFormatError",
    "__version__",
    "build",
    "project",
    "render",
    "render_plain",
    "render_sheet",
    "render_tabular",
]
