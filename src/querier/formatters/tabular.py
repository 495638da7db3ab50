"""Shared cell preparation for the tabular styles (table, markdown, html, csv)."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from querier.core.exceptions import UnsupportedFormatError
from querier.core.projector import project
from querier.core.values import to_text
from querier.formatters.base import registry

if TYPE_CHECKING:
    from querier.core.models import ResultSet


class TabularStyle(StrEnum):
    TABLE = "table"
    MARKDOWN = "markdown"
    HTML = "html"
    CSV = "csv"


def text_rows(result: ResultSet) -> list[list[str]]:
    """Every row as display strings in column order, NULL as ''."""
    return [[to_text(v) for v in project(row, result.columns)] for row in result.rows]


def render_tabular(
    result: ResultSet,
    include_header: bool = True,
    style: TabularStyle | str = TabularStyle.TABLE,
) -> bytes:
    """Render one of the tabular styles."""
    # Import here to trigger registry population from formatter modules.
    import querier.formatters.csv  # noqa: F401
    import querier.formatters.html  # noqa: F401
    import querier.formatters.markdown  # noqa: F401
    import querier.formatters.table  # noqa: F401

    try:
        style = TabularStyle(style)
    except ValueError:
        available = ", ".join(s.value for s in TabularStyle)
        msg = f"Unknown tabular style {style!r}. Available: {available}"
        raise UnsupportedFormatError(msg) from None
    return registry.get(style.value, include_header=include_header).render(result)
