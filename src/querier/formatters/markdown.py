"""Markdown (pipe table) formatter for ResultSet output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from querier.formatters.base import registry
from querier.formatters.tabular import text_rows

if TYPE_CHECKING:
    from querier.core.models import ResultSet


def _escape(value: str) -> str:
    return value.replace("|", "\\|").replace("\r\n", "<br/>").replace("\n", "<br/>")


def _line(cells: list[str]) -> str:
    return "| " + " | ".join(_escape(c) for c in cells) + " |"


class MarkdownFormatter:
    def __init__(self, include_header: bool = True) -> None:
        self.include_header = include_header

    def render(self, result: ResultSet) -> bytes:
        lines = []
        if self.include_header:
            lines.append(_line(result.column_names))
            lines.append("| " + " | ".join("---" for _ in result.columns) + " |")
        lines.extend(_line(cells) for cells in text_rows(result))
        return "".join(line + "\n" for line in lines).encode("utf-8")


registry.register("markdown", MarkdownFormatter)
