"""HTML table formatter for ResultSet output."""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from querier.formatters.base import registry
from querier.formatters.tabular import text_rows

if TYPE_CHECKING:
    from querier.core.models import ResultSet


def _cell(tag: str, value: str) -> str:
    text = html.escape(value).replace("\r\n", "<br/>").replace("\n", "<br/>")
    return f"    <{tag}>{text}</{tag}>"


class HTMLFormatter:
    def __init__(self, include_header: bool = True) -> None:
        self.include_header = include_header

    def render(self, result: ResultSet) -> bytes:
        lines = ['<table class="querier-table">']
        if self.include_header:
            lines.append("  <thead>")
            lines.append("  <tr>")
            lines.extend(_cell("th", name) for name in result.column_names)
            lines.append("  </tr>")
            lines.append("  </thead>")
        lines.append("  <tbody>")
        for cells in text_rows(result):
            lines.append("  <tr>")
            lines.extend(_cell("td", value) for value in cells)
            lines.append("  </tr>")
        lines.append("  </tbody>")
        lines.append("</table>")
        return "".join(line + "\n" for line in lines).encode("utf-8")


registry.register("html", HTMLFormatter)
