"""Plain key=value formatter: one line per row."""

from __future__ import annotations

from typing import TYPE_CHECKING

from querier.core.projector import project
from querier.core.values import to_text
from querier.formatters.base import registry

if TYPE_CHECKING:
    from querier.core.models import ResultSet


def _pair(name: str, value: object) -> str:
    return f"{name}={to_text(value)}".replace("\n", "\\n")


class PlainFormatter:
    def render(self, result: ResultSet) -> bytes:
        names = result.column_names
        lines = []
        for row in result.rows:
            values = project(row, result.columns)
            lines.append(
                ", ".join(_pair(n, v) for n, v in zip(names, values, strict=True))
            )
        return "".join(line + "\n" for line in lines).encode("utf-8")


def render_plain(result: ResultSet) -> bytes:
    return PlainFormatter().render(result)


registry.register("plain", PlainFormatter)
