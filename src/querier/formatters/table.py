"""Rich box table formatter for ResultSet output.

Large results (more than FOOTER_THRESHOLD rows) get a summary footer
with the row count. Adjacent equal footer cells are drawn as a single
span across their columns.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from querier.core.logging import get_logger
from querier.formatters.base import registry
from querier.formatters.tabular import text_rows

if TYPE_CHECKING:
    from querier.core.models import ResultSet

FOOTER_THRESHOLD = 10


def _truncate(value: str, width: int | None) -> str:
    if width is None or len(value) <= width:
        return value
    return value[: width - 1] + "…"


def _cell_text(value: str, width: int | None) -> str:
    return _truncate(value.expandtabs(), width)


def _natural_width(columns: list[list[str]]) -> int:
    """Console width that fits every column without cropping or wrapping."""
    widths = [
        max(cell_len(line) for cell in cells for line in cell.split("\n"))
        for cells in columns
    ]
    # one space of padding each side, a divider per column plus the right edge
    return sum(w + 3 for w in widths) + 1


def footer_cells(result: ResultSet) -> list[str | int] | None:
    """Summary footer for the table style, or None below the threshold."""
    n = result.row_count
    if n <= FOOTER_THRESHOLD or not result.columns:
        return None
    if len(result.columns) > 1:
        return ["Total", *([n] * (len(result.columns) - 1))]
    return [f"Total {n}"]


def merge_spans(cells: list[str | int]) -> list[tuple[str, int]]:
    """Group adjacent equal cells into (text, span) pairs."""
    spans: list[tuple[str, int]] = []
    for cell in cells:
        text = str(cell)
        if spans and spans[-1][0] == text:
            spans[-1] = (text, spans[-1][1] + 1)
        else:
            spans.append((text, 1))
    return spans


def _merge_line(
    line: str,
    bounds: list[int],
    spans: list[tuple[str, int]],
    fill: str | None,
) -> str:
    """Redraw one footer line so each span occupies a single cell.

    With fill=None the span is redrawn as centered text, otherwise the
    inner column dividers of the span are replaced with fill.
    """
    out = line[: bounds[0] + 1]
    col = 0
    for text, span in spans:
        left, right = bounds[col], bounds[col + span]
        if span == 1:
            out += line[left + 1 : right + 1]
        elif fill is None:
            out += f" {text} ".center(right - left - 1) + line[right]
        else:
            out += fill * (right - left - 1) + line[right]
        col += span
    return out


def _apply_footer_spans(lines: list[str], spans: list[tuple[str, int]]) -> list[str]:
    if all(span == 1 for _, span in spans):
        return lines
    # The top edge holds a '+' at every column boundary.
    bounds = [i for i, ch in enumerate(lines[0]) if ch == "+"]
    lines[-3] = _merge_line(lines[-3], bounds, spans, "-")
    lines[-2] = _merge_line(lines[-2], bounds, spans, None)
    lines[-1] = _merge_line(lines[-1], bounds, spans, "-")
    return lines


class TableFormatter:
    def __init__(
        self,
        include_header: bool = True,
        max_width: int | None = None,
    ) -> None:
        self.include_header = include_header
        self.max_width = max_width

    def render(self, result: ResultSet) -> bytes:
        if not result.columns:
            return b""

        footer = footer_cells(result)
        headers = [col.name.expandtabs() for col in result.columns]
        footers = [str(cell) for cell in footer] if footer is not None else None
        rows = [
            [_cell_text(v, self.max_width) for v in cells]
            for cells in text_rows(result)
        ]

        table = Table(
            box=box.ASCII2,
            show_header=self.include_header,
            show_footer=footers is not None,
            show_edge=True,
            pad_edge=True,
        )
        for i, name in enumerate(headers):
            table.add_column(
                Text(name),
                footer=Text(footers[i]) if footers is not None else "",
                no_wrap=True,
            )
        for cells in rows:
            table.add_row(*(Text(v) for v in cells))

        columns = [
            [name, *(cells[i] for cells in rows), *([footers[i]] if footers else [])]
            for i, name in enumerate(headers)
        ]
        buf = StringIO()
        console = Console(
            file=buf,
            width=_natural_width(columns),
            color_system=None,
            force_terminal=False,
            force_jupyter=False,
            highlight=False,
            markup=False,
            emoji=False,
        )
        console.print(table)
        lines = [line.rstrip() for line in buf.getvalue().rstrip("\n").split("\n")]
        if footer is not None:
            lines = _apply_footer_spans(lines, merge_spans(footer))

        get_logger(__name__).debug(
            "table rendered",
            rows=result.row_count,
            footer=footer is not None,
        )
        return "".join(line + "\n" for line in lines).encode("utf-8")


registry.register("table", TableFormatter)
