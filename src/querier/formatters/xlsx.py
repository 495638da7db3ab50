"""Spreadsheet (xlsx) formatter for ResultSet output.

Row 1 holds the column names, data row i lands on sheet row i + 2.
Columns are addressed with single letters A-Z, so only the first 26
columns are written unless wide_columns is enabled, which switches to
AA, AB, ... addressing.

Document properties and zip entry times are pinned to a fixed date, so
the same result always produces the same bytes.
"""

from __future__ import annotations

import string
from datetime import datetime, time, timezone
from io import BytesIO
from typing import TYPE_CHECKING, Any
from zipfile import ZIP_DEFLATED, ZipFile, ZipInfo

from openpyxl import Workbook
from openpyxl.cell.cell import TYPE_STRING
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import IllegalCharacterError
from openpyxl.writer.excel import ExcelWriter

from querier.core.exceptions import EncodingError
from querier.core.logging import get_logger
from querier.core.projector import project
from querier.core.values import ValueKind, decode_bytes, kind_of
from querier.formatters.base import registry

if TYPE_CHECKING:
    from openpyxl.worksheet.worksheet import Worksheet

    from querier.core.models import ResultSet

SHEET_NAME = "Sheet1"
COLUMN_LETTERS = tuple(string.ascii_uppercase)
# earliest timestamp a zip entry can hold
FIXED_TIMESTAMP = datetime(1980, 1, 1)


def _cell_value(value: Any) -> Any:
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return None
    if kind is ValueKind.BYTES:
        return decode_bytes(value)
    if kind is ValueKind.DATETIME and getattr(value, "tzinfo", None) is not None:
        # xlsx has no timezone support
        if isinstance(value, datetime):
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        if isinstance(value, time):
            return value.replace(tzinfo=None)
    return value


def _write(ws: Worksheet, address: str, value: Any) -> None:
    try:
        ws[address] = value
    except IllegalCharacterError as e:
        msg = f"Value for cell {address} contains characters not allowed in xlsx"
        raise EncodingError(msg) from e
    if isinstance(value, str):
        # keep strings such as "=1+1" as text, not formulas
        ws[address].data_type = TYPE_STRING


def _repack(data: bytes) -> bytes:
    """Rewrite the archive with every entry dated FIXED_TIMESTAMP."""
    date_time = FIXED_TIMESTAMP.timetuple()[:6]
    out = BytesIO()
    with ZipFile(BytesIO(data)) as src, ZipFile(out, "w", ZIP_DEFLATED) as dst:
        for info in src.infolist():
            entry = ZipInfo(info.filename, date_time=date_time)
            entry.compress_type = ZIP_DEFLATED
            entry.external_attr = info.external_attr
            dst.writestr(entry, src.read(info.filename))
    return out.getvalue()


class XLSXFormatter:
    def __init__(self, wide_columns: bool = False) -> None:
        self.wide_columns = wide_columns

    def _letters(self, count: int) -> list[str]:
        if self.wide_columns:
            return [get_column_letter(i + 1) for i in range(count)]
        if count > len(COLUMN_LETTERS):
            get_logger(__name__).warning(
                "columns dropped from spreadsheet",
                written=len(COLUMN_LETTERS),
                dropped=count - len(COLUMN_LETTERS),
            )
        return list(COLUMN_LETTERS[:count])

    def render(self, result: ResultSet) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_NAME

        letters = self._letters(len(result.columns))
        for letter, col in zip(letters, result.columns):
            _write(ws, f"{letter}1", col.name)

        for i, row in enumerate(result.rows):
            values = project(row, result.columns)
            for letter, value in zip(letters, values):
                cell_value = _cell_value(value)
                if cell_value is not None:
                    _write(ws, f"{letter}{i + 2}", cell_value)

        # Workbook.save() stamps the current time into docProps/core.xml
        wb.properties.created = FIXED_TIMESTAMP
        wb.properties.modified = FIXED_TIMESTAMP
        buf = BytesIO()
        with ZipFile(buf, "w", ZIP_DEFLATED) as archive:
            ExcelWriter(wb, archive).save()
        return _repack(buf.getvalue())


def render_sheet(result: ResultSet, wide_columns: bool = False) -> bytes:
    return XLSXFormatter(wide_columns=wide_columns).render(result)


registry.register("xlsx", XLSXFormatter)
