"""CSV formatter for ResultSet output (RFC 4180 quoting, UTF-8 BOM)."""

from __future__ import annotations

import csv
from io import StringIO
from typing import TYPE_CHECKING

from querier.formatters.base import registry
from querier.formatters.tabular import text_rows

if TYPE_CHECKING:
    from querier.core.models import ResultSet

# Spreadsheet programs rely on the BOM to detect UTF-8.
UTF8_BOM = b"\xef\xbb\xbf"


class CSVFormatter:
    def __init__(self, include_header: bool = True) -> None:
        self.include_header = include_header

    def render(self, result: ResultSet) -> bytes:
        buf = StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        if self.include_header:
            writer.writerow(result.column_names)
        writer.writerows(text_rows(result))
        return UTF8_BOM + buf.getvalue().encode("utf-8")


registry.register("csv", CSVFormatter)
