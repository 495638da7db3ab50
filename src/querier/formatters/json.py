"""JSON formatter for ResultSet output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from querier.core.exceptions import EncodingError
from querier.formatters.base import registry
from querier.formatters.structured import encode_rows

if TYPE_CHECKING:
    from querier.core.models import ResultSet


class JSONFormatter:
    def __init__(self, indent: int | None = None) -> None:
        self.indent = indent

    def render(self, result: ResultSet) -> bytes:
        rows_as_dicts = encode_rows(result)
        try:
            if self.indent is None:
                text = json.dumps(
                    rows_as_dicts,
                    ensure_ascii=False,
                    separators=(",", ":"),
                    allow_nan=False,
                )
            else:
                text = json.dumps(
                    rows_as_dicts,
                    ensure_ascii=False,
                    indent=self.indent,
                    allow_nan=False,
                )
        except (TypeError, ValueError) as e:
            msg = f"JSON encoding failed: {e}"
            raise EncodingError(msg) from e
        return text.encode("utf-8")


registry.register("json", JSONFormatter)
