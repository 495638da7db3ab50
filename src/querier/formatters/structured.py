"""Row encoding shared by the JSON and YAML formatters."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from querier.core.exceptions import EncodingError
from querier.core.projector import project
from querier.core.values import ValueKind, decode_bytes, kind_of

if TYPE_CHECKING:
    from querier.core.models import ResultSet


def encode_value(value: Any) -> Any:
    """Convert a cell value to a plain JSON/YAML scalar."""
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return None
    if kind is ValueKind.FLOAT:
        if isinstance(value, Decimal):
            return str(value)
        if not math.isfinite(value):
            msg = f"Non-finite float {value!r} cannot be encoded"
            raise EncodingError(msg)
        return value
    if kind is ValueKind.DATETIME:
        return value.isoformat()
    if kind is ValueKind.BYTES:
        return decode_bytes(value, strict=True)
    return value


def encode_rows(result: ResultSet) -> list[dict[str, Any]]:
    """One dict per row, keys in column order."""
    names = result.column_names
    return [
        {
            name: encode_value(val)
            for name, val in zip(names, project(row, result.columns), strict=True)
        }
        for row in result.rows
    ]
