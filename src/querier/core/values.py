"""Scalar value classification for result cells.

Query results carry untyped scalars discovered at query time. Every
value is classified into one closed ValueKind so renderers dispatch on
the kind instead of inspecting Python types themselves.
"""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from enum import StrEnum
from typing import Any

from querier.core.exceptions import EncodingError


class ValueKind(StrEnum):
    NULL = "null"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    BYTES = "bytes"


class _Missing:
    """Marker for a NULL or absent cell, produced by the row projector."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def kind_of(value: Any) -> ValueKind:
    """Classify a cell value.

    Raises EncodingError for types outside the supported scalar set.
    """
    if value is None or value is MISSING:
        return ValueKind.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, (float, Decimal)):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (datetime, date, time)):
        return ValueKind.DATETIME
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ValueKind.BYTES
    msg = f"Unsupported value type: {type(value).__name__}"
    raise EncodingError(msg)


def decode_bytes(value: bytes | bytearray | memoryview, *, strict: bool = False) -> str:
    """Decode a byte sequence as UTF-8.

    With strict=True invalid sequences raise EncodingError, otherwise
    they are replaced.
    """
    raw = bytes(value)
    if not strict:
        return raw.decode("utf-8", errors="replace")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"Byte value is not valid UTF-8: {raw[:16]!r}"
        raise EncodingError(msg) from e


def to_text(value: Any) -> str:
    """Textual form of a cell value, shared by all text formats."""
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.BYTES:
        return decode_bytes(value)
    return str(value)
