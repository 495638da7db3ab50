"""Result dump loading for querier.

Reads a JSON result dump from one of two sources:
1. File path  - higher priority
2. stdin      - lower priority

Two dump shapes are accepted::

    {"columns": ["id", "name"], "rows": [[1, "a"]], "statement": "SELECT ..."}
    [{"id": 1, "name": "a"}]
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from querier.core.exceptions import InputError
from querier.core.models import ResultSet, build


def resolve_result_source(file_path: str | None) -> str:
    """Read the dump text from file or stdin.

    Raises InputError when no source is available.
    """
    if file_path is not None and file_path != "-":
        p = Path(file_path)
        if not p.exists():
            msg = f"Result file not found: {file_path}"
            raise InputError(msg)
        return p.read_text(encoding="utf-8")

    if file_path == "-" or not sys.stdin.isatty():
        return sys.stdin.read()

    msg = "No result provided. Pass a file path or pipe a JSON dump to stdin."
    raise InputError(msg)


def _columns(value: Any) -> tuple[list[str], list[str | None] | None]:
    if not isinstance(value, list):
        msg = "'columns' must be a list"
        raise InputError(msg)
    names: list[str] = []
    type_names: list[str | None] = []
    for col in value:
        if isinstance(col, str):
            names.append(col)
            type_names.append(None)
        elif isinstance(col, dict) and isinstance(col.get("name"), str):
            names.append(col["name"])
            type_names.append(col.get("type"))
        else:
            msg = f"Invalid column entry: {col!r}"
            raise InputError(msg)
    if all(t is None for t in type_names):
        return names, None
    return names, type_names


def load_result(text: str, statement: str | None = None) -> ResultSet:
    """Parse a JSON result dump into a ResultSet.

    statement, when given, overrides the statement stored in the dump.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"Result dump is not valid JSON: {e}"
        raise InputError(msg) from e

    if isinstance(data, list):
        if not all(isinstance(record, dict) for record in data):
            msg = "A list dump must contain only objects"
            raise InputError(msg)
        return ResultSet.from_records(data, statement=statement or "")

    if not isinstance(data, dict) or "columns" not in data:
        msg = "Result dump must be a list of objects or an object with 'columns'"
        raise InputError(msg)

    names, type_names = _columns(data["columns"])
    rows = data.get("rows", [])
    if not isinstance(rows, list) or not all(isinstance(r, list) for r in rows):
        msg = "'rows' must be a list of arrays"
        raise InputError(msg)
    if statement is None:
        statement = data.get("statement") or ""
    return build(names, rows, statement=statement, type_names=type_names)
