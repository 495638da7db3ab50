"""Query result models for querier.

A ResultSet is the ordered column list plus the rows of one query,
built once from positional driver output and read by exactly one
renderer.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from querier.core.exceptions import MalformedRowError

Row = Mapping[str, Any]


class Column(BaseModel):
    """A named, ordered field of a result set."""

    model_config = ConfigDict(frozen=True)

    name: str
    position: int
    type_name: str | None = None


class ResultSet(BaseModel):
    """Immutable result of a single query."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    columns: tuple[Column, ...]
    rows: tuple[Any, ...] = ()
    statement: str = ""

    @field_validator("rows", mode="before")
    @classmethod
    def freeze_rows(cls, v: Any) -> Any:
        return tuple(MappingProxyType(dict(row)) for row in v)

    @model_validator(mode="after")
    def check_shape(self) -> ResultSet:
        seen: set[str] = set()
        for index, col in enumerate(self.columns):
            if col.name in seen:
                msg = f"Duplicate column name: {col.name!r}"
                raise MalformedRowError(msg)
            if col.position != index:
                msg = (
                    f"Column {col.name!r} has position {col.position}, "
                    f"expected {index}"
                )
                raise MalformedRowError(msg)
            seen.add(col.name)
        for index, row in enumerate(self.rows):
            unknown = set(row) - seen
            if unknown:
                msg = f"Row {index} has unknown columns: {', '.join(sorted(unknown))}"
                raise MalformedRowError(msg)
        return self

    @property
    def column_names(self) -> list[str]:
        return [col.name for col in self.columns]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        *,
        columns: Sequence[str] | None = None,
        statement: str = "",
    ) -> ResultSet:
        """Build a ResultSet from name-keyed rows.

        Column order defaults to the key order of the first record.
        Keys missing from a record are treated as NULL.
        """
        records = list(records)
        if columns is None:
            columns = list(records[0]) if records else []
        return cls(
            columns=tuple(
                Column(name=name, position=i) for i, name in enumerate(columns)
            ),
            rows=records,
            statement=statement,
        )


def build(
    column_names: Sequence[str],
    raw_rows: Iterable[Sequence[Any]],
    *,
    statement: str = "",
    type_names: Sequence[str | None] | None = None,
) -> ResultSet:
    """Build a ResultSet from positional driver output.

    Every raw row must have exactly len(column_names) entries.
    Raises MalformedRowError on a length mismatch.
    """
    width = len(column_names)
    if type_names is None:
        type_names = [None] * width
    elif len(type_names) != width:
        msg = f"Got {len(type_names)} type names for {width} columns"
        raise MalformedRowError(msg)

    rows = []
    for index, raw in enumerate(raw_rows):
        if len(raw) != width:
            msg = f"Row {index} has {len(raw)} values, expected {width}"
            raise MalformedRowError(msg)
        rows.append(dict(zip(column_names, raw, strict=True)))

    pairs = zip(column_names, type_names, strict=True)
    columns = tuple(
        Column(name=name, position=i, type_name=type_name)
        for i, (name, type_name) in enumerate(pairs)
    )
    return ResultSet(columns=columns, rows=rows, statement=statement)
