"""Row projection shared by every renderer.

This is the single place where NULL and absent cells are resolved, so
all output formats treat them the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from querier.core.values import MISSING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from querier.core.models import Column, Row


def project(row: Row, columns: Iterable[Column]) -> tuple[Any, ...]:
    """Return the row's values in column order, MISSING for NULL/absent."""
    values = []
    for col in columns:
        value = row.get(col.name)
        values.append(MISSING if value is None else value)
    return tuple(values)
