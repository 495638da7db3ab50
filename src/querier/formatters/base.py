"""Formatter protocol and registry for output rendering."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from querier.core.exceptions import UnsupportedFormatError

if TYPE_CHECKING:
    from querier.core.models import ResultSet


@runtime_checkable
class Formatter(Protocol):
    """Protocol for output formatters.

    Each formatter transforms a ResultSet into the complete output
    document. The whole document is built in memory before anything is
    returned, so a failure never leaves partial output behind.
    """

    def render(self, result: ResultSet) -> bytes:
        """Transform a ResultSet into format-self-contained bytes."""
        ...


class FormatterRegistry:
    """Registry for looking up formatters by name."""

    def __init__(self) -> None:
        self._formatters: dict[str, type[Formatter]] = {}

    def register(self, name: str, formatter_class: type[Formatter]) -> None:
        self._formatters[name] = formatter_class

    def get(self, name: str, **kwargs: object) -> Formatter:
        """Return a formatter instance by name.

        Options the formatter's constructor does not accept are ignored,
        so callers can pass one options set to any format.
        Raises UnsupportedFormatError if the format name is not registered.
        """
        if name not in self._formatters:
            available = ", ".join(sorted(self._formatters))
            msg = f"Unknown format {name!r}. Available: {available}"
            raise UnsupportedFormatError(msg)
        formatter_class = self._formatters[name]
        accepted = inspect.signature(formatter_class).parameters
        options = {k: v for k, v in kwargs.items() if k in accepted}
        return formatter_class(**options)

    def __contains__(self, name: object) -> bool:
        return name in self._formatters

    @property
    def available(self) -> list[str]:
        return sorted(self._formatters)


# Global registry instance populated by formatter modules.
registry = FormatterRegistry()
