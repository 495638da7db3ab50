"""Tests for Formatter protocol and registry."""

import pytest

from querier.core.exceptions import UnsupportedFormatError
from querier.core.models import build
from querier.formatters.base import Formatter, FormatterRegistry


def _make_result(rows=None):
    if rows is None:
        rows = [(1,)]
    return build(["id"], rows)


class _StubFormatter:
    def render(self, result):
        return b"".join(str(row["id"]).encode() for row in result.rows)


class _BadFormatter:
    """Missing render method."""

    pass


@pytest.mark.unit
def test_stub_formatter_implements_protocol():
    assert isinstance(_StubFormatter(), Formatter)


@pytest.mark.unit
def test_bad_formatter_does_not_implement_protocol():
    assert not isinstance(_BadFormatter(), Formatter)


@pytest.mark.unit
def test_registry_register_and_get():
    reg = FormatterRegistry()
    reg.register("stub", _StubFormatter)
    fmt = reg.get("stub")
    assert isinstance(fmt, _StubFormatter)
    assert fmt.render(_make_result(rows=[(1,), (2,)])) == b"12"


@pytest.mark.unit
def test_registry_get_unknown_raises():
    reg = FormatterRegistry()
    with pytest.raises(UnsupportedFormatError, match="Unknown format 'nope'"):
        reg.get("nope")


@pytest.mark.unit
def test_registry_get_unknown_lists_available():
    reg = FormatterRegistry()
    reg.register("csv", _StubFormatter)
    reg.register("json", _StubFormatter)
    with pytest.raises(UnsupportedFormatError, match="csv, json"):
        reg.get("nope")


@pytest.mark.unit
def test_registry_available_returns_sorted_names():
    reg = FormatterRegistry()
    reg.register("json", _StubFormatter)
    reg.register("csv", _StubFormatter)
    reg.register("table", _StubFormatter)
    assert reg.available == ["csv", "json", "table"]
    assert "csv" in reg
    assert "xml" not in reg


@pytest.mark.unit
def test_registry_passes_accepted_kwargs_only():
    class _WidthFormatter:
        def __init__(self, width=40):
            self.width = width

        def render(self, result):
            return f"width={self.width}".encode()

    reg = FormatterRegistry()
    reg.register("width", _WidthFormatter)
    fmt = reg.get("width", width=80, include_header=False)
    assert fmt.render(_make_result()) == b"width=80"
