"""Tests for JSONFormatter."""

import json
from datetime import UTC, datetime
from decimal import Decimal

import pytest

from querier.core.exceptions import EncodingError
from querier.core.models import ResultSet, build
from querier.formatters.base import Formatter
from querier.formatters.json import JSONFormatter


def _make_result(rows=None, columns=None):
    if columns is None:
        columns = ["id", "name"]
    if rows is None:
        rows = [(1, "alice"), (2, "bob")]
    return build(columns, rows)


@pytest.mark.unit
def test_json_formatter_implements_protocol():
    assert isinstance(JSONFormatter(), Formatter)


@pytest.mark.unit
def test_json_formatter_compact_by_default():
    data = JSONFormatter().render(_make_result())
    assert data == b'[{"id":1,"name":"alice"},{"id":2,"name":"bob"}]'


@pytest.mark.unit
def test_json_formatter_indent():
    output = JSONFormatter(indent=2).render(_make_result(rows=[(1, "alice")])).decode()
    assert "\n" in output
    assert '  "id": 1' in output
    assert json.loads(output) == [{"id": 1, "name": "alice"}]


@pytest.mark.unit
def test_json_formatter_keys_follow_column_order():
    output = JSONFormatter().render(_make_result(rows=[("x", 1)], columns=["zeta", "alpha"]))
    assert output == b'[{"zeta":"x","alpha":1}]'


@pytest.mark.unit
def test_json_formatter_empty_result():
    assert json.loads(JSONFormatter().render(_make_result(rows=[]))) == []


@pytest.mark.unit
def test_json_formatter_handles_none_values():
    parsed = json.loads(JSONFormatter().render(_make_result(rows=[(1, None)])))
    assert parsed[0] == {"id": 1, "name": None}


@pytest.mark.unit
def test_json_formatter_absent_key_is_null():
    result = ResultSet.from_records([{"id": 1, "name": "a"}, {"id": 2}])
    parsed = json.loads(JSONFormatter().render(result))
    assert parsed[1] == {"id": 2, "name": None}


@pytest.mark.unit
def test_json_formatter_handles_special_types():
    dt = datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)
    result = _make_result(
        rows=[(dt, Decimal("123.45"), True, b"raw")],
        columns=["ts", "amount", "flag", "blob"],
    )
    parsed = json.loads(JSONFormatter().render(result))
    assert parsed[0] == {
        "ts": "2024-01-15T10:30:00+00:00",
        "amount": "123.45",
        "flag": True,
        "blob": "raw",
    }


@pytest.mark.unit
def test_json_formatter_keeps_unicode():
    output = JSONFormatter().render(_make_result(rows=[(1, "café")]))
    assert "café" in output.decode("utf-8")


@pytest.mark.unit
def test_json_formatter_rejects_nan():
    with pytest.raises(EncodingError, match="Non-finite"):
        JSONFormatter().render(_make_result(rows=[(1, float("nan"))]))


@pytest.mark.unit
def test_json_formatter_rejects_invalid_bytes():
    with pytest.raises(EncodingError, match="UTF-8"):
        JSONFormatter().render(_make_result(rows=[(1, b"\xff\xfe")]))


@pytest.mark.unit
def test_json_formatter_rejects_unsupported_type():
    with pytest.raises(EncodingError, match="Unsupported value type"):
        JSONFormatter().render(_make_result(rows=[(1, object())]))
