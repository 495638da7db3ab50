"""Tests for the result model."""

import pytest
from pydantic import ValidationError

from querier.core.exceptions import MalformedRowError
from querier.core.models import Column, ResultSet, build


@pytest.mark.unit
class TestBuild:
    def test_maps_positions_to_names(self):
        result = build(["id", "name"], [(1, "alice"), (2, "bob")])
        assert result.rows[0] == {"id": 1, "name": "alice"}
        assert result.rows[1] == {"id": 2, "name": "bob"}

    def test_columns_are_ordered(self):
        result = build(["b", "a", "c"], [])
        assert [c.name for c in result.columns] == ["b", "a", "c"]
        assert [c.position for c in result.columns] == [0, 1, 2]

    def test_row_count(self):
        result = build(["n"], [(1,), (2,), (3,)])
        assert result.row_count == 3

    def test_statement_and_type_names(self):
        result = build(
            ["id"], [(1,)], statement="SELECT 1 AS id", type_names=["int4"]
        )
        assert result.statement == "SELECT 1 AS id"
        assert result.columns[0].type_name == "int4"

    def test_short_row_raises(self):
        with pytest.raises(MalformedRowError, match="Row 1 has 1 values, expected 2"):
            build(["id", "name"], [(1, "alice"), (2,)])

    def test_long_row_raises(self):
        with pytest.raises(MalformedRowError, match="Row 0 has 3 values"):
            build(["id"], [(1, 2, 3)])

    def test_type_names_length_mismatch(self):
        with pytest.raises(MalformedRowError, match="type names"):
            build(["id", "name"], [], type_names=["int4"])

    def test_duplicate_column_names(self):
        with pytest.raises(MalformedRowError, match="Duplicate column name: 'id'"):
            build(["id", "id"], [(1, 2)])

    def test_no_columns(self):
        result = build([], [])
        assert result.columns == ()
        assert result.rows == ()


@pytest.mark.unit
class TestImmutability:
    def test_rows_are_read_only(self):
        result = build(["id"], [(1,)])
        with pytest.raises(TypeError):
            result.rows[0]["id"] = 2

    def test_model_is_frozen(self):
        result = build(["id"], [(1,)])
        with pytest.raises(ValidationError):
            result.statement = "DROP TABLE users"

    def test_source_rows_not_shared(self):
        source = [{"id": 1}]
        result = ResultSet.from_records(source)
        source[0]["id"] = 99
        assert result.rows[0]["id"] == 1


@pytest.mark.unit
class TestFromRecords:
    def test_columns_from_first_record(self):
        result = ResultSet.from_records([{"b": 1, "a": 2}])
        assert result.column_names == ["b", "a"]

    def test_explicit_columns(self):
        result = ResultSet.from_records([{"a": 1, "b": 2}], columns=["b", "a"])
        assert result.column_names == ["b", "a"]

    def test_missing_key_allowed(self):
        result = ResultSet.from_records([{"a": 1, "b": 2}, {"a": 3}])
        assert "b" not in result.rows[1]

    def test_unknown_key_raises(self):
        with pytest.raises(MalformedRowError, match="unknown columns: c"):
            ResultSet.from_records([{"a": 1}, {"a": 2, "c": 3}])

    def test_empty(self):
        result = ResultSet.from_records([])
        assert result.columns == ()
        assert result.row_count == 0


@pytest.mark.unit
def test_column_position_must_match_index():
    with pytest.raises(MalformedRowError, match="position"):
        ResultSet(columns=(Column(name="a", position=1),), rows=[])


@pytest.mark.unit
def test_column_serializes_to_dict():
    col = Column(name="name", position=0, type_name="text")
    assert col.model_dump() == {"name": "name", "position": 0, "type_name": "text"}
