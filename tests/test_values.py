"""Tests for value classification and record reduction."""

from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

import pytest
from pydantic import BaseModel, Field

from uritemplates.values import (
    FieldMappable,
    ListValue,
    MapValue,
    StringValue,
    UriRecord,
    as_record_map,
    classify,
    dataclass_field_map,
    field_map,
    render_scalar,
)


class Repo(UriRecord):
    owner: str
    name: str = Field(json_schema_extra={"uri": "repo"})
    stars: int = Field(default=0, alias=" star_count ")


@dataclass
class Tile:
    z: int = field(metadata={"uri": "zoom"})
    col: int = 0


class PlainModel(BaseModel):
    user: str
    page: int | None = None


class Coordinates:
    """Hand-written FieldMappable record."""

    def __init__(self, lat: float, lon: float) -> None:
        self.lat = lat
        self.lon = lon

    def to_field_map(self) -> dict[str, Any]:
        return {"lat": self.lat, "lon": self.lon}


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    """Test normalisation of raw values."""

    def test_none_is_undefined(self):
        assert classify(None) is None

    def test_string(self):
        assert classify("abc") == StringValue("abc")

    def test_empty_string_is_defined(self):
        assert classify("") == StringValue("")

    @pytest.mark.parametrize("value", [["a", "b"], ("a", "b")])
    def test_sequences(self, value: Any) -> None:
        assert classify(value) == ListValue(("a", "b"))

    def test_sequence_items_rendered_as_strings(self):
        assert classify([1, True, 2.5]) == ListValue(("1", "true", "2.5"))

    def test_sequence_drops_none_members(self):
        assert classify(["a", None, "b"]) == ListValue(("a", "b"))

    @pytest.mark.parametrize("value", [[], (), [None, None]])
    def test_empty_sequence_is_undefined(self, value: Any) -> None:
        assert classify(value) is None

    def test_mapping_keeps_insertion_order(self):
        value = OrderedDict([("z", "1"), ("a", "2")])
        assert classify(value) == MapValue((("z", "1"), ("a", "2")))

    def test_mapping_drops_none_values(self):
        assert classify({"a": None, "b": 2}) == MapValue((("b", "2"),))

    @pytest.mark.parametrize("value", [{}, {"a": None}])
    def test_empty_mapping_is_undefined(self, value: Any) -> None:
        assert classify(value) is None

    def test_record_becomes_map(self):
        assert classify(Coordinates(1.5, -2.0)) == MapValue((("lat", "1.5"), ("lon", "-2.0")))

    def test_pydantic_model_becomes_map(self):
        assert classify(PlainModel(user="u")) == MapValue((("user", "u"),))

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(42, "42"), (3.25, "3.25"), (Decimal("1.10"), "1.10"), (False, "false"), (b"raw", "raw")],
    )
    def test_scalars_rendered_as_strings(self, value: Any, expected: str) -> None:
        assert classify(value) == StringValue(expected)

    def test_undecodable_bytes_kept_byte_for_byte(self):
        value = classify(b"\xff")
        assert isinstance(value, StringValue)
        assert value.text.encode("utf-8", errors="surrogateescape") == b"\xff"

    def test_dataclass_becomes_map(self):
        assert classify(Tile(1, 2)) == MapValue((("zoom", "1"), ("col", "2")))


def test_render_scalar_bool():
    assert render_scalar(True) == "true"
    assert render_scalar(False) == "false"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class TestFieldMap:
    """Test pydantic and dataclass record reduction."""

    def test_key_precedence(self):
        repo = Repo(owner="jtacoma", name="uritemplates", **{" star_count ": 5})
        assert field_map(repo) == {"owner": "jtacoma", "repo": "uritemplates", "star_count": 5}

    def test_uri_record_is_field_mappable(self):
        repo = Repo(owner="o", name="n")
        assert isinstance(repo, FieldMappable)
        assert repo.to_field_map() == field_map(repo)

    def test_plain_model_uses_field_names(self):
        assert field_map(PlainModel(user="u", page=2)) == {"user": "u", "page": 2}

    def test_as_record_map_for_non_records(self):
        assert as_record_map("text") is None
        assert as_record_map(3) is None

    def test_as_record_map_prefers_protocol(self):
        assert as_record_map(Coordinates(0.0, 1.0)) == {"lat": 0.0, "lon": 1.0}

    def test_as_record_map_for_dataclass(self):
        assert as_record_map(Tile(3, 4)) == {"zoom": 3, "col": 4}

    def test_dataclass_class_is_not_a_record(self):
        assert as_record_map(Tile) is None

    def test_dataclass_field_map_without_tags(self):
        @dataclass
        class Pair:
            left: str
            right: str

        assert dataclass_field_map(Pair("l", "r")) == {"left": "l", "right": "r"}
