"""Value model for expansion.

Anything a caller passes in is normalised into one of three shapes before the
expansion engine sees it: :class:`StringValue`, :class:`ListValue` or
:class:`MapValue`. ``None`` stands for "undefined" and is skipped by the
engine, as are lists and maps left empty after dropping ``None`` members.

Records become maps in one of three ways. A class can implement
:class:`FieldMappable` itself, or it can be a pydantic model or a dataclass.
Pydantic fields are keyed by, in order of preference:

1. an explicit ``uri`` tag: ``Field(json_schema_extra={"uri": "user-id"})``
2. the field alias, stripped of surrounding whitespace
3. the declared field name

Dataclass fields take the ``uri`` tag from ``field(metadata={"uri": ...})``
and otherwise keep their declared name.
"""

import dataclasses
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

from pydantic import BaseModel

URI_TAG = "uri"


@runtime_checkable
class FieldMappable(Protocol):
    """Object that can present itself as a string-keyed map of values."""

    def to_field_map(self) -> Mapping[str, Any]: ...


class UriRecord(BaseModel):
    """Pydantic base class for records passed to ``UriTemplate.expand``.

    @public

    Example:
        >>> class Repo(UriRecord):
        ...     owner: str
        ...     name: str = Field(json_schema_extra={"uri": "repo"})
        >>> UriTemplate("{/owner,repo}").expand(Repo(owner="jtacoma", name="uritemplates"))
        '/jtacoma/uritemplates'
    """

    def to_field_map(self) -> dict[str, Any]:
        return field_map(self)


def _field_key(field_name: str, alias: str | None, extra: Any) -> str:
    if isinstance(extra, Mapping):
        tag = extra.get(URI_TAG)
        if isinstance(tag, str) and tag:
            return tag
    if alias and alias.strip():
        return alias.strip()
    return field_name


def field_map(record: BaseModel) -> dict[str, Any]:
    """Reduce a pydantic model to a map keyed by each field's URI name."""
    result: dict[str, Any] = {}
    for field_name, info in type(record).model_fields.items():
        key = _field_key(field_name, info.alias, info.json_schema_extra)
        result[key] = getattr(record, field_name)
    return result


def dataclass_field_map(record: Any) -> dict[str, Any]:
    """Reduce a dataclass instance; ``field(metadata={"uri": ...})`` renames a field."""
    return {
        _field_key(f.name, None, f.metadata): getattr(record, f.name)
        for f in dataclasses.fields(record)
    }


def as_record_map(value: Any) -> Mapping[str, Any] | None:
    """Return the map form of a record, or None if ``value`` is not a record."""
    if isinstance(value, FieldMappable):
        return value.to_field_map()
    if isinstance(value, BaseModel):
        return field_map(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclass_field_map(value)
    return None


@dataclass(frozen=True, slots=True)
class StringValue:
    text: str


@dataclass(frozen=True, slots=True)
class ListValue:
    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class MapValue:
    pairs: tuple[tuple[str, str], ...]


TemplateValue: TypeAlias = StringValue | ListValue | MapValue


def render_scalar(value: Any) -> str:
    """Default string rendering for values that are not strings or composites."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="surrogateescape")
    return str(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def classify(value: Any) -> TemplateValue | None:
    """Normalise a raw value into a :data:`TemplateValue`.

    Precedence: string, sequence, mapping, record, then scalar rendering.
    Returns None when the value is undefined: ``None`` itself, or a sequence
    or mapping with no defined members.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return StringValue(value)
    if _is_sequence(value):
        items = tuple(render_scalar(item) for item in value if item is not None)
        return ListValue(items) if items else None
    if isinstance(value, Mapping):
        return _map_value(value)
    record = as_record_map(value)
    if record is not None:
        return _map_value(record)
    return StringValue(render_scalar(value))


def _map_value(mapping: Mapping[Any, Any]) -> MapValue | None:
    pairs = tuple((str(key), render_scalar(item)) for key, item in mapping.items() if item is not None)
    return MapValue(pairs) if pairs else None


__all__ = [
    "FieldMappable",
    "ListValue",
    "MapValue",
    "StringValue",
    "TemplateValue",
    "UriRecord",
    "as_record_map",
    "classify",
    "dataclass_field_map",
    "field_map",
    "render_scalar",
]
