"""Expansion engine: renders compiled segments against a set of values."""

from collections.abc import Mapping
from io import StringIO
from typing import Any

from uritemplates.exceptions import TemplateExpansionError

from .escaping import escape
from .types import Expression, Literal, Operator, Segment, Term
from .values import ListValue, MapValue, StringValue, classify


def expand_segments(segments: tuple[Segment, ...], values: Mapping[str, Any]) -> str:
    """Expand ``segments`` in order and return the resulting string.

    Raises:
        TemplateExpansionError: If a prefix modifier is applied to a map value.
    """
    buf = StringIO()
    for segment in segments:
        match segment:
            case Literal(text=text):
                buf.write(text)
            case Expression():
                _expand_expression(buf, segment, values)
    return buf.getvalue()


def _expand_expression(buf: StringIO, expression: Expression, values: Mapping[str, Any]) -> None:
    operator = expression.operator
    zero_mark = buf.tell()
    buf.write(operator.first)
    first_mark = buf.tell()

    for term in expression.terms:
        value = classify(values.get(term.name))
        if value is None:
            continue

        # An empty string still counts as defined: keep the leading string.
        if isinstance(value, StringValue) and not value.text:
            zero_mark = first_mark

        if buf.tell() != first_mark:
            buf.write(operator.separator)

        match value:
            case StringValue(text=text):
                _expand_string(buf, operator, term, text)
            case ListValue(items=items):
                _expand_list(buf, operator, term, items)
            case MapValue(pairs=pairs):
                if term.prefix:
                    raise TemplateExpansionError("cannot truncate a map expansion")
                _expand_map(buf, operator, term, pairs)

    if buf.tell() == first_mark:
        buf.seek(zero_mark)
        buf.truncate()


def _truncate(text: str, term: Term) -> str:
    if term.prefix and len(text) > term.prefix:
        return text[: term.prefix]
    return text


def _write_name(buf: StringIO, operator: Operator, name: str, empty: bool) -> None:
    if operator.named:
        buf.write(name)
        buf.write(operator.if_empty if empty else "=")


def _expand_string(buf: StringIO, operator: Operator, term: Term, text: str) -> None:
    text = _truncate(text, term)
    _write_name(buf, operator, term.name, not text)
    buf.write(escape(text, operator.allow_reserved))


def _expand_list(buf: StringIO, operator: Operator, term: Term, items: tuple[str, ...]) -> None:
    if not term.explode:
        _write_name(buf, operator, term.name, False)
    for i, item in enumerate(items):
        if i:
            buf.write(operator.separator if term.explode else ",")
        item = _truncate(item, term)
        if term.explode:
            _write_name(buf, operator, term.name, not item)
        buf.write(escape(item, operator.allow_reserved))


def _expand_map(buf: StringIO, operator: Operator, term: Term, pairs: tuple[tuple[str, str], ...]) -> None:
    if not term.explode:
        _write_name(buf, operator, term.name, False)
    for i, (key, item) in enumerate(pairs):
        if i:
            buf.write(operator.separator if term.explode else ",")
        buf.write(escape(key, operator.allow_reserved))
        buf.write("=" if term.explode else ",")
        buf.write(escape(item, operator.allow_reserved))


__all__ = ["expand_segments"]
