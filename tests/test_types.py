"""Tests for operator metadata and segment types."""

import dataclasses

import pytest

from uritemplates.types import Expression, Literal, Operator, Term


@pytest.mark.parametrize(
    ("operator", "first", "separator", "named", "allow_reserved", "if_empty"),
    [
        (Operator.SIMPLE, "", ",", False, False, ""),
        (Operator.RESERVED, "", ",", False, True, ""),
        (Operator.FRAGMENT, "#", ",", False, True, ""),
        (Operator.LABEL, ".", ".", False, False, ""),
        (Operator.PATH_SEGMENT, "/", "/", False, False, ""),
        (Operator.PATH_PARAMETER, ";", ";", True, False, ""),
        (Operator.QUERY, "?", "&", True, False, "="),
        (Operator.QUERY_CONTINUATION, "&", "&", True, False, "="),
    ],
)
def test_operator_table(
    operator: Operator, first: str, separator: str, named: bool, allow_reserved: bool, if_empty: str
) -> None:
    assert operator.first == first
    assert operator.separator == separator
    assert operator.named is named
    assert operator.allow_reserved is allow_reserved
    assert operator.if_empty == if_empty


def test_from_char():
    assert Operator.from_char("?") is Operator.QUERY
    assert Operator.from_char("x") is None
    assert Operator.from_char("") is None


def test_term_str():
    assert str(Term("a")) == "a"
    assert str(Term("a", explode=True)) == "a*"
    assert str(Term("a", prefix=4)) == "a:4"


def test_expression_requires_terms():
    with pytest.raises(ValueError, match="at least one term"):
        Expression(Operator.SIMPLE, ())


def test_expression_str_and_names():
    expression = Expression(Operator.QUERY, (Term("x"), Term("list", explode=True)))
    assert str(expression) == "{?x,list*}"
    assert expression.names == ["x", "list"]


def test_segments_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Literal("a").text = "b"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        Term("a").name = "b"  # type: ignore[misc]
