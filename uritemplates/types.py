"""Compiled template building blocks: operators, terms and segments."""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class Operator(Enum):
    """Expression operator (RFC 6570 section 2.2).

    Each member carries its expansion behaviour as attributes:

    - ``char``: operator character as written in the template ("" for simple)
    - ``first``: string written before the first expanded term
    - ``separator``: string written between expanded terms
    - ``named``: whether terms render as ``name=value``
    - ``allow_reserved``: whether reserved characters pass through unescaped
    - ``if_empty``: suffix written after the name when the value is empty
    """

    SIMPLE = ("", "", ",", False, False, "")
    RESERVED = ("+", "", ",", False, True, "")
    FRAGMENT = ("#", "#", ",", False, True, "")
    LABEL = (".", ".", ".", False, False, "")
    PATH_SEGMENT = ("/", "/", "/", False, False, "")
    PATH_PARAMETER = (";", ";", ";", True, False, "")
    QUERY = ("?", "?", "&", True, False, "=")
    QUERY_CONTINUATION = ("&", "&", "&", True, False, "=")

    def __init__(self, char: str, first: str, separator: str, named: bool, allow_reserved: bool, if_empty: str) -> None:
        self.char = char
        self.first = first
        self.separator = separator
        self.named = named
        self.allow_reserved = allow_reserved
        self.if_empty = if_empty

    @classmethod
    def from_char(cls, char: str) -> "Operator | None":
        """Return the operator written as ``char``, or None if it is not one."""
        return _OPERATORS_BY_CHAR.get(char)


_OPERATORS_BY_CHAR: dict[str, Operator] = {op.char: op for op in Operator if op.char}


@dataclass(frozen=True, slots=True)
class Term:
    """A single variable reference inside an expression.

    Attributes:
        name: Variable name (validated against the varname grammar).
        explode: True when the ``*`` modifier is present.
        prefix: Maximum length from the ``:N`` modifier, 0 when absent.
    """

    name: str
    explode: bool = False
    prefix: int = 0

    def __str__(self) -> str:
        if self.explode:
            return f"{self.name}*"
        if self.prefix:
            return f"{self.name}:{self.prefix}"
        return self.name


@dataclass(frozen=True, slots=True)
class Literal:
    """Template text emitted verbatim."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Expression:
    """A ``{...}`` expression: an operator applied to one or more terms."""

    operator: Operator
    terms: tuple[Term, ...]

    def __post_init__(self) -> None:
        if not self.terms:
            raise ValueError("Expression requires at least one term")

    @property
    def names(self) -> list[str]:
        return [term.name for term in self.terms]

    def __str__(self) -> str:
        return "{" + self.operator.char + ",".join(str(term) for term in self.terms) + "}"


Segment: TypeAlias = Literal | Expression


__all__ = ["Expression", "Literal", "Operator", "Segment", "Term"]
