"""Template compiler: turns a raw template string into segments.

The grammar is RFC 6570 level 4. Parsing never partially succeeds: the first
problem raises :class:`TemplateSyntaxError` and nothing is returned.
"""

import re

from uritemplates.exceptions import TemplateSyntaxError
from uritemplates.logging import get_logger

from .types import Expression, Literal, Operator, Segment, Term

logger = get_logger(__name__)

_VALID_NAME = re.compile(r"(?:[A-Za-z0-9_.]|%[0-9A-Fa-f]{2})+")
_PREFIX_DIGITS = re.compile(r"[0-9]+")

MAX_PREFIX_LENGTH = 9999


def parse_term(raw: str) -> Term:
    """Parse one comma-separated term such as ``var``, ``list*`` or ``var:3``."""
    explode = raw.endswith("*")
    if explode:
        raw = raw[:-1]

    parts = raw.split(":")
    if len(parts) > 2:
        raise TemplateSyntaxError("multiple colons in same term")

    name = parts[0]
    prefix = 0
    if len(parts) == 2:
        digits = parts[1]
        if not _PREFIX_DIGITS.fullmatch(digits) or not 0 < int(digits) <= MAX_PREFIX_LENGTH:
            raise TemplateSyntaxError(f"invalid prefix length: {digits}")
        prefix = int(digits)

    if not _VALID_NAME.fullmatch(name):
        raise TemplateSyntaxError(f"not a valid name: {name}")
    if explode and prefix:
        raise TemplateSyntaxError("both explode and prefix modifiers on same term")

    return Term(name=name, explode=explode, prefix=prefix)


def parse_expression(body: str) -> Expression:
    """Parse the text between ``{`` and ``}`` into an :class:`Expression`."""
    if not body:
        raise TemplateSyntaxError("empty expression")

    operator = Operator.from_char(body[0])
    if operator is None:
        operator = Operator.SIMPLE
    else:
        body = body[1:]

    terms = tuple(parse_term(raw) for raw in body.split(","))
    return Expression(operator=operator, terms=terms)


def parse_template(raw: str) -> tuple[Segment, ...]:
    """Split ``raw`` into literal and expression segments, in template order.

    Raises:
        TemplateSyntaxError: On unbalanced braces, empty expressions, invalid
            variable names or conflicting term modifiers.
    """
    try:
        segments = _parse_segments(raw)
    except TemplateSyntaxError as exc:
        exc.template = raw
        logger.debug("Failed to compile template %r: %s", raw, exc)
        raise

    logger.debug("Compiled template %r into %d segments", raw, len(segments))
    return segments


def _parse_segments(raw: str) -> tuple[Segment, ...]:
    chunks = raw.split("{")

    leading = chunks[0]
    if "}" in leading:
        raise TemplateSyntaxError("unexpected }")

    segments: list[Segment] = []
    if leading:
        segments.append(Literal(leading))

    for chunk in chunks[1:]:
        pieces = chunk.split("}")
        if len(pieces) != 2:
            raise TemplateSyntaxError("malformed template")
        body, trailing = pieces
        segments.append(parse_expression(body))
        if trailing:
            segments.append(Literal(trailing))

    return tuple(segments)


__all__ = ["MAX_PREFIX_LENGTH", "parse_expression", "parse_template", "parse_term"]
