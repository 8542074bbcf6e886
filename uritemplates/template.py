"""Compiled URI template."""

from collections.abc import Mapping
from typing import Any

from uritemplates.exceptions import TemplateExpansionError
from uritemplates.logging import get_logger

from .expand import expand_segments
from .parser import parse_template
from .types import Expression, Segment
from .values import as_record_map

logger = get_logger(__name__)


class UriTemplate:
    """A parsed RFC 6570 template, ready to be expanded any number of times.

    @public

    Instances are immutable and safe to share between threads. Equality and
    hashing use the raw template text.

    Example:
        >>> template = UriTemplate("https://api.github.com/repos{/user,repo}")
        >>> template.expand({"user": "jtacoma", "repo": "uritemplates"})
        'https://api.github.com/repos/jtacoma/uritemplates'
        >>> template.names()
        ['user', 'repo']
    """

    __slots__ = ("_raw", "_segments")

    def __init__(self, raw: str) -> None:
        self._raw = raw
        self._segments = parse_template(raw)

    @classmethod
    def parse(cls, raw: str) -> "UriTemplate":
        """Compile ``raw``; same as calling the constructor."""
        return cls(raw)

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    def names(self) -> list[str]:
        """Return the variable names referenced by the template, in order.

        A name referenced more than once appears once per reference.
        """
        names: list[str] = []
        for segment in self._segments:
            if isinstance(segment, Expression):
                names.extend(segment.names)
        return names

    def expand(self, values: Mapping[str, Any] | Any = None, /, **kwargs: Any) -> str:
        """Expand the template with ``values`` and return the URI string.

        Args:
            values: A string-keyed mapping, a :class:`~uritemplates.values.FieldMappable`
                    record, or a pydantic model.
            **kwargs: Additional values; these take precedence over ``values``.

        Raises:
            TemplateExpansionError: If ``values`` has an unsupported type, or a
                prefix modifier is applied to a map value.
        """
        try:
            merged = _merge_values(values, kwargs)
            return expand_segments(self._segments, merged)
        except TemplateExpansionError as exc:
            logger.debug("Failed to expand template %r: %s", self._raw, exc)
            raise

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"UriTemplate({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UriTemplate):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)


def _merge_values(values: Any, overrides: dict[str, Any]) -> Mapping[str, Any]:
    if values is None:
        return overrides
    if isinstance(values, Mapping):
        mapping = values
    else:
        mapping = as_record_map(values)
        if mapping is None:
            raise TemplateExpansionError(
                f"expected a mapping or a field-mappable record, got {type(values).__name__}"
            )
    if not overrides:
        return mapping
    return {**mapping, **overrides}


__all__ = ["UriTemplate"]
