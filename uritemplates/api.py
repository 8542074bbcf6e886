"""Top-level helpers: ``compile`` and one-shot ``expand``."""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from uritemplates.logging import get_logger
from uritemplates.settings import settings

from .template import UriTemplate

logger = get_logger(__name__)


def compile(raw: str) -> UriTemplate:  # noqa: A001
    """Compile a template string.

    @public

    Raises:
        TemplateSyntaxError: If ``raw`` is not a valid level 4 template.
    """
    return UriTemplate(raw)


if settings.template_cache_size:
    _cached_compile = lru_cache(maxsize=settings.template_cache_size)(compile)
else:
    _cached_compile = compile


def expand(raw: str, values: Mapping[str, Any] | Any = None, /, **kwargs: Any) -> str:
    """Compile ``raw`` (through a cache) and expand it in one step.

    @public

    Example:
        >>> expand("https://api.github.com{/end}", {"end": "users"})
        'https://api.github.com/users'
        >>> expand("https://api.github.com{/end}", end="gists")
        'https://api.github.com/gists'

    Note:
        Keyword values override entries of the same name in ``values``.
    """
    return _cached_compile(raw).expand(values, **kwargs)


def clear_cache() -> None:
    """Drop every template held by the ``expand`` cache."""
    if hasattr(_cached_compile, "cache_clear"):
        logger.debug("Clearing template cache: %s", _cached_compile.cache_info())
        _cached_compile.cache_clear()


__all__ = ["clear_cache", "compile", "expand"]
