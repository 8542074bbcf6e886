"""Exception hierarchy for uritemplates.

All exceptions inherit from UriTemplateError, so callers can catch a single
base class. Compile-time and expansion-time failures also subclass the
closest builtin (ValueError / TypeError).
"""


class UriTemplateError(Exception):
    """Base exception for all uritemplates errors."""


class TemplateSyntaxError(UriTemplateError, ValueError):
    """Raised when a template string cannot be compiled.

    Attributes:
        template: The raw template text being compiled, when known.
    """

    def __init__(self, message: str, *, template: str | None = None) -> None:
        super().__init__(message)
        self.template = template


class TemplateExpansionError(UriTemplateError, TypeError):
    """Raised when values cannot be expanded into a compiled template."""
