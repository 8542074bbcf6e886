"""uritemplates - RFC 6570 (level 4) URI Template compiler and expander.

@public

Parse a template once, then expand it with any number of value sets:

    >>> from uritemplates import compile
    >>>
    >>> template = compile("https://api.github.com/repos{/user,repo}")
    >>> template.expand({"user": "jtacoma", "repo": "uritemplates"})
    'https://api.github.com/repos/jtacoma/uritemplates'

Values may be strings, sequences, mappings, pydantic models / FieldMappable
records, or any other scalar (rendered with ``str``). ``None`` and missing
names are omitted from the result.

Environment Variables:
    - URITEMPLATES_TEMPLATE_CACHE_SIZE: size of the ``expand()`` compile cache
    - URITEMPLATES_LOGGING_CONFIG: path to a YAML logging configuration
    - URITEMPLATES_LOG_LEVEL: default level of the ``uritemplates`` logger
"""

from .api import clear_cache, compile, expand
from .escaping import escape
from .exceptions import TemplateExpansionError, TemplateSyntaxError, UriTemplateError
from .logging import LoggingConfig, get_logger, setup_logging
from .settings import Settings, settings
from .template import UriTemplate
from .types import Expression, Literal, Operator, Segment, Term
from .values import FieldMappable, UriRecord

__version__ = "1.0.0"

__all__ = [
    "Expression",
    "FieldMappable",
    "Literal",
    "LoggingConfig",
    "Operator",
    "Segment",
    "Settings",
    "Term",
    "TemplateExpansionError",
    "TemplateSyntaxError",
    "UriRecord",
    "UriTemplate",
    "UriTemplateError",
    "clear_cache",
    "compile",
    "escape",
    "expand",
    "get_logger",
    "settings",
    "setup_logging",
]
