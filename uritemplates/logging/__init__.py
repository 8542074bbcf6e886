"""Logging infrastructure for uritemplates.

@public

Key components:
    get_logger: Factory function for library loggers
    setup_logging: Initialize logging configuration from YAML or defaults
    LoggingConfig: Configuration class for logging settings

Example:
    >>> from uritemplates.logging import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.debug("compiled template")
"""

from .logging_config import LoggingConfig, get_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
