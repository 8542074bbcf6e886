"""Centralized logging configuration for uritemplates.

@public

Supports YAML-based configuration (``logging.config.dictConfig`` format)
and programmatic setup with sensible defaults.

Usage:
    >>> from uritemplates.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Expanding template")

Environment variables:
    URITEMPLATES_LOGGING_CONFIG: Path to custom logging.yml
    URITEMPLATES_LOG_LEVEL: Default log level (WARNING, DEBUG, etc.)
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Any

import yaml

# Default log levels for library components
DEFAULT_LOG_LEVELS = {
    "uritemplates": "WARNING",
    "uritemplates.parser": "WARNING",
    "uritemplates.expand": "WARNING",
    "uritemplates.api": "WARNING",
}


class LoggingConfig:
    """Manages logging configuration for the library.

    @public

    Attributes:
        config_path: Path to YAML configuration file.
        _config: Cached configuration dictionary.

    Configuration precedence:
        1. Explicit config_path parameter
        2. URITEMPLATES_LOGGING_CONFIG environment variable
        3. Default configuration

    Example:
        >>> config = LoggingConfig()
        >>> config.apply()
        >>>
        >>> config = LoggingConfig(Path("custom_logging.yml"))
        >>> config.apply()

    Note:
        Configuration is lazy-loaded and cached after first access.
    """

    def __init__(self, config_path: Path | None = None):
        """Initialize logging configuration.

        Args:
            config_path: Optional path to YAML configuration file.
                        If None, checks the environment and falls back
                        to the default configuration.
        """
        self.config_path = config_path or self._get_default_config_path()
        self._config: dict[str, Any] | None = None

    @staticmethod
    def _get_default_config_path() -> Path | None:
        """Get config path from URITEMPLATES_LOGGING_CONFIG, if set."""
        if env_path := os.environ.get("URITEMPLATES_LOGGING_CONFIG"):
            return Path(env_path)
        return None

    def load_config(self) -> dict[str, Any]:
        """Load logging configuration from file or defaults.

        Returns:
            Dictionary in ``logging.config.dictConfig`` format.

        Note:
            Configuration is cached after first load. Create a new
            LoggingConfig instance to reload from disk.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self._get_default_config()
        assert self._config is not None
        return self._config

    @staticmethod
    def _get_default_config() -> dict[str, Any]:
        """Get default logging configuration.

        Default format:
            "HH:MM:SS.mmm | LEVEL | logger.name - message"

        Environment variables:
            URITEMPLATES_LOG_LEVEL: Override default log level
        """
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
                "detailed": {
                    "format": (
                        "%(asctime)s | %(levelname)-7s | %(name)s | "
                        "%(funcName)s:%(lineno)d - %(message)s"
                    ),
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "uritemplates": {
                    "level": os.environ.get("URITEMPLATES_LOG_LEVEL", "WARNING"),
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

    def apply(self):
        """Apply the logging configuration via ``logging.config.dictConfig``.

        Note:
            Multiple calls will reconfigure logging.
        """
        config = self.load_config()
        logging.config.dictConfig(config)


# Global configuration instance
_logging_config: LoggingConfig | None = None


def setup_logging(config_path: Path | None = None, level: str | None = None):
    """Setup logging for the uritemplates library.

    @public

    Args:
        config_path: Optional path to YAML logging configuration file.
                    If None, uses environment variables or defaults.
        level: Optional log level override (INFO, DEBUG, WARNING, etc.).
              Overrides any level set in configuration or environment.

    Example:
        >>> setup_logging()
        >>> setup_logging(Path("/etc/myapp/logging.yml"))
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for logger_name in DEFAULT_LOG_LEVELS:
            logging.getLogger(logger_name).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for library components.

    @public

    Initializes logging on first use if ``setup_logging`` has not been
    called yet.

    Args:
        name: Logger name, typically __name__.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Template compiled", extra={"template": raw})
    """
    if _logging_config is None:
        setup_logging()

    return logging.getLogger(name)
