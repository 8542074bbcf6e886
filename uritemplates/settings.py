"""Configuration settings for uritemplates.

@public

Settings are loaded from environment variables (prefix ``URITEMPLATES_``)
with .env file support via pydantic-settings.

Environment variables:
    URITEMPLATES_TEMPLATE_CACHE_SIZE: Number of compiled templates kept by
        the module-level ``expand()`` helper (0 disables caching).

Example:
    >>> from uritemplates.settings import settings
    >>> settings.template_cache_size
    256

Note:
    Settings are loaded once at import and frozen. The process must be
    restarted to pick up changes to the environment.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration.

    @public

    Attributes:
        template_cache_size: Maximum number of compiled templates cached by
                             :func:`uritemplates.expand`. Zero disables the
                             cache entirely.
    """

    model_config = SettingsConfigDict(
        env_prefix="URITEMPLATES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    template_cache_size: int = Field(default=256, ge=0)


settings = Settings()
"""Global settings instance, created at import time.

@public
"""
