"""Configuration settings for the i18n package.

Settings are read from environment variables and an optional ``.env`` file
using Pydantic BaseSettings.

Environment Variables:
    I18N_DEFAULT_LOCALE: Locale of a freshly created default translator.
    I18N_DEFAULT_SCOPE: Scope of a freshly created default translator.
    I18N_TRANSLATIONS_FILE: Optional file loaded into the default translator
        when it is created lazily.
    LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR).
    LOG_JSON: Render logs as JSON instead of console output.

Example:
    ```python
    from bit_i18n.configuration import get_settings

    settings = get_settings()
    locale = settings.DEFAULT_LOCALE
    ```
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """i18n package settings."""

    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    DEFAULT_SCOPE: str = Field(default="default", alias="I18N_DEFAULT_SCOPE")
    TRANSLATIONS_FILE: Optional[Path] = Field(
        default=None, alias="I18N_TRANSLATIONS_FILE"
    )
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("DEFAULT_LOCALE", "DEFAULT_SCOPE")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Reject empty defaults; an empty override means "use the default"."""
        if not v:
            raise ValueError("default locale and scope must not be empty")
        return v

    @field_validator("TRANSLATIONS_FILE", mode="before")
    @classmethod
    def validate_translations_file(cls, v):
        if v == "":
            return None
        return v


@lru_cache()
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
