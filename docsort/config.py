"""Configuration management for the document classifier.

This module uses Pydantic Settings to load configuration from environment
variables. All settings are validated on first access to catch configuration
errors early.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # Category table
    categories_file: Optional[Path] = Field(
        default=None,
        description="JSON file overriding the built-in document category table"
    )

    # Clean filename generation
    default_extension: str = Field(
        default="pdf",
        description="Extension used for suggested filenames when the upload has none"
    )

    # Model configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that LOG_LEVEL is a standard logging level name."""
        level = (v or "").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)} (got: {v!r})"
            )
        return level

    @field_validator("categories_file", mode="before")
    @classmethod
    def validate_categories_file(cls, v: object) -> Optional[Path]:
        """Validate that CATEGORIES_FILE points to an existing file when set."""
        if v is None or not str(v).strip():
            return None
        v = Path(str(v).strip())
        if not v.is_file():
            raise ValueError(f"CATEGORIES_FILE does not exist or is not a file: {v}")
        return v

    @field_validator("default_extension")
    @classmethod
    def validate_default_extension(cls, v: str) -> str:
        """Strip a leading dot and lowercase the extension."""
        ext = (v or "").strip().lstrip(".").lower()
        if not ext:
            raise ValueError("DEFAULT_EXTENSION must not be empty")
        return ext


@lru_cache
def get_settings() -> Settings:
    """Get cached Settings instance.

    Returns:
        Settings: Validated application settings

    Raises:
        ValueError: If environment variables are invalid
    """
    return Settings()
