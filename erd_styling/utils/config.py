"""Runtime configuration.

Values come from the environment (and an optional .env file) the same way the
host diagram tooling reads its own settings.
"""
from __future__ import annotations

import os
from typing import List, Optional

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError


class ConfigurationError(ValueError):
    """Raised when styling configuration cannot be parsed or validated."""


class Settings(BaseSettings):
    """Styling settings loaded from .env and environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    colors: str = Field(
        default="",
        validation_alias=AliasChoices("ERD_COLORS", "RAILS_ERD_COLORS"),
    )
    packages_roots: List[str] = Field(
        default_factory=lambda: ["/usr/src/app/packs"],
        validation_alias=AliasChoices("ERD_PACKAGES_ROOTS"),
    )
    dependency_roots: List[str] = Field(
        default_factory=lambda: ["/usr/local/bundle/gems"],
        validation_alias=AliasChoices("ERD_DEPENDENCY_ROOTS"),
    )
    project_root: str = Field(
        default_factory=os.getcwd,
        validation_alias=AliasChoices("ERD_PROJECT_ROOT"),
    )
    ownership_file: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("ERD_OWNERSHIP_FILE"),
    )


def load_settings() -> Settings:
    """Read settings fresh from the current environment."""
    try:
        return Settings()
    except (ValidationError, SettingsError) as exc:
        raise ConfigurationError(f"Invalid styling settings: {exc}") from exc
