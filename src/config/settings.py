# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for metadata locations, cache freshness, language
routing and logging.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Metadata location (relative to the workspace root) ===
    photos_dir_name: str = ".photos"
    metadata_file_name: str = "element_selectors.json"

    # === Cache ===
    cache_enabled: bool = True
    cache_ttl_seconds: float = 5.0

    # === Resolution ===
    resolution_strategy: Literal["index", "scan"] = "index"
    word_languages: str = (
        "python,javascript,typescript,javascriptreact,typescriptreact"
    )
    bracket_languages: str = "robotframework"

    # === Hover card ===
    image_width: int = 400

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("cache_ttl_seconds")
    @classmethod
    def validate_cache_ttl(cls, v: float) -> float:  # noqa: N805
        if v < 0:
            raise ValueError("cache_ttl_seconds must be >= 0")
        return v

    @field_validator("image_width")
    @classmethod
    def validate_image_width(cls, v: int) -> int:  # noqa: N805
        if v <= 0:
            raise ValueError("image_width must be > 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        overlap = set(self.word_languages_list) & set(self.bracket_languages_list)
        if overlap:
            errors.append(
                "WORD_LANGUAGES and BRACKET_LANGUAGES overlap: "
                + ", ".join(sorted(overlap))
            )

        if not self.photos_dir_name.strip():
            errors.append("PHOTOS_DIR_NAME must not be empty")

        if not self.metadata_file_name.strip():
            errors.append("METADATA_FILE_NAME must not be empty")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def word_languages_list(self) -> list[str]:
        """Parse comma-separated word-mode language ids."""
        return [
            x.strip().lower() for x in self.word_languages.split(",") if x.strip()
        ]

    @property
    def bracket_languages_list(self) -> list[str]:
        """Parse comma-separated bracket-mode language ids."""
        return [
            x.strip().lower() for x in self.bracket_languages.split(",") if x.strip()
        ]


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or CLI flags).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
