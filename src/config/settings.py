# src/config/settings.py - v2
"""Typed configuration loaded from the environment via pydantic-settings.

Variables use the ``MBCHUNKER_`` prefix (e.g. ``MBCHUNKER_FILE_CHUNK_SIZE``)
and may also come from a ``.env`` file. Only the factory and the CLI read
settings; chunk sources always receive explicit values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mbchunker.core.errors import ConfigurationError, UnsupportedEncodingError
from mbchunker.encoding.registry import MAX_CHARACTER_SIZE, resolve_encoding


class Settings(BaseSettings):
    """Application settings loaded from env vars and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="MBCHUNKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Chunking ===
    default_encoding: str = "utf-8"
    text_chunk_size: int = 2000
    file_chunk_size: int = 8192

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_chunking(self) -> Settings:
        """Reject sizes and encodings no chunker could be built with."""
        errors: list[str] = []

        try:
            self.default_encoding = resolve_encoding(self.default_encoding).name
        except UnsupportedEncodingError as e:
            errors.append(str(e))

        if self.text_chunk_size < 1:
            errors.append("TEXT_CHUNK_SIZE must be >= 1")

        if self.file_chunk_size < MAX_CHARACTER_SIZE:
            errors.append(f"FILE_CHUNK_SIZE must be >= {MAX_CHARACTER_SIZE}")

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from env/.env with optional overrides.

    Raises:
        ConfigurationError: If a chunking value is unusable.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
