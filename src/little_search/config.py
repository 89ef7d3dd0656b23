"""Centralized configuration for little-search-engine using Pydantic Settings."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration loaded from ``LITTLE_SEARCH_*`` environment variables.

    Command-line arguments take precedence over these values.
    """

    model_config = SettingsConfigDict(
        env_prefix="LITTLE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Input sources
    docs_file: Path | None = Field(default=None, description="File listing document names, whitespace separated")
    noise_words_file: Path | None = Field(default=None, description="File listing noise words, whitespace separated")
    docs_root: Path | None = Field(
        default=None,
        description="Directory holding the documents (defaults to the directory of docs_file)",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON logs")

    # Tracing
    tracing_enabled: bool = Field(default=False, description="Write finished spans to stderr")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if not isinstance(logging.getLevelName(value.upper()), int):
            raise ValueError(f"Unknown log level: {value}")
        return value.lower()

    def resolve_docs_root(self) -> Path | None:
        """Directory documents are resolved against.

        Returns:
            docs_root when set, otherwise the parent of docs_file, or None
        """
        if self.docs_root is not None:
            return self.docs_root
        if self.docs_file is not None:
            return self.docs_file.parent
        return None
