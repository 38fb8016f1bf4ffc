"""Settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters


class Settings(BaseSettings):
    """Configuration for the lincol command line.

    Values are read from ``LINCOL_``-prefixed environment variables and from
    a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="LINCOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    max_document_size: int = DEFAULT_MAX_DOCUMENT_SIZE
