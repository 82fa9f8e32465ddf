"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for validatree report rendering and logging.

    Values are read from ``VALIDATREE_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="VALIDATREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Reports
    report_format: Literal["json", "yaml"] = "json"
    report_indent: int = 2


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings (call once from an entry point)."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
