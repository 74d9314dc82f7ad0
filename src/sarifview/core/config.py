# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pathlib import Path

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sarifview.core.constants import Importance
from sarifview.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SARIFVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Location resolution
    source_root: Path = Path(".")
    resolve_concurrency: int = 16
    read_snippets: bool = True
    max_snippet_chars: int = 2000
    file_encoding: str = "utf-8"

    @field_validator("resolve_concurrency", mode="after")
    @classmethod
    def _check_concurrency(cls, v: int) -> int:
        if v < 1:
            raise ValueError("resolve_concurrency must be at least 1")
        return v

    # Code flows
    step_command: str = "sarifview.selectCodeFlowStep"
    default_verbosity: Importance = Importance.IMPORTANT

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
