"""Application configuration."""

import logging
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    log_level: str = "INFO"
    report_output_file: str | None = None
    example_output_file: str = "example_output.txt"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_log_level(raw: str | None) -> int:
    """Parse a log level name or number, falling back to INFO."""
    if raw is None:
        return logging.INFO
    cleaned = raw.strip()
    if cleaned.isdigit():
        return int(cleaned)
    return logging.getLevelNamesMapping().get(cleaned.upper(), logging.INFO)
