# celine/binding/core/config.py
"""
Central configuration for route model binding applications.

Environment variables override defaults.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_json: bool = Field(
        default=True,
        description="Emit JSON log lines (plain text when disabled)",
    )

    database_url: str = Field(
        default="sqlite+aiosqlite:///:memory:",
        description="Async SQLAlchemy database URL",
    )
    database_echo: bool = Field(default=False)


settings = Settings()
