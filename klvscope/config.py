"""Application configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Root logger level")
    json_logs: bool = Field(default=True, description="Enable JSON formatted logs")


class Settings(BaseSettings):
    """Central application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=(Path(__file__).resolve().parent.parent / ".env"), env_file_encoding="utf-8")

    app_name: str = Field(default="klvscope")
    environment: Literal["development", "staging", "production"] = Field(default="development")
    api_key: str = Field(default="dev-secret-key")
    history_limit: int = Field(default=10, ge=1, le=100)
    batch_max_lines: int = Field(default=1000, ge=1)
    default_export_format: Literal["structured", "tabular", "fixed-width"] = Field(
        default="structured", validation_alias=AliasChoices("KLVSCOPE_EXPORT_FORMAT", "DEFAULT_EXPORT_FORMAT")
    )
    allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return memoized application settings."""

    return Settings()


settings = get_settings()
