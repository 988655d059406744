"""Application configuration models."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

import httpx
from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    app_name: str = Field(default="Playgama Games", alias="APP_NAME")
    server_host: str = Field(default="0.0.0.0", alias="HOST")
    server_port: int = Field(default=3000, alias="PORT")

    catalog_resource_name: str = Field(
        default="games.json", alias="CATALOG_RESOURCE_NAME", min_length=1
    )
    catalog_resource_dir: Path | None = Field(
        default=None, alias="CATALOG_RESOURCE_DIR"
    )
    catalog_remote_url: HttpUrl | None = Field(
        default=None, alias="CATALOG_REMOTE_URL"
    )

    http_connect_timeout: float = Field(
        default=15.0, alias="HTTP_CONNECT_TIMEOUT", gt=0, le=300
    )
    http_read_timeout: float = Field(
        default=15.0, alias="HTTP_READ_TIMEOUT", gt=0, le=300
    )

    environment: Literal["development", "production"] = Field(
        default="development", alias="ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("catalog_resource_dir", "catalog_remote_url", mode="before")
    @classmethod
    def _blank_as_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        """Accept logging level names in any case."""

        level = str(value or "").strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value!r}")
        return level

    def http_timeout(self) -> httpx.Timeout:
        """Return the timeout used for remote catalog requests."""

        return httpx.Timeout(
            self.http_read_timeout,
            connect=self.http_connect_timeout,
            read=self.http_read_timeout,
        )

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()  # type: ignore[call-arg]


settings = get_settings()
