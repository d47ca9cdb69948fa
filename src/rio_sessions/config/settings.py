"""Configuration for the session service runtime."""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Session service configuration resolved from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    host: str = Field(default="127.0.0.1", alias="RIO_SESSIONS_HOST")
    port: int = Field(default=8000, alias="RIO_SESSIONS_PORT")
    sessions_table: str = Field(default="sessions", alias="RIO_SESSIONS_TABLE")

    @classmethod
    def load(cls) -> Settings:
        instance = cls()
        logger = logging.getLogger("rio_sessions.settings")
        logger.info("session settings loaded: %r", instance)
        return instance


__all__ = ["Settings"]
