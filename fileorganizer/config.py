"""Server settings, read from ``FILE_ORGANIZER_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATIC_DIR = Path(__file__).parent / "static"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FILE_ORGANIZER_", extra="ignore")

    host: str = "127.0.0.1"
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("FILE_ORGANIZER_PORT", "PORT"),
    )
    log_level: str = "INFO"
    static_dir: Path = DEFAULT_STATIC_DIR


@lru_cache
def get_settings() -> Settings:
    return Settings()
