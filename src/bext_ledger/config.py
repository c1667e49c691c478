from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    timezone: str = Field(default="UTC", alias="BEXT_TIMEZONE")
    default_file: Optional[Path] = Field(default=None, alias="BEXT_FILE")
    currency_symbol: str = Field(default="$", alias="BEXT_CURRENCY")

    def validate_required(self) -> None:
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"BEXT_TIMEZONE is not a known timezone: {self.timezone}") from e


@lru_cache
def load_settings() -> Settings:
    settings = Settings()
    settings.validate_required()
    return settings
