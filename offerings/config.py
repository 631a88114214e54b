"""
Service configuration.

Uses pydantic-settings; values come from the environment or a local .env file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .rules import OPEN_MATCH_CONTAINS, OPEN_MATCH_EXACT


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OFFERINGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    sheet_csv_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SHEET_CSV_URL", "OFFERINGS_SHEET_CSV_URL"),
    )
    http_timeout: float = 30.0  # seconds
    open_match: str = OPEN_MATCH_EXACT
    log_level: str = "INFO"

    @field_validator("open_match")
    @classmethod
    def check_open_match(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in (OPEN_MATCH_EXACT, OPEN_MATCH_CONTAINS):
            raise ValueError(f"open_match must be '{OPEN_MATCH_EXACT}' or '{OPEN_MATCH_CONTAINS}'")
        return v

    def require_feed_url(self) -> str:
        """Return the feed location or fail before any fetch is attempted."""
        url = (self.sheet_csv_url or "").strip()
        if not url:
            raise ConfigurationError("Falta SHEET_CSV_URL en la configuración.")
        return url


@lru_cache
def get_settings() -> Settings:
    return Settings()
