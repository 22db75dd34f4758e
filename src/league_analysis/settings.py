"""Configuration management for league analysis."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT, RECENT_RESULTS_LIMIT


class LeagueSettings(BaseSettings):
    """Settings loaded from ``LEAGUE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LEAGUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # League backend
    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: float = DEFAULT_TIMEOUT

    # Analysis
    recent_results_limit: int = RECENT_RESULTS_LIMIT

    # Logging
    log_dir: Path = Path(__file__).resolve().parent / "logs"
    log_level: str = "INFO"

    @field_validator("api_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @field_validator("recent_results_limit", mode="after")
    @classmethod
    def non_negative_limit(cls, value: int) -> int:
        if value < 0:
            raise ValueError("recent_results_limit must be >= 0")
        return value

    @field_validator("log_level", mode="after")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def log_file(self) -> Path:
        """Path of the API call log file."""
        return self.log_dir / "api_calls.log"


@lru_cache(maxsize=1)
def get_settings() -> LeagueSettings:
    """Return the process-wide settings instance."""
    return LeagueSettings()
