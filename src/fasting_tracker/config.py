"""Application configuration."""

import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fasting_tracker.domain.models import (
    DEFAULT_FASTING_HOURS,
    MAX_FASTING_HOURS,
    MIN_FASTING_HOURS,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_path: Path = Path.home() / ".fasting_tracker" / "state.json"
    storage_namespace: str = "fasting_tracker"
    default_fasting_hours: int = Field(
        default=DEFAULT_FASTING_HOURS, ge=MIN_FASTING_HOURS, le=MAX_FASTING_HOURS
    )
    history_limit: int = Field(default=30, ge=1)
    weekly_cheat_days: int = Field(default=1, ge=0)
    timezone: str = "UTC"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FASTING_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value
