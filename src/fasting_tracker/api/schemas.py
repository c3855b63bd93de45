"""Pydantic models for request payloads."""

from pydantic import BaseModel, Field, StrictInt

from fasting_tracker.domain.models import MAX_FASTING_HOURS, MIN_FASTING_HOURS


class SettingsUpdate(BaseModel):
    """Fasting duration as entered in the settings form."""

    fasting_hours: StrictInt | str


class ExternalSettings(BaseModel):
    """Settings pushed by another process sharing the same storage."""

    fasting_hours: int = Field(ge=MIN_FASTING_HOURS, le=MAX_FASTING_HOURS)
