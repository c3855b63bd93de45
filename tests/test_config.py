"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from fasting_tracker.config import Settings


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FASTING_DEFAULT_FASTING_HOURS", "18")
    monkeypatch.setenv("FASTING_TIMEZONE", "Europe/Berlin")

    settings = Settings()

    assert settings.default_fasting_hours == 18
    assert settings.timezone == "Europe/Berlin"


def test_settings_reject_out_of_range_default() -> None:
    with pytest.raises(ValidationError):
        Settings(default_fasting_hours=80)


def test_settings_reject_unknown_timezone() -> None:
    with pytest.raises(ValidationError):
        Settings(timezone="Mars/Olympus")
