"""Validation for user-supplied fast settings."""

from fasting_tracker.domain.errors import InvalidSettingsError
from fasting_tracker.domain.models import (
    MAX_FASTING_HOURS,
    MIN_FASTING_HOURS,
    FastSettings,
)


def parse_fasting_hours(raw: object) -> FastSettings:
    """Build settings from a fasting duration entered by the user.

    Accepts whole numbers and numeric strings between 1 and 72 hours.
    """
    hours = _parse_whole_number(raw)
    if hours is None:
        raise InvalidSettingsError(f"Fasting hours must be a whole number, got {raw!r}")
    if not MIN_FASTING_HOURS <= hours <= MAX_FASTING_HOURS:
        raise InvalidSettingsError(
            f"Fasting hours must be between {MIN_FASTING_HOURS} and "
            f"{MAX_FASTING_HOURS}, got {hours}"
        )
    return FastSettings(fasting_hours=hours)


def _parse_whole_number(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None
