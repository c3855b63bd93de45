"""JSON-compatible encoding for persisted tracker state.

Decoders raise ``ParseError`` for any value that does not have the expected
shape so the storage layer can fall back to defaults.
"""

from fasting_tracker.domain.errors import ParseError
from fasting_tracker.domain.models import (
    MAX_FASTING_HOURS,
    MIN_FASTING_HOURS,
    CheatDayState,
    FastingHistory,
    FastingRecord,
    FastSession,
    FastSettings,
)


def encode_settings(settings: FastSettings) -> dict[str, object]:
    """Encode fast settings."""
    return {"fasting_hours": settings.fasting_hours}


def decode_settings(raw: object) -> FastSettings:
    """Decode fast settings."""
    data = _expect_dict(raw, "settings")
    hours = _expect_int(data.get("fasting_hours"), "fasting_hours")
    if not MIN_FASTING_HOURS <= hours <= MAX_FASTING_HOURS:
        raise ParseError(f"fasting_hours out of range: {hours}")
    return FastSettings(fasting_hours=hours)


def encode_session(session: FastSession) -> dict[str, object]:
    """Encode the current fast session."""
    return {"is_active": session.is_active, "start_time": session.start_time}


def decode_session(raw: object) -> FastSession:
    """Decode the current fast session."""
    data = _expect_dict(raw, "session")
    is_active = data.get("is_active")
    if not isinstance(is_active, bool):
        raise ParseError("is_active must be a boolean")
    start_raw = data.get("start_time")
    start_time = None if start_raw is None else _expect_int(start_raw, "start_time")
    try:
        return FastSession(is_active=is_active, start_time=start_time)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def encode_record(record: FastingRecord) -> dict[str, object]:
    """Encode a single fasting record."""
    return {
        "start_time": record.start_time,
        "end_time": record.end_time,
        "duration_hours": record.duration_hours,
        "completed": record.completed,
    }


def decode_record(raw: object) -> FastingRecord:
    """Decode a single fasting record."""
    data = _expect_dict(raw, "record")
    completed = data.get("completed")
    if not isinstance(completed, bool):
        raise ParseError("completed must be a boolean")
    duration = _expect_number(data.get("duration_hours"), "duration_hours")
    if duration < 0:
        raise ParseError("duration_hours must not be negative")
    return FastingRecord(
        start_time=_expect_int(data.get("start_time"), "start_time"),
        end_time=_expect_int(data.get("end_time"), "end_time"),
        duration_hours=duration,
        completed=completed,
    )


def encode_history(history: FastingHistory) -> dict[str, object]:
    """Encode the fasting history and its aggregates."""
    return {
        "records": [encode_record(record) for record in history.records],
        "longest_fast_hours": history.longest_fast_hours,
        "shortest_fast_hours": history.shortest_fast_hours,
        "successful_fasts": history.successful_fasts,
    }


def decode_history(raw: object) -> FastingHistory:
    """Decode the fasting history and its aggregates."""
    data = _expect_dict(raw, "history")
    records_raw = data.get("records")
    if not isinstance(records_raw, list):
        raise ParseError("records must be a list")
    shortest_raw = data.get("shortest_fast_hours")
    successful = _expect_int(data.get("successful_fasts"), "successful_fasts")
    if successful < 0:
        raise ParseError("successful_fasts must not be negative")
    return FastingHistory(
        records=tuple(decode_record(item) for item in records_raw),
        longest_fast_hours=_expect_number(
            data.get("longest_fast_hours"), "longest_fast_hours"
        ),
        shortest_fast_hours=(
            None
            if shortest_raw is None
            else _expect_number(shortest_raw, "shortest_fast_hours")
        ),
        successful_fasts=successful,
    )


def encode_cheat_days(state: CheatDayState) -> dict[str, object]:
    """Encode the cheat-day allowance."""
    return {"remaining_days": state.remaining_days, "last_reset": state.last_reset}


def decode_cheat_days(raw: object) -> CheatDayState:
    """Decode the cheat-day allowance."""
    data = _expect_dict(raw, "cheat_days")
    remaining = _expect_int(data.get("remaining_days"), "remaining_days")
    if remaining < 0:
        raise ParseError("remaining_days must not be negative")
    return CheatDayState(
        remaining_days=remaining,
        last_reset=_expect_int(data.get("last_reset"), "last_reset"),
    )


def _expect_dict(raw: object, name: str) -> dict[str, object]:
    if not isinstance(raw, dict):
        raise ParseError(f"{name} must be an object, got {type(raw).__name__}")
    return raw


def _expect_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"{name} must be an integer")
    return value


def _expect_number(value: object, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ParseError(f"{name} must be a number")
    return float(value)
