"""JSON views of domain objects."""

from fasting_tracker.domain.models import (
    CheatDayState,
    FastingHistory,
    FastingRecord,
    FastSettings,
    FastStatus,
)
from fasting_tracker.domain.stats import DayOverview
from fasting_tracker.services.stats import format_stats


def serialize_status(status: FastStatus) -> dict[str, object]:
    """Session, settings and live countdown for the fast screen."""
    remaining = status.remaining
    return {
        "is_active": status.session.is_active,
        "start_time": status.session.start_time,
        "fasting_hours": status.settings.fasting_hours,
        "status": status.headline,
        "remaining": {
            "hours": remaining.hours,
            "minutes": remaining.minutes,
            "seconds": remaining.seconds,
            "is_complete": remaining.is_complete,
        },
        "countdown": status.countdown if status.session.is_active else None,
    }


def serialize_settings(settings: FastSettings) -> dict[str, object]:
    """Current fasting duration."""
    return {"fasting_hours": settings.fasting_hours}


def serialize_record(record: FastingRecord) -> dict[str, object]:
    """One history entry; cheat days are flagged explicitly."""
    return {
        "start_time": record.start_time,
        "end_time": record.end_time,
        "duration_hours": record.duration_hours,
        "completed": record.completed,
        "cheat_day": record.is_cheat_day,
    }


def serialize_history(history: FastingHistory) -> dict[str, object]:
    """Records newest first, raw aggregates and their display strings."""
    summary = format_stats(history)
    return {
        "records": [serialize_record(record) for record in history.records],
        "successful_fasts": history.successful_fasts,
        "longest_fast_hours": history.longest_fast_hours,
        "shortest_fast_hours": history.shortest_fast_hours,
        "display": {
            "successful_fasts": summary.successful_fasts,
            "longest_fast": summary.longest_fast,
            "shortest_fast": summary.shortest_fast,
        },
    }


def serialize_cheat_days(state: CheatDayState) -> dict[str, object]:
    """Remaining allowance and the last reset instant."""
    return {"remaining_days": state.remaining_days, "last_reset": state.last_reset}


def serialize_day(day: DayOverview) -> dict[str, object]:
    """One day of the overview with its eating windows as day percentages."""
    return {
        "day": day.day.isoformat(),
        "has_successful_fast": day.has_successful_fast,
        "has_incomplete_fast": day.has_incomplete_fast,
        "has_cheat_day": day.has_cheat_day,
        "windows": [
            {
                "start_percent": window.start_percent,
                "end_percent": window.end_percent,
                "completed": window.completed,
            }
            for window in day.windows
        ],
    }
