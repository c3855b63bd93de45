"""Countdown derivation for the active fast."""

from fasting_tracker.domain.models import FastSession, FastSettings, TimeRemaining

_IDLE = TimeRemaining(hours=0, minutes=0, seconds=0, is_complete=False)


def remaining(session: FastSession, settings: FastSettings, now: int) -> TimeRemaining:
    """Return the time left until the fast reaches its target duration.

    The result is derived from the session start on every call, never from a
    previous tick. Idle sessions report zero time remaining.
    """
    if not session.is_active or session.start_time is None:
        return _IDLE
    target_end = session.start_time + settings.target_ms
    delta_seconds = max(0, target_end - now) // 1000
    minutes, seconds = divmod(delta_seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return TimeRemaining(
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        is_complete=now >= target_end,
    )


def format_time(hours: int, minutes: int, seconds: int) -> str:
    """Format a countdown as zero-padded HH:MM:SS."""
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def fasting_status(session: FastSession, time_remaining: TimeRemaining) -> str:
    """Return the headline shown above the countdown."""
    if not session.is_active:
        return "Ready to start fasting"
    if time_remaining.is_complete:
        return "Fasting complete! You can eat now"
    return "Fasting in progress"
