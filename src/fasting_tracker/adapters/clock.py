"""System clock adapter."""

from datetime import UTC, datetime

from fasting_tracker.services.tracker import Clock


class SystemClock(Clock):
    """Clock backed by the system time."""

    def now_ms(self) -> int:
        """Return the current system time in epoch milliseconds."""
        return int(datetime.now(tz=UTC).timestamp() * 1000)
