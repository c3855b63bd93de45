"""Weekly cheat-day allowance."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from fasting_tracker.domain.models import CheatDayState

logger = logging.getLogger(__name__)

WEEK_MS = 7 * 24 * 3_600_000
DEFAULT_WEEKLY_CHEAT_DAYS = 1
SUNDAY = 6


@dataclass
class CheatDayAllowance:
    """Tracks how many cheat days are left in the current week.

    The quota is restored on the first check after a local Sunday midnight, or
    once a full week has passed since the last reset.
    """

    weekly_quota: int
    timezone_name: str
    _state: CheatDayState

    def __init__(
        self,
        state: CheatDayState,
        weekly_quota: int = DEFAULT_WEEKLY_CHEAT_DAYS,
        timezone_name: str = "UTC",
    ) -> None:
        if weekly_quota < 0:
            raise ValueError("weekly quota must not be negative")
        self.weekly_quota = weekly_quota
        self.timezone_name = timezone_name
        self._state = state

    @classmethod
    def fresh(
        cls,
        now: int,
        weekly_quota: int = DEFAULT_WEEKLY_CHEAT_DAYS,
        timezone_name: str = "UTC",
    ) -> "CheatDayAllowance":
        """Create an allowance with a full quota starting at ``now``."""
        state = CheatDayState(remaining_days=weekly_quota, last_reset=now)
        return cls(state, weekly_quota=weekly_quota, timezone_name=timezone_name)

    @property
    def state(self) -> CheatDayState:
        """Return the current allowance state."""
        return self._state

    def maybe_reset_weekly(self, now: int) -> bool:
        """Restore the quota if a week boundary passed since the last reset."""
        last_reset = self._state.last_reset
        week_start = week_start_ms(now, self.timezone_name)
        if last_reset >= week_start and now - last_reset < WEEK_MS:
            return False
        logger.info("Weekly cheat-day reset (last reset %s, now %s)", last_reset, now)
        self._state = CheatDayState(remaining_days=self.weekly_quota, last_reset=now)
        return True

    def manual_reset(self, now: int) -> CheatDayState:
        """Restore the full quota immediately."""
        self._state = CheatDayState(remaining_days=self.weekly_quota, last_reset=now)
        return self._state

    def use(self) -> bool:
        """Consume one cheat day; return False when none are left."""
        if self._state.remaining_days <= 0:
            return False
        self._state = CheatDayState(
            remaining_days=self._state.remaining_days - 1,
            last_reset=self._state.last_reset,
        )
        return True


def week_start_ms(now: int, timezone_name: str) -> int:
    """Return the most recent local Sunday midnight at or before ``now``."""
    tz = ZoneInfo(timezone_name)
    local = datetime.fromtimestamp(now / 1000, tz=tz)
    days_since_sunday = (local.weekday() - SUNDAY) % 7
    sunday = (local - timedelta(days=days_since_sunday)).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    return int(sunday.timestamp() * 1000)
