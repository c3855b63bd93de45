"""Fasting tracker composed from the session, history and cheat-day components."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from fasting_tracker.domain.models import (
    CheatDayState,
    FastingHistory,
    FastingRecord,
    FastSession,
    FastSettings,
    FastStatus,
    TimeRemaining,
)
from fasting_tracker.domain.stats import DayOverview
from fasting_tracker.services.cheat_days import (
    DEFAULT_WEEKLY_CHEAT_DAYS,
    CheatDayAllowance,
)
from fasting_tracker.services.countdown import fasting_status, format_time, remaining
from fasting_tracker.services.fast_settings import parse_fasting_hours
from fasting_tracker.services.history import HISTORY_LIMIT, HistoryAggregator
from fasting_tracker.services.sessions import SessionController
from fasting_tracker.services.stats import OVERVIEW_DAYS, daily_overview
from fasting_tracker.services.storage import TrackerStorage

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Source of the current instant."""

    def now_ms(self) -> int:
        """Return milliseconds since the Unix epoch."""


@dataclass(frozen=True)
class ClearResult:
    """Outcome of clearing all persisted data."""

    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when every key was deleted."""
        return not self.warnings


@dataclass
class FastingTracker:
    """Entry point for every user-facing fasting operation.

    State is loaded once from storage and each successful mutation is saved
    right away. Storage failures are logged by ``TrackerStorage`` and never
    interrupt the in-memory state machine.
    """

    storage: TrackerStorage
    clock: Clock
    controller: SessionController
    history_aggregator: HistoryAggregator
    allowance: CheatDayAllowance
    default_settings: FastSettings
    timezone_name: str
    _settings: FastSettings

    @classmethod
    def load(  # noqa: PLR0913
        cls,
        storage: TrackerStorage,
        clock: Clock,
        *,
        default_settings: FastSettings | None = None,
        history_limit: int = HISTORY_LIMIT,
        weekly_cheat_days: int = DEFAULT_WEEKLY_CHEAT_DAYS,
        timezone_name: str = "UTC",
    ) -> "FastingTracker":
        """Build a tracker from persisted state, using defaults for gaps."""
        defaults = default_settings or FastSettings()
        history_aggregator = HistoryAggregator(storage.load_history(), history_limit)
        controller = SessionController(history_aggregator, storage.load_session())
        cheat_state = storage.load_cheat_days()
        if cheat_state is None:
            allowance = CheatDayAllowance.fresh(
                clock.now_ms(), weekly_cheat_days, timezone_name
            )
        else:
            allowance = CheatDayAllowance(cheat_state, weekly_cheat_days, timezone_name)
        return cls(
            storage=storage,
            clock=clock,
            controller=controller,
            history_aggregator=history_aggregator,
            allowance=allowance,
            default_settings=defaults,
            timezone_name=timezone_name,
            _settings=storage.load_settings(defaults),
        )

    @property
    def settings(self) -> FastSettings:
        """Return the settings in force."""
        return self._settings

    @property
    def session(self) -> FastSession:
        """Return the current fast session."""
        return self.controller.session

    @property
    def history(self) -> FastingHistory:
        """Return the history snapshot."""
        return self.history_aggregator.history

    def start_fast(self) -> bool:
        """Start a fast now; return False if one is already running."""
        if not self.controller.start(self.clock.now_ms()):
            return False
        self.storage.save_session(self.controller.session)
        return True

    def stop_fast(self) -> FastingRecord | None:
        """Stop the running fast and return its record, or None when idle.

        The fasting hours configured now, not at start, decide completion.
        """
        record = self.controller.stop(self.clock.now_ms(), self._settings)
        if record is None:
            return None
        logger.info(
            "Fast stopped after %.2f hours (completed=%s)",
            record.duration_hours,
            record.completed,
        )
        self.storage.save_history(self.history)
        self.storage.save_session(self.controller.session)
        return record

    def remaining(self) -> TimeRemaining:
        """Return the countdown for the current fast."""
        return remaining(self.controller.session, self._settings, self.clock.now_ms())

    def status(self) -> FastStatus:
        """Return the current fast with its countdown and headline."""
        session = self.controller.session
        time_remaining = remaining(session, self._settings, self.clock.now_ms())
        return FastStatus(
            session=session,
            settings=self._settings,
            remaining=time_remaining,
            headline=fasting_status(session, time_remaining),
            countdown=format_time(
                time_remaining.hours, time_remaining.minutes, time_remaining.seconds
            ),
        )

    def update_settings(self, fasting_hours: object) -> FastSettings:
        """Validate and save a new fasting duration.

        Raises ``InvalidSettingsError`` and keeps the prior settings when the
        value is rejected.
        """
        self._settings = parse_fasting_hours(fasting_hours)
        self.storage.save_settings(self._settings)
        return self._settings

    def on_external_settings_change(self, settings: FastSettings) -> FastSettings:
        """Replace settings pushed by another process.

        The change is already persisted by its sender, so nothing is written.
        """
        self._settings = settings
        return self._settings

    def reset_settings(self) -> FastSettings:
        """Restore the default settings."""
        self._settings = self.default_settings
        self.storage.save_settings(self._settings)
        return self._settings

    def reset_history(self) -> FastingHistory:
        """Delete all history records and aggregates."""
        history = self.history_aggregator.reset()
        self.storage.save_history(history)
        return history

    def cheat_days(self) -> CheatDayState:
        """Return the cheat-day allowance after applying any weekly reset."""
        self._refresh_cheat_days(self.clock.now_ms())
        return self.allowance.state

    def use_cheat_day(self) -> FastingRecord | None:
        """Consume a cheat day and log it; return None when none are left."""
        now = self.clock.now_ms()
        self._refresh_cheat_days(now)
        if not self.allowance.use():
            logger.info("No cheat days left this week")
            return None
        record = FastingRecord(
            start_time=now, end_time=now, duration_hours=0.0, completed=False
        )
        self.history_aggregator.append(record)
        self.storage.save_cheat_days(self.allowance.state)
        self.storage.save_history(self.history)
        return record

    def reset_cheat_days(self) -> CheatDayState:
        """Restore the full weekly allowance now."""
        state = self.allowance.manual_reset(self.clock.now_ms())
        self.storage.save_cheat_days(state)
        return state

    def daily_overview(self, days: int = OVERVIEW_DAYS) -> list[DayOverview]:
        """Return the per-day overview of recent records."""
        return daily_overview(
            self.history.records, self.clock.now_ms(), self.timezone_name, days
        )

    def clear_all(self) -> ClearResult:
        """Delete all persisted data and reset in-memory state to defaults.

        In-memory state is reset even when some keys could not be deleted.
        """
        failed = self.storage.clear()
        now = self.clock.now_ms()
        self.history_aggregator.reset()
        self.controller = SessionController(self.history_aggregator)
        self._settings = self.default_settings
        self.allowance = CheatDayAllowance.fresh(
            now, self.allowance.weekly_quota, self.timezone_name
        )
        if failed:
            logger.warning("Clear all left %d keys in storage", len(failed))
        return ClearResult(warnings=[f"Failed to delete {key}" for key in failed])

    def _refresh_cheat_days(self, now: int) -> None:
        if self.allowance.maybe_reset_weekly(now):
            self.storage.save_cheat_days(self.allowance.state)
