"""State machine for the current fast."""

import logging
from dataclasses import dataclass

from fasting_tracker.domain.models import (
    MS_PER_HOUR,
    FastingRecord,
    FastSession,
    FastSettings,
)
from fasting_tracker.services.history import HistoryAggregator

logger = logging.getLogger(__name__)


@dataclass
class SessionController:
    """Moves the fast between idle and active.

    Stopping an active fast builds a ``FastingRecord`` and appends it to the
    history. Transitions that are not valid from the current state are
    ignored.
    """

    history: HistoryAggregator
    _session: FastSession

    def __init__(
        self, history: HistoryAggregator, session: FastSession | None = None
    ) -> None:
        self.history = history
        self._session = session or FastSession.idle()

    @property
    def session(self) -> FastSession:
        """Return the current session."""
        return self._session

    def start(self, now: int) -> bool:
        """Start a fast at ``now``; return False if one is already running."""
        if self._session.is_active:
            logger.warning(
                "Ignoring start: fast already active since %s", self._session.start_time
            )
            return False
        self._session = FastSession.active(now)
        return True

    def stop(self, now: int, settings: FastSettings) -> FastingRecord | None:
        """Stop the running fast and return its record, or None when idle.

        Completion is judged against ``settings`` as passed at stop time, not
        the duration configured when the fast started.
        """
        start_time = self._session.start_time
        if not self._session.is_active or start_time is None:
            logger.warning("Ignoring stop: no active fast")
            return None

        duration_ms = now - start_time
        if duration_ms < 0:
            logger.warning(
                "Clock moved backward (start=%s, now=%s); recording zero duration",
                start_time,
                now,
            )
            duration_ms = 0
        record = FastingRecord(
            start_time=start_time,
            end_time=now,
            duration_hours=duration_ms / MS_PER_HOUR,
            completed=duration_ms >= settings.target_ms,
        )
        try:
            self.history.append(record)
        finally:
            self._session = FastSession.idle()
        return record
