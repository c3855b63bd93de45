"""Bounded fasting history with incrementally maintained aggregates."""

from dataclasses import dataclass, replace

from fasting_tracker.domain.models import FastingHistory, FastingRecord

HISTORY_LIMIT = 30


@dataclass
class HistoryAggregator:
    """Owns the fasting history.

    ``records`` is a rolling window of the newest ``limit`` entries while the
    aggregates cover every completed fast ever appended, so they are updated
    per append and never recomputed from the window.
    """

    limit: int
    _history: FastingHistory

    def __init__(
        self, history: FastingHistory | None = None, limit: int = HISTORY_LIMIT
    ) -> None:
        if limit < 1:
            raise ValueError("history limit must be positive")
        self.limit = limit
        history = history or FastingHistory()
        self._history = replace(history, records=history.records[:limit])

    @property
    def history(self) -> FastingHistory:
        """Return the current history snapshot."""
        return self._history

    def append(self, record: FastingRecord) -> FastingHistory:
        """Add a record as the newest entry and update the aggregates."""
        current = self._history
        records = (record, *current.records)[: self.limit]
        if not record.completed:
            self._history = replace(current, records=records)
            return self._history

        shortest = current.shortest_fast_hours
        self._history = FastingHistory(
            records=records,
            longest_fast_hours=max(current.longest_fast_hours, record.duration_hours),
            shortest_fast_hours=(
                record.duration_hours
                if shortest is None
                else min(shortest, record.duration_hours)
            ),
            successful_fasts=current.successful_fasts + 1,
        )
        return self._history

    def reset(self) -> FastingHistory:
        """Drop every record and aggregate."""
        self._history = FastingHistory()
        return self._history
