"""Tests for the history aggregator."""

import random

import pytest

from fasting_tracker.domain.models import FastingHistory, FastingRecord
from fasting_tracker.services.history import HISTORY_LIMIT, HistoryAggregator
from tests.conftest import make_record


def _fold(records: list[FastingRecord]) -> tuple[int, float, float | None]:
    completed = [record.duration_hours for record in records if record.completed]
    return (
        len(completed),
        max(completed, default=0.0),
        min(completed) if completed else None,
    )


def test_append_prepends_newest_first() -> None:
    aggregator = HistoryAggregator()
    first = make_record(10, completed=False)
    second = make_record(17, completed=True)

    aggregator.append(first)
    aggregator.append(second)

    assert aggregator.history.records == (second, first)


def test_records_are_capped_but_aggregates_are_not() -> None:
    aggregator = HistoryAggregator()
    records = [make_record(16 + index / 10, completed=True) for index in range(40)]

    for record in records:
        aggregator.append(record)

    history = aggregator.history
    assert len(history.records) == HISTORY_LIMIT
    assert history.records[0] == records[-1]
    assert history.records[-1] == records[10]
    assert history.successful_fasts == 40
    assert history.shortest_fast_hours == 16
    assert history.longest_fast_hours == pytest.approx(19.9)


def test_incomplete_records_leave_aggregates_untouched() -> None:
    aggregator = HistoryAggregator()

    aggregator.append(make_record(3, completed=False))
    aggregator.append(make_record(0, completed=False))

    history = aggregator.history
    assert len(history.records) == 2
    assert history.successful_fasts == 0
    assert history.longest_fast_hours == 0
    assert history.shortest_fast_hours is None


def test_shortest_tracks_completed_records_only() -> None:
    aggregator = HistoryAggregator()

    aggregator.append(make_record(18, completed=True))
    aggregator.append(make_record(2, completed=False))
    aggregator.append(make_record(16.5, completed=True))

    assert aggregator.history.shortest_fast_hours == 16.5
    assert aggregator.history.longest_fast_hours == 18


def test_aggregates_match_fold_over_full_sequence() -> None:
    rng = random.Random(7)
    records = [
        make_record(round(rng.uniform(0, 30), 2), completed=rng.random() < 0.6)
        for _ in range(120)
    ]
    aggregator = HistoryAggregator()

    for record in records:
        aggregator.append(record)

    history = aggregator.history
    assert (
        history.successful_fasts,
        history.longest_fast_hours,
        history.shortest_fast_hours,
    ) == _fold(records)
    assert len(history.records) == HISTORY_LIMIT


def test_reset_is_idempotent() -> None:
    aggregator = HistoryAggregator()
    aggregator.append(make_record(16, completed=True))

    once = aggregator.reset()
    twice = aggregator.reset()

    assert once == twice == FastingHistory()


def test_loaded_history_is_truncated_to_limit() -> None:
    records = tuple(make_record(1, completed=False) for _ in range(8))
    loaded = FastingHistory(records=records, successful_fasts=3)

    aggregator = HistoryAggregator(loaded, limit=5)

    assert len(aggregator.history.records) == 5
    assert aggregator.history.successful_fasts == 3


def test_limit_must_be_positive() -> None:
    with pytest.raises(ValueError):
        HistoryAggregator(limit=0)
