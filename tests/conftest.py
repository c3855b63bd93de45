"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

import pytest

from fasting_tracker.adapters.memory_store import InMemoryKeyValueStore
from fasting_tracker.config import Settings
from fasting_tracker.containers import AppContainer
from fasting_tracker.domain.errors import StorageReadError, StorageWriteError
from fasting_tracker.domain.models import MS_PER_HOUR, FastingRecord
from fasting_tracker.services.storage import KeyValueStore, StorageKeys, TrackerStorage
from fasting_tracker.services.tracker import Clock, FastingTracker

# Thursday, 2026-01-01 00:00 UTC.
EPOCH_2026 = int(datetime(2026, 1, 1, tzinfo=UTC).timestamp() * 1000)


def hours(value: float) -> int:
    """Return ``value`` hours in milliseconds."""
    return int(value * MS_PER_HOUR)


def make_record(
    duration_hours: float, completed: bool, start_time: int = EPOCH_2026
) -> FastingRecord:
    return FastingRecord(
        start_time=start_time,
        end_time=start_time + hours(duration_hours),
        duration_hours=duration_hours,
        completed=completed,
    )


@dataclass
class FakeClock(Clock):
    """Clock that only moves when told to."""

    now: int = EPOCH_2026

    def now_ms(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@dataclass
class FailingKeyValueStore(KeyValueStore):
    """Store whose reads and writes fail for selected keys."""

    inner: InMemoryKeyValueStore = field(default_factory=InMemoryKeyValueStore)
    failing_reads: set[str] = field(default_factory=set)
    failing_writes: set[str] = field(default_factory=set)
    failing_deletes: set[str] = field(default_factory=set)

    def get(self, key: str) -> object | None:
        if key in self.failing_reads:
            raise StorageReadError(f"cannot read {key}")
        return self.inner.get(key)

    def set(self, key: str, value: object) -> None:
        if key in self.failing_writes:
            raise StorageWriteError(f"cannot write {key}")
        self.inner.set(key, value)

    def delete(self, key: str) -> None:
        if key in self.failing_deletes:
            raise StorageWriteError(f"cannot delete {key}")
        self.inner.delete(key)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def keys() -> StorageKeys:
    return StorageKeys.for_namespace("test")


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def storage(store: InMemoryKeyValueStore, keys: StorageKeys) -> TrackerStorage:
    return TrackerStorage(store=store, keys=keys)


@pytest.fixture
def tracker(storage: TrackerStorage, clock: FakeClock) -> FastingTracker:
    return FastingTracker.load(storage, clock, weekly_cheat_days=2)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        storage_path=tmp_path / "state.json",
        storage_namespace="test",
        weekly_cheat_days=2,
    )


@pytest.fixture
def container(settings: Settings, tracker: FastingTracker) -> AppContainer:
    return AppContainer(settings=settings, tracker=tracker)
