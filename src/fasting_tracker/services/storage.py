"""Typed persistence of tracker state over a key-value store."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from fasting_tracker.domain import codec
from fasting_tracker.domain.errors import (
    ParseError,
    StorageReadError,
    StorageWriteError,
)
from fasting_tracker.domain.models import (
    CheatDayState,
    FastingHistory,
    FastSession,
    FastSettings,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class KeyValueStore(Protocol):
    """Persistence interface for JSON-compatible values."""

    def get(self, key: str) -> object | None:
        """Return the stored value, or None when the key is missing."""

    def set(self, key: str, value: object) -> None:
        """Store a value under a key."""

    def delete(self, key: str) -> None:
        """Remove a key if present."""


@dataclass(frozen=True)
class StorageKeys:
    """Stable keys for the four persisted records."""

    settings: str
    session: str
    history: str
    cheat_days: str

    @classmethod
    def for_namespace(cls, namespace: str) -> "StorageKeys":
        """Build keys under a namespace prefix."""
        return cls(
            settings=f"{namespace}:settings",
            session=f"{namespace}:state",
            history=f"{namespace}:history",
            cheat_days=f"{namespace}:cheat_days",
        )

    def all(self) -> tuple[str, ...]:
        """Return every key."""
        return (self.settings, self.session, self.history, self.cheat_days)


@dataclass
class TrackerStorage:
    """Loads and saves tracker state, falling back to defaults on bad data.

    Read and write failures are logged and never raised to callers.
    """

    store: KeyValueStore
    keys: StorageKeys

    def load_settings(self, default: FastSettings) -> FastSettings:
        """Return persisted settings or ``default``."""
        return self._load(self.keys.settings, codec.decode_settings, default)

    def load_session(self) -> FastSession:
        """Return the persisted session or an idle one."""
        return self._load(self.keys.session, codec.decode_session, FastSession.idle())

    def load_history(self) -> FastingHistory:
        """Return the persisted history or an empty one."""
        return self._load(self.keys.history, codec.decode_history, FastingHistory())

    def load_cheat_days(self) -> CheatDayState | None:
        """Return the persisted cheat-day state, or None when unavailable."""
        return self._load(self.keys.cheat_days, codec.decode_cheat_days, None)

    def save_settings(self, settings: FastSettings) -> bool:
        """Persist settings."""
        return self._save(self.keys.settings, codec.encode_settings(settings))

    def save_session(self, session: FastSession) -> bool:
        """Persist the current session."""
        return self._save(self.keys.session, codec.encode_session(session))

    def save_history(self, history: FastingHistory) -> bool:
        """Persist the history."""
        return self._save(self.keys.history, codec.encode_history(history))

    def save_cheat_days(self, state: CheatDayState) -> bool:
        """Persist the cheat-day state."""
        return self._save(self.keys.cheat_days, codec.encode_cheat_days(state))

    def clear(self) -> list[str]:
        """Delete every key and return the ones that could not be deleted."""
        failed: list[str] = []
        for key in self.keys.all():
            try:
                self.store.delete(key)
            except StorageWriteError:
                logger.exception("Failed to delete %s", key)
                failed.append(key)
        return failed

    def _load(self, key: str, decode: Callable[[object], T], default: T) -> T:
        try:
            raw = self.store.get(key)
        except StorageReadError:
            logger.exception("Failed to read %s; using defaults", key)
            return default
        if raw is None:
            return default
        try:
            return decode(raw)
        except ParseError as exc:
            logger.warning("Malformed value for %s (%s); using defaults", key, exc)
            return default

    def _save(self, key: str, value: object) -> bool:
        try:
            self.store.set(key, value)
        except StorageWriteError:
            logger.exception("Failed to write %s", key)
            return False
        return True
