"""In-memory key-value store."""

import copy
from dataclasses import dataclass

from fasting_tracker.services.storage import KeyValueStore


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Key-value store kept in process memory.

    Values are deep-copied on the way in and out so callers never share
    mutable state with the store.
    """

    _entries: dict[str, object]

    def __init__(self, entries: dict[str, object] | None = None) -> None:
        self._entries = copy.deepcopy(entries) if entries else {}

    def get(self, key: str) -> object | None:
        """Return a stored value if present."""
        return copy.deepcopy(self._entries.get(key))

    def set(self, key: str, value: object) -> None:
        """Store a value."""
        self._entries[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        """Remove a key."""
        self._entries.pop(key, None)
