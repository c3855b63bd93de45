"""Key-value store persisted to a local JSON file."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from fasting_tracker.domain.errors import StorageReadError, StorageWriteError
from fasting_tracker.services.storage import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Stores every key in a single JSON object on disk.

    Writes go to a temporary file that replaces the original, so a crash
    mid-write leaves the previous contents intact.
    """

    path: Path

    def get(self, key: str) -> object | None:
        """Return the value for a key, or None when missing."""
        return self._read().get(key)

    def set(self, key: str, value: object) -> None:
        """Store a value under a key."""
        data = self._read_for_update()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        """Remove a key if present."""
        data = self._read_for_update()
        if key not in data:
            return
        del data[key]
        self._write(data)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as fp:
                payload = json.load(fp)
        except (OSError, ValueError) as exc:
            raise StorageReadError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise StorageReadError(f"{self.path} does not contain a JSON object")
        return payload

    def _read_for_update(self) -> dict[str, object]:
        try:
            return self._read()
        except StorageReadError:
            logger.warning("Replacing unreadable store at %s", self.path)
            return {}

    def _write(self, data: dict[str, object]) -> None:
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as fp:
                json.dump(data, fp, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as exc:
            tmp_path.unlink(missing_ok=True)
            raise StorageWriteError(f"Cannot write {self.path}: {exc}") from exc
