"""Dependency container wiring for the application."""

from dataclasses import dataclass

from fasting_tracker.adapters.clock import SystemClock
from fasting_tracker.adapters.json_file_store import JsonFileKeyValueStore
from fasting_tracker.config import Settings
from fasting_tracker.domain.models import FastSettings
from fasting_tracker.services.storage import StorageKeys, TrackerStorage
from fasting_tracker.services.tracker import FastingTracker


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    tracker: FastingTracker


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    storage = TrackerStorage(
        store=JsonFileKeyValueStore(resolved_settings.storage_path),
        keys=StorageKeys.for_namespace(resolved_settings.storage_namespace),
    )
    tracker = FastingTracker.load(
        storage,
        SystemClock(),
        default_settings=FastSettings(
            fasting_hours=resolved_settings.default_fasting_hours
        ),
        history_limit=resolved_settings.history_limit,
        weekly_cheat_days=resolved_settings.weekly_cheat_days,
        timezone_name=resolved_settings.timezone,
    )

    return AppContainer(
        settings=resolved_settings,
        tracker=tracker,
    )
