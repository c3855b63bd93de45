"""FastAPI application factory."""

import logging

from fastapi import Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from fasting_tracker.api.cheat_days import router as cheat_days_router
from fasting_tracker.api.deps import get_tracker
from fasting_tracker.api.schemas import ExternalSettings, SettingsUpdate
from fasting_tracker.api.serializers import (
    serialize_day,
    serialize_history,
    serialize_record,
    serialize_settings,
    serialize_status,
)
from fasting_tracker.app_logging import configure_logging
from fasting_tracker.containers import AppContainer
from fasting_tracker.domain.errors import InvalidSettingsError
from fasting_tracker.domain.models import FastSettings
from fasting_tracker.services.stats import OVERVIEW_DAYS
from fasting_tracker.services.tracker import FastingTracker


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Fasting Tracker")
    app.state.container = container

    app.include_router(cheat_days_router)

    @app.exception_handler(InvalidSettingsError)
    async def invalid_settings(
        request: Request, exc: InvalidSettingsError
    ) -> JSONResponse:
        logger.info("Rejected settings update: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/fast")
    async def current_fast(
        tracker: FastingTracker = Depends(get_tracker),
    ) -> dict[str, object]:
        """Return the current fast and its countdown."""
        return serialize_status(tracker.status())

    @app.post("/fast/start")
    async def start_fast(
        tracker: FastingTracker = Depends(get_tracker),
    ) -> dict[str, object]:
        """Start a fast now."""
        if not tracker.start_fast():
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="A fast is already in progress.",
            )
        return serialize_status(tracker.status())

    @app.post("/fast/stop")
    async def stop_fast(
        tracker: FastingTracker = Depends(get_tracker),
    ) -> dict[str, object]:
        """Stop the running fast and record it."""
        record = tracker.stop_fast()
        if record is None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No fast in progress.",
            )
        return {
            "record": serialize_record(record),
            "status": serialize_status(tracker.status()),
        }

    @app.get("/settings")
    async def get_settings(
        tracker: FastingTracker = Depends(get_tracker),
    ) -> dict[str, object]:
        """Return the fasting settings."""
        return serialize_settings(tracker.settings)

    @app.put("/settings")
    async def update_settings(
        payload: SettingsUpdate, tracker: FastingTracker = Depends(get_tracker)
    ) -> dict[str, object]:
        """Save a new fasting duration."""
        return serialize_settings(tracker.update_settings(payload.fasting_hours))

    @app.post("/settings/reset")
    async def reset_settings(
        tracker: FastingTracker = Depends(get_tracker),
    ) -> dict[str, object]:
        """Restore default settings."""
        return serialize_settings(tracker.reset_settings())

    @app.post("/settings/external")
    async def external_settings(
        payload: ExternalSettings, tracker: FastingTracker = Depends(get_tracker)
    ) -> dict[str, object]:
        """Apply settings changed by another process."""
        settings = FastSettings(fasting_hours=payload.fasting_hours)
        return serialize_settings(tracker.on_external_settings_change(settings))

    @app.get("/history")
    async def history(
        tracker: FastingTracker = Depends(get_tracker),
    ) -> dict[str, object]:
        """Return recent records and all-time stats."""
        return serialize_history(tracker.history)

    @app.delete("/history")
    async def reset_history(
        tracker: FastingTracker = Depends(get_tracker),
    ) -> dict[str, object]:
        """Delete the fasting history."""
        return serialize_history(tracker.reset_history())

    @app.get("/history/overview")
    async def history_overview(
        days: int = Query(default=OVERVIEW_DAYS, ge=1, le=366),
        tracker: FastingTracker = Depends(get_tracker),
    ) -> dict[str, object]:
        """Return recent records grouped by day."""
        return {"days": [serialize_day(day) for day in tracker.daily_overview(days)]}

    @app.post("/clear-all")
    async def clear_all(
        tracker: FastingTracker = Depends(get_tracker),
    ) -> dict[str, object]:
        """Delete all stored data and restore defaults."""
        result = tracker.clear_all()
        return {"status": "ok" if result.ok else "partial", "warnings": result.warnings}

    return app
