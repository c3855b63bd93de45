"""Request dependencies for the HTTP shell."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

from fasting_tracker.domain.errors import ContextMisuseError
from fasting_tracker.services.tracker import FastingTracker  # noqa: TC001

if TYPE_CHECKING:
    from fasting_tracker.containers import AppContainer


def get_tracker(request: Request) -> FastingTracker:
    """Return the tracker bound to the application.

    Raises ``ContextMisuseError`` when the app was not created with a
    container, which is a wiring bug rather than a runtime condition.
    """
    container: AppContainer | None = getattr(request.app.state, "container", None)
    if container is None:
        raise ContextMisuseError(
            "Fasting tracker requested outside an application with a container"
        )
    return container.tracker
