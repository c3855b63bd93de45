"""Cheat-day endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from fasting_tracker.api.deps import get_tracker
from fasting_tracker.api.serializers import (
    serialize_cheat_days,
    serialize_record,
)
from fasting_tracker.services.tracker import FastingTracker

router = APIRouter(prefix="/cheat-days", tags=["cheat-days"])


@router.get("")
async def cheat_days(
    tracker: FastingTracker = Depends(get_tracker),
) -> dict[str, object]:
    """Return the remaining cheat days for this week."""
    return serialize_cheat_days(tracker.cheat_days())


@router.post("/use")
async def use_cheat_day(
    tracker: FastingTracker = Depends(get_tracker),
) -> dict[str, object]:
    """Consume a cheat day and log it in the history."""
    record = tracker.use_cheat_day()
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="No cheat days left this week.",
        )
    return {
        "record": serialize_record(record),
        "cheat_days": serialize_cheat_days(tracker.allowance.state),
    }


@router.post("/reset")
async def reset_cheat_days(
    tracker: FastingTracker = Depends(get_tracker),
) -> dict[str, object]:
    """Restore the full weekly allowance."""
    return serialize_cheat_days(tracker.reset_cheat_days())
