"""Activity log and progress statistics API routes."""
import logging
import sqlite3

from fastapi import APIRouter, Depends, HTTPException

from progress_tracker import ProgressTracker

from ..dependencies import get_tracker, get_user_id
from ..models.progress import Activity, ActivityCreate, ProgressStats

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/progress", tags=["Progress"])


@router.post("/activities", response_model=Activity, status_code=201)
async def record_activity(
    body: ActivityCreate,
    user_id: str = Depends(get_user_id),
    tracker: ProgressTracker = Depends(get_tracker),
):
    """Append an activity (meditation, wellness exercise, login, ...) to the log."""
    try:
        record = tracker.track_activity(
            user_id,
            body.activity_type,
            duration_minutes=body.duration_minutes,
            mood_rating=body.mood_rating,
            notes=body.notes,
        )
    except sqlite3.Error as e:
        log.error(f"[PROGRESS] Failed to record activity: {e}")
        raise HTTPException(status_code=503, detail="Failed to record activity")
    return Activity(**record.to_dict())


@router.get("/stats", response_model=ProgressStats, response_model_by_alias=True)
async def get_progress_stats(
    user_id: str = Depends(get_user_id),
    tracker: ProgressTracker = Depends(get_tracker),
):
    """
    Get dashboard statistics for the current user.
    Falls back to an all-zero snapshot if the activity log is unavailable.
    """
    snapshot = tracker.get_progress_stats(user_id)
    return ProgressStats(**snapshot.to_dict())
