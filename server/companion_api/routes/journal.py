"""Journal API routes."""
import logging
import sqlite3

from fastapi import APIRouter, Depends, HTTPException

from progress_tracker import ProgressTracker
from therapy_engine import generate_journal_insight, mood_rating
from therapy_engine.journal import journal_notes

from ..dependencies import get_tracker, get_user_id
from ..models.journal import JournalEntryCreate, JournalEntrySaved

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/journal", tags=["Journal"])


@router.post("", response_model=JournalEntrySaved, status_code=201)
async def save_journal_entry(
    body: JournalEntryCreate,
    user_id: str = Depends(get_user_id),
    tracker: ProgressTracker = Depends(get_tracker),
):
    """Record a journal entry and return a reflective insight for it."""
    if not body.title.strip() or not body.content.strip():
        raise HTTPException(status_code=422, detail="Please fill in both title and content")

    rating = mood_rating(body.mood)
    try:
        record = tracker.track_journal_entry(
            user_id,
            mood_rating=rating,
            notes=journal_notes(body.title, body.tags),
        )
    except sqlite3.Error as e:
        log.error(f"[JOURNAL] Failed to track journal entry: {e}")
        raise HTTPException(status_code=503, detail="Failed to save journal entry")

    return JournalEntrySaved(
        activity_id=record.id,
        mood_rating=rating,
        insight=generate_journal_insight(body.mood),
        created_at=record.created_at.isoformat(),
    )
