"""
Progress Tracker Service.

Records user actions in the activity log and builds dashboard
statistics from it. Reads never fail: when the log cannot be read the
empty snapshot is returned so the dashboard can still render.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from .aggregator import compute_stats, empty_snapshot
from .models import ActivityRecord, ActivityType, ProgressSnapshot
from .store import ActivityStore

logger = logging.getLogger(__name__)


class ProgressTracker:
    """Activity logging and progress statistics for users."""

    def __init__(self, store: ActivityStore):
        self.store = store

    def track_activity(
        self,
        user_id: str,
        activity_type: ActivityType,
        duration_minutes: Optional[int] = None,
        mood_rating: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> ActivityRecord:
        """
        Append an activity to the user's log.

        The timestamp is assigned here, at write time. Store errors
        propagate to the caller.
        """
        record = ActivityRecord(
            user_id=user_id,
            activity_type=ActivityType(activity_type),
            duration_minutes=duration_minutes,
            mood_rating=mood_rating,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )
        stored = self.store.add_activity(record)
        logger.info(f"[PROGRESS] Tracked {stored.activity_type.value} for user {user_id}")
        return stored

    def track_login(self, user_id: str) -> ActivityRecord:
        return self.track_activity(user_id, ActivityType.LOGIN)

    def track_therapy_session(
        self,
        user_id: str,
        duration_minutes: int,
        mood_rating: Optional[int] = None,
    ) -> ActivityRecord:
        return self.track_activity(
            user_id,
            ActivityType.THERAPY_SESSION,
            duration_minutes=duration_minutes,
            mood_rating=mood_rating,
        )

    def track_journal_entry(
        self,
        user_id: str,
        mood_rating: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> ActivityRecord:
        return self.track_activity(
            user_id,
            ActivityType.JOURNAL_ENTRY,
            mood_rating=mood_rating,
            notes=notes,
        )

    def track_meditation(self, user_id: str, duration_minutes: int) -> ActivityRecord:
        return self.track_activity(
            user_id,
            ActivityType.MEDITATION,
            duration_minutes=duration_minutes,
        )

    def track_wellness_activity(
        self,
        user_id: str,
        activity_name: str,
        duration_minutes: Optional[int] = None,
    ) -> ActivityRecord:
        """Record a wellness exercise; its name is kept in the notes."""
        return self.track_activity(
            user_id,
            ActivityType.WELLNESS_ACTIVITY,
            duration_minutes=duration_minutes,
            notes=activity_name,
        )

    def get_progress_stats(
        self,
        user_id: str,
        now: Optional[datetime] = None,
    ) -> ProgressSnapshot:
        """
        Build the progress snapshot for a user.

        Returns:
            The computed snapshot, or the empty snapshot if the
            activity log could not be read
        """
        try:
            activities = self.store.list_activities(user_id)
        except Exception as e:
            logger.error(f"[PROGRESS] Failed to fetch activities for user {user_id}: {e}")
            return empty_snapshot()

        logger.debug(f"[PROGRESS] Retrieved {len(activities)} activities for user {user_id}")
        return compute_stats(activities, now=now)
