"""Activity log storage interface and an in-memory implementation."""

import logging
import uuid
from dataclasses import replace
from typing import Dict, List, Protocol

from .models import ActivityRecord

logger = logging.getLogger(__name__)


class ActivityStore(Protocol):
    """Append-only log of activity records keyed by user."""

    def add_activity(self, record: ActivityRecord) -> ActivityRecord:
        ...

    def list_activities(self, user_id: str) -> List[ActivityRecord]:
        ...


class InMemoryActivityStore:
    """Activity log held in process memory."""

    def __init__(self):
        self._records: Dict[str, List[ActivityRecord]] = {}

    def add_activity(self, record: ActivityRecord) -> ActivityRecord:
        stored = replace(record, id=record.id or uuid.uuid4().hex)
        self._records.setdefault(stored.user_id, []).append(stored)
        return stored

    def list_activities(self, user_id: str) -> List[ActivityRecord]:
        # Newest first
        return sorted(
            self._records.get(user_id, []),
            key=lambda r: r.created_at,
            reverse=True,
        )

    def delete_user(self, user_id: str) -> int:
        """Drop a user's whole log (account deletion)."""
        removed = len(self._records.pop(user_id, []))
        logger.info(f"[STORE] Deleted {removed} activities for user {user_id}")
        return removed
