"""
Progress Data Models.

Activity records are the append-only log of user actions; the snapshot
types are derived from that log on demand and never stored.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional


class ActivityType(str, Enum):
    """Kinds of user action recorded in the activity log."""

    THERAPY_SESSION = "therapy_session"
    JOURNAL_ENTRY = "journal_entry"
    MEDITATION = "meditation"
    WELLNESS_ACTIVITY = "wellness_activity"
    LOGIN = "login"


@dataclass(frozen=True)
class ActivityRecord:
    """One immutable entry in a user's activity log."""

    user_id: str
    activity_type: ActivityType
    duration_minutes: Optional[int] = None
    mood_rating: Optional[int] = None
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: Optional[str] = None

    def __post_init__(self):
        # Accept raw strings from storage rows
        if not isinstance(self.activity_type, ActivityType):
            object.__setattr__(self, "activity_type", ActivityType(self.activity_type))
        if self.duration_minutes is not None and self.duration_minutes < 0:
            raise ValueError("duration_minutes must be non-negative")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "activity_type": self.activity_type.value,
            "duration_minutes": self.duration_minutes,
            "mood_rating": self.mood_rating,
            "notes": self.notes,
            "created_at": self.created_at.isoformat(),
        }


@dataclass
class WeeklyGoal:
    """Progress toward one rolling weekly target."""

    current: float
    target: float

    @property
    def progress_percent(self) -> float:
        """Calculate progress as a percentage."""
        if self.target == 0:
            return 100.0
        return min((self.current / self.target) * 100, 100.0)

    @property
    def remaining(self) -> float:
        return max(self.target - self.current, 0)

    def to_dict(self) -> dict:
        return {"current": self.current, "target": self.target}


@dataclass
class MoodTrendPoint:
    """Average mood and therapy session count for one calendar day."""

    date: str
    mood: float = 0.0
    sessions: int = 0

    def to_dict(self) -> dict:
        return {"date": self.date, "mood": self.mood, "sessions": self.sessions}


@dataclass
class Achievements:
    """Achievement flags, re-derived on every computation."""

    seven_day_streak: bool = False
    mindful_writer: bool = False
    zen_master: bool = False
    progress_pioneer: bool = False
    wellness_warrior: bool = False

    def to_dict(self) -> dict:
        return {
            "seven_day_streak": self.seven_day_streak,
            "mindful_writer": self.mindful_writer,
            "zen_master": self.zen_master,
            "progress_pioneer": self.progress_pioneer,
            "wellness_warrior": self.wellness_warrior,
        }


@dataclass
class ProgressSnapshot:
    """Dashboard statistics derived from an activity log."""

    total_sessions: int = 0
    journal_entries: int = 0
    meditation_minutes: int = 0
    streak_days: int = 0
    activity_counts: Dict[str, int] = field(
        default_factory=lambda: {t.value: 0 for t in ActivityType}
    )
    weekly_goals: Dict[str, WeeklyGoal] = field(default_factory=dict)
    mood_trend: List[MoodTrendPoint] = field(default_factory=list)
    achievements: Achievements = field(default_factory=Achievements)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "total_sessions": self.total_sessions,
            "journal_entries": self.journal_entries,
            "meditation_minutes": self.meditation_minutes,
            "streak_days": self.streak_days,
            "activity_counts": dict(self.activity_counts),
            "weekly_goals": {name: goal.to_dict() for name, goal in self.weekly_goals.items()},
            "mood_trend": [point.to_dict() for point in self.mood_trend],
            "achievements": self.achievements.to_dict(),
        }
