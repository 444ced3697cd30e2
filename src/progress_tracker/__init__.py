"""
Progress Tracker Module.

Keeps the append-only activity log and derives streaks, weekly goals,
mood trends and achievements from it.
"""

from .models import (
    ActivityRecord,
    ActivityType,
    Achievements,
    MoodTrendPoint,
    ProgressSnapshot,
    WeeklyGoal,
)
from .aggregator import compute_stats, empty_snapshot
from .store import ActivityStore, InMemoryActivityStore
from .tracker import ProgressTracker

__all__ = [
    "ActivityRecord",
    "ActivityType",
    "Achievements",
    "MoodTrendPoint",
    "ProgressSnapshot",
    "WeeklyGoal",
    "compute_stats",
    "empty_snapshot",
    "ActivityStore",
    "InMemoryActivityStore",
    "ProgressTracker",
]
