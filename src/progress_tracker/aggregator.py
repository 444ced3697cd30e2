"""
Progress Aggregation Module.

Derives dashboard statistics (counts, streak, weekly goals, mood trend
and achievements) from a user's raw activity log. Everything is
recomputed from the log on every call; nothing is cached or stored.

Calendar days are local dates. Timezone-aware timestamps are converted
to local time before their date is taken; naive timestamps are assumed
to already be local.
"""

import logging
import math
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Set

from .models import (
    Achievements,
    ActivityRecord,
    ActivityType,
    MoodTrendPoint,
    ProgressSnapshot,
    WeeklyGoal,
)

logger = logging.getLogger(__name__)

# Weekly targets
THERAPY_SESSIONS_TARGET = 5
JOURNAL_ENTRIES_TARGET = 3
MEDITATION_MINUTES_TARGET = 60
DAILY_PRACTICE_TARGET = 7

# Achievement thresholds
SEVEN_DAY_STREAK_DAYS = 7
MINDFUL_WRITER_ENTRIES = 20
ZEN_MASTER_MEDITATIONS = 10
PROGRESS_PIONEER_DAYS = 30
WELLNESS_WARRIOR_ACTIVITIES = 50

WEEK = timedelta(days=7)
TREND_DAYS = 7


def _local(dt: datetime) -> datetime:
    """Naive local datetime for comparisons."""
    if dt.tzinfo is not None:
        return dt.astimezone().replace(tzinfo=None)
    return dt


def _activity_days(activities: Iterable[ActivityRecord]) -> Set[date]:
    return {_local(a.created_at).date() for a in activities}


def _round_half_up(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def calculate_streak(activities: Iterable[ActivityRecord], today: date) -> int:
    """
    Count consecutive active days ending today.

    A day with no activity stops the walk, so no activity today
    means a streak of zero.
    """
    days = _activity_days(activities)
    streak = 0
    current = today
    while current in days:
        streak += 1
        current -= timedelta(days=1)
    return streak


def daily_practice_days(activities: Iterable[ActivityRecord], today: date) -> int:
    """Number of the trailing seven calendar days with any activity."""
    days = _activity_days(activities)
    return sum(1 for i in range(TREND_DAYS) if today - timedelta(days=i) in days)


def mood_trend(activities: Iterable[ActivityRecord], today: date) -> List[MoodTrendPoint]:
    """
    Average mood per day over the trailing week, oldest first.

    Activities without a rating are left out of the average; a day
    without any rating reports 0.
    """
    by_day: Dict[date, List[ActivityRecord]] = {}
    for activity in activities:
        by_day.setdefault(_local(activity.created_at).date(), []).append(activity)

    points = []
    for offset in range(TREND_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        day_activities = by_day.get(day, [])

        ratings = [a.mood_rating for a in day_activities if a.mood_rating is not None]
        average = sum(ratings) / len(ratings) if ratings else 0.0
        sessions = sum(
            1 for a in day_activities if a.activity_type == ActivityType.THERAPY_SESSION
        )

        points.append(MoodTrendPoint(
            date=day.isoformat(),
            mood=_round_half_up(average),
            sessions=sessions,
        ))

    return points


def _weekly_goals(
    therapy: int = 0,
    journal: int = 0,
    meditation_minutes: int = 0,
    practice_days: int = 0,
) -> Dict[str, WeeklyGoal]:
    return {
        "therapy_sessions": WeeklyGoal(current=therapy, target=THERAPY_SESSIONS_TARGET),
        "journal_entries": WeeklyGoal(current=journal, target=JOURNAL_ENTRIES_TARGET),
        "meditation_minutes": WeeklyGoal(current=meditation_minutes, target=MEDITATION_MINUTES_TARGET),
        "daily_practice": WeeklyGoal(current=practice_days, target=DAILY_PRACTICE_TARGET),
    }


def empty_snapshot() -> ProgressSnapshot:
    """All-zero snapshot used when the activity log is unavailable."""
    return ProgressSnapshot(weekly_goals=_weekly_goals())


def compute_stats(
    activities: Iterable[ActivityRecord],
    now: Optional[datetime] = None,
) -> ProgressSnapshot:
    """
    Compute the progress snapshot for one user's activity log.

    Args:
        activities: Activity records in any order
        now: Reference time (defaults to the current local time)

    Returns:
        ProgressSnapshot with counts, streak, weekly goals, mood trend
        and achievements
    """
    activities = list(activities)
    now = _local(now) if now is not None else datetime.now()
    today = now.date()
    week_ago = now - WEEK
    month_ago = now - timedelta(days=PROGRESS_PIONEER_DAYS)

    by_type: Dict[ActivityType, List[ActivityRecord]] = {t: [] for t in ActivityType}
    for activity in activities:
        by_type[activity.activity_type].append(activity)

    def in_week(activity: ActivityRecord) -> bool:
        return week_ago <= _local(activity.created_at) <= now

    therapy = by_type[ActivityType.THERAPY_SESSION]
    journal = by_type[ActivityType.JOURNAL_ENTRY]
    meditations = by_type[ActivityType.MEDITATION]
    wellness = by_type[ActivityType.WELLNESS_ACTIVITY]

    meditation_minutes = sum(a.duration_minutes or 0 for a in meditations)
    weekly_meditation_minutes = sum(
        a.duration_minutes or 0 for a in meditations if in_week(a)
    )

    streak = calculate_streak(activities, today)

    achievements = Achievements(
        seven_day_streak=streak >= SEVEN_DAY_STREAK_DAYS,
        mindful_writer=len(journal) >= MINDFUL_WRITER_ENTRIES,
        zen_master=len(meditations) >= ZEN_MASTER_MEDITATIONS,
        progress_pioneer=any(_local(a.created_at) <= month_ago for a in activities),
        wellness_warrior=len(wellness) >= WELLNESS_WARRIOR_ACTIVITIES,
    )

    snapshot = ProgressSnapshot(
        total_sessions=len(therapy),
        journal_entries=len(journal),
        meditation_minutes=meditation_minutes,
        streak_days=streak,
        activity_counts={t.value: len(records) for t, records in by_type.items()},
        weekly_goals=_weekly_goals(
            therapy=sum(1 for a in therapy if in_week(a)),
            journal=sum(1 for a in journal if in_week(a)),
            meditation_minutes=weekly_meditation_minutes,
            practice_days=daily_practice_days(activities, today),
        ),
        mood_trend=mood_trend(activities, today),
        achievements=achievements,
    )

    logger.debug(
        f"[PROGRESS] {len(activities)} activities: streak={streak}, "
        f"sessions={snapshot.total_sessions}, journal={snapshot.journal_entries}, "
        f"meditation={meditation_minutes}min"
    )
    return snapshot
