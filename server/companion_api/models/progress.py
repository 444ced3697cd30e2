"""Activity log and progress statistics models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, Literal

ActivityTypeName = Literal[
    "therapy_session", "journal_entry", "meditation", "wellness_activity", "login"
]


class ActivityCreate(BaseModel):
    """Request body for recording an activity."""

    activity_type: ActivityTypeName
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    mood_rating: Optional[int] = Field(default=None, ge=1, le=10)
    notes: Optional[str] = None


class Activity(BaseModel):
    """A recorded activity."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    activity_type: ActivityTypeName
    duration_minutes: Optional[int] = None
    mood_rating: Optional[int] = None
    notes: Optional[str] = None
    created_at: str


class GoalPair(BaseModel):
    current: float
    target: float


class WeeklyGoals(BaseModel):
    """Rolling seven-day goal progress."""

    model_config = ConfigDict(populate_by_name=True)

    therapy_sessions: GoalPair = Field(serialization_alias="therapySessions")
    journal_entries: GoalPair = Field(serialization_alias="journalEntries")
    meditation_minutes: GoalPair = Field(serialization_alias="meditationMinutes")
    daily_practice: GoalPair = Field(serialization_alias="dailyPractice")


class MoodTrendEntry(BaseModel):
    date: str
    mood: float
    sessions: int


class AchievementFlags(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    seven_day_streak: bool = Field(serialization_alias="sevenDayStreak")
    mindful_writer: bool = Field(serialization_alias="mindfulWriter")
    zen_master: bool = Field(serialization_alias="zenMaster")
    progress_pioneer: bool = Field(serialization_alias="progressPioneer")
    wellness_warrior: bool = Field(serialization_alias="wellnessWarrior")


class ProgressStats(BaseModel):
    """Dashboard statistics for one user."""

    model_config = ConfigDict(populate_by_name=True)

    total_sessions: int = Field(serialization_alias="totalSessions")
    journal_entries: int = Field(serialization_alias="journalEntries")
    meditation_minutes: int = Field(serialization_alias="meditationMinutes")
    streak_days: int = Field(serialization_alias="streakDays")
    activity_counts: dict[str, int] = Field(serialization_alias="activityCounts")
    weekly_goals: WeeklyGoals = Field(serialization_alias="weeklyGoals")
    mood_trend: list[MoodTrendEntry] = Field(serialization_alias="moodTrend")
    achievements: AchievementFlags
