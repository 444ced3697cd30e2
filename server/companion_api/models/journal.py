"""Journal entry models."""
from pydantic import BaseModel, Field
from typing import Literal

JournalMoodName = Literal["happy", "neutral", "sad", "anxious", "excited"]


class JournalEntryCreate(BaseModel):
    """Request body for saving a journal entry."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    mood: JournalMoodName = "neutral"
    tags: list[str] = Field(default_factory=list)


class JournalEntrySaved(BaseModel):
    """Result of saving a journal entry."""

    activity_id: str
    mood_rating: int
    insight: str
    created_at: str
