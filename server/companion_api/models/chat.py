"""Chat session and message models."""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, Literal

TherapyTypeName = Literal["cbt", "dbt", "mindfulness", "solution_focused", "general"]
MessageType = Literal["user", "ai"]


class SessionCreate(BaseModel):
    """Request body for starting a chat session."""

    therapy_type: TherapyTypeName = "general"
    title: Optional[str] = None


class ChatSession(BaseModel):
    """A chat session owned by one user."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    therapy_type: TherapyTypeName
    created_at: str
    updated_at: str


class ChatMessage(BaseModel):
    """One message in a chat session."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    session_id: str
    message_type: MessageType
    content: str
    created_at: str


class MessageCreate(BaseModel):
    """Request body for sending a user message."""

    content: str = Field(min_length=1, max_length=4000)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("content must not be blank")
        return value


class ClassificationResult(BaseModel):
    """Intent flags and emotion tags for a message."""

    is_crisis: bool
    is_greeting: bool
    is_casual: bool
    emotions: list[str]


class ChatExchange(BaseModel):
    """A stored user message and the reply stored after it."""

    user_message: ChatMessage
    ai_message: ChatMessage
    source: str
    classification: ClassificationResult


class SessionComplete(BaseModel):
    """Request body for finishing a chat session."""

    duration_minutes: int = Field(ge=0, le=24 * 60)
    mood_rating: Optional[int] = Field(default=None, ge=1, le=10)


class AnalyzeRequest(BaseModel):
    text: str = Field(max_length=4000)


class EmotionCount(BaseModel):
    emotion: str
    count: int


class SessionAnalytics(BaseModel):
    """Emotion summary of a session's user messages."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(serialization_alias="sessionId")
    total_turns: int = Field(serialization_alias="totalTurns")
    common_emotions: list[EmotionCount] = Field(serialization_alias="commonEmotions")
    progress_trend: str = Field(serialization_alias="progressTrend")
