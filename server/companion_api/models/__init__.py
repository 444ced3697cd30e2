"""Pydantic models for companion API requests and responses."""
from .chat import (
    SessionCreate,
    ChatSession,
    ChatMessage,
    MessageCreate,
    ChatExchange,
    SessionComplete,
    AnalyzeRequest,
    ClassificationResult,
    SessionAnalytics,
)
from .progress import ActivityCreate, Activity, ProgressStats
from .journal import JournalEntryCreate, JournalEntrySaved

__all__ = [
    "SessionCreate",
    "ChatSession",
    "ChatMessage",
    "MessageCreate",
    "ChatExchange",
    "SessionComplete",
    "AnalyzeRequest",
    "ClassificationResult",
    "SessionAnalytics",
    "ActivityCreate",
    "Activity",
    "ProgressStats",
    "JournalEntryCreate",
    "JournalEntrySaved",
]
