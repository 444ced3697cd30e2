"""
Therapy Engine Module.

Classifies user messages and selects therapist replies, with an optional
generative backend in front of curated response pools.
"""

from .classifier import Classification, EmotionTag, classify
from .selector import TherapyType, select_response
from .generation import HttpTextGenerator, build_prompt, clean_generated
from .responder import TherapyReply, TherapyResponder
from .analytics import summarize_session
from .journal import JournalMood, generate_journal_insight, mood_rating

__all__ = [
    "Classification",
    "EmotionTag",
    "classify",
    "TherapyType",
    "select_response",
    "HttpTextGenerator",
    "build_prompt",
    "clean_generated",
    "TherapyReply",
    "TherapyResponder",
    "summarize_session",
    "JournalMood",
    "generate_journal_insight",
    "mood_rating",
]
