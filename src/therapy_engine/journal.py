"""Journal mood ratings and reflective insights."""

import random
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple


class JournalMood(str, Enum):
    """Mood picked when writing a journal entry."""

    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    ANXIOUS = "anxious"
    EXCITED = "excited"


MOOD_TO_RATING: Dict[JournalMood, int] = {
    JournalMood.HAPPY: 8,
    JournalMood.EXCITED: 9,
    JournalMood.NEUTRAL: 5,
    JournalMood.SAD: 3,
    JournalMood.ANXIOUS: 2,
}

JOURNAL_INSIGHTS: Dict[JournalMood, Tuple[str, ...]] = {
    JournalMood.HAPPY: (
        "Your positive energy is evident in this entry. Consider what contributed to this feeling so you can recreate it in the future.",
        "It's lovely to see your joy shine through. Gratitude and positive experiences like these can be powerful mood boosters.",
        "This happiness seems genuine and grounded. Remember this feeling during more challenging times.",
    ),
    JournalMood.SAD: (
        "I notice you're experiencing some difficult emotions. It's okay to feel sad; these feelings are valid and temporary.",
        "Your willingness to express these feelings shows emotional awareness. Consider reaching out to supportive people in your life.",
        "Sadness can be a natural response to life's challenges. Be gentle with yourself during this time.",
    ),
    JournalMood.ANXIOUS: (
        "I can sense the worry in your words. Try some deep breathing, and remember that anxiety often makes things seem worse than they are.",
        "Anxiety can feel overwhelming, but you're not alone. Consider breaking your concerns down into smaller, manageable pieces.",
        "Your feelings are valid. Writing about anxiety can help reduce its power over us.",
    ),
    JournalMood.NEUTRAL: (
        "Stability in mood can be a sign of emotional balance. How do you feel about this sense of equilibrium?",
        "Neutral days give us space to reflect clearly. What insights are emerging for you today?",
        "This steady emotional state might be an opportunity to focus on goals or relationships.",
    ),
    JournalMood.EXCITED: (
        "Your enthusiasm is contagious! This energy could be channeled into creative or productive activities.",
        "Excitement can be a powerful motivator. What are you most looking forward to?",
        "This positive energy is wonderful to see. Consider how you can keep this momentum going.",
    ),
}


def parse_mood(mood: str) -> JournalMood:
    """Journal mood for a raw value; unknown values become NEUTRAL."""
    try:
        return JournalMood(str(getattr(mood, "value", mood)).lower())
    except ValueError:
        return JournalMood.NEUTRAL


def mood_rating(mood: str) -> int:
    return MOOD_TO_RATING[parse_mood(mood)]


def generate_journal_insight(mood: str, rng: Optional[random.Random] = None) -> str:
    """Pick a reflective insight for a journal entry's mood."""
    pool: Sequence[str] = JOURNAL_INSIGHTS[parse_mood(mood)]
    return (rng or random).choice(pool)


def journal_notes(title: str, tags: Sequence[str]) -> str:
    """Activity notes recorded for a saved journal entry."""
    if not tags:
        return title
    return f"{title}: {', '.join(tags)}"
