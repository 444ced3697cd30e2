"""
Emotion and Intent Classifier.

Scans free text for keyword membership across a fixed taxonomy of
emotional categories, and detects crisis language, greetings and
small talk. Matching is purely lexical (case-insensitive substrings),
so identical input always produces an identical result.

Known limitation: crisis detection only recognises the listed phrases.
Paraphrased crisis language can be missed.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Tuple

logger = logging.getLogger(__name__)


class EmotionTag(str, Enum):
    """Emotion taxonomy used to pick response pools."""

    ANXIETY = "anxiety"
    DEPRESSION = "depression"
    ANGER = "anger"
    GRIEF = "grief"
    STRESS = "stress"
    LONELINESS = "loneliness"
    FEAR = "fear"
    SHAME = "shame"
    CONFUSION = "confusion"
    HAPPINESS = "happiness"
    HOPE = "hope"
    NEUTRAL = "neutral"


CRISIS_KEYWORDS: Tuple[str, ...] = (
    "kill myself",
    "suicide",
    "suicidal",
    "want to die",
    "end it all",
    "end my life",
    "hurt myself",
    "self harm",
    "self-harm",
    "not worth living",
)

GREETINGS: FrozenSet[str] = frozenset({
    "hi",
    "hii",
    "hello",
    "hey",
    "hiya",
    "howdy",
    "greetings",
    "yo",
    "hi there",
    "hello there",
    "hey there",
    "good morning",
    "good afternoon",
    "good evening",
})

CASUAL_PHRASES: Tuple[str, ...] = (
    "how are you",
    "how's it going",
    "hows it going",
    "what's up",
    "whats up",
    "thanks",
    "thank you",
    "bye",
    "goodbye",
    "see you",
    "good night",
    "nice to meet you",
)

GREETING_MAX_LENGTH = 25
CASUAL_MAX_LENGTH = 50

# Substrings are chosen to avoid common accidental matches
# (e.g. "mad" in "made", "rage" in "courage", "numb" in "number").
EMOTION_KEYWORDS: Dict[EmotionTag, Tuple[str, ...]] = {
    EmotionTag.ANXIETY: (
        "anxious", "anxiety", "worried", "worry", "nervous", "panic",
        "scared", "frightened", "overwhelmed", "on edge",
    ),
    EmotionTag.DEPRESSION: (
        "sad", "depressed", "depression", "hopeless", "empty", "worthless",
        "feel numb", "feeling numb", "numbness", "tired of", "miserable",
        "down lately", "feeling down", "unhappy",
    ),
    EmotionTag.ANGER: (
        "angry", "furious", "enraged", "rage at", "mad at", "so mad",
        "frustrated", "irritated", "i hate", "hatred", "resentful", "resentment",
    ),
    EmotionTag.GRIEF: (
        "loss", "died", "death", "passed away", "miss them", "miss him",
        "miss her", "funeral", "mourning", "grieving", "grief",
    ),
    EmotionTag.STRESS: (
        "stressed", "stressful", "stress", "pressure", "burnout",
        "burned out", "burnt out", "exhausted", "overworked", "deadline",
    ),
    EmotionTag.LONELINESS: (
        "lonely", "loneliness", "alone", "isolated", "disconnected",
        "withdrawn", "no friends", "nobody cares",
    ),
    EmotionTag.FEAR: (
        "afraid", "terrified", "phobia", "terror", "dread", "fear",
    ),
    EmotionTag.SHAME: (
        "ashamed", "shame", "embarrassed", "guilty", "humiliated", "disgrace",
    ),
    EmotionTag.CONFUSION: (
        "confused", "uncertain", "unclear", "mixed up", "don't know what to do",
        "dont know what to do", "torn between",
    ),
    EmotionTag.HAPPINESS: (
        "happy", "joyful", "excited", "grateful", "thankful", "wonderful",
        "awesome", "feeling good", "feel good", "great day",
    ),
    EmotionTag.HOPE: (
        "hopeful", "optimistic", "looking forward", "feeling better",
        "getting better",
    ),
}

_PUNCTUATION = re.compile(r"[^\w\s']")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Classification:
    """Result of classifying one user message."""

    is_crisis: bool = False
    is_greeting: bool = False
    is_casual: bool = False
    emotions: FrozenSet[EmotionTag] = field(
        default_factory=lambda: frozenset({EmotionTag.NEUTRAL})
    )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "is_crisis": self.is_crisis,
            "is_greeting": self.is_greeting,
            "is_casual": self.is_casual,
            "emotions": sorted(e.value for e in self.emotions),
        }


def normalize(text: str) -> str:
    """Lowercase, strip punctuation and collapse whitespace."""
    stripped = _PUNCTUATION.sub("", text.lower())
    return _WHITESPACE.sub(" ", stripped).strip()


def is_crisis_message(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in CRISIS_KEYWORDS)


def is_greeting_message(text: str) -> bool:
    """Short messages that are nothing but a greeting."""
    stripped = text.strip()
    if not stripped or len(stripped) >= GREETING_MAX_LENGTH:
        return False
    return normalize(stripped) in GREETINGS


def is_casual_message(text: str) -> bool:
    """Short conversational fillers such as thanks or goodbyes."""
    stripped = text.strip()
    if not stripped or len(stripped) >= CASUAL_MAX_LENGTH:
        return False

    normalized = normalize(stripped)
    for phrase in CASUAL_PHRASES:
        # Short single words must match a whole word
        if len(phrase) <= 4 and " " not in phrase:
            if phrase in normalized.split():
                return True
        elif phrase in stripped.lower() or phrase in normalized:
            return True
    return False


def detect_emotions(text: str) -> FrozenSet[EmotionTag]:
    """
    Tag a message with every emotion category it mentions.

    Returns:
        Non-empty set of tags; {NEUTRAL} when nothing matched
    """
    lowered = text.lower()
    detected = {
        emotion
        for emotion, keywords in EMOTION_KEYWORDS.items()
        if any(keyword in lowered for keyword in keywords)
    }
    return frozenset(detected) if detected else frozenset({EmotionTag.NEUTRAL})


def classify(text: str) -> Classification:
    """
    Classify a user message.

    Crisis language short-circuits every other check.

    Args:
        text: Raw user message (may be empty)

    Returns:
        Classification with intent flags and emotion tags
    """
    text = text or ""

    if is_crisis_message(text):
        logger.warning("[CLASSIFIER] Crisis language detected")
        return Classification(is_crisis=True)

    result = Classification(
        is_greeting=is_greeting_message(text),
        is_casual=is_casual_message(text),
        emotions=detect_emotions(text),
    )

    logger.debug(
        f"[CLASSIFIER] greeting={result.is_greeting} casual={result.is_casual} "
        f"emotions={sorted(e.value for e in result.emotions)}"
    )
    return result


def emotion_names(classification: Classification) -> List[str]:
    """Sorted emotion tag values, for logging and prompts."""
    return sorted(e.value for e in classification.emotions)
