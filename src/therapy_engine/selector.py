"""
Deterministic Response Selection.

Narrows a classified user message down to one response pool using a
fixed priority order, then picks one entry from that pool:

1. crisis language -> fixed crisis message (never randomized)
2. greeting -> greeting pool
3. small talk -> casual sub-pool (how are you / thanks / goodbye / other)
4. dominant emotion -> that emotion's pool
5. technique modality (cbt, dbt, mindfulness, solution_focused) -> modality pool
6. generic therapeutic prompts

Selection within a pool is uniform with repeats allowed. Pass a seeded
random.Random to make it reproducible.
"""

import logging
import random
from enum import Enum
from typing import Optional, Sequence

from .classifier import Classification, EmotionTag, classify
from .responses import (
    CASUAL_GENERIC,
    CASUAL_GOODBYE,
    CASUAL_HOW_ARE_YOU,
    CASUAL_THANKS,
    CRISIS_RESPONSE,
    EMOTION_PRECEDENCE,
    EMOTION_RESPONSES,
    GENERAL_RESPONSES,
    GREETING_RESPONSES,
    MODALITY_RESPONSES,
)

logger = logging.getLogger(__name__)


class TherapyType(str, Enum):
    """Conversational modality selected for a chat session."""

    CBT = "cbt"
    DBT = "dbt"
    MINDFULNESS = "mindfulness"
    SOLUTION_FOCUSED = "solution_focused"
    GENERAL = "general"


def pick(pool: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """Uniformly pick one entry from a response pool."""
    return (rng or random).choice(pool)


def dominant_emotion(classification: Classification) -> Optional[EmotionTag]:
    """
    Highest-precedence specific emotion in the classification.

    Returns:
        The emotion tag, or None if only NEUTRAL matched
    """
    for emotion in EMOTION_PRECEDENCE:
        if emotion in classification.emotions:
            return emotion
    return None


def casual_pool(message: str) -> Sequence[str]:
    lowered = message.lower()
    if "how are you" in lowered:
        return CASUAL_HOW_ARE_YOU
    if "thank" in lowered:
        return CASUAL_THANKS
    if "bye" in lowered:
        return CASUAL_GOODBYE
    return CASUAL_GENERIC


def fallback_response(
    therapy_type: str,
    classification: Classification,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Emotion, modality and generic stages of the policy (steps 4-6).

    Used directly when a generated reply was rejected.
    """
    emotion = dominant_emotion(classification)
    if emotion is not None:
        logger.debug(f"[SELECTOR] Using {emotion.value} pool")
        return pick(EMOTION_RESPONSES[emotion], rng)

    modality = _modality_value(therapy_type)
    if modality in MODALITY_RESPONSES:
        logger.debug(f"[SELECTOR] Using {modality} modality pool")
        return pick(MODALITY_RESPONSES[modality], rng)

    logger.debug("[SELECTOR] Using general pool")
    return pick(GENERAL_RESPONSES, rng)


def select_intent_response(
    message: str,
    classification: Classification,
    rng: Optional[random.Random] = None,
) -> Optional[str]:
    """
    Crisis, greeting and small-talk stages of the policy (steps 1-3).

    Returns:
        A response if one of those intents matched, None otherwise
    """
    if classification.is_crisis:
        logger.warning("[SELECTOR] Returning crisis response")
        return CRISIS_RESPONSE

    if classification.is_greeting:
        return pick(GREETING_RESPONSES, rng)

    if classification.is_casual:
        return pick(casual_pool(message), rng)

    return None


def select_response(
    message: str,
    therapy_type: str = TherapyType.GENERAL.value,
    history: Sequence[str] = (),
    classification: Optional[Classification] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Pick a reply for a user message using the deterministic policy.

    Args:
        message: Raw user message
        therapy_type: Active modality (cbt, dbt, mindfulness, solution_focused, general)
        history: Prior turns; read only, not used by the deterministic pools
        classification: Precomputed classification (computed if omitted)
        rng: Random source for pool selection

    Returns:
        Non-empty response ending in sentence punctuation
    """
    if classification is None:
        classification = classify(message)

    response = select_intent_response(message, classification, rng)
    if response is not None:
        return response

    return fallback_response(therapy_type, classification, rng)


def _modality_value(therapy_type) -> str:
    if isinstance(therapy_type, TherapyType):
        return therapy_type.value
    return (therapy_type or "").lower()
