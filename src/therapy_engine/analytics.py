"""Emotion summaries over the turns of a conversation."""

from collections import Counter
from typing import Dict, Iterable, List

from .classifier import EmotionTag

NEGATIVE_EMOTIONS = frozenset({
    EmotionTag.ANXIETY,
    EmotionTag.DEPRESSION,
    EmotionTag.ANGER,
    EmotionTag.GRIEF,
    EmotionTag.STRESS,
})

TREND_WINDOW = 5


def common_emotions(emotion_sets: Iterable[Iterable[EmotionTag]]) -> List[Dict]:
    """Emotion counts across turns, most frequent first."""
    counts = Counter(
        EmotionTag(e).value for emotions in emotion_sets for e in emotions
    )
    return [
        {"emotion": emotion, "count": count}
        for emotion, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]


def progress_trend(emotion_sets: List[Iterable[EmotionTag]]) -> str:
    """
    Rough direction of the last few turns.

    A turn counts as positive when it has no negative emotion or was
    tagged neutral.

    Returns:
        neutral, improving, needs_attention or stable
    """
    if len(emotion_sets) < 2:
        return "neutral"

    recent = [set(EmotionTag(e) for e in emotions) for emotions in emotion_sets[-TREND_WINDOW:]]
    positive = sum(
        1 for emotions in recent
        if not (emotions & NEGATIVE_EMOTIONS) or EmotionTag.NEUTRAL in emotions
    )

    if positive > len(recent) * 0.6:
        return "improving"
    if positive < len(recent) * 0.4:
        return "needs_attention"
    return "stable"


def summarize_session(emotion_sets: Iterable[Iterable[EmotionTag]]) -> Dict:
    """
    Summarize the emotions seen across a conversation.

    Args:
        emotion_sets: Emotion tags of each user turn, oldest first

    Returns:
        Dict with total_turns, common_emotions and progress_trend
    """
    turns = [list(emotions) for emotions in emotion_sets]
    return {
        "total_turns": len(turns),
        "common_emotions": common_emotions(turns),
        "progress_trend": progress_trend(turns),
    }
