"""
Unit tests for deterministic response selection.

These tests verify the priority order of the selection policy:
crisis > greeting > small talk > dominant emotion > modality > generic,
and that replies always come from the expected pool.

Usage:
    pytest tests/test_selector.py -v
"""
import random

import pytest

from therapy_engine.classifier import Classification, EmotionTag, classify
from therapy_engine.responses import (
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
from therapy_engine.selector import (
    TherapyType,
    dominant_emotion,
    fallback_response,
    select_response,
)


def _all_pools():
    pools = [GREETING_RESPONSES, CASUAL_HOW_ARE_YOU, CASUAL_THANKS, CASUAL_GOODBYE,
             CASUAL_GENERIC, GENERAL_RESPONSES]
    pools.extend(EMOTION_RESPONSES.values())
    pools.extend(MODALITY_RESPONSES.values())
    return pools


class TestCrisisResponse:
    """Crisis replies are fixed and take precedence over everything."""

    @pytest.mark.parametrize("text", [
        "I want to kill myself",
        "Hi. Sometimes I think about SUICIDE",
        "thanks, but honestly life is not worth living",
        "I'm anxious and want to hurt myself",
    ])
    def test_crisis_message_is_exact(self, text):
        for therapy_type in TherapyType:
            assert select_response(text, therapy_type.value) == CRISIS_RESPONSE

    def test_crisis_message_names_hotline(self):
        assert "988" in CRISIS_RESPONSE

    def test_crisis_not_randomized(self):
        replies = {
            select_response("suicide", rng=random.Random(seed)) for seed in range(10)
        }
        assert replies == {CRISIS_RESPONSE}


class TestIntentResponses:
    """Greeting and small-talk replies."""

    def test_greeting_pool(self, rng):
        assert select_response("Hello!", rng=rng) in GREETING_RESPONSES

    def test_how_are_you(self, rng):
        assert select_response("how are you?", rng=rng) in CASUAL_HOW_ARE_YOU

    def test_thanks(self, rng):
        assert select_response("thank you so much", rng=rng) in CASUAL_THANKS

    def test_goodbye(self, rng):
        assert select_response("ok bye", rng=rng) in CASUAL_GOODBYE
        assert select_response("goodbye!", rng=rng) in CASUAL_GOODBYE

    def test_other_casual(self, rng):
        assert select_response("what's up", rng=rng) in CASUAL_GENERIC

    def test_casual_beats_emotion(self, rng):
        """Short thanks mentioning an emotion is still small talk."""
        assert select_response("thanks, I feel less sad", rng=rng) in CASUAL_THANKS


class TestEmotionResponses:
    """Dominant emotion selection."""

    def test_every_emotion_pool_has_three_entries(self):
        for emotion in EMOTION_PRECEDENCE:
            assert len(EMOTION_RESPONSES[emotion]) >= 3

    def test_anxiety_pool(self, rng):
        reply = select_response(
            "I've been feeling really anxious about everything lately", "general", [], rng=rng
        )
        assert reply in EMOTION_RESPONSES[EmotionTag.ANXIETY]

    def test_precedence_anxiety_over_depression(self):
        classification = Classification(
            emotions=frozenset({EmotionTag.DEPRESSION, EmotionTag.ANXIETY})
        )
        assert dominant_emotion(classification) == EmotionTag.ANXIETY

    def test_precedence_grief_over_loneliness(self):
        classification = Classification(
            emotions=frozenset({EmotionTag.LONELINESS, EmotionTag.GRIEF})
        )
        assert dominant_emotion(classification) == EmotionTag.GRIEF

    def test_neutral_has_no_dominant_emotion(self):
        assert dominant_emotion(Classification()) is None

    def test_emotion_beats_modality(self, rng):
        reply = select_response("I am so angry at my boss right now today", "cbt", rng=rng)
        assert reply in EMOTION_RESPONSES[EmotionTag.ANGER]


class TestModalityAndFallback:
    """Modality pools and the generic fallback."""

    @pytest.mark.parametrize("therapy_type", ["cbt", "dbt", "mindfulness", "solution_focused"])
    def test_modality_pool_for_neutral_message(self, therapy_type, rng):
        reply = select_response("I went for a walk and then made some dinner", therapy_type, rng=rng)
        assert reply in MODALITY_RESPONSES[therapy_type]

    def test_modality_enum_accepted(self, rng):
        reply = fallback_response(TherapyType.DBT, Classification(), rng)
        assert reply in MODALITY_RESPONSES["dbt"]

    def test_general_fallback(self, rng):
        reply = select_response("I went for a walk and then made some dinner", "general", rng=rng)
        assert reply in GENERAL_RESPONSES

    def test_unknown_modality_uses_general_pool(self, rng):
        reply = select_response("I went for a walk and then made some dinner", "psychoanalysis", rng=rng)
        assert reply in GENERAL_RESPONSES

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_input_does_not_crash(self, text, rng):
        assert select_response(text, "general", rng=rng) in GENERAL_RESPONSES

    def test_history_not_mutated(self, rng):
        history = ["Client: hello", "Therapist: hi"]
        select_response("I feel lost and confused", "general", history, rng=rng)
        assert history == ["Client: hello", "Therapist: hi"]


class TestSelectionProperties:
    """Properties shared by all replies."""

    def test_seeded_selection_is_reproducible(self):
        text = "I'm so stressed about work"
        first = [select_response(text, rng=random.Random(3)) for _ in range(5)]
        second = [select_response(text, rng=random.Random(3)) for _ in range(5)]
        assert first == second

    def test_all_pool_entries_end_with_punctuation(self):
        for pool in _all_pools():
            for entry in pool:
                assert entry and entry[-1] in ".!?"

    def test_precomputed_classification_used(self, rng):
        classification = classify("I feel hopeless")
        reply = select_response("I feel hopeless", classification=classification, rng=rng)
        assert reply in EMOTION_RESPONSES[EmotionTag.DEPRESSION]
