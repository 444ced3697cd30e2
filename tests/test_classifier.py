"""
Unit tests for the Emotion and Intent Classifier.

These tests verify:
1. Crisis phrases are detected anywhere, in any case, and short-circuit
2. Greetings and small talk respect their length ceilings
3. Emotion tagging is lexical, multi-label and never empty

Usage:
    pytest tests/test_classifier.py -v
"""
import pytest

from therapy_engine.classifier import (
    CRISIS_KEYWORDS,
    Classification,
    EmotionTag,
    classify,
    detect_emotions,
    is_casual_message,
    is_greeting_message,
    normalize,
)


class TestCrisisDetection:
    """Test crisis phrase detection."""

    @pytest.mark.parametrize("phrase", CRISIS_KEYWORDS)
    def test_every_crisis_phrase_detected(self, phrase):
        """Each listed phrase should flag the message as a crisis."""
        assert classify(f"lately I think {phrase} sometimes").is_crisis is True

    def test_case_insensitive(self):
        assert classify("I Want To DIE").is_crisis is True

    def test_crisis_short_circuits_other_flags(self):
        """A crisis message is never also treated as a greeting or emotion."""
        result = classify("hi, I'm so anxious I want to kill myself")

        assert result.is_crisis is True
        assert result.is_greeting is False
        assert result.is_casual is False
        assert result.emotions == frozenset({EmotionTag.NEUTRAL})

    def test_ordinary_sadness_is_not_crisis(self):
        assert classify("I feel sad today").is_crisis is False


class TestGreetingDetection:
    """Test greeting detection."""

    @pytest.mark.parametrize("text", ["Hi", "hello there", "Hey!", "Good morning.", "  hello  "])
    def test_short_greetings(self, text):
        assert is_greeting_message(text) is True
        assert classify(text).is_greeting is True

    def test_long_message_containing_hi_is_not_greeting(self):
        """Length ceiling should stop false positives on longer messages."""
        text = "hi, I've been feeling really anxious lately and don't know what to do"
        assert classify(text).is_greeting is False

    def test_greeting_must_be_exact_phrase(self):
        assert is_greeting_message("hi mom") is False

    def test_empty_text(self):
        assert is_greeting_message("") is False
        assert is_greeting_message("   ") is False

    def test_normalize(self):
        assert normalize("  Hello,   THERE!! ") == "hello there"


class TestCasualDetection:
    """Test small-talk detection."""

    @pytest.mark.parametrize("text", [
        "How are you?",
        "thanks so much",
        "Thank you!",
        "ok bye",
        "Goodbye for now",
    ])
    def test_casual_phrases(self, text):
        assert is_casual_message(text) is True

    def test_casual_length_ceiling(self):
        text = "thanks, but honestly I have been struggling a lot with work and my family"
        assert len(text) >= 50
        assert is_casual_message(text) is False

    def test_bye_is_whole_word(self):
        assert is_casual_message("maybe") is False


class TestEmotionTagging:
    """Test emotion keyword tagging."""

    def test_single_emotion(self):
        assert detect_emotions("I'm so worried about tomorrow") == frozenset({EmotionTag.ANXIETY})

    def test_multiple_emotions(self):
        emotions = detect_emotions("I'm angry and so lonely since the funeral")
        assert emotions == frozenset({EmotionTag.ANGER, EmotionTag.LONELINESS, EmotionTag.GRIEF})

    def test_case_insensitive(self):
        assert EmotionTag.DEPRESSION in detect_emotions("I feel HOPELESS")

    @pytest.mark.parametrize("text", ["", "   ", "I went to the store", "I made dinner"])
    def test_neutral_when_nothing_matches(self, text):
        assert detect_emotions(text) == frozenset({EmotionTag.NEUTRAL})

    def test_avoids_accidental_substrings(self):
        """Words like 'whatever', 'present' or 'courage' should not tag anger."""
        emotions = detect_emotions("whatever, the present takes courage")
        assert EmotionTag.ANGER not in emotions

    @pytest.mark.parametrize("text", [
        "",
        "hello",
        "I'm furious and terrified",
        "I feel great today, looking forward to the weekend",
    ])
    def test_never_empty(self, text):
        assert len(classify(text).emotions) >= 1

    def test_classification_is_idempotent(self):
        text = "I'm stressed, exhausted and confused about my deadline"
        assert classify(text) == classify(text)

    def test_end_to_end_anxiety_message(self):
        result = classify("I've been feeling really anxious about everything lately")

        assert result == Classification(
            is_crisis=False,
            is_greeting=False,
            is_casual=False,
            emotions=frozenset({EmotionTag.ANXIETY}),
        )

    def test_to_dict(self):
        data = classify("I feel sad and alone").to_dict()

        assert data["is_crisis"] is False
        assert data["emotions"] == ["depression", "loneliness"]
