"""
Therapy Responder.

Two-stage reply pipeline: intent replies (crisis, greeting, small talk)
first, then an optional generated reply, then the deterministic emotion,
modality and generic pools. Holds configuration only; conversation
history is passed in on every call.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from .classifier import Classification, classify, emotion_names
from .generation import TextGenerator, generate_candidate
from .selector import TherapyType, fallback_response, select_intent_response

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TherapyReply:
    """A reply plus the stage that produced it."""

    text: str
    source: str  # intent, generated, pool
    classification: Classification

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "text": self.text,
            "source": self.source,
            "classification": self.classification.to_dict(),
        }


class TherapyResponder:
    """
    Produces therapist replies for user messages.

    The generated stage is skipped when no generator is configured, and
    any generator failure falls back to the deterministic pools, so a
    reply is always produced.
    """

    def __init__(
        self,
        generator: Optional[TextGenerator] = None,
        timeout: float = 5.0,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the responder.

        Args:
            generator: Optional text-generation backend
            timeout: Seconds to wait for the generator
            rng: Random source for pool selection
        """
        self.generator = generator
        self.timeout = timeout
        self.rng = rng

    async def respond(
        self,
        message: str,
        therapy_type: str = TherapyType.GENERAL.value,
        history: Sequence[str] = (),
    ) -> TherapyReply:
        """
        Reply to one user message.

        Args:
            message: Raw user message
            therapy_type: Active modality
            history: Prior turns, oldest first

        Returns:
            TherapyReply with the response text and its source
        """
        classification = classify(message)

        intent_reply = select_intent_response(message, classification, self.rng)
        if intent_reply is not None:
            return TherapyReply(intent_reply, "intent", classification)

        generated = await generate_candidate(
            self.generator,
            message,
            therapy_type,
            history,
            timeout=self.timeout,
        )
        if generated is not None:
            return TherapyReply(generated, "generated", classification)

        text = fallback_response(therapy_type, classification, self.rng)
        logger.info(
            f"[RESPONDER] Pool reply for emotions={emotion_names(classification)} "
            f"therapy_type={therapy_type}"
        )
        return TherapyReply(text, "pool", classification)
