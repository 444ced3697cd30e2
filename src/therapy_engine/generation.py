"""
Generative Reply Stage.

Builds a therapist prompt, calls an optional text-generation backend
with a bounded timeout, cleans the raw output and decides whether it is
good enough to send. Any failure yields no candidate so that the
deterministic pools can answer instead.
"""

import asyncio
import logging
import re
from typing import Any, Dict, Optional, Protocol, Sequence

import httpx

logger = logging.getLogger(__name__)

DEFAULT_GENERATION_PARAMS: Dict[str, Any] = {
    "max_new_tokens": 80,
    "temperature": 0.8,
    "do_sample": True,
    "repetition_penalty": 1.2,
}

HISTORY_TURNS = 3
MIN_GENERATED_LENGTH = 15
GENERIC_LENGTH_CEILING = 30
MAX_SENTENCES = 2

GENERIC_OPENERS = (
    "i understand",
    "that sounds",
    "can you tell me more",
    "how does that make you feel",
    "i see",
    "thank you for sharing",
)

PERSONALITIES: Dict[str, str] = {
    "cbt": (
        "a warm, insightful Cognitive Behavioral Therapist. You help clients "
        "examine their thought patterns with gentle curiosity and ask about the "
        "connection between thoughts, feelings, and behaviors."
    ),
    "dbt": (
        "a compassionate Dialectical Behavior Therapist. You help clients build "
        "emotional regulation and mindfulness skills, validating their emotions "
        "while teaching practical coping strategies."
    ),
    "mindfulness": (
        "a calm mindfulness-based therapist. You gently guide clients back to the "
        "present moment and encourage non-judgmental awareness of their experience."
    ),
    "solution_focused": (
        "a solution-focused brief therapist. You focus on the client's strengths, "
        "past successes, and small concrete steps toward the future they want."
    ),
    "general": (
        "a caring, empathetic therapist. You create a safe space for people to "
        "share their feelings, listen actively, and ask open-ended questions."
    ),
}

ROLE_LABEL = re.compile(r"^\s*(therapist response|therapist|client|response|assistant)\s*:\s*", re.I)
SENTENCE_END = re.compile(r"(?<=[.!?])\s+")


class TextGenerator(Protocol):
    """Anything that can turn a prompt into generated text."""

    async def generate(self, prompt: str, params: Dict[str, Any]) -> str:
        ...


class HttpTextGenerator:
    """
    Text generation backend reached over HTTP.

    Posts {"inputs": prompt, "parameters": params} and reads
    `generated_text` from either a list or an object reply, which covers
    hosted inference endpoints for text-generation models.
    """

    def __init__(
        self,
        url: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.token = token
        self.timeout = timeout
        self._client = client

    async def generate(self, prompt: str, params: Dict[str, Any]) -> str:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        payload = {"inputs": prompt, "parameters": params}

        if self._client is not None:
            response = await self._client.post(self.url, json=payload, headers=headers, timeout=self.timeout)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.url, json=payload, headers=headers)

        response.raise_for_status()
        return extract_generated_text(response.json())


def extract_generated_text(data: Any) -> str:
    """Pull `generated_text` out of a list or dict response body."""
    if isinstance(data, list):
        data = data[0] if data else {}
    if isinstance(data, dict):
        return str(data.get("generated_text") or "")
    if isinstance(data, str):
        return data
    return ""


def build_prompt(message: str, therapy_type: str, history: Sequence[str] = ()) -> str:
    """
    Build the therapist prompt for the generative backend.

    Args:
        message: Current user message
        therapy_type: Active modality; unknown values use the general persona
        history: Prior turns, oldest first; only the last few are embedded
    """
    personality = PERSONALITIES.get(str(getattr(therapy_type, "value", therapy_type)), PERSONALITIES["general"])
    recent = "\n".join(list(history)[-HISTORY_TURNS:])
    context = f"Previous conversation:\n{recent}\n\n" if recent else ""
    return f'You are {personality}\n\n{context}Client: "{message}"\n\nTherapist response:'


def clean_generated(raw: str, prompt: str = "") -> str:
    """
    Tidy raw model output into a short reply.

    Strips an echoed prompt, role labels and surrounding quotes, keeps the
    first line and at most two sentences, and ends it with punctuation.
    """
    cleaned = raw or ""
    if prompt:
        cleaned = cleaned.replace(prompt, "")
    cleaned = cleaned.strip()
    cleaned = ROLE_LABEL.sub("", cleaned)
    cleaned = cleaned.strip().strip("\"'").strip()

    lines = cleaned.splitlines()
    cleaned = lines[0] if lines else ""
    cleaned = re.sub(r"\s+", " ", cleaned).strip().strip("\"'").strip()

    sentences = [s for s in SENTENCE_END.split(cleaned) if s]
    cleaned = " ".join(sentences[:MAX_SENTENCES])

    if cleaned and cleaned[-1] not in ".!?":
        cleaned += "."
    return cleaned


def is_generic_response(text: str) -> bool:
    """Bland openers that are too short to add anything."""
    lowered = text.lower()
    return len(text) < GENERIC_LENGTH_CEILING and any(
        phrase in lowered for phrase in GENERIC_OPENERS
    )


def is_acceptable(text: str) -> bool:
    return len(text) >= MIN_GENERATED_LENGTH and not is_generic_response(text)


async def generate_candidate(
    generator: Optional[TextGenerator],
    message: str,
    therapy_type: str,
    history: Sequence[str] = (),
    timeout: float = 5.0,
    params: Optional[Dict[str, Any]] = None,
) -> Optional[str]:
    """
    Try to produce an acceptable generated reply.

    Args:
        generator: Backend to call (None when unavailable)
        message: Current user message
        therapy_type: Active modality
        history: Prior turns
        timeout: Seconds to wait for the backend
        params: Generation parameters (defaults to DEFAULT_GENERATION_PARAMS)

    Returns:
        Cleaned reply, or None if the backend was unavailable, slow,
        failing, or produced something unusable
    """
    if generator is None:
        return None

    prompt = build_prompt(message, therapy_type, history)

    try:
        raw = await asyncio.wait_for(
            generator.generate(prompt, params or DEFAULT_GENERATION_PARAMS),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logger.warning(f"[GENERATION] Backend did not answer within {timeout}s")
        return None
    except httpx.HTTPError as e:
        logger.warning(f"[GENERATION] Backend request failed: {e}")
        return None
    except Exception as e:
        logger.error(f"[GENERATION] Backend error: {e}")
        return None

    candidate = clean_generated(raw, prompt)
    if not is_acceptable(candidate):
        logger.info(f"[GENERATION] Rejected generated reply ({len(candidate)} chars)")
        return None

    logger.debug(f"[GENERATION] Accepted generated reply ({len(candidate)} chars)")
    return candidate
