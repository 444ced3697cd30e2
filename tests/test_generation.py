"""
Unit tests for the generative reply stage and the responder pipeline.

These tests verify:
1. Prompt building embeds modality, recent history and the message
2. Raw model output is cleaned and validated
3. Slow, failing or absent backends fall back to the response pools
4. The HTTP backend parses hosted inference replies

These tests run WITHOUT a real text-generation backend.

Usage:
    pytest tests/test_generation.py -v
"""
import asyncio
import random

import httpx
import pytest
from unittest.mock import AsyncMock

from therapy_engine.classifier import EmotionTag
from therapy_engine.generation import (
    DEFAULT_GENERATION_PARAMS,
    HttpTextGenerator,
    build_prompt,
    clean_generated,
    extract_generated_text,
    generate_candidate,
    is_acceptable,
    is_generic_response,
)
from therapy_engine.responder import TherapyResponder
from therapy_engine.responses import (
    CRISIS_RESPONSE,
    EMOTION_RESPONSES,
    GREETING_RESPONSES,
    MODALITY_RESPONSES,
)

GOOD_REPLY = "It sounds like the week has worn you down. What has felt heaviest?"


class FakeGenerator:
    """Generator returning a fixed reply and recording prompts."""

    def __init__(self, reply: str = GOOD_REPLY, delay: float = 0.0):
        self.reply = reply
        self.delay = delay
        self.prompts = []

    async def generate(self, prompt, params):
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        return prompt + " " + self.reply


class TestPromptBuilding:
    """Test therapist prompt construction."""

    def test_prompt_contains_message_and_persona(self):
        prompt = build_prompt("I can't sleep", "cbt")

        assert 'Client: "I can\'t sleep"' in prompt
        assert "Cognitive Behavioral Therapist" in prompt
        assert prompt.endswith("Therapist response:")
        assert "Previous conversation" not in prompt

    def test_prompt_keeps_last_three_turns(self):
        history = ["Client: one", "Therapist: two", "Client: three", "Therapist: four"]
        prompt = build_prompt("five", "general", history)

        assert "Client: one" not in prompt
        assert "Therapist: two\nClient: three\nTherapist: four" in prompt

    def test_unknown_modality_uses_general_persona(self):
        assert "caring, empathetic therapist" in build_prompt("hi", "unknown")


class TestCleaning:
    """Test cleanup of raw model output."""

    def test_strips_echoed_prompt_and_label(self):
        prompt = build_prompt("I feel stuck", "general")
        raw = prompt + "\nTherapist: What does feeling stuck look like for you"

        assert clean_generated(raw, prompt) == "What does feeling stuck look like for you."

    def test_strips_quotes_and_extra_lines(self):
        raw = '"Let\'s slow down together and notice your breath."\nClient: ok'
        assert clean_generated(raw) == "Let's slow down together and notice your breath."

    def test_truncates_to_two_sentences(self):
        raw = "First sentence here. Second one too! Third should go. Fourth as well."
        assert clean_generated(raw) == "First sentence here. Second one too!"

    def test_collapses_whitespace(self):
        assert clean_generated("Response:   what   helps you rest?") == "what helps you rest?"

    def test_empty_output(self):
        assert clean_generated("") == ""


class TestAcceptance:
    """Test acceptance criteria for generated replies."""

    def test_generic_short_reply_rejected(self):
        assert is_generic_response("I understand.") is True
        assert is_acceptable("I understand how you feel.") is False

    def test_too_short_rejected(self):
        assert is_acceptable("Okay then.") is False

    def test_long_reply_with_opener_accepted(self):
        text = "I see how much effort you have been putting into this lately."
        assert is_generic_response(text) is False
        assert is_acceptable(text) is True


class TestGenerateCandidate:
    """Test the bounded generation attempt."""

    @pytest.mark.asyncio
    async def test_no_generator(self):
        assert await generate_candidate(None, "hello", "general") is None

    @pytest.mark.asyncio
    async def test_accepted_reply(self):
        generator = FakeGenerator()
        reply = await generate_candidate(generator, "I'm worn out", "general")

        assert reply == GOOD_REPLY
        assert len(generator.prompts) == 1

    @pytest.mark.asyncio
    async def test_timeout_returns_none(self):
        generator = FakeGenerator(delay=1.0)
        assert await generate_candidate(generator, "hello", "general", timeout=0.05) is None

    @pytest.mark.asyncio
    async def test_backend_error_returns_none(self):
        generator = AsyncMock()
        generator.generate.side_effect = RuntimeError("model not loaded")

        assert await generate_candidate(generator, "hello", "general") is None

    @pytest.mark.asyncio
    async def test_generic_reply_rejected(self):
        generator = FakeGenerator(reply="I see.")
        assert await generate_candidate(generator, "hello", "general") is None

    @pytest.mark.asyncio
    async def test_default_params_passed(self):
        generator = AsyncMock()
        generator.generate.return_value = GOOD_REPLY

        await generate_candidate(generator, "hello", "dbt")

        _, params = generator.generate.call_args.args
        assert params == DEFAULT_GENERATION_PARAMS


class TestTherapyResponder:
    """Test the full reply pipeline."""

    @pytest.mark.asyncio
    async def test_generated_reply_used(self):
        responder = TherapyResponder(generator=FakeGenerator(), rng=random.Random(1))
        reply = await responder.respond("I'm worried about my exams", "general", [])

        assert reply.source == "generated"
        assert reply.text == GOOD_REPLY
        assert EmotionTag.ANXIETY in reply.classification.emotions

    @pytest.mark.asyncio
    async def test_crisis_skips_generator(self):
        generator = FakeGenerator()
        responder = TherapyResponder(generator=generator)

        reply = await responder.respond("I want to end it all", "cbt", [])

        assert reply.text == CRISIS_RESPONSE
        assert reply.source == "intent"
        assert generator.prompts == []

    @pytest.mark.asyncio
    async def test_greeting_skips_generator(self):
        generator = FakeGenerator()
        responder = TherapyResponder(generator=generator, rng=random.Random(1))

        reply = await responder.respond("hey there", "general", [])

        assert reply.text in GREETING_RESPONSES
        assert generator.prompts == []

    @pytest.mark.asyncio
    async def test_slow_generator_falls_back_to_emotion_pool(self):
        responder = TherapyResponder(
            generator=FakeGenerator(delay=1.0), timeout=0.05, rng=random.Random(1)
        )
        reply = await responder.respond("I've been so lonely this month, nobody calls me", "general", [])

        assert reply.source == "pool"
        assert reply.text in EMOTION_RESPONSES[EmotionTag.LONELINESS]

    @pytest.mark.asyncio
    async def test_no_generator_uses_modality_pool(self):
        responder = TherapyResponder(rng=random.Random(1))
        reply = await responder.respond("Today I cleaned the kitchen and read a book", "cbt", [])

        assert reply.source == "pool"
        assert reply.text in MODALITY_RESPONSES["cbt"]

    @pytest.mark.asyncio
    async def test_history_passed_to_prompt(self):
        generator = FakeGenerator()
        responder = TherapyResponder(generator=generator)

        await responder.respond("and it keeps happening", "general", ["Client: my sister yelled at me"])

        assert "Client: my sister yelled at me" in generator.prompts[0]

    def test_reply_to_dict(self):
        reply = asyncio.run(TherapyResponder(rng=random.Random(1)).respond("hello", "general", []))
        data = reply.to_dict()

        assert data["source"] == "intent"
        assert data["classification"]["is_greeting"] is True


class TestHttpTextGenerator:
    """Test the HTTP inference backend."""

    def test_extract_list_reply(self):
        assert extract_generated_text([{"generated_text": "hello"}]) == "hello"

    def test_extract_object_reply(self):
        assert extract_generated_text({"generated_text": "hi"}) == "hi"

    def test_extract_unexpected_reply(self):
        assert extract_generated_text([]) == ""
        assert extract_generated_text(42) == ""

    @pytest.mark.asyncio
    async def test_posts_prompt_and_parses_reply(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("authorization")
            seen["body"] = request.read()
            return httpx.Response(200, json=[{"generated_text": "What helps you unwind?"}])

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            generator = HttpTextGenerator("http://model.local/generate", token="secret", client=client)
            text = await generator.generate("prompt text", {"max_new_tokens": 10})

        assert text == "What helps you unwind?"
        assert seen["auth"] == "Bearer secret"
        assert b"prompt text" in seen["body"]

    @pytest.mark.asyncio
    async def test_http_error_falls_back(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, json={"error": "loading"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            generator = HttpTextGenerator("http://model.local/generate", client=client)
            assert await generate_candidate(generator, "hello", "general") is None
