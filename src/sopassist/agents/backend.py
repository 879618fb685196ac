"""Answering backend adapter.

The dispatcher talks to the language model through the small AnswerBackend
protocol so that retries and failure classification can be exercised against
a simulated backend. GeminiBackend is the production implementation.
"""

from __future__ import annotations

from typing import Protocol

import structlog
from google import genai
from google.genai import types

logger = structlog.get_logger()


class AnswerBackend(Protocol):
    """Remote procedure: text query + system instruction -> JSON text."""

    async def generate(
        self,
        *,
        model: str,
        system_instruction: str,
        question: str,
        temperature: float,
    ) -> str | None: ...

    async def aclose(self) -> None: ...


class GeminiBackend:
    """AnswerBackend backed by the Google Gen AI SDK.

    One backend holds one API key for its lifetime; ChatSession.select_credentials()
    swaps in a new backend and closes the old one. The client is created on the
    first call and reused until aclose().
    """

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate(
        self,
        *,
        model: str,
        system_instruction: str,
        question: str,
        temperature: float,
    ) -> str | None:
        client = self._get_client()

        logger.debug("gemini_generate_content", model=model, question_length=len(question))

        response = await client.aio.models.generate_content(
            model=model,
            contents=[types.Content(role="user", parts=[types.Part(text=question)])],
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                response_mime_type="application/json",
                temperature=temperature,
            ),
        )
        return response.text

    async def aclose(self) -> None:
        """Close the underlying HTTP clients."""
        if self._client is None:
            return
        client, self._client = self._client, None
        await client.aio.aclose()
        client.close()
