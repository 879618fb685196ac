"""Query Dispatcher: answers a policy question with one backend call.

Issues the question to the answering backend with a fixed system instruction
and decoding configuration, decodes the JSON payload into a StructuredAnswer,
and classifies failures:

- Capacity (HTTP 429 / RESOURCE_EXHAUSTED): retried with exponential backoff
  (3s, 6s, 12s, 24s), then CapacityExceededError.
- Credential not found: CredentialNotFoundError, never retried.
- Empty payload: EmptyResponseError, never retried.
- Payload that is not a StructuredAnswer: MalformedPayloadError, never retried.
- Anything else: UnclassifiedBackendError, never retried.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Awaitable, Callable

import structlog
from pydantic import ValidationError

from sopassist.agents.backend import AnswerBackend
from sopassist.agents.enums import FailureKind
from sopassist.agents.exceptions import (
    CapacityExceededError,
    CredentialNotFoundError,
    DispatchError,
    EmptyResponseError,
    MalformedPayloadError,
    UnclassifiedBackendError,
)
from sopassist.agents.prompts.sop_expert import SOP_EXPERT_SYSTEM_PROMPT
from sopassist.agents.schemas import StructuredAnswer
from sopassist.core.config import settings

logger = structlog.get_logger()

SleepFunc = Callable[[float], Awaitable[None]]

_CAPACITY_PATTERN = re.compile(r"\b429\b|RESOURCE_EXHAUSTED")
_CREDENTIAL_MARKER = "Requested entity was not found."

_BACKEND_FAILURES: dict[FailureKind, type[DispatchError]] = {
    FailureKind.CAPACITY_EXCEEDED: CapacityExceededError,
    FailureKind.CREDENTIAL_NOT_FOUND: CredentialNotFoundError,
    FailureKind.UNCLASSIFIED: UnclassifiedBackendError,
}


def _error_text(exc: BaseException) -> str:
    text = str(exc)
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message not in text:
        return f"{text} {message}"
    return text


def classify_failure(exc: BaseException) -> FailureKind:
    """Classify an exception raised by the backend call.

    Status codes are read from ``code``, ``status`` or ``status_code`` when
    the exception carries them (google-genai APIError, httpx, etc.).
    """
    for attr in ("code", "status", "status_code"):
        value = getattr(exc, attr, None)
        if value == 429 or value == "RESOURCE_EXHAUSTED":
            return FailureKind.CAPACITY_EXCEEDED

    text = _error_text(exc)
    if _CAPACITY_PATTERN.search(text):
        return FailureKind.CAPACITY_EXCEEDED
    if _CREDENTIAL_MARKER in text:
        return FailureKind.CREDENTIAL_NOT_FOUND
    return FailureKind.UNCLASSIFIED


def decode_answer(payload: str) -> StructuredAnswer:
    """Decode a backend payload into a StructuredAnswer.

    Raises:
        MalformedPayloadError: If the payload is not JSON of the expected shape
    """
    try:
        return StructuredAnswer.model_validate_json(payload)
    except ValidationError as exc:
        raise MalformedPayloadError(
            payload,
            f"Backend response did not match the expected answer format: "
            f"{exc.error_count()} error(s).",
        ) from exc


class QueryDispatcher:
    """Dispatches policy questions to the answering backend."""

    def __init__(
        self,
        backend: AnswerBackend,
        *,
        model: str | None = None,
        temperature: float | None = None,
        max_retries: int | None = None,
        backoff_base_seconds: float | None = None,
        system_instruction: str = SOP_EXPERT_SYSTEM_PROMPT,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self._backend = backend
        self._model = model or settings.gemini_model
        self._temperature = settings.gemini_temperature if temperature is None else temperature
        self._max_retries = settings.query_max_retries if max_retries is None else max_retries
        self._backoff_base_seconds = (
            settings.query_backoff_base_seconds
            if backoff_base_seconds is None
            else backoff_base_seconds
        )
        self._system_instruction = system_instruction
        self._sleep = sleep

    @property
    def backend(self) -> AnswerBackend:
        return self._backend

    @backend.setter
    def backend(self, backend: AnswerBackend) -> None:
        self._backend = backend

    async def aclose(self) -> None:
        """Release the backend's connections."""
        await self._backend.aclose()

    def backoff_delay(self, attempt: int) -> float:
        """Seconds to wait before retrying after failed attempt ``attempt`` (0-based)."""
        return self._backoff_base_seconds * 2**attempt

    async def answer_query(self, question: str) -> StructuredAnswer:
        """Answer a policy question.

        Args:
            question: The user's question, forwarded as the sole user turn

        Returns:
            The decoded StructuredAnswer

        Raises:
            CapacityExceededError: Still rate-limited after all retries
            CredentialNotFoundError: The backend could not find the credential
            EmptyResponseError: The backend returned no payload
            MalformedPayloadError: The payload is not a StructuredAnswer
            UnclassifiedBackendError: Any other backend failure
        """
        log = logger.bind(model=self._model, question_preview=question[:100])
        log.info("query_dispatch_started")

        attempt = 0
        while True:
            try:
                payload = await self._backend.generate(
                    model=self._model,
                    system_instruction=self._system_instruction,
                    question=question,
                    temperature=self._temperature,
                )
            except Exception as exc:
                kind = classify_failure(exc)
                if kind is FailureKind.CAPACITY_EXCEEDED and attempt < self._max_retries:
                    delay = self.backoff_delay(attempt)
                    log.warning(
                        "query_quota_retry",
                        retry=attempt + 1,
                        max_retries=self._max_retries,
                        delay_seconds=delay,
                    )
                    await self._sleep(delay)
                    attempt += 1
                    continue

                log.error(
                    "query_dispatch_failed",
                    failure=kind.value,
                    attempts=attempt + 1,
                    error=str(exc),
                )
                error_class = _BACKEND_FAILURES[kind]
                raise error_class(detail={"attempts": attempt + 1, "error": str(exc)}) from exc

            if not payload:
                log.error("query_dispatch_empty_response", attempts=attempt + 1)
                raise EmptyResponseError()

            try:
                answer = decode_answer(payload)
            except MalformedPayloadError:
                log.error("query_dispatch_malformed_payload", payload_preview=payload[:200])
                raise

            log.info(
                "query_dispatch_complete",
                attempts=attempt + 1,
                references=len(answer.references),
                faqs=len(answer.faqs),
            )
            return answer
