"""Shared test fixtures.

The answering backend is always simulated: ScriptedBackend plays back a list
of outcomes (payload strings or exceptions) and records every call, and
RecordingSleep captures backoff delays instead of waiting.
"""

from __future__ import annotations

import json

import pytest

from sopassist.agents.dispatcher import QueryDispatcher

SAMPLE_ANSWER = {
    "summary": (
        "• Request the licence plate number (SOP-OPS-01).\n"
        "• Run an LPR search in the PMS.\n"
        "• Charge from the recorded entry time."
    ),
    "roles": [
        {"position": "Valet Attendant", "responsibility": "Collects plate number from customer"},
        {"position": "Shift Supervisor", "responsibility": "Approves lost ticket fee"},
    ],
    "flowchart": {
        "nodes": [
            {"id": "1", "text": "Customer reports lost ticket", "type": "start"},
            {"id": "2", "text": "LPR search", "type": "process"},
            {"id": "3", "text": "Plate found?", "type": "decision"},
            {"id": "4", "text": "Charge actual stay", "type": "end"},
        ],
        "edges": [
            {"from": "1", "to": "2"},
            {"from": "2", "to": "3"},
            {"from": "3", "to": "4", "label": "Yes"},
        ],
    },
    "references": ["SOP-OPS-01 - Lost Ticket Procedure"],
    "faqs": [
        "What if the LPR search fails?",
        "How is the lost ticket fee calculated?",
        "Who approves a fee waiver?",
        "How long is CCTV footage retained?",
        "Can the customer pay via the app?",
    ],
}


class BackendFailure(Exception):
    """Simulated backend exception carrying an optional status code."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class ScriptedBackend:
    """AnswerBackend that returns or raises the scripted outcomes in order."""

    def __init__(self, outcomes: list[object]) -> None:
        self._outcomes = list(outcomes)
        self.calls: list[dict[str, object]] = []
        self.closed = False

    async def generate(
        self,
        *,
        model: str,
        system_instruction: str,
        question: str,
        temperature: float,
    ) -> str | None:
        self.calls.append(
            {
                "model": model,
                "system_instruction": system_instruction,
                "question": question,
                "temperature": temperature,
            }
        )
        outcome = self._outcomes.pop(0) if len(self._outcomes) > 1 else self._outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome  # type: ignore[return-value]

    async def aclose(self) -> None:
        self.closed = True


class RecordingSleep:
    """Drop-in for asyncio.sleep that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def sample_answer_json() -> str:
    return json.dumps(SAMPLE_ANSWER)


@pytest.fixture
def rate_limit_error() -> BackendFailure:
    return BackendFailure("429 RESOURCE_EXHAUSTED. Quota exceeded.", code=429)


@pytest.fixture
def credential_error() -> BackendFailure:
    return BackendFailure("404 NOT_FOUND. Requested entity was not found.", code=404)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_dispatcher(recording_sleep: RecordingSleep):
    """Build a QueryDispatcher over a ScriptedBackend with recorded sleeps."""

    def _make(outcomes: list[object]) -> tuple[QueryDispatcher, ScriptedBackend]:
        backend = ScriptedBackend(outcomes)
        dispatcher = QueryDispatcher(
            backend,
            model="gemini-test",
            temperature=0.1,
            max_retries=4,
            backoff_base_seconds=3.0,
            sleep=recording_sleep,
        )
        return dispatcher, backend

    return _make
