"""Unit tests for the in-memory chat session."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from sopassist.agents.backend import GeminiBackend
from sopassist.agents.conversations import (
    ABANDONED_MESSAGE,
    CREDENTIAL_REQUIRED_MESSAGE,
    GENERIC_FAILURE_MESSAGE,
    QUOTA_REACHED_MESSAGE,
    STARTER_QUESTIONS,
    ChatSession,
)
from sopassist.agents.enums import FailureKind, MessageRole
from sopassist.agents.exceptions import QueryInProgressError

from conftest import BackendFailure


class TestSubmit:
    async def test_blank_question_is_ignored(self, make_dispatcher, sample_answer_json) -> None:
        dispatcher, backend = make_dispatcher([sample_answer_json])
        session = ChatSession(dispatcher)

        assert await session.submit("   ") is None
        assert session.turns == ()
        assert backend.calls == []

    async def test_successful_answer_is_recorded(self, make_dispatcher, sample_answer_json) -> None:
        dispatcher, _ = make_dispatcher([sample_answer_json])
        session = ChatSession(dispatcher)
        session.credential_prompt_required = True

        turn = await session.submit(STARTER_QUESTIONS[0])

        assert [t.role for t in session.turns] == [MessageRole.USER, MessageRole.MODEL]
        assert session.turns[0].content == STARTER_QUESTIONS[0]
        assert turn is session.turns[1]
        assert turn.failure is None
        answer = ChatSession.parse_answer(turn)
        assert answer is not None
        assert answer.flowchart.edges[0].source == "1"
        assert '"from":"1"' in turn.content
        assert session.credential_prompt_required is False
        assert session.is_busy is False

    async def test_quota_failure_prompts_for_credentials(
        self, make_dispatcher, rate_limit_error
    ) -> None:
        dispatcher, _ = make_dispatcher([rate_limit_error])
        session = ChatSession(dispatcher)

        turn = await session.submit("Petty cash limits?")

        assert turn is not None
        assert turn.content == QUOTA_REACHED_MESSAGE
        assert turn.failure is FailureKind.CAPACITY_EXCEEDED
        assert session.credential_prompt_required is True
        assert ChatSession.parse_answer(turn) is None

    async def test_credential_failure_prompts_for_credentials(
        self, make_dispatcher, credential_error
    ) -> None:
        dispatcher, _ = make_dispatcher([credential_error])
        session = ChatSession(dispatcher)

        turn = await session.submit("Leave policy?")

        assert turn is not None
        assert turn.content == CREDENTIAL_REQUIRED_MESSAGE
        assert turn.failure is FailureKind.CREDENTIAL_NOT_FOUND
        assert session.credential_prompt_required is True

    async def test_malformed_payload_falls_back_to_raw_text(self, make_dispatcher) -> None:
        dispatcher, _ = make_dispatcher(["I can only answer ParkPoint policy questions."])
        session = ChatSession(dispatcher)

        turn = await session.submit("What's the weather?")

        assert turn is not None
        assert turn.content == "I can only answer ParkPoint policy questions."
        assert turn.failure is FailureKind.MALFORMED_PAYLOAD
        assert session.credential_prompt_required is False

    @pytest.mark.parametrize("outcome", ["", BackendFailure("503 UNAVAILABLE", code=503)])
    async def test_other_failures_show_generic_message(self, make_dispatcher, outcome) -> None:
        dispatcher, _ = make_dispatcher([outcome])
        session = ChatSession(dispatcher)

        turn = await session.submit("Audit cycle?")

        assert turn is not None
        assert turn.content == GENERIC_FAILURE_MESSAGE

    async def test_rejects_second_question_while_busy(self) -> None:
        release = asyncio.Event()

        async def slow_answer(question: str) -> object:
            await release.wait()
            raise BackendFailure("never mind")

        dispatcher = MagicMock()
        dispatcher.answer_query = slow_answer
        session = ChatSession(dispatcher)

        first = asyncio.create_task(session.submit("First question"))
        await asyncio.sleep(0)
        assert session.is_busy

        with pytest.raises(QueryInProgressError):
            await session.submit("Second question")

        release.set()
        with pytest.raises(BackendFailure):
            await first
        assert session.is_busy is False
        assert [t.content for t in session.turns] == ["First question"]


class TestAbandon:
    async def test_abandon_without_pending_query(self, make_dispatcher) -> None:
        dispatcher, _ = make_dispatcher([""])
        assert ChatSession(dispatcher).abandon() is False

    async def test_abandon_records_cancelled_turn(self) -> None:
        async def never_answers(question: str) -> object:
            await asyncio.Event().wait()

        dispatcher = MagicMock()
        dispatcher.answer_query = never_answers
        session = ChatSession(dispatcher)

        pending = asyncio.create_task(session.submit("Lost ticket?"))
        await asyncio.sleep(0)

        assert session.abandon() is True
        turn = await pending

        assert turn is not None
        assert turn.content == ABANDONED_MESSAGE
        assert session.is_busy is False

    async def test_abandon_after_answer_arrived_keeps_answer(
        self, make_dispatcher, sample_answer_json
    ) -> None:
        dispatcher, _ = make_dispatcher([sample_answer_json])
        session = ChatSession(dispatcher)

        pending = asyncio.create_task(session.submit("Lost ticket?"))
        await asyncio.sleep(0)
        while session._pending is not None and not session._pending.done():
            await asyncio.sleep(0)

        assert session.abandon() is False
        turn = await pending

        assert turn is not None
        assert turn.failure is None
        assert ChatSession.parse_answer(turn) is not None
        assert turn.content != ABANDONED_MESSAGE


class TestCredentialsAndReferences:
    async def test_select_credentials_swaps_backend(self, make_dispatcher) -> None:
        dispatcher, old_backend = make_dispatcher([""])
        session = ChatSession(dispatcher)
        session.credential_prompt_required = True

        await session.select_credentials("new-key")

        assert isinstance(dispatcher.backend, GeminiBackend)
        assert old_backend.closed is True
        assert session.credential_prompt_required is False

    def test_open_reference_resolves_catalog_document(self, make_dispatcher) -> None:
        dispatcher, _ = make_dispatcher([""])
        session = ChatSession(dispatcher)

        document = session.open_reference("SOP-FIN-01 - Petty Cash Management")

        assert document is not None
        assert document.title == "Petty Cash Management"

    def test_open_reference_unknown(self, make_dispatcher) -> None:
        dispatcher, _ = make_dispatcher([""])
        assert ChatSession(dispatcher).open_reference("Manual Section 4.2") is None

    def test_parse_answer_ignores_user_turns(self, make_dispatcher) -> None:
        from sopassist.agents.schemas import ConversationTurn

        turn = ConversationTurn(role=MessageRole.USER, content='{"summary": "x"}')
        assert ChatSession.parse_answer(turn) is None


async def test_dispatcher_mock_is_awaited() -> None:
    dispatcher = MagicMock()
    dispatcher.answer_query = AsyncMock(side_effect=BackendFailure("boom"))
    session = ChatSession(dispatcher)

    with pytest.raises(BackendFailure):
        await session.submit("Anything")

    dispatcher.answer_query.assert_awaited_once_with("Anything")
