"""Chat session: in-memory conversation around the query dispatcher.

Holds the append-only list of turns for one interactive user, allows a single
query in flight at a time, and turns classified dispatch failures into the
messages shown to the user. Nothing here is persisted.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from sopassist.agents.backend import GeminiBackend
from sopassist.agents.enums import FailureKind, MessageRole
from sopassist.agents.exceptions import DispatchError, MalformedPayloadError, QueryInProgressError
from sopassist.agents.schemas import ConversationTurn, StructuredAnswer
from sopassist.catalog.lookup import Catalog, default_catalog

if TYPE_CHECKING:
    from sopassist.agents.dispatcher import QueryDispatcher
    from sopassist.catalog.schemas import ProcedureDocument

logger = structlog.get_logger()

STARTER_QUESTIONS = (
    "Procedure for lost valet tickets?",
    "Employee recruitment request process?",
    "Revenue reconciliation thresholds?",
    "Petty cash local payment limits?",
)

CREDENTIAL_REQUIRED_MESSAGE = (
    "API Key selection required. The previous key could not be found. "
    "Please select a valid API key from a paid GCP project."
)
QUOTA_REACHED_MESSAGE = (
    "Quota Limit Reached. The free API tier has strict limits. Please wait 60 seconds "
    "or switch to a paid project API key for uninterrupted access."
)
GENERIC_FAILURE_MESSAGE = (
    "I encountered an error retrieving that policy. Please try again or rephrase your question."
)
ABANDONED_MESSAGE = "Request cancelled before the policy answer arrived."

# Failures that should send the user back to credential selection
_CREDENTIAL_PROMPT_FAILURES = {FailureKind.CREDENTIAL_NOT_FOUND, FailureKind.CAPACITY_EXCEEDED}


class ChatSession:
    """One user's in-memory conversation with the SOP assistant."""

    def __init__(self, dispatcher: QueryDispatcher, catalog: Catalog = default_catalog) -> None:
        self._dispatcher = dispatcher
        self._catalog = catalog
        self._turns: list[ConversationTurn] = []
        self._pending: asyncio.Task[StructuredAnswer] | None = None
        self._abandoned = False
        self.credential_prompt_required = False

    @property
    def turns(self) -> tuple[ConversationTurn, ...]:
        return tuple(self._turns)

    @property
    def is_busy(self) -> bool:
        return self._pending is not None

    async def submit(self, question: str) -> ConversationTurn | None:
        """Ask a question and record the exchange.

        Blank questions are ignored. Returns the model turn that was appended,
        or None when nothing was submitted.

        Raises:
            QueryInProgressError: If another question is still being answered
        """
        if not question.strip():
            return None
        if self._pending is not None:
            raise QueryInProgressError()

        self._append(ConversationTurn(role=MessageRole.USER, content=question))
        self._abandoned = False
        self._pending = asyncio.create_task(self._dispatcher.answer_query(question))

        try:
            answer = await self._pending
        except asyncio.CancelledError:
            if not self._abandoned:
                raise
            logger.info("chat_query_abandoned", question_preview=question[:100])
            return self._append(
                ConversationTurn(
                    role=MessageRole.MODEL,
                    content=ABANDONED_MESSAGE,
                    failure=FailureKind.UNCLASSIFIED,
                )
            )
        except DispatchError as exc:
            return self._append(self._failure_turn(exc))
        finally:
            self._pending = None

        self.credential_prompt_required = False
        return self._append(
            ConversationTurn(role=MessageRole.MODEL, content=answer.model_dump_json(by_alias=True))
        )

    def abandon(self) -> bool:
        """Stop waiting for the in-flight question.

        Returns False if nothing was pending or the answer already arrived.
        """
        if self._pending is None or not self._pending.cancel():
            return False
        self._abandoned = True
        return True

    async def select_credentials(self, api_key: str) -> None:
        """Use a newly selected API key for subsequent queries."""
        previous = self._dispatcher.backend
        self._dispatcher.backend = GeminiBackend(api_key=api_key)
        await previous.aclose()
        self.credential_prompt_required = False
        logger.info("chat_credentials_selected")

    def open_reference(self, reference: str) -> ProcedureDocument | None:
        """Resolve a reference string from an answer to a catalog document."""
        document = self._catalog.resolve_reference(reference)
        if document is None:
            logger.warning("reference_not_found", reference=reference)
        return document

    @staticmethod
    def parse_answer(turn: ConversationTurn) -> StructuredAnswer | None:
        """Decode a model turn back into a StructuredAnswer.

        Returns None for user turns and for plain-text content, which callers
        display as-is.
        """
        if turn.role is not MessageRole.MODEL or turn.failure is not None:
            return None
        try:
            return StructuredAnswer.model_validate_json(turn.content)
        except ValidationError:
            return None

    def _failure_turn(self, exc: DispatchError) -> ConversationTurn:
        logger.error("chat_query_failed", failure=exc.kind.value, code=exc.code)

        if exc.kind in _CREDENTIAL_PROMPT_FAILURES:
            self.credential_prompt_required = True

        if exc.kind is FailureKind.CREDENTIAL_NOT_FOUND:
            content = CREDENTIAL_REQUIRED_MESSAGE
        elif exc.kind is FailureKind.CAPACITY_EXCEEDED:
            content = QUOTA_REACHED_MESSAGE
        elif isinstance(exc, MalformedPayloadError):
            content = exc.raw_text
        else:
            content = GENERIC_FAILURE_MESSAGE

        return ConversationTurn(role=MessageRole.MODEL, content=content, failure=exc.kind)

    def _append(self, turn: ConversationTurn) -> ConversationTurn:
        self._turns.append(turn)
        return turn
