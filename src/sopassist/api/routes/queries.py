"""Policy question route."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from sopassist.agents.dispatcher import QueryDispatcher
from sopassist.agents.schemas import QueryRequest, StructuredAnswer
from sopassist.api.dependencies import get_dispatcher

router = APIRouter(prefix="/api/v1/queries", tags=["queries"])


@router.post("", response_model=StructuredAnswer)
async def ask_question(
    data: QueryRequest,
    dispatcher: QueryDispatcher = Depends(get_dispatcher),
) -> StructuredAnswer:
    """Answer a policy question.

    Dispatch failures are rendered by the SopAssistError handler: 429 when the
    backend quota is exhausted, 401 when the API key is unknown, 422 with the
    raw text when the answer is malformed, 502 otherwise.
    """
    return await dispatcher.answer_query(data.question)
