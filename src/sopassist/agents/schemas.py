"""Pydantic v2 schemas for backend answers and conversation turns."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from sopassist.agents.enums import FailureKind, FlowNodeType, MessageRole

# ---------------------------------------------------------------------------
# Structured answer (backend output contract)
# ---------------------------------------------------------------------------


class RoleResponsibility(BaseModel):
    """A position and what it is responsible for in the procedure."""

    position: str
    responsibility: str


class FlowNode(BaseModel):
    id: str
    text: str
    type: FlowNodeType


class FlowEdge(BaseModel):
    """Directed edge between two flowchart nodes.

    Serialised with the wire names ``from`` / ``to``.
    """

    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(..., alias="from")
    target: str = Field(..., alias="to")
    label: str | None = None


class Flowchart(BaseModel):
    """Procedure flowchart as emitted by the backend.

    Edges are not checked against declared nodes, and the graph may be
    cyclic or disconnected.
    """

    nodes: list[FlowNode] = Field(default_factory=list)
    edges: list[FlowEdge] = Field(default_factory=list)

    def dangling_edges(self) -> list[FlowEdge]:
        """Edges whose endpoints are not declared nodes."""
        node_ids = {node.id for node in self.nodes}
        return [
            edge for edge in self.edges if edge.source not in node_ids or edge.target not in node_ids
        ]


class StructuredAnswer(BaseModel):
    """Decoded backend answer: summary, roles, flowchart, references and FAQs."""

    summary: str
    roles: list[RoleResponsibility]
    flowchart: Flowchart
    references: list[str]
    faqs: list[str]


# ---------------------------------------------------------------------------
# Conversation
# ---------------------------------------------------------------------------


class ConversationTurn(BaseModel):
    """One entry in an in-memory chat session.

    ``content`` is the user's text, a serialised StructuredAnswer, or a
    plain-text error message (in which case ``failure`` is set).
    """

    model_config = ConfigDict(frozen=True)

    role: MessageRole
    content: str
    failure: FailureKind | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class QueryRequest(BaseModel):
    """Request body for POST /api/v1/queries."""

    question: str = Field(..., min_length=1, max_length=4000)
