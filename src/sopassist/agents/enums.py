"""Enumerations for query dispatch and chat sessions."""

from __future__ import annotations

from enum import StrEnum


class MessageRole(StrEnum):
    """Sender of a conversation turn."""

    USER = "user"
    MODEL = "model"


class FlowNodeType(StrEnum):
    """Shape of a flowchart node."""

    START = "start"
    PROCESS = "process"
    DECISION = "decision"
    END = "end"


class FailureKind(StrEnum):
    """Classified reason a query could not produce a structured answer."""

    CAPACITY_EXCEEDED = "capacity_exceeded"
    CREDENTIAL_NOT_FOUND = "credential_not_found"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_PAYLOAD = "malformed_payload"
    UNCLASSIFIED = "unclassified"
