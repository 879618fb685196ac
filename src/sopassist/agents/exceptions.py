"""Query dispatch exceptions.

Every failure surfaced by QueryDispatcher is a DispatchError subclass whose
``kind`` tells the caller how to present it.
"""

from __future__ import annotations

from sopassist.agents.enums import FailureKind
from sopassist.core.exceptions import ConflictError, SopAssistError


class DispatchError(SopAssistError):
    """Base exception for query dispatch failures."""

    status_code = 502
    code = "dispatch_error"
    message = "The answering backend could not produce an answer."
    kind: FailureKind = FailureKind.UNCLASSIFIED


class CapacityExceededError(DispatchError):
    """Backend kept signalling rate-limit / resource exhaustion after all retries."""

    status_code = 429
    code = "capacity_exceeded"
    message = "Backend quota exhausted. Please wait before retrying."
    kind = FailureKind.CAPACITY_EXCEEDED


class CredentialNotFoundError(DispatchError):
    """Backend could not find the configured credential entity."""

    status_code = 401
    code = "credential_not_found"
    message = "The configured API key could not be found."
    kind = FailureKind.CREDENTIAL_NOT_FOUND


class EmptyResponseError(DispatchError):
    code = "empty_response"
    message = "Empty response from backend."
    kind = FailureKind.EMPTY_RESPONSE


class MalformedPayloadError(DispatchError):
    """Backend payload did not decode to a StructuredAnswer."""

    status_code = 422
    code = "malformed_payload"
    message = "Backend response did not match the expected answer format."
    kind = FailureKind.MALFORMED_PAYLOAD

    def __init__(self, raw_text: str, message: str | None = None) -> None:
        self.raw_text = raw_text
        super().__init__(message, detail={"raw_text": raw_text})


class UnclassifiedBackendError(DispatchError):
    code = "backend_error"
    message = "The answering backend request failed."
    kind = FailureKind.UNCLASSIFIED


class QueryInProgressError(ConflictError):
    code = "query_in_progress"
    message = "A query is already in progress for this session."
