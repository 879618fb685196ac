"""Custom exceptions for SOP Assist.

Each exception maps to a specific HTTP status code and error code.
The global exception handler in api/main.py converts these to ErrorResponse.
"""


class SopAssistError(Exception):
    """Base exception for all SOP Assist errors."""

    status_code: int = 500
    code: str = "internal_error"
    message: str = "An unexpected error occurred."

    def __init__(self, message: str | None = None, detail: dict[str, object] | None = None):
        self.message = message or self.__class__.message
        self.detail = detail
        super().__init__(self.message)


class NotFoundError(SopAssistError):
    status_code = 404
    code = "not_found"
    message = "Resource not found."


class ConflictError(SopAssistError):
    status_code = 409
    code = "conflict"
    message = "Request conflicts with the current state."
