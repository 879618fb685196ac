"""Procedure catalog exceptions."""

from __future__ import annotations

from sopassist.core.exceptions import NotFoundError


class DocumentNotFoundError(NotFoundError):
    """No catalog document matches the requested id or reference."""

    code = "document_not_found"
    message = "Procedure document not found."
