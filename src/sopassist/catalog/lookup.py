"""Read-only procedure catalog and reference resolution.

Answers from the backend cite procedures in whatever format the model chose:
a bare code (``SOP-HR-01``), a code followed by a title
(``SOP-HR-01 - Recruitment & Onboarding``), or occasionally a title fragment.
``Catalog.resolve_reference`` maps any of these back to a catalog document.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sopassist.catalog.exceptions import DocumentNotFoundError
from sopassist.catalog.schemas import DepartmentGroup, ProcedureDocument
from sopassist.catalog.seed_data import SOP_CATALOG


def normalise_reference(query: str) -> str:
    """Return the uppercased leading token of a reference string.

    Returns an empty string for empty or whitespace-only input.
    """
    tokens = query.split(maxsplit=1)
    if not tokens:
        return ""
    return tokens[0].strip().upper()


class Catalog:
    """Immutable table of procedure documents grouped by department."""

    def __init__(self, groups: Iterable[DepartmentGroup]) -> None:
        self._groups = tuple(groups)
        self._documents = tuple(doc for group in self._groups for doc in group.documents)

    def __iter__(self) -> Iterator[DepartmentGroup]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._documents)

    @property
    def groups(self) -> tuple[DepartmentGroup, ...]:
        return self._groups

    def documents(self) -> tuple[ProcedureDocument, ...]:
        """All documents, flattened in declaration order."""
        return self._documents

    def get(self, document_id: str) -> ProcedureDocument:
        """Exact lookup by document id.

        Raises:
            DocumentNotFoundError: If no document has this id
        """
        for doc in self._documents:
            if doc.id == document_id:
                return doc
        raise DocumentNotFoundError(
            f"Procedure document '{document_id}' not found.",
            detail={"document_id": document_id},
        )

    def resolve_reference(self, query: str) -> ProcedureDocument | None:
        """Resolve a loosely formatted citation to a catalog document.

        The leading token of ``query`` is compared against document ids first;
        if nothing matches, the first document whose uppercased title contains
        the token wins. Declaration order breaks ties.
        Leading whitespace is ignored, so ``" SOP-FIN-01"`` resolves like ``"SOP-FIN-01"``.

        Args:
            query: Free-text reference, e.g. ``"SOP-HR-01 - Recruitment"``

        Returns:
            The matching document, or None when nothing matches
        """
        token = normalise_reference(query)
        if not token:
            return None

        for doc in self._documents:
            if doc.id == token:
                return doc

        for doc in self._documents:
            if token in doc.title.upper():
                return doc

        return None


default_catalog = Catalog(SOP_CATALOG)


def resolve_reference(query: str) -> ProcedureDocument | None:
    """Resolve ``query`` against the default ParkPoint catalog."""
    return default_catalog.resolve_reference(query)
