"""Procedure catalog schemas.

Catalog entries are frozen: they are built once at import time from seed data
and shared read-only for the lifetime of the process.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProcedureSection(BaseModel):
    """A titled block of free text within a procedure document."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str


class ProcedureDocument(BaseModel):
    """A standard operating procedure, e.g. ``SOP-HR-01``."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    department: str
    sections: tuple[ProcedureSection, ...] = ()


class DepartmentGroup(BaseModel):
    """Documents belonging to one department, in navigation order."""

    model_config = ConfigDict(frozen=True)

    name: str
    icon: str
    documents: tuple[ProcedureDocument, ...] = ()
