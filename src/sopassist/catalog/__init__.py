"""Static ParkPoint procedure catalog."""

from sopassist.catalog.lookup import Catalog, default_catalog, resolve_reference
from sopassist.catalog.schemas import DepartmentGroup, ProcedureDocument, ProcedureSection

__all__ = [
    "Catalog",
    "DepartmentGroup",
    "ProcedureDocument",
    "ProcedureSection",
    "default_catalog",
    "resolve_reference",
]
