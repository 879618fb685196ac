"""Procedure catalog routes: browse, fetch, resolve references, export PDF."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from sopassist.api.dependencies import get_catalog
from sopassist.catalog.exceptions import DocumentNotFoundError
from sopassist.catalog.lookup import Catalog
from sopassist.catalog.pdf_export import export_document_pdf
from sopassist.catalog.schemas import DepartmentGroup, ProcedureDocument

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


@router.get("", response_model=list[DepartmentGroup])
async def list_catalog(catalog: Catalog = Depends(get_catalog)) -> list[DepartmentGroup]:
    return list(catalog.groups)


@router.get("/resolve", response_model=ProcedureDocument)
async def resolve_reference(
    ref: str = Query(..., description="Free-text reference, e.g. 'SOP-HR-01 - Recruitment'"),
    catalog: Catalog = Depends(get_catalog),
) -> ProcedureDocument:
    document = catalog.resolve_reference(ref)
    if document is None:
        raise DocumentNotFoundError(
            f"No procedure document matches '{ref}'.",
            detail={"reference": ref},
        )
    return document


@router.get("/documents/{document_id}", response_model=ProcedureDocument)
async def get_document(
    document_id: str,
    catalog: Catalog = Depends(get_catalog),
) -> ProcedureDocument:
    return catalog.get(document_id)


@router.get("/documents/{document_id}/pdf")
async def get_document_pdf(
    document_id: str,
    catalog: Catalog = Depends(get_catalog),
) -> Response:
    document = catalog.get(document_id)
    pdf_bytes = await export_document_pdf(document)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{document.id}.pdf"'},
    )
