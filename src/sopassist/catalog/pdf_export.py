"""PDF export of procedure documents."""

from __future__ import annotations

import asyncio
import io
from datetime import UTC, datetime
from xml.sax.saxutils import escape

import structlog
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from sopassist.catalog.schemas import ProcedureDocument

logger = structlog.get_logger()

CONFIDENTIAL_NOTICE = "Confidential Internal Document"


def _as_markup(text: str) -> str:
    """Escape free text for reportlab paragraphs, keeping line breaks."""
    return escape(text).replace("\n", "<br/>")


def render_document_pdf(document: ProcedureDocument, *, organisation: str = "ParkPoint") -> bytes:
    """Render a procedure document to PDF bytes.

    Synchronous and CPU-bound; use export_document_pdf() from async code.
    """
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=inch,
        leftMargin=inch,
        topMargin=inch,
        bottomMargin=inch,
        title=f"{document.id} - {document.title}",
        author=organisation,
    )

    styles = getSampleStyleSheet()
    style_meta = ParagraphStyle(
        "DocumentMeta",
        parent=styles["Normal"],
        textColor=colors.grey,
        fontSize=9,
    )
    style_notice = ParagraphStyle(
        "ConfidentialNotice",
        parent=styles["Normal"],
        textColor=colors.grey,
        fontName="Helvetica-Bold",
        fontSize=8,
    )

    story = []
    story.append(Paragraph(_as_markup(f"{organisation} Policy & Procedure Manual"), style_meta))
    story.append(Spacer(1, 0.2 * inch))
    story.append(Paragraph(_as_markup(document.title), styles["Title"]))
    story.append(
        Paragraph(
            f"<b>Document:</b> {_as_markup(document.id)} &nbsp; "
            f"<b>Department:</b> {_as_markup(document.department)}",
            styles["Normal"],
        )
    )
    story.append(Spacer(1, 0.3 * inch))

    for number, section in enumerate(document.sections, start=1):
        story.append(Paragraph(f"{number}. {_as_markup(section.title)}", styles["Heading2"]))
        story.append(Paragraph(_as_markup(section.content), styles["Normal"]))
        story.append(Spacer(1, 0.2 * inch))

    story.append(Spacer(1, 0.4 * inch))
    story.append(
        Paragraph(
            f"{CONFIDENTIAL_NOTICE} &nbsp;|&nbsp; "
            f"Printed {datetime.now(UTC).strftime('%d %B %Y at %H:%M UTC')}",
            style_notice,
        )
    )

    doc.build(story)
    return buffer.getvalue()


async def export_document_pdf(document: ProcedureDocument) -> bytes:
    """Generate a document PDF without blocking the event loop."""
    log = logger.bind(document_id=document.id)
    log.info("pdf_export_started")

    pdf_bytes = await asyncio.to_thread(render_document_pdf, document)

    log.info("pdf_export_complete", pdf_size=len(pdf_bytes))
    return pdf_bytes
