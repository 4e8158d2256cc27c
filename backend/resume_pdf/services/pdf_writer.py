"""
PDF serialization for laid-out resumes
Replays recorded page operations onto a ReportLab canvas
"""

from io import BytesIO

import structlog
from reportlab.pdfgen import canvas

from resume_pdf.core.exceptions import ResumeRenderError
from .surface import Document, DrawOp

logger = structlog.get_logger()

DEFAULT_CREATOR = "ResumeForge PDF"


def _draw_op(pdf: canvas.Canvas, op: DrawOp):
    if op.kind == "text":
        pdf.setFont(op.font.name, op.size)
        pdf.setFillColor(op.fill)
        pdf.drawString(op.x, op.y, op.text)

    elif op.kind == "rect":
        if op.fill is not None:
            pdf.setFillColor(op.fill)
        if op.stroke is not None:
            pdf.setStrokeColor(op.stroke)
            pdf.setLineWidth(op.thickness)
        stroke = 1 if op.stroke is not None and op.thickness > 0 else 0
        fill = 1 if op.fill is not None else 0
        if op.radius > 0:
            pdf.roundRect(op.x, op.y, op.width, op.height, op.radius, stroke=stroke, fill=fill)
        else:
            pdf.rect(op.x, op.y, op.width, op.height, stroke=stroke, fill=fill)

    elif op.kind == "line":
        pdf.setStrokeColor(op.stroke)
        pdf.setLineWidth(op.thickness)
        pdf.line(op.x, op.y, op.x2, op.y2)

    elif op.kind == "circle":
        if op.fill is not None:
            pdf.setFillColor(op.fill)
        if op.stroke is not None:
            pdf.setStrokeColor(op.stroke)
            pdf.setLineWidth(op.thickness)
        stroke = 1 if op.stroke is not None and op.thickness > 0 else 0
        fill = 1 if op.fill is not None else 0
        pdf.circle(op.x, op.y, op.radius, stroke=stroke, fill=fill)

    else:
        raise ValueError(f"Unknown drawing operation: {op.kind}")


def write_pdf(document: Document, creator: str = DEFAULT_CREATOR) -> bytes:
    """
    Serialize a laid-out document to PDF bytes

    The canvas runs in invariant mode, so no creation timestamp or random
    document ID ends up in the file and identical documents give identical
    bytes.

    Args:
        document: Document with at least one page
        creator: Creator string written to the PDF metadata

    Returns:
        Complete PDF file content

    Raises:
        ResumeRenderError: If ReportLab fails while drawing or saving
    """
    buffer = BytesIO()
    try:
        pdf = canvas.Canvas(buffer, pagesize=(document.width, document.height), invariant=1)
        pdf.setCreator(creator)
        if document.title:
            pdf.setTitle(document.title)

        for page in document.pages:
            for op in page.ops:
                _draw_op(pdf, op)
            pdf.showPage()

        pdf.save()
    except Exception as e:
        logger.error("PDF serialization failed", pages=document.page_count, error=str(e))
        raise ResumeRenderError(f"PDF serialization failed: {e}") from e

    return buffer.getvalue()
