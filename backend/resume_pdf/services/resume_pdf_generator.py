"""
Resume PDF generation service
Resolves the design, lays the resume out and serializes it with ReportLab
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import structlog

from resume_pdf.core.config import settings
from resume_pdf.models.resume import DesignVariant, ResumeData
from .layout_variants import get_layout
from .pdf_writer import write_pdf
from .surface import Document
from .text_wrapper import AverageWidthMeasurer, FontMetricsMeasurer, TextMeasurer

logger = structlog.get_logger()

PDF_MEDIA_TYPE = "application/pdf"


@dataclass(frozen=True)
class RenderedResume:
    """Finished PDF plus what the HTTP layer needs to serve it"""
    content: bytes
    design: DesignVariant
    page_count: int
    filename: str
    media_type: str = PDF_MEDIA_TYPE

    @property
    def size_bytes(self) -> int:
        return len(self.content)


def download_filename(data: ResumeData) -> str:
    """<Full_Name>_Resume.pdf, or Resume.pdf for an anonymous resume"""
    name = "_".join(data.personal_info.full_name.split())
    return f"{name}_Resume.pdf" if name else "Resume.pdf"


class ResumePDFGenerator:
    """
    Renders ResumeData into an A4 PDF in one of the supported designs

    Each call builds its own document and render state, so one generator
    can serve concurrent requests.

    Args:
        regular_font: Regular face name (standard Type 1 or a TTF registered under this name)
        bold_font: Bold face name
        regular_font_path: Optional TTF file for the regular face
        bold_font_path: Optional TTF file for the bold face
        measurer: Width estimator used for every wrap
        default_design: Variant used when the caller passes no design
    """

    def __init__(
        self,
        regular_font: str = "Helvetica",
        bold_font: str = "Helvetica-Bold",
        regular_font_path: Optional[str] = None,
        bold_font_path: Optional[str] = None,
        measurer: Optional[TextMeasurer] = None,
        default_design: Union[str, DesignVariant] = DesignVariant.MODERN_SIDEBAR,
    ):
        self.regular_font = regular_font
        self.bold_font = bold_font
        self.regular_font_path = regular_font_path
        self.bold_font_path = bold_font_path
        self.measurer = measurer or AverageWidthMeasurer()
        self.default_design = DesignVariant.parse(default_design)

    @classmethod
    def from_settings(cls) -> "ResumePDFGenerator":
        if settings.text_measurement == "font_metrics":
            measurer = FontMetricsMeasurer(settings.regular_font, settings.bold_font)
        else:
            measurer = AverageWidthMeasurer(settings.char_width_factor)

        return cls(
            regular_font=settings.regular_font,
            bold_font=settings.bold_font,
            regular_font_path=settings.regular_font_path,
            bold_font_path=settings.bold_font_path,
            measurer=measurer,
            default_design=settings.default_design,
        )

    def resolve_design(self, design: Optional[Union[str, DesignVariant]]) -> DesignVariant:
        if design is None or (isinstance(design, str) and not design.strip()):
            return self.default_design
        return DesignVariant.parse(design)

    def layout(self, data: ResumeData, design: Optional[Union[str, DesignVariant]] = None) -> Document:
        """
        Lay the resume out without serializing it

        Raises:
            FontEmbeddingError: If either font face cannot be loaded
        """
        variant = self.resolve_design(design)
        document = Document(title=_document_title(data))
        regular = document.embed_font(self.regular_font, bold=False, path=self.regular_font_path)
        bold = document.embed_font(self.bold_font, bold=True, path=self.bold_font_path)

        layout = get_layout(variant)(data, regular, bold, self.measurer)
        layout.render(document)
        return document

    def generate(self, data: ResumeData, design: Optional[Union[str, DesignVariant]] = None) -> RenderedResume:
        """
        Render a resume to PDF

        Args:
            data: Resume content; every field is optional
            design: Design id, "modern" alias, or None for the default design

        Returns:
            RenderedResume with the PDF bytes and page count

        Raises:
            ResumeRenderError: On font or serialization failure
        """
        variant = self.resolve_design(design)
        logger.info("Starting resume render",
                   design=variant.value,
                   experience_entries=len(data.experience),
                   education_entries=len(data.education),
                   skills=len(data.skills))

        document = self.layout(data, variant)
        content = write_pdf(document)

        rendered = RenderedResume(
            content=content,
            design=variant,
            page_count=document.page_count,
            filename=download_filename(data),
        )

        logger.info("Resume render completed",
                   design=variant.value,
                   page_count=rendered.page_count,
                   size_bytes=rendered.size_bytes)

        return rendered


def _document_title(data: ResumeData) -> str:
    name = data.personal_info.full_name
    return f"{name} - Resume" if name else "Resume"


def generate_resume_pdf(
    data: Union[ResumeData, Dict[str, Any]],
    design: Optional[str] = "modern-sidebar",
) -> bytes:
    """Render resume data (model or camelCase dict) and return the PDF bytes"""
    if not isinstance(data, ResumeData):
        data = ResumeData.model_validate(data)
    return ResumePDFGenerator.from_settings().generate(data, design).content


def get_resume_pdf_generator() -> ResumePDFGenerator:
    return ResumePDFGenerator.from_settings()
