"""
Resume rendering endpoints for ResumeForge PDF
Template catalog and anonymous PDF generation without authentication
"""

from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel, Field, model_validator
import structlog
from slowapi import Limiter
from slowapi.util import get_remote_address

from resume_pdf.core.config import settings
from resume_pdf.core.exceptions import ResumeRenderError
from resume_pdf.models.resume import ResumeData
from resume_pdf.services.resume_pdf_generator import ResumePDFGenerator, get_resume_pdf_generator
from resume_pdf.services.templates import RESUME_TEMPLATES, ResumeTemplate, get_template_by_id

logger = structlog.get_logger()

# Initialize rate limiter
limiter = Limiter(key_func=get_remote_address)

router = APIRouter()


class RenderRequest(BaseModel):
    """Body of a render request: resume content plus the design selector"""
    data: ResumeData = Field(default_factory=ResumeData)
    design: Optional[str] = None

    @model_validator(mode="after")
    def check_limits(self):
        if len(self.data.experience) > settings.max_experience_entries:
            raise ValueError(f"Too many experience entries. Maximum: {settings.max_experience_entries}")
        if len(self.data.education) > settings.max_education_entries:
            raise ValueError(f"Too many education entries. Maximum: {settings.max_education_entries}")
        if len(self.data.skills) > settings.max_skills:
            raise ValueError(f"Too many skills. Maximum: {settings.max_skills}")
        return self


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback name and the UTF-8 original"""
    fallback = filename.encode("ascii", "ignore").decode("ascii").replace('"', "") or "Resume.pdf"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


@router.get("/templates", response_model=List[ResumeTemplate], response_model_by_alias=True)
async def list_templates() -> List[ResumeTemplate]:
    """List the available resume designs"""
    return RESUME_TEMPLATES


@router.get("/templates/{template_id}", response_model=ResumeTemplate, response_model_by_alias=True)
async def get_template(template_id: str) -> ResumeTemplate:
    """Look up one design; unknown ids return the first template"""
    return get_template_by_id(template_id)


@router.post("/pdf")
@limiter.limit(f"{settings.rate_limit_per_minute}/minute")
def render_resume_pdf(
    request: Request,
    payload: RenderRequest,
    generator: ResumePDFGenerator = Depends(get_resume_pdf_generator),
):
    """
    Render resume data to a downloadable PDF

    Runs synchronously in the threadpool; every request gets its own
    document and render state.
    """
    client = request.client.host if request.client else None

    try:
        rendered = generator.generate(payload.data, payload.design)
    except ResumeRenderError as e:
        logger.error("Resume render request failed",
                    client=client,
                    design=payload.design,
                    error=str(e))
        raise HTTPException(status_code=500, detail="Resume rendering failed")

    logger.info("Resume PDF served",
               client=client,
               design=rendered.design.value,
               page_count=rendered.page_count,
               filename=rendered.filename)

    return Response(
        content=rendered.content,
        media_type=rendered.media_type,
        headers={
            "Content-Disposition": content_disposition(rendered.filename),
            "X-Page-Count": str(rendered.page_count),
        },
    )
