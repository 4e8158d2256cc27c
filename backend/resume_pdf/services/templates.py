"""
Resume template catalog
Static descriptions of the designs offered to the template picker
"""

from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from resume_pdf.models.resume import DesignVariant


class ResumeTemplate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: DesignVariant
    name: str
    description: str
    category: str
    supports_profile_picture: bool
    preview: str


RESUME_TEMPLATES: List[ResumeTemplate] = [
    ResumeTemplate(
        id=DesignVariant.CLASSIC,
        name="Classic",
        description="Traditional single-column layout, perfect for formal applications",
        category="classic",
        supports_profile_picture=False,
        preview="Traditional layout with centered header and clean sections",
    ),
    ResumeTemplate(
        id=DesignVariant.MODERN_SIDEBAR,
        name="Modern Sidebar",
        description="Single-column layout under a colored header band, perfect for modern professionals",
        category="modern",
        supports_profile_picture=False,
        preview="Accent header with name and contact details above the content",
    ),
    ResumeTemplate(
        id=DesignVariant.MODERN_TWO_COLUMN,
        name="Modern Two-Column",
        description="Dark sidebar beside a clean content column",
        category="modern",
        supports_profile_picture=False,
        preview="Sidebar with contact info, skills, and education on left",
    ),
    ResumeTemplate(
        id=DesignVariant.MODERN_MINIMAL,
        name="Modern Minimal",
        description="Minimalist design with subtle colors and elegant typography",
        category="modern",
        supports_profile_picture=True,
        preview="Minimalist beige color scheme with circular profile picture",
    ),
]


def get_template_by_id(template_id: str) -> ResumeTemplate:
    """Template for an id; unknown ids get the first template"""
    for template in RESUME_TEMPLATES:
        if template.id.value == template_id:
            return template
    return RESUME_TEMPLATES[0]
