"""
Resume data models for the ResumeForge PDF service
Immutable input shapes accepted by the layout engine and the HTTP API
"""

from typing import Any, List, Optional
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
import structlog

logger = structlog.get_logger()


def _blank_if_none(value: Any) -> Any:
    """Coerce missing and numeric values to the plain strings the renderer expects"""
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class DesignVariant(str, Enum):
    """Resume design variants supported by the layout engine"""
    CLASSIC = "classic"
    MODERN_SIDEBAR = "modern-sidebar"
    MODERN_TWO_COLUMN = "modern-two-column"
    MODERN_MINIMAL = "modern-minimal"

    @classmethod
    def default(cls) -> "DesignVariant":
        return cls.MODERN_SIDEBAR

    @classmethod
    def parse(cls, value: Optional[Any]) -> "DesignVariant":
        """
        Resolve a design selector to a variant

        "modern" is an alias of modern-sidebar; anything unrecognised falls
        back to the default variant instead of raising.
        """
        if isinstance(value, cls):
            return value

        key = str(value or "").strip().lower()
        if key == "modern":
            return cls.MODERN_SIDEBAR

        for variant in cls:
            if variant.value == key:
                return variant

        logger.warning("Unknown resume design, using default",
                      requested=value,
                      fallback=cls.default().value)
        return cls.default()


class ResumeModel(BaseModel):
    """Base model: camelCase aliases, snake_case names, immutable instances"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        str_strip_whitespace=True,
    )


class PersonalInfo(ResumeModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linked_in_url: str = Field(
        default="",
        validation_alias=AliasChoices("linkedInUrl", "linkedIn", "linked_in_url"),
    )
    website_url: str = Field(
        default="",
        validation_alias=AliasChoices("websiteUrl", "website", "website_url"),
    )

    @field_validator("*", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return _blank_if_none(v)

    def contact_parts(self) -> List[str]:
        """Email, phone and location in display order, blanks removed"""
        return [part for part in (self.email, self.phone, self.location) if part]

    def link_parts(self) -> List[str]:
        """Profile and website links in display order, blanks removed"""
        return [part for part in (self.linked_in_url, self.website_url) if part]


class ExperienceEntry(ResumeModel):
    position: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = Field(
        default=False,
        validation_alias=AliasChoices("isCurrent", "current", "is_current"),
    )
    description: str = ""

    @field_validator("position", "company", "start_date", "end_date", "description", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return _blank_if_none(v)

    @field_validator("is_current", mode="before")
    @classmethod
    def coerce_flag(cls, v):
        return False if v is None else v


class EducationEntry(ResumeModel):
    degree: str = ""
    institution: str = ""
    year: str = ""
    grade: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return _blank_if_none(v)


class ResumeData(ResumeModel):
    """
    Complete resume content for one render

    Every field is optional; an empty instance renders as an empty header.
    List order is preserved exactly as given.
    """
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)

    @field_validator("personal_info", mode="before")
    @classmethod
    def default_personal_info(cls, v):
        return {} if v is None else v

    @field_validator("summary", mode="before")
    @classmethod
    def coerce_summary(cls, v):
        return _blank_if_none(v)

    @field_validator("experience", "education", mode="before")
    @classmethod
    def default_entries(cls, v):
        return [] if v is None else v

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_skills(cls, v):
        if v is None:
            return []
        return [_blank_if_none(skill) for skill in v]

    @property
    def visible_skills(self) -> List[str]:
        """Skills with blank entries dropped; duplicates are kept"""
        return [skill.strip() for skill in self.skills if skill.strip()]

    @property
    def is_empty(self) -> bool:
        info = self.personal_info
        return not (
            info.full_name or info.contact_parts() or info.link_parts()
            or self.summary or self.experience or self.education or self.visible_skills
        )
