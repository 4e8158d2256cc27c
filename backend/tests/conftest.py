"""
Shared fixtures for the ResumeForge PDF test suite
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from resume_pdf.models.resume import ResumeData
from resume_pdf.services.surface import Document, FontHandle
from resume_pdf.services.text_wrapper import AverageWidthMeasurer


@pytest.fixture
def measurer():
    return AverageWidthMeasurer()


@pytest.fixture
def fonts():
    return FontHandle("Helvetica"), FontHandle("Helvetica-Bold", bold=True)


@pytest.fixture
def document():
    return Document()


@pytest.fixture
def sample_payload():
    """A typical resume as the web client sends it (camelCase keys)"""
    return {
        "personalInfo": {
            "fullName": "Jane Doe",
            "email": "jane.doe@example.com",
            "phone": "+1 555 0100",
            "location": "Berlin, Germany",
            "linkedIn": "linkedin.com/in/janedoe",
            "website": "janedoe.dev",
        },
        "summary": "Backend engineer with ten years of experience building data platforms.",
        "experience": [
            {
                "position": "Staff Engineer",
                "company": "Acme Corp",
                "startDate": "2020-03",
                "endDate": "",
                "current": True,
                "description": "Led the platform team. Cut build times in half! Mentored six engineers.",
            },
            {
                "position": "Software Engineer",
                "company": "Globex",
                "startDate": "2015-06",
                "endDate": "2020-02",
                "description": "Built billing services. Migrated the monolith to services.",
            },
        ],
        "education": [
            {"degree": "BSc Computer Science", "institution": "TU Berlin", "year": "2015", "grade": "1.3"},
        ],
        "skills": ["Python", "PostgreSQL", "Kubernetes", "Terraform", "Go"],
    }


@pytest.fixture
def sample_resume(sample_payload):
    return ResumeData.model_validate(sample_payload)


def long_description(sentences: int = 50, words_per_sentence: int = 10) -> str:
    """Numbered sentences so each one can be found in the output"""
    parts = []
    for index in range(sentences):
        words = " ".join(f"word{index}x{n}" for n in range(words_per_sentence - 1))
        parts.append(f"Sentence{index:03d} {words}.")
    return " ".join(parts)


@pytest.fixture
def long_resume():
    """One experience entry with a 500-word description"""
    return ResumeData.model_validate({
        "personalInfo": {"fullName": "Long Story"},
        "experience": [{
            "position": "Engineer",
            "company": "Verbose Inc",
            "startDate": "2019-01",
            "endDate": "2021-12",
            "description": long_description(),
        }],
    })
