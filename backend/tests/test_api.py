"""
HTTP API tests using FastAPI's TestClient
"""

import fitz
import pytest
from fastapi.testclient import TestClient

from main import app
from resume_pdf.core.exceptions import FontEmbeddingError
from resume_pdf.services.resume_pdf_generator import get_resume_pdf_generator


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["environment"] == "test"


def test_detailed_health_lists_designs(client):
    response = client.get("/api/v1/health/detailed")
    assert response.status_code == 200
    assert "modern-two-column" in response.json()["rendering"]["designs"]


def test_list_templates(client):
    response = client.get("/api/v1/resume/templates")
    assert response.status_code == 200
    templates = response.json()
    assert [template["id"] for template in templates] == [
        "classic", "modern-sidebar", "modern-two-column", "modern-minimal",
    ]
    assert "supportsProfilePicture" in templates[0]


def test_get_template_falls_back_to_first(client):
    assert client.get("/api/v1/resume/templates/modern-minimal").json()["id"] == "modern-minimal"
    assert client.get("/api/v1/resume/templates/does-not-exist").json()["id"] == "classic"


def test_render_pdf(client, sample_payload):
    response = client.post("/api/v1/resume/pdf", json={"data": sample_payload, "design": "classic"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert 'filename="Jane_Doe_Resume.pdf"' in response.headers["content-disposition"]
    assert response.headers["x-page-count"] == "1"
    with fitz.open(stream=response.content, filetype="pdf") as pdf:
        assert pdf.page_count == 1
        assert "Jane Doe" in pdf[0].get_text()


def test_render_pdf_with_unknown_design_still_succeeds(client, sample_payload):
    response = client.post("/api/v1/resume/pdf", json={"data": sample_payload, "design": "bogus"})
    assert response.status_code == 200


def test_render_pdf_with_empty_body_renders_blank_resume(client):
    response = client.post("/api/v1/resume/pdf", json={})
    assert response.status_code == 200
    assert 'filename="Resume.pdf"' in response.headers["content-disposition"]


def test_render_pdf_non_ascii_name(client):
    payload = {"data": {"personalInfo": {"fullName": "Zoë Ångström"}}, "design": "classic"}
    response = client.post("/api/v1/resume/pdf", json=payload)

    assert response.status_code == 200
    disposition = response.headers["content-disposition"]
    assert "filename*=UTF-8''Zo%C3%AB_%C3%85ngstr%C3%B6m_Resume.pdf" in disposition


def test_render_pdf_rejects_invalid_shape(client):
    response = client.post("/api/v1/resume/pdf", json={"data": {"experience": "not a list"}})
    assert response.status_code == 422


def test_render_pdf_rejects_too_many_skills(client):
    payload = {"data": {"skills": [f"skill {index}" for index in range(500)]}}
    response = client.post("/api/v1/resume/pdf", json=payload)
    assert response.status_code == 422


def test_render_failure_returns_500(client, sample_payload):
    class BrokenGenerator:
        def generate(self, data, design=None):
            raise FontEmbeddingError("Broken", "font file is corrupt")

    app.dependency_overrides[get_resume_pdf_generator] = BrokenGenerator
    response = client.post("/api/v1/resume/pdf", json={"data": sample_payload})

    assert response.status_code == 500
    assert response.json()["detail"] == "Resume rendering failed"
