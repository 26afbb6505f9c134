import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_external_client
from config import settings
from main import app
from services.errors import ExternalServiceError
from services.external_analysis import LocalAnalysisClient

client = TestClient(app)

RESUME = "Experienced Python developer with React and Docker skills. Built REST APIs. 5 years experience."
JOB = "Looking for a Python developer with React experience and Docker. 3+ years experience."


class UnavailableClient(LocalAnalysisClient):
    async def generate_resume_tips(self, resume_text):
        raise ExternalServiceError("Gemini API error: unavailable")

    async def generate_career_coach_analysis(self, resume_text):
        raise ExternalServiceError("Gemini API error: unavailable")


@pytest.fixture(autouse=True)
def local_external_client():
    app.dependency_overrides[get_external_client] = LocalAnalysisClient
    yield
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["gemini_configured"] is False


def test_list_jobs():
    response = client.get("/jobs")
    assert response.status_code == 200
    jobs = response.json()
    assert jobs[0]["title"] == "Frontend Developer"
    assert {"title", "category", "popularity"} <= set(jobs[0])


def test_extract_skills():
    response = client.post("/skills/extract", json={"text": RESUME})
    assert response.status_code == 200
    data = response.json()
    names = [s["name"] for s in data["skills"]["hard_skills"]]
    assert "Python" in names
    assert data["word_count"] == len(RESUME.split())
    assert "suggested_roles" in data["job_suggestions"]


def test_extract_blank_text():
    response = client.post("/skills/extract", json={"text": "  "})
    assert response.status_code == 422
    assert response.json()["detail"] == "Could not analyze empty text"


def test_extract_upstream_error():
    response = client.post("/skills/extract", json={"text": "", "error": "Scanned PDF has no text layer"})
    assert response.status_code == 422
    assert response.json()["detail"] == "Scanned PDF has no text layer"


def test_compare_job():
    response = client.post(
        "/jobs/compare", json={"job_title": "Frontend Developer", "skills": ["JavaScript", "HTML", "CSS", "React"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["match_percentage"] == 84
    assert data["experience_level"] == "Mid"


def test_compare_unknown_job():
    response = client.post("/jobs/compare", json={"job_title": "Astronaut", "skills": []})
    assert response.status_code == 404
    assert response.json()["detail"] == 'Job title "Astronaut" not found in database'


def test_ats_analyze():
    response = client.post("/ats/analyze", json={"resume_text": RESUME, "job_description": JOB})
    assert response.status_code == 200
    data = response.json()
    assert 0 <= data["overall_score"] <= 100
    assert "python developer" in data["title_analysis"]["matching_titles"]
    assert data["external_analysis"]["is_ai_generated"] is False
    assert data["external_analysis"]["error"] is None
    assert data["breakdown"]["format_check"] in ("Good", "Fair", "Poor")


def test_ats_analyze_without_external_stage(monkeypatch):
    monkeypatch.setattr(settings, "external_analysis_enabled", False)
    response = client.post("/ats/analyze", json={"resume_text": RESUME, "job_description": JOB})
    assert response.status_code == 200
    assert response.json()["external_analysis"] is None


def test_ats_analyze_rejects_oversized_job_description():
    response = client.post(
        "/ats/analyze",
        json={"resume_text": RESUME, "job_description": "x" * (settings.max_job_description_length + 1)},
    )
    assert response.status_code == 400


def test_ats_analyze_blank_resume():
    response = client.post("/ats/analyze", json={"resume_text": "", "job_description": JOB})
    assert response.status_code == 422


def test_coach_tips():
    response = client.post("/coach/tips", json={"resume_text": RESUME})
    assert response.status_code == 200
    data = response.json()
    assert data["is_ai_generated"] is False
    assert data["suggestions"].startswith("**Job Title Suitability:**")


def test_coach_career():
    response = client.post("/coach/career", json={"resume_text": RESUME})
    assert response.status_code == 200
    data = response.json()
    assert "Frontend Developer" in data["suitable_job_titles"]
    assert data["overall_assessment"]


def test_coach_unavailable():
    app.dependency_overrides[get_external_client] = UnavailableClient
    response = client.post("/coach/tips", json={"resume_text": RESUME})
    assert response.status_code == 502
    response = client.post("/coach/career", json={"resume_text": RESUME})
    assert response.status_code == 502
