import random
from io import BytesIO

import docx
import pytest
from fastapi.testclient import TestClient

from skillsync.config import settings
from skillsync.main import app
from skillsync.services import profile_store
from skillsync.services.resume_analyzer import build_career_profile


@pytest.fixture
def client():
    return TestClient(app)


def _docx_bytes(*paragraphs: str) -> bytes:
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_analyze_text(client, sample_resume):
    resp = client.post(
        "/api/analysis/analyze-text",
        json={"text": sample_resume},
        headers={"X-Analysis-Seed": "42"},
    )
    assert resp.status_code == 200

    body = resp.json()
    assert body["name"] == "Jane Smith"
    assert body["email"] == "jane.smith@example.com"
    assert body["completeness"] == 100
    assert body["profile"]["currentRole"] == "Senior Software Engineer"
    assert body["profile"]["learningRoadmap"][0]["status"] == "current"
    assert body["profileId"]


def test_same_text_returns_cached_analysis(client, sample_resume):
    first = client.post("/api/analysis/analyze-text", json={"text": sample_resume}).json()
    second = client.post("/api/analysis/analyze-text", json={"text": sample_resume}).json()
    assert first["profileId"] == second["profileId"]


def test_seed_header_makes_results_repeatable(client, sample_resume):
    headers = {"X-Analysis-Seed": "7"}
    first = client.post("/api/analysis/analyze-text", json={"text": sample_resume}, headers=headers)
    profile_store.clear_results()
    second = client.post("/api/analysis/analyze-text", json={"text": sample_resume}, headers=headers)

    assert first.json()["profile"] == second.json()["profile"]


def test_each_seed_gets_its_own_draws(client, sample_resume):
    for seed in (1, 2):
        resp = client.post(
            "/api/analysis/analyze-text",
            json={"text": sample_resume},
            headers={"X-Analysis-Seed": str(seed)},
        )
        expected = build_career_profile(sample_resume, random.Random(seed)).profile
        assert resp.json()["profile"] == expected.model_dump(by_alias=True, mode="json")


def test_same_text_and_seed_share_one_analysis(client, sample_resume):
    headers = {"X-Analysis-Seed": "3"}
    first = client.post("/api/analysis/analyze-text", json={"text": sample_resume}, headers=headers).json()
    other = client.post(
        "/api/analysis/analyze-text", json={"text": sample_resume}, headers={"X-Analysis-Seed": "4"}
    ).json()
    again = client.post("/api/analysis/analyze-text", json={"text": sample_resume}, headers=headers).json()

    assert again["profileId"] == first["profileId"]
    assert other["profileId"] != first["profileId"]


def test_analyze_text_rejects_oversized_text(client, sample_resume, monkeypatch):
    monkeypatch.setattr(settings, "max_upload_mb", 0)
    resp = client.post("/api/analysis/analyze-text", json={"text": sample_resume})
    assert resp.status_code == 400


def test_get_analysis_and_history(client, sample_resume):
    created = client.post("/api/analysis/analyze-text", json={"text": sample_resume}).json()
    profile_id = created["profileId"]

    resp = client.get(f"/api/analysis/{profile_id}")
    assert resp.status_code == 200
    assert resp.json() == created

    history = client.get(f"/api/analysis/history/{profile_id}").json()
    assert history["careerMatches"] == created["profile"]["careerMatches"]
    assert history["skillGaps"] == created["profile"]["skillGaps"]
    assert history["learningRoadmap"] == created["profile"]["learningRoadmap"]


def test_unknown_analysis(client):
    assert client.get("/api/analysis/missing").status_code == 404
    assert client.get("/api/analysis/history/missing").status_code == 404


def test_upload_docx(client, sample_resume):
    payload = _docx_bytes(*sample_resume.split("\n"))
    resp = client.post(
        "/api/analysis/upload-resume",
        files={"file": ("resume.docx", payload, "application/octet-stream")},
        headers={"X-Analysis-Seed": "1"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Jane Smith"
    assert body["profile"]["experience"][0]["company"] == "Acme Corp"


def test_upload_rejects_unsupported_type(client):
    resp = client.post(
        "/api/analysis/upload-resume",
        files={"file": ("resume.txt", b"plain text", "text/plain")},
    )
    assert resp.status_code == 400


def test_upload_rejects_large_file(client, monkeypatch):
    monkeypatch.setattr(settings, "max_upload_mb", 0)
    resp = client.post(
        "/api/analysis/upload-resume",
        files={"file": ("resume.docx", _docx_bytes("Jane Smith"), "application/octet-stream")},
    )
    assert resp.status_code == 400


def test_upload_rejects_unreadable_document(client):
    resp = client.post(
        "/api/analysis/upload-resume",
        files={"file": ("resume.docx", _docx_bytes("Jane"), "application/octet-stream")},
    )
    assert resp.status_code == 422
