"""Tests for achievement API endpoints."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from resume_ecosystem.api.main import app
from resume_ecosystem.exceptions import ResumeRefreshError

PROJECT = {
    "type": "project",
    "title": "Resume Builder",
    "organization": "Side Projects",
    "description": "Built with React and Docker",
    "start_date": "2024-01-10",
    "skills": ["React"],
}


@pytest.fixture
def client(api_db: None) -> TestClient:
    """Create a test client for the API backed by a temporary database."""
    return TestClient(app)


@pytest.fixture
def headers(client: TestClient) -> dict[str, str]:
    """Register a user with name and email only and return auth headers."""
    response = client.post(
        "/api/auth/register",
        json={"name": "Ada Lovelace", "email": "ada@example.com", "password": "secret123"},
    )
    return {"X-User-Id": str(response.json()["data"]["id"])}


def test_requires_authentication(client: TestClient) -> None:
    response = client.get("/api/achievements")

    assert response.status_code == 401
    assert response.json()["success"] is False
    assert client.get("/api/achievements", headers={"X-User-Id": "abc"}).status_code == 401


def test_create_achievement_updates_resume(client: TestClient, headers: dict[str, str]) -> None:
    assert client.get("/api/resume", headers=headers).json()["data"]["completeness"] == 10

    response = client.post("/api/achievements", headers=headers, json=PROJECT)

    assert response.status_code == 201
    created = response.json()["data"]
    assert created["status"] == "unverified"
    assert created["source"] == "manual"

    resume = client.get("/api/resume", headers=headers).json()["data"]
    assert set(resume["skills"]) == {"React", "Docker"}
    assert resume["achievement_ids"] == [created["id"]]
    assert resume["achievements"][0]["title"] == "Resume Builder"
    # profile 10 + summary 10 + skills 4 + achievements 10
    assert resume["completeness"] == 34


def test_create_validation_errors_return_400(client: TestClient, headers: dict[str, str]) -> None:
    missing = client.post(
        "/api/achievements",
        headers=headers,
        json={k: v for k, v in PROJECT.items() if k != "title"},
    )
    assert missing.status_code == 400
    assert missing.json()["success"] is False
    assert "title" in missing.json()["message"]

    bad_type = client.post("/api/achievements", headers=headers, json={**PROJECT, "type": "award"})
    assert bad_type.status_code == 400

    bad_dates = client.post(
        "/api/achievements", headers=headers, json={**PROJECT, "end_date": "2023-01-01"}
    )
    assert bad_dates.status_code == 400
    assert bad_dates.json()["message"] == "end_date cannot be before start_date"


def test_list_get_update_delete(client: TestClient, headers: dict[str, str]) -> None:
    created = client.post("/api/achievements", headers=headers, json=PROJECT).json()["data"]
    client.post(
        "/api/achievements",
        headers=headers,
        json={**PROJECT, "type": "course", "title": "Databases", "skills": []},
    )

    listing = client.get("/api/achievements", headers=headers).json()
    assert listing["count"] == 2
    assert listing["data"][0]["title"] == "Databases"

    filtered = client.get("/api/achievements", headers=headers, params={"type": "course"}).json()
    assert filtered["count"] == 1

    oldest = client.get("/api/achievements", headers=headers, params={"sort": "oldest"}).json()
    assert oldest["data"][0]["id"] == created["id"]
    bad_sort = client.get("/api/achievements", headers=headers, params={"sort": "title"})
    assert bad_sort.status_code == 400

    fetched = client.get(f"/api/achievements/{created['id']}", headers=headers).json()
    assert fetched["data"]["id"] == created["id"]
    assert "count" not in fetched

    updated = client.put(
        f"/api/achievements/{created['id']}",
        headers=headers,
        json={"title": "Resume Builder v2", "metadata": {"tech_stack": ["Vite"]}},
    ).json()["data"]
    assert updated["title"] == "Resume Builder v2"
    assert updated["organization"] == "Side Projects"
    assert updated["metadata"] == {"tech_stack": ["Vite"]}
    assert "Vite" in client.get("/api/resume", headers=headers).json()["data"]["skills"]

    deleted = client.delete(f"/api/achievements/{created['id']}", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True, "message": "Achievement removed"}
    assert client.get(f"/api/achievements/{created['id']}", headers=headers).status_code == 404


def test_other_users_achievement_is_forbidden(client: TestClient, headers: dict[str, str]) -> None:
    created = client.post("/api/achievements", headers=headers, json=PROJECT).json()["data"]
    other = client.post(
        "/api/auth/register",
        json={"name": "Grace", "email": "grace@example.com", "password": "secret123"},
    ).json()["data"]
    other_headers = {"X-User-Id": str(other["id"])}

    response = client.get(f"/api/achievements/{created['id']}", headers=other_headers)
    assert response.status_code == 403
    assert response.json()["message"] == "Not authorized to access this achievement"
    deleted = client.delete(f"/api/achievements/{created['id']}", headers=other_headers)
    assert deleted.status_code == 403


def test_stats(client: TestClient, headers: dict[str, str]) -> None:
    client.post("/api/achievements", headers=headers, json=PROJECT)

    stats = client.get("/api/achievements/stats", headers=headers).json()["data"]

    assert stats["total"] == 1
    assert stats["by_type"]["project"] == 1
    assert stats["by_status"]["unverified"] == 1
    assert set(stats["skills"]) == {"React", "Docker"}


def test_refresh_failure_fails_the_request(client: TestClient, headers: dict[str, str]) -> None:
    with patch(
        "resume_ecosystem.services.achievement.refresh_resume_for_user",
        side_effect=ResumeRefreshError(),
    ):
        response = client.post("/api/achievements", headers=headers, json=PROJECT)

    assert response.status_code == 500
    assert response.json()["success"] is False
    assert response.json()["message"] == "Failed to refresh resume"
