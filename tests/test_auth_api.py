"""Tests for registration, login and profile endpoints."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import resume_ecosystem.data.db as db_module
from resume_ecosystem.api.main import app


@pytest.fixture
def client(api_db: None) -> TestClient:
    """Create a test client for the API backed by a temporary database."""
    return TestClient(app)


def _register(client: TestClient, **overrides) -> dict:
    payload = {"name": "Ada Lovelace", "email": "ada@example.com", "password": "secret123"}
    payload.update(overrides)
    return client.post("/api/auth/register", json=payload)


def test_register_creates_user_and_default_resume(client: TestClient) -> None:
    response = _register(client)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["email"] == "ada@example.com"
    assert "password" not in body["data"]
    assert "password_hash" not in body["data"]

    resume = client.get("/api/resume", headers={"X-User-Id": str(body["data"]["id"])}).json()
    assert resume["data"]["completeness"] == 10
    assert resume["data"]["personal_info"]["name"] == "Ada Lovelace"


def test_register_rejects_missing_fields_and_duplicates(client: TestClient) -> None:
    missing = client.post("/api/auth/register", json={"email": "ada@example.com"})
    assert missing.status_code == 400
    assert missing.json() == {
        "success": False,
        "message": "Please provide name, email, and password",
    }

    assert _register(client).status_code == 201
    duplicate = _register(client, email="ADA@example.com")
    assert duplicate.status_code == 400
    assert duplicate.json()["message"] == "User already exists with this email"


def test_register_validates_email_and_password(client: TestClient) -> None:
    assert _register(client, email="not-an-email").json()["message"] == "Please add a valid email"
    assert _register(client, password="123").status_code == 400


def test_login(client: TestClient) -> None:
    user_id = _register(client).json()["data"]["id"]

    ok = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})
    assert ok.status_code == 200
    assert ok.json()["data"]["id"] == user_id

    bad = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "nope!!"})
    assert bad.status_code == 401
    assert bad.json()["message"] == "Invalid email or password"


def test_me_requires_known_user_header(client: TestClient) -> None:
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/auth/me", headers={"X-User-Id": "999"}).status_code == 401
    malformed = client.get("/api/auth/me", headers={"X-User-Id": "abc"})
    assert malformed.status_code == 401
    assert malformed.json()["success"] is False

    user_id = _register(client).json()["data"]["id"]
    response = client.get("/api/auth/me", headers={"X-User-Id": str(user_id)})
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Ada Lovelace"


def test_profile_update_ignores_blank_values_and_refreshes_resume(client: TestClient) -> None:
    user_id = _register(client).json()["data"]["id"]
    headers = {"X-User-Id": str(user_id)}

    response = client.put(
        "/api/auth/profile",
        headers=headers,
        json={"name": "", "phone": "555-0100", "github": "ada"},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Ada Lovelace"
    assert data["phone"] == "555-0100"

    resume = client.get("/api/resume", headers=headers).json()["data"]
    assert resume["personal_info"]["github"] == "ada"
    # 4 profile fields, plus the refreshed summary
    assert resume["completeness"] == 30


def test_requests_use_the_temporary_database(client: TestClient, tmp_path: Path) -> None:
    assert _register(client).status_code == 201

    assert db_module._engine is not None
    assert str(db_module._engine.url) == f"sqlite:///{(tmp_path / 'api.db').as_posix()}"
    assert (tmp_path / "api.db").exists()
