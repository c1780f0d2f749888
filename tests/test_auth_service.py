"""Test suite for password hashing, account registration and profile updates."""

from __future__ import annotations

import logging

import pytest

from resume_ecosystem.exceptions import AuthenticationError, InvalidDataError
from resume_ecosystem.services.auth import (
    _hash_password,
    _verify_password,
    authenticate_user,
    register_user,
)
from resume_ecosystem.services.resume import get_resume, update_resume
from resume_ecosystem.services.user_profile import update_user_profile


def test_password_hash_roundtrip() -> None:
    stored = _hash_password("secret123")

    assert stored != _hash_password("secret123")
    assert _verify_password("secret123", stored)
    assert not _verify_password("secret124", stored)
    assert not _verify_password("secret123", "not-a-hash")


def test_register_normalizes_email_and_creates_resume(tmp_db) -> None:
    user = register_user("  Ada  ", " Ada@Example.com ", "secret123", phone="555")

    assert user["name"] == "Ada"
    assert user["email"] == "ada@example.com"
    resume = get_resume(user["id"])
    assert resume["personal_info"]["phone"] == "555"
    assert resume["completeness"] == 15


def test_authenticate(tmp_db) -> None:
    register_user("Ada", "ada@example.com", "secret123")

    assert authenticate_user("ADA@example.com", "secret123")["name"] == "Ada"
    with pytest.raises(AuthenticationError):
        authenticate_user("ada@example.com", "wrong-password")
    with pytest.raises(AuthenticationError):
        authenticate_user("nobody@example.com", "secret123")
    with pytest.raises(InvalidDataError):
        authenticate_user("", "")


def test_profile_and_resume_updates_are_logged(tmp_db, caplog: pytest.LogCaptureFixture) -> None:
    user = register_user("Ada", "ada@example.com", "secret123")

    with caplog.at_level(logging.INFO, logger="resume_ecosystem.services"):
        update_user_profile(user["id"], {"name": "", "location": "London"})
        update_resume(user["id"], template="minimal")

    messages = [r.getMessage() for r in caplog.records]
    assert f"Updated profile for user {user['id']}: location" in messages
    assert any(m.startswith(f"Updated resume for user {user['id']}") for m in messages)
    assert get_resume(user["id"])["personal_info"]["location"] == "London"
