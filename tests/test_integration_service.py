"""Test suite for integration service and webhook handling."""

from __future__ import annotations

from datetime import date
from unittest.mock import patch

import pytest

from resume_ecosystem.exceptions import (
    InvalidDataError,
    NotFoundError,
    PermissionDeniedError,
    ResumeRefreshError,
)
from resume_ecosystem.services.achievement import list_achievements
from resume_ecosystem.services.integration import (
    connect_integration,
    delete_integration,
    handle_webhook,
    list_integrations,
    toggle_integration,
)
from resume_ecosystem.services.resume import get_resume

EVENT = {
    "type": "project",
    "title": "open-source-lib",
    "organization": "GitHub",
    "start_date": date(2024, 3, 1),
    "skills": ["TypeScript"],
    "status": "unverified",
    "source": "manual",
}


def test_connect_is_an_upsert_that_reactivates(make_user) -> None:
    user_id = make_user()

    created = connect_integration(user_id, "github", platform_user_id="ada", api_key="secret")
    toggle_integration(user_id, created["id"])
    again = connect_integration(user_id, "github")

    assert again["id"] == created["id"]
    assert again["is_active"] is True
    assert again["platform_user_id"] == "ada"
    assert "api_key" not in again
    assert len(list_integrations(user_id)) == 1


def test_connect_rejects_unknown_platform(make_user) -> None:
    user_id = make_user()

    with pytest.raises(InvalidDataError, match="platform"):
        connect_integration(user_id, "myspace")


def test_webhook_forces_verified_status_and_platform_source(make_user) -> None:
    user_id = make_user()
    connect_integration(user_id, "github")

    result = handle_webhook(user_id, "github", dict(EVENT))

    assert result["status"] == "verified"
    assert result["source"] == "github"
    integration = list_integrations(user_id)[0]
    assert integration["sync_count"] == 1
    assert integration["last_synced"] is not None
    assert get_resume(user_id)["achievement_ids"] == [result["id"]]


def test_repeated_webhook_creates_duplicates(make_user) -> None:
    user_id = make_user()
    connect_integration(user_id, "github")

    first = handle_webhook(user_id, "github", dict(EVENT))
    second = handle_webhook(user_id, "github", dict(EVENT))

    assert first["id"] != second["id"]
    assert len(list_achievements(user_id)) == 2
    assert list_integrations(user_id)[0]["sync_count"] == 2


def test_webhook_requires_active_integration(make_user) -> None:
    user_id = make_user()

    with pytest.raises(NotFoundError, match="not found or inactive"):
        handle_webhook(user_id, "github", dict(EVENT))

    integration = connect_integration(user_id, "github")
    toggle_integration(user_id, integration["id"])

    with pytest.raises(NotFoundError):
        handle_webhook(user_id, "github", dict(EVENT))

    assert list_achievements(user_id) == []
    assert list_integrations(user_id)[0]["sync_count"] == 0


def test_webhook_requires_all_fields(make_user) -> None:
    user_id = make_user()
    connect_integration(user_id, "github")

    for args in ((None, "github", EVENT), (user_id, None, EVENT), (user_id, "github", None)):
        with pytest.raises(InvalidDataError, match="Please provide"):
            handle_webhook(*args)


def test_invalid_event_leaves_sync_count_unchanged(make_user) -> None:
    user_id = make_user()
    connect_integration(user_id, "github")

    with pytest.raises(InvalidDataError):
        handle_webhook(user_id, "github", {**EVENT, "title": ""})

    assert list_integrations(user_id)[0]["sync_count"] == 0


def test_webhook_succeeds_when_refresh_fails(make_user) -> None:
    user_id = make_user()
    connect_integration(user_id, "github")

    with patch(
        "resume_ecosystem.services.integration.refresh_resume_for_user",
        side_effect=ResumeRefreshError("boom"),
    ):
        result = handle_webhook(user_id, "github", dict(EVENT))

    assert result["status"] == "verified"
    assert len(list_achievements(user_id)) == 1


def test_toggle_and_delete_check_ownership(make_user) -> None:
    owner = make_user()
    other = make_user(name="Grace", email="grace@example.com")
    integration = connect_integration(owner, "devpost")

    with pytest.raises(NotFoundError):
        toggle_integration(owner, 9999)
    with pytest.raises(PermissionDeniedError):
        toggle_integration(other, integration["id"])
    with pytest.raises(PermissionDeniedError):
        delete_integration(other, integration["id"])

    assert toggle_integration(owner, integration["id"])["is_active"] is False
    delete_integration(owner, integration["id"])
    assert list_integrations(owner) == []


def test_integration_is_checked_before_event_fields(make_user) -> None:
    user_id = make_user()

    with pytest.raises(NotFoundError):
        handle_webhook(user_id, "github", {"title": "x"})


def test_webhook_parses_iso_dates_from_json(make_user) -> None:
    user_id = make_user()
    connect_integration(user_id, "coursera")

    result = handle_webhook(
        user_id,
        "coursera",
        {**EVENT, "type": "course", "start_date": "2024-03-01", "end_date": "2024-04-15"},
    )

    assert result["start_date"] == date(2024, 3, 1)
    assert result["end_date"] == date(2024, 4, 15)
    assert result["source"] == "coursera"

    with pytest.raises(InvalidDataError, match="achievementData.start_date"):
        handle_webhook(user_id, "coursera", {**EVENT, "start_date": "soon"})
