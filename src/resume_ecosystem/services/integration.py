"""Integration service: platform connections and the inbound achievement webhook.

An active integration lets its platform push achievements for the user.
Pushed achievements are stored as verified with the platform as source.
Unlike the achievement CRUD paths, the webhook treats the resume refresh as
best effort: refresh failures are logged and the event is still accepted.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.orm import Session

from resume_ecosystem.constants.achievement_constants import (
    INTEGRATION_PLATFORMS,
    AchievementStatus,
)
from resume_ecosystem.data.db import get_session
from resume_ecosystem.data.models import Integration
from resume_ecosystem.exceptions import (
    InvalidDataError,
    NotFoundError,
    PermissionDeniedError,
    ResumeRefreshError,
)
from resume_ecosystem.services.achievement import (
    AchievementData,
    build_achievement,
    parse_achievement_data,
)
from resume_ecosystem.services.records import achievement_to_dict, integration_to_dict
from resume_ecosystem.services.resume_synthesis import refresh_resume_for_user

logger = logging.getLogger(__name__)

__all__ = [
    "connect_integration",
    "delete_integration",
    "handle_webhook",
    "list_integrations",
    "toggle_integration",
]


def _load_owned_integration(session: Session, user_id: int, integration_id: int) -> Integration:
    integration = session.get(Integration, integration_id)
    if integration is None:
        raise NotFoundError("Integration not found")
    if integration.user_id != user_id:
        raise PermissionDeniedError("Not authorized")
    return integration


def list_integrations(user_id: int) -> list[dict]:
    """Get all integrations of a user, oldest first."""
    with get_session() as session:
        integrations = (
            session.query(Integration)
            .filter(Integration.user_id == user_id)
            .order_by(Integration.id)
            .all()
        )
        return [integration_to_dict(i) for i in integrations]


def connect_integration(
    user_id: int,
    platform: str,
    platform_user_id: str | None = None,
    api_key: str | None = None,
) -> dict:
    """Create the user's integration for a platform, or reactivate and update it.

    Args:
        user_id: ID of the user
        platform: Platform name
        platform_user_id: The user's ID on the platform (kept if not given)
        api_key: Platform credential (kept if not given)

    Returns:
        Dictionary with integration data

    Raises:
        InvalidDataError: If the platform is not supported.
    """
    if platform not in INTEGRATION_PLATFORMS:
        raise InvalidDataError(
            f"Invalid platform '{platform}'. Must be one of: {', '.join(INTEGRATION_PLATFORMS)}"
        )

    with get_session() as session:
        integration = (
            session.query(Integration)
            .filter(Integration.user_id == user_id, Integration.platform == platform)
            .first()
        )

        if integration:
            integration.platform_user_id = platform_user_id or integration.platform_user_id
            integration.api_key = api_key or integration.api_key
            integration.is_active = True
        else:
            integration = Integration(
                user_id=user_id,
                platform=platform,
                platform_user_id=platform_user_id or "",
                api_key=api_key or "",
            )
            session.add(integration)

        session.flush()
        result = integration_to_dict(integration)

    logger.info("Connected %s integration for user %d", platform, user_id)
    return result


def handle_webhook(
    user_id: int | None,
    platform: str | None,
    achievement_data: dict[str, Any] | None,
) -> dict:
    """Accept an achievement pushed by an external platform.

    Requires an active integration for ``(user_id, platform)``; the event
    fields are only validated once the integration is found. The
    achievement is created as verified with the platform as its source, the
    integration's sync counter and timestamp are updated in the same
    transaction, and the resume is refreshed afterwards. Identical events
    create duplicate achievements.

    Webhook signatures are not verified.

    Returns:
        Dictionary with the created achievement data

    Raises:
        InvalidDataError: If a field is missing or the achievement data is invalid.
        NotFoundError: If there is no active integration for the pair.
    """
    if not user_id or not platform or not achievement_data:
        raise InvalidDataError("Please provide userId, platform, and achievementData")

    with get_session() as session:
        integration = (
            session.query(Integration)
            .filter(
                Integration.user_id == user_id,
                Integration.platform == platform,
                Integration.is_active.is_(True),
            )
            .first()
        )
        if integration is None:
            raise NotFoundError("Integration not found or inactive")

        event = parse_achievement_data(achievement_data, field_prefix="achievementData.")
        verified_data: AchievementData = {
            **event,
            "status": AchievementStatus.VERIFIED.value,
            "source": platform,
        }
        achievement = build_achievement(user_id, verified_data)
        session.add(achievement)

        integration.last_synced = datetime.now(UTC)
        integration.sync_count += 1

        session.flush()
        result = achievement_to_dict(achievement)

    logger.info(
        "Webhook from %s created achievement %d for user %d", platform, result["id"], user_id
    )

    try:
        refresh_resume_for_user(user_id)
    except ResumeRefreshError:
        logger.exception("Error updating resume from integration for user %d", user_id)

    return result


def toggle_integration(user_id: int, integration_id: int) -> dict:
    """Flip the active flag of an integration owned by the user."""
    with get_session() as session:
        integration = _load_owned_integration(session, user_id, integration_id)
        integration.is_active = not integration.is_active
        session.flush()
        return integration_to_dict(integration)


def delete_integration(user_id: int, integration_id: int) -> None:
    """Delete an integration owned by the user."""
    with get_session() as session:
        integration = _load_owned_integration(session, user_id, integration_id)
        session.delete(integration)
