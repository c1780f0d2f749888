"""Conversions from ORM models to plain dictionaries.

Services hand dictionaries to the API layer and to the resume synthesis
functions, so nothing outside a session touches ORM instances.
"""

from __future__ import annotations

from typing import Any

from resume_ecosystem.constants.achievement_constants import PERSONAL_INFO_FIELDS, VISIBILITY_FIELDS
from resume_ecosystem.data.models import Achievement, Integration, Resume, User


def user_to_dict(user: User) -> dict[str, Any]:
    """Convert a User model to a dictionary (without the password hash)."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "phone": user.phone,
        "profile_picture": user.profile_picture,
        "location": user.location,
        "linkedin": user.linkedin,
        "github": user.github,
        "portfolio": user.portfolio,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def personal_info_from_user(user: User) -> dict[str, str]:
    """Build the resume personal-info snapshot from a user's profile fields."""
    return {field: getattr(user, field) or "" for field in PERSONAL_INFO_FIELDS}


def achievement_to_dict(achievement: Achievement) -> dict[str, Any]:
    """Convert an Achievement model to a dictionary.

    Args:
        achievement: Achievement model instance

    Returns:
        Dictionary with achievement data; the metadata bag is exposed as ``metadata``
    """
    return {
        "id": achievement.id,
        "user_id": achievement.user_id,
        "type": achievement.type,
        "title": achievement.title,
        "organization": achievement.organization,
        "description": achievement.description,
        "start_date": achievement.start_date,
        "end_date": achievement.end_date,
        "skills": list(achievement.skills or []),
        "certificate_url": achievement.certificate_url,
        "status": achievement.status,
        "source": achievement.source,
        "metadata": dict(achievement.meta or {}),
        "created_at": achievement.created_at,
        "updated_at": achievement.updated_at,
    }


def resume_to_dict(resume: Resume) -> dict[str, Any]:
    """Convert a Resume model to a dictionary with achievement ids, not records."""
    return {
        "id": resume.id,
        "user_id": resume.user_id,
        "personal_info": dict(resume.personal_info or {}),
        "summary": resume.summary,
        "skills": list(resume.skills or []),
        "achievement_ids": list(resume.achievement_ids or []),
        "visibility": {field: getattr(resume, field) for field in VISIBILITY_FIELDS},
        "template": resume.template,
        "completeness": resume.completeness,
        "created_at": resume.created_at,
        "updated_at": resume.updated_at,
    }


def integration_to_dict(integration: Integration) -> dict[str, Any]:
    """Convert an Integration model to a dictionary. The API key is never included."""
    return {
        "id": integration.id,
        "user_id": integration.user_id,
        "platform": integration.platform,
        "platform_user_id": integration.platform_user_id,
        "is_active": integration.is_active,
        "last_synced": integration.last_synced,
        "sync_count": integration.sync_count,
        "created_at": integration.created_at,
        "updated_at": integration.updated_at,
    }
