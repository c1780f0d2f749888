"""User profile service for reading and updating a user's personal information.

Profile changes are mirrored into the resume's personal-info snapshot and
trigger a resume refresh, since completeness is scored on profile fields.
"""

from __future__ import annotations

import logging
from typing import TypedDict

from resume_ecosystem.data.db import get_session
from resume_ecosystem.data.models import User
from resume_ecosystem.exceptions import NotFoundError
from resume_ecosystem.services.records import personal_info_from_user, user_to_dict
from resume_ecosystem.services.resume_synthesis import get_or_create_resume, refresh_resume_for_user

logger = logging.getLogger(__name__)

__all__ = [
    "UserProfileData",
    "get_user",
    "update_user_profile",
]

# Fields that can be updated through the profile endpoint
_PROFILE_FIELDS = (
    "name",
    "phone",
    "location",
    "linkedin",
    "github",
    "portfolio",
    "profile_picture",
)


class UserProfileData(TypedDict, total=False):
    """TypedDict for user profile data."""

    name: str
    phone: str
    location: str
    linkedin: str
    github: str
    portfolio: str
    profile_picture: str


def get_user(user_id: int) -> dict:
    """Get a user's account and profile information.

    Raises:
        NotFoundError: If the user does not exist.
    """
    with get_session() as session:
        user = session.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user_to_dict(user)


def update_user_profile(user_id: int, profile_data: UserProfileData) -> dict:
    """Update profile fields and mirror them into the user's resume.

    Only non-empty values overwrite stored ones; blank values keep the
    current field.

    Args:
        user_id: ID of the user
        profile_data: Dictionary containing profile fields to update

    Returns:
        Dictionary with updated user data

    Raises:
        NotFoundError: If the user does not exist.
        ResumeRefreshError: If the resume could not be recomputed afterwards.
    """
    with get_session() as session:
        user = session.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")

        updated_fields = []
        for field in _PROFILE_FIELDS:
            value = profile_data.get(field)
            if value:
                setattr(user, field, value)
                updated_fields.append(field)

        resume = get_or_create_resume(session, user)
        snapshot = dict(resume.personal_info or {})
        snapshot.update(personal_info_from_user(user))
        resume.personal_info = snapshot

    logger.info(
        "Updated profile for user %d: %s", user_id, ", ".join(updated_fields) or "no changes"
    )
    refresh_resume_for_user(user_id)
    return get_user(user_id)
