"""Achievement service for managing a user's achievement records.

This service provides CRUD operations for Achievement data. Every
create, update and delete ends with a synchronous resume refresh; a failed
refresh propagates to the caller as ``ResumeRefreshError``.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Literal, get_args

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session
from typing_extensions import TypedDict

from resume_ecosystem.constants.achievement_constants import (
    ACHIEVEMENT_SOURCES,
    ACHIEVEMENT_STATUSES,
    ACHIEVEMENT_TYPES,
)
from resume_ecosystem.data.db import get_session
from resume_ecosystem.data.models import Achievement
from resume_ecosystem.exceptions import InvalidDataError, NotFoundError, PermissionDeniedError
from resume_ecosystem.services.records import achievement_to_dict
from resume_ecosystem.services.resume_synthesis import refresh_resume_for_user
from resume_ecosystem.services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)

__all__ = [
    "AchievementData",
    "SORT_OPTIONS",
    "SortOption",
    "build_achievement",
    "create_achievement",
    "delete_achievement",
    "get_achievement",
    "get_achievement_stats",
    "list_achievements",
    "parse_achievement_data",
    "update_achievement",
]

# Fields that can be set on Achievement (``metadata`` maps to the ``meta`` attribute)
_ACHIEVEMENT_FIELDS = (
    "type",
    "title",
    "organization",
    "description",
    "start_date",
    "end_date",
    "skills",
    "certificate_url",
    "status",
    "source",
    "metadata",
)

_REQUIRED_FIELDS = ("type", "title", "organization", "start_date")

SortOption = Literal["newest", "oldest", "date"]
SORT_OPTIONS: tuple[str, ...] = get_args(SortOption)


class AchievementData(TypedDict, total=False):
    """TypedDict for achievement data."""

    type: str
    title: str
    organization: str
    description: str
    start_date: date
    end_date: date | None
    skills: list[str]
    certificate_url: str
    status: str
    source: str
    metadata: dict[str, Any]


_ACHIEVEMENT_DATA_ADAPTER = TypeAdapter(AchievementData)


def parse_achievement_data(raw: dict[str, Any], field_prefix: str = "") -> AchievementData:
    """Coerce untyped achievement fields, e.g. ISO date strings from JSON payloads.

    Unknown keys are dropped. Required fields and enum values are checked
    later by ``build_achievement``.

    Raises:
        InvalidDataError: If a field has the wrong type or format.
    """
    try:
        return _ACHIEVEMENT_DATA_ADAPTER.validate_python(raw)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"])
        raise InvalidDataError(
            f"Invalid {field_prefix}{field}: {first['msg']}", detail=errors
        ) from e


def _validate_achievement_data(achievement_data: AchievementData) -> str | None:
    """Validate achievement data.

    Args:
        achievement_data: Dictionary containing achievement fields

    Returns:
        Error message if validation fails, None if valid
    """
    for field, allowed in (
        ("type", ACHIEVEMENT_TYPES),
        ("status", ACHIEVEMENT_STATUSES),
        ("source", ACHIEVEMENT_SOURCES),
    ):
        value = achievement_data.get(field)
        if value is not None and value not in allowed:
            return f"Invalid {field} '{value}'. Must be one of: {', '.join(allowed)}"

    for field in ("title", "organization"):
        if field in achievement_data and not (achievement_data[field] or "").strip():
            return f"{field} cannot be empty"

    start_date = achievement_data.get("start_date")
    end_date = achievement_data.get("end_date")
    if start_date and end_date and end_date < start_date:
        return "end_date cannot be before start_date"

    return None


def _apply_achievement_updates(achievement: Achievement, achievement_data: AchievementData) -> None:
    """Apply updates from achievement_data to an Achievement model."""
    for field in _ACHIEVEMENT_FIELDS:
        if field not in achievement_data:
            continue
        value = achievement_data[field]
        if field == "metadata":
            achievement.meta = dict(value or {})
        elif field in ("title", "organization"):
            setattr(achievement, field, value.strip())
        elif field == "skills":
            achievement.skills = list(value or [])
        elif field in ("description", "certificate_url"):
            setattr(achievement, field, value or "")
        elif value is not None or field == "end_date":
            setattr(achievement, field, value)


def _load_owned_achievement(session: Session, user_id: int, achievement_id: int) -> Achievement:
    """Load an achievement and check it belongs to the user.

    Raises:
        NotFoundError: If no achievement has this ID.
        PermissionDeniedError: If it belongs to another user.
    """
    achievement = session.get(Achievement, achievement_id)
    if achievement is None:
        raise NotFoundError("Achievement not found")
    if achievement.user_id != user_id:
        raise PermissionDeniedError("Not authorized to access this achievement")
    return achievement


def build_achievement(user_id: int, achievement_data: AchievementData) -> Achievement:
    """Validate data and build an unsaved Achievement for the user.

    Raises:
        InvalidDataError: If required fields are missing or values are invalid.
    """
    missing = [field for field in _REQUIRED_FIELDS if not achievement_data.get(field)]
    if missing:
        raise InvalidDataError(f"Missing required fields: {', '.join(missing)}")

    validation_error = _validate_achievement_data(achievement_data)
    if validation_error:
        raise InvalidDataError(validation_error)

    achievement = Achievement(user_id=user_id)
    _apply_achievement_updates(achievement, achievement_data)
    return achievement


def list_achievements(
    user_id: int,
    achievement_type: str | None = None,
    status: str | None = None,
    sort: SortOption | None = None,
) -> list[dict]:
    """Get a user's achievements, optionally filtered and sorted.

    Args:
        user_id: ID of the owner
        achievement_type: Only return achievements of this type
        status: Only return achievements with this verification status
        sort: ``newest`` (default, by creation time), ``oldest`` or ``date``
            (by start date, most recent first)

    Returns:
        List of achievement dictionaries

    Raises:
        InvalidDataError: If the sort order is unknown.
    """
    if sort is not None and sort not in SORT_OPTIONS:
        raise InvalidDataError(
            f"Invalid sort '{sort}'. Must be one of: {', '.join(SORT_OPTIONS)}"
        )

    with get_session() as session:
        query = session.query(Achievement).filter(Achievement.user_id == user_id)
        if achievement_type:
            query = query.filter(Achievement.type == achievement_type)
        if status:
            query = query.filter(Achievement.status == status)

        if sort == "oldest":
            query = query.order_by(Achievement.created_at.asc(), Achievement.id.asc())
        elif sort == "date":
            query = query.order_by(Achievement.start_date.desc(), Achievement.id.desc())
        else:
            query = query.order_by(Achievement.created_at.desc(), Achievement.id.desc())

        return [achievement_to_dict(a) for a in query.all()]


def get_achievement(user_id: int, achievement_id: int) -> dict:
    """Get a single achievement owned by the user."""
    with get_session() as session:
        return achievement_to_dict(_load_owned_achievement(session, user_id, achievement_id))


def create_achievement(user_id: int, achievement_data: AchievementData) -> dict:
    """Create an achievement and refresh the owner's resume.

    Args:
        user_id: ID of the owner
        achievement_data: Dictionary containing achievement fields.
                          Must include type, title, organization and start_date.

    Returns:
        Dictionary with the created achievement data

    Raises:
        InvalidDataError: If the data is invalid.
        ResumeRefreshError: If the resume refresh fails after creation.
    """
    with get_session() as session:
        achievement = build_achievement(user_id, achievement_data)
        session.add(achievement)
        session.flush()
        result = achievement_to_dict(achievement)

    logger.info("Created achievement %d for user %d", result["id"], user_id)
    refresh_resume_for_user(user_id)
    return result


def update_achievement(
    user_id: int, achievement_id: int, achievement_data: AchievementData
) -> dict:
    """Update an achievement and refresh the owner's resume.

    Only the fields present in ``achievement_data`` are changed.

    Raises:
        NotFoundError: If the achievement does not exist.
        PermissionDeniedError: If it belongs to another user.
        InvalidDataError: If the merged data is invalid.
        ResumeRefreshError: If the resume refresh fails after the update.
    """
    with get_session() as session:
        achievement = _load_owned_achievement(session, user_id, achievement_id)

        # Merge existing dates with updates for validation
        merged_data: AchievementData = {
            **{k: v for k, v in achievement_data.items() if k not in ("start_date", "end_date")},
            "start_date": achievement_data.get("start_date") or achievement.start_date,
            "end_date": achievement_data.get("end_date", achievement.end_date),
        }
        validation_error = _validate_achievement_data(merged_data)
        if validation_error:
            raise InvalidDataError(validation_error)

        _apply_achievement_updates(achievement, achievement_data)
        session.flush()
        result = achievement_to_dict(achievement)

    refresh_resume_for_user(user_id)
    return result


def delete_achievement(user_id: int, achievement_id: int) -> None:
    """Delete an achievement immediately and refresh the owner's resume.

    Raises:
        NotFoundError: If the achievement does not exist.
        PermissionDeniedError: If it belongs to another user.
        ResumeRefreshError: If the resume refresh fails after deletion.
    """
    with get_session() as session:
        achievement = _load_owned_achievement(session, user_id, achievement_id)
        session.delete(achievement)

    logger.info("Deleted achievement %d for user %d", achievement_id, user_id)
    refresh_resume_for_user(user_id)


def get_achievement_stats(user_id: int) -> dict:
    """Summarize a user's achievements by type and status.

    Returns:
        Dictionary with ``total``, ``by_type``, ``by_status`` and the
        extracted ``skills``
    """
    achievements = list_achievements(user_id)

    by_type = dict.fromkeys(ACHIEVEMENT_TYPES, 0)
    by_status = dict.fromkeys(ACHIEVEMENT_STATUSES, 0)
    for achievement in achievements:
        by_type[achievement["type"]] = by_type.get(achievement["type"], 0) + 1
        by_status[achievement["status"]] = by_status.get(achievement["status"], 0) + 1

    return {
        "total": len(achievements),
        "by_type": by_type,
        "by_status": by_status,
        "skills": extract_skills(achievements),
    }
