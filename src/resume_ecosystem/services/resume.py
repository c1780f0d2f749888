"""Resume service: read, edit and preview a user's resume document.

The resume is created lazily on first access. Edits made here (summary
text, template, visibility, personal-info overrides) are presentation
choices; the derived fields are rewritten by the next refresh.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from resume_ecosystem.constants.achievement_constants import (
    PERSONAL_INFO_FIELDS,
    RESUME_TEMPLATES,
    VISIBILITY_FIELD_BY_TYPE,
    VISIBILITY_FIELDS,
)
from resume_ecosystem.data.db import get_session
from resume_ecosystem.data.models import Achievement, Resume, User
from resume_ecosystem.exceptions import InvalidDataError, NotFoundError
from resume_ecosystem.services.records import achievement_to_dict, resume_to_dict, user_to_dict
from resume_ecosystem.services.resume_synthesis import (
    calculate_completeness,
    generate_summary,
    get_or_create_resume,
)

logger = logging.getLogger(__name__)

__all__ = [
    "get_resume",
    "get_resume_preview",
    "regenerate_summary",
    "update_resume",
    "update_visibility",
]


def _load_user(session: Session, user_id: int) -> User:
    user = session.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def _populated(session: Session, resume: Resume) -> dict[str, Any]:
    """Return the resume dictionary with achievement records in stored order.

    Ids whose achievement no longer exists are skipped.
    """
    data = resume_to_dict(resume)
    ids = data["achievement_ids"]
    records = {}
    if ids:
        records = {
            a.id: achievement_to_dict(a)
            for a in session.query(Achievement).filter(Achievement.id.in_(ids)).all()
        }
    data["achievements"] = [records[i] for i in ids if i in records]
    return data


def _rescore(resume: Resume, user: User) -> None:
    resume.completeness = calculate_completeness(
        {
            "summary": resume.summary,
            "skills": resume.skills,
            "achievement_ids": resume.achievement_ids,
        },
        user_to_dict(user),
    )


def get_resume(user_id: int) -> dict[str, Any]:
    """Get the user's resume with populated achievements, creating it if missing."""
    with get_session() as session:
        user = _load_user(session, user_id)
        resume = get_or_create_resume(session, user)
        return _populated(session, resume)


def update_resume(
    user_id: int,
    personal_info: dict[str, str] | None = None,
    summary: str | None = None,
    template: str | None = None,
) -> dict[str, Any]:
    """Edit the resume's personal info, summary or template and rescore it.

    Args:
        user_id: ID of the resume owner
        personal_info: Personal-info fields to merge into the snapshot
        summary: Replacement summary text (an empty string clears it)
        template: One of modern, classic, minimal

    Returns:
        Updated resume dictionary with populated achievements

    Raises:
        InvalidDataError: If the template is unknown.
    """
    if template is not None and template not in RESUME_TEMPLATES:
        raise InvalidDataError(
            f"Invalid template '{template}'. Must be one of: {', '.join(RESUME_TEMPLATES)}"
        )

    with get_session() as session:
        user = _load_user(session, user_id)
        resume = get_or_create_resume(session, user)

        if personal_info:
            snapshot = dict(resume.personal_info or {})
            snapshot.update(
                {
                    k: v
                    for k, v in personal_info.items()
                    if k in PERSONAL_INFO_FIELDS and v is not None
                }
            )
            resume.personal_info = snapshot

        if summary is not None:
            resume.summary = summary

        if template:
            resume.template = template

        _rescore(resume, user)
        session.flush()
        logger.info("Updated resume for user %d (completeness %d)", user_id, resume.completeness)
        return _populated(session, resume)


def update_visibility(user_id: int, visibility: dict[str, bool]) -> dict[str, Any]:
    """Merge visibility flags into the resume.

    Unknown keys are ignored.

    Returns:
        Updated resume dictionary (achievement ids only)
    """
    with get_session() as session:
        user = _load_user(session, user_id)
        resume = get_or_create_resume(session, user)

        for field in VISIBILITY_FIELDS:
            value = visibility.get(field)
            if value is not None:
                setattr(resume, field, bool(value))

        session.flush()
        logger.debug("Updated resume visibility for user %d", user_id)
        return resume_to_dict(resume)


def regenerate_summary(user_id: int) -> str:
    """Regenerate the summary from the current achievements and rescore.

    Returns:
        The new summary text
    """
    with get_session() as session:
        user = _load_user(session, user_id)
        resume = get_or_create_resume(session, user)
        achievements = [
            achievement_to_dict(a)
            for a in session.query(Achievement)
            .filter(Achievement.user_id == user_id)
            .order_by(Achievement.id)
            .all()
        ]

        resume.summary = generate_summary(user_to_dict(user), achievements)
        _rescore(resume, user)
        logger.info("Regenerated summary for user %d", user_id)
        return resume.summary


def get_resume_preview(user_id: int) -> dict[str, Any]:
    """Get the resume with achievements filtered by its visibility settings.

    Achievements of a type without a visibility flag are always shown.
    """
    with get_session() as session:
        user = _load_user(session, user_id)
        resume = get_or_create_resume(session, user)
        data = _populated(session, resume)

    visibility = data["visibility"]
    data["achievements"] = [
        a
        for a in data["achievements"]
        if visibility.get(VISIBILITY_FIELD_BY_TYPE.get(a["type"], ""), True)
    ]
    return data
