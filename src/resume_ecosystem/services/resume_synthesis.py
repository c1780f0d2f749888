"""Resume synthesis: summary, completeness and the consistency refresh.

``generate_summary`` and ``calculate_completeness`` are pure functions over
plain dictionaries. ``refresh_resume_for_user`` recomputes every derived
field of a user's resume from the current achievement set and profile; it is
called after each achievement mutation and each accepted webhook event.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy.orm import Session

from resume_ecosystem.constants.achievement_constants import (
    ACHIEVEMENT_POINTS_CAP,
    ACHIEVEMENT_POINTS_EACH,
    MAX_COMPLETENESS,
    PROFILE_COMPLETENESS_FIELDS,
    PROFILE_FIELD_POINTS,
    SKILL_POINTS_CAP,
    SKILL_POINTS_EACH,
    SUMMARY_FRAGMENTS,
    SUMMARY_MIN_LENGTH,
    SUMMARY_POINTS,
    SUMMARY_SKILL_PREVIEW_COUNT,
    SUMMARY_TYPE_BUCKETS,
)
from resume_ecosystem.data.db import get_session
from resume_ecosystem.data.models import Achievement, Resume, User
from resume_ecosystem.exceptions import ResumeRefreshError
from resume_ecosystem.services.records import (
    achievement_to_dict,
    personal_info_from_user,
    resume_to_dict,
    user_to_dict,
)
from resume_ecosystem.services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)

__all__ = [
    "calculate_completeness",
    "generate_summary",
    "get_or_create_resume",
    "refresh_resume_for_user",
]


def _pluralize(noun: str, count: int) -> str:
    return f"{noun}s" if count > 1 else noun


def generate_summary(
    user: Mapping[str, Any] | None, achievements: Sequence[Mapping[str, Any]]
) -> str:
    """Build the resume summary from achievement counts and extracted skills.

    The opening sentence reports the total number of achievements as
    "verified" whatever their individual status. Certifications are tallied
    but do not get a sentence of their own.

    Args:
        user: Profile of the achievements' owner. The wording does not use it.
        achievements: Achievement dictionaries of the user.

    Returns:
        Summary text. Count sentences end with a trailing space; the skills
        sentence, when present, ends without one.
    """
    counts = dict.fromkeys(SUMMARY_TYPE_BUCKETS, 0)
    for achievement in achievements:
        achievement_type = achievement.get("type")
        if achievement_type in counts:
            counts[achievement_type] += 1

    skills = extract_skills(achievements)

    summary = f"Motivated professional with {len(achievements)} verified achievements. "

    for achievement_type, template, noun in SUMMARY_FRAGMENTS:
        count = counts[achievement_type]
        if count > 0:
            summary += template.format(count=count, noun=_pluralize(noun, count))

    if skills:
        preview = ", ".join(skills[:SUMMARY_SKILL_PREVIEW_COUNT])
        summary += f"Proficient in {len(skills)}+ technologies including {preview}."

    return summary


def calculate_completeness(resume: Mapping[str, Any], user: Mapping[str, Any]) -> int:
    """Score how complete a resume is on a 0-100 scale.

    Points:
        - 5 for each non-empty profile field (name, email, phone, location,
          linkedin, github); portfolio is not scored
        - 10 for a summary longer than 50 characters
        - 2 per skill, at most 20
        - 10 per achievement, at most 40

    Args:
        resume: Mapping with ``summary``, ``skills`` and ``achievement_ids``.
        user: Mapping with the profile fields.

    Returns:
        Integer score capped at 100.
    """
    score = sum(PROFILE_FIELD_POINTS for field in PROFILE_COMPLETENESS_FIELDS if user.get(field))

    summary = resume.get("summary") or ""
    if len(summary) > SUMMARY_MIN_LENGTH:
        score += SUMMARY_POINTS

    skills = resume.get("skills") or []
    score += min(SKILL_POINTS_CAP, len(skills) * SKILL_POINTS_EACH)

    achievement_ids = resume.get("achievement_ids") or []
    score += min(ACHIEVEMENT_POINTS_CAP, len(achievement_ids) * ACHIEVEMENT_POINTS_EACH)

    return min(MAX_COMPLETENESS, score)


def get_or_create_resume(session: Session, user: User) -> Resume:
    """Return the user's resume, creating it with a personal-info snapshot if missing.

    A newly created resume has an empty summary, no skills and no achievements,
    and its completeness reflects the profile fields alone.
    """
    resume = session.query(Resume).filter(Resume.user_id == user.id).first()
    if resume is not None:
        return resume

    resume = Resume(
        user_id=user.id,
        personal_info=personal_info_from_user(user),
        summary="",
        skills=[],
        achievement_ids=[],
    )
    resume.completeness = calculate_completeness(
        {"summary": "", "skills": [], "achievement_ids": []}, user_to_dict(user)
    )
    session.add(resume)
    session.flush()
    logger.info("Created resume for user %d", user.id)
    return resume


def refresh_resume_for_user(user_id: int) -> dict[str, Any]:
    """Recompute and persist every derived field of a user's resume.

    Reads all of the user's achievements and the profile, fetches or creates
    the resume, then replaces ``achievement_ids``, ``skills``, ``summary`` and
    ``completeness``. Running it twice without intervening changes leaves the
    stored row untouched the second time.

    There is no lock or version check between the reads and the write:
    overlapping refreshes for the same user race and the last one to commit
    wins.

    Args:
        user_id: ID of the resume owner.

    Returns:
        Dictionary with the refreshed resume data.

    Raises:
        ResumeRefreshError: If the user does not exist or persistence fails.
    """
    try:
        with get_session() as session:
            user = session.get(User, user_id)
            if user is None:
                raise ResumeRefreshError(f"User {user_id} not found")

            achievements = [
                achievement_to_dict(a)
                for a in session.query(Achievement)
                .filter(Achievement.user_id == user_id)
                .order_by(Achievement.id)
                .all()
            ]
            user_data = user_to_dict(user)

            resume = get_or_create_resume(session, user)
            resume.achievement_ids = [a["id"] for a in achievements]
            resume.skills = extract_skills(achievements)
            resume.summary = generate_summary(user_data, achievements)
            resume.completeness = calculate_completeness(
                {
                    "summary": resume.summary,
                    "skills": resume.skills,
                    "achievement_ids": resume.achievement_ids,
                },
                user_data,
            )

    except ResumeRefreshError:
        logger.error("Resume refresh skipped: user %d not found", user_id)
        raise
    except Exception as exc:
        logger.exception("Failed to refresh resume for user %d", user_id)
        raise ResumeRefreshError(detail=str(exc)) from exc

    logger.debug(
        "Refreshed resume for user %d: %d achievements, completeness %d",
        user_id,
        len(resume.achievement_ids),
        resume.completeness,
    )
    return resume_to_dict(resume)
