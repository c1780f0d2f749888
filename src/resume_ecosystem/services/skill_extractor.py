"""Skill extraction from achievement records.

Skills come from three places on each achievement:
- the explicit ``skills`` tag list (verbatim)
- the ``tech_stack`` list in the metadata bag, when present
- canonical labels from ``COMMON_SKILLS`` found in the description
  by case-insensitive substring match

Labels are not normalized: "Node.js" and "NodeJS" are distinct skills.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from resume_ecosystem.constants.achievement_constants import COMMON_SKILLS, TECH_STACK_KEY

__all__ = ["detect_description_skills", "extract_skills"]


def detect_description_skills(description: str | None) -> list[str]:
    """Return the vocabulary labels mentioned in a free-text description.

    Args:
        description: Achievement description, may be empty or None.

    Returns:
        Canonical labels in vocabulary order.
    """
    if not description:
        return []

    description_lower = description.lower()
    return [skill for skill in COMMON_SKILLS if skill.lower() in description_lower]


def _tech_stack(achievement: Mapping[str, Any]) -> list[str]:
    metadata = achievement.get("metadata") or {}
    tech_stack = metadata.get(TECH_STACK_KEY)
    if not tech_stack:
        return []
    return list(tech_stack)


def extract_skills(achievements: Iterable[Mapping[str, Any]]) -> list[str]:
    """Derive the deduplicated skill set of a collection of achievements.

    The result keeps first-seen order (achievement order, then tags,
    tech stack, description matches), so the same input sequence always
    yields the same list. Callers should compare it as a set.

    Args:
        achievements: Achievement dictionaries with ``skills``, ``metadata``
            and ``description`` keys (missing keys are treated as empty).

    Returns:
        List of unique skill labels.
    """
    # dict keeps insertion order, giving an ordered set
    skill_set: dict[str, None] = {}

    for achievement in achievements:
        for skill in achievement.get("skills") or []:
            skill_set.setdefault(skill, None)

        for tech in _tech_stack(achievement):
            skill_set.setdefault(tech, None)

        for skill in detect_description_skills(achievement.get("description")):
            skill_set.setdefault(skill, None)

    return list(skill_set)
