from __future__ import annotations

from resume_ecosystem.constants.achievement_constants import (
    ACHIEVEMENT_SOURCES,
    ACHIEVEMENT_STATUSES,
    ACHIEVEMENT_TYPES,
    COMMON_SKILLS,
    INTEGRATION_PLATFORMS,
    MANUAL_SOURCE,
    RESUME_TEMPLATES,
    AchievementSource,
    AchievementStatus,
    AchievementType,
    IntegrationPlatform,
    ResumeTemplate,
)

__all__ = [
    "ACHIEVEMENT_SOURCES",
    "ACHIEVEMENT_STATUSES",
    "ACHIEVEMENT_TYPES",
    "COMMON_SKILLS",
    "INTEGRATION_PLATFORMS",
    "MANUAL_SOURCE",
    "RESUME_TEMPLATES",
    "AchievementSource",
    "AchievementStatus",
    "AchievementType",
    "IntegrationPlatform",
    "ResumeTemplate",
]
