"""Services"""

from resume_ecosystem.services.achievement import (
    create_achievement,
    delete_achievement,
    get_achievement,
    get_achievement_stats,
    list_achievements,
    update_achievement,
)
from resume_ecosystem.services.resume_synthesis import (
    calculate_completeness,
    generate_summary,
    refresh_resume_for_user,
)
from resume_ecosystem.services.skill_extractor import extract_skills

__all__ = [
    "calculate_completeness",
    "create_achievement",
    "delete_achievement",
    "extract_skills",
    "generate_summary",
    "get_achievement",
    "get_achievement_stats",
    "list_achievements",
    "refresh_resume_for_user",
    "update_achievement",
]
