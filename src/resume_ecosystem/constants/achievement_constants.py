"""
Constants for achievements, integrations and resume synthesis.
"""

from enum import Enum


class AchievementType(str, Enum):
    """Kinds of achievements a user can record."""

    HACKATHON = "hackathon"
    COURSE = "course"
    INTERNSHIP = "internship"
    PROJECT = "project"
    CERTIFICATION = "certification"


class AchievementStatus(str, Enum):
    """Verification status of an achievement."""

    VERIFIED = "verified"
    PENDING = "pending"
    UNVERIFIED = "unverified"


class IntegrationPlatform(str, Enum):
    """External platforms that can push achievements through the webhook."""

    DEVPOST = "devpost"
    COURSERA = "coursera"
    UDEMY = "udemy"
    GITHUB = "github"
    LINKEDIN = "linkedin"


class ResumeTemplate(str, Enum):
    """Presentation template selector stored on a resume."""

    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"


class AchievementSource(str, Enum):
    """Where an achievement came from: manual entry or an integration platform."""

    MANUAL = "manual"
    DEVPOST = "devpost"
    COURSERA = "coursera"
    UDEMY = "udemy"
    GITHUB = "github"
    LINKEDIN = "linkedin"


MANUAL_SOURCE = AchievementSource.MANUAL.value
ACHIEVEMENT_SOURCES = tuple(s.value for s in AchievementSource)

ACHIEVEMENT_TYPES = tuple(t.value for t in AchievementType)
ACHIEVEMENT_STATUSES = tuple(s.value for s in AchievementStatus)
INTEGRATION_PLATFORMS = tuple(p.value for p in IntegrationPlatform)
RESUME_TEMPLATES = tuple(t.value for t in ResumeTemplate)

# ============================================================================
# SKILL EXTRACTION - Canonical labels matched case-insensitively in descriptions
# ============================================================================

COMMON_SKILLS = (
    "JavaScript",
    "Python",
    "Java",
    "C++",
    "React",
    "Node.js",
    "Express",
    "MongoDB",
    "SQL",
    "PostgreSQL",
    "AWS",
    "Docker",
    "Kubernetes",
    "Git",
    "HTML",
    "CSS",
    "TypeScript",
    "Vue",
    "Angular",
    "Django",
    "Flask",
    "FastAPI",
    "Machine Learning",
    "Data Science",
    "TensorFlow",
    "PyTorch",
    "Redux",
    "Next.js",
    "Tailwind",
    "Bootstrap",
    "REST API",
    "GraphQL",
    "Firebase",
)

# Metadata key holding a project's technology list
TECH_STACK_KEY = "tech_stack"

# ============================================================================
# SUMMARY GENERATION
# ============================================================================

# Types tallied for the summary. Certifications are counted but never produce a sentence.
SUMMARY_TYPE_BUCKETS = ACHIEVEMENT_TYPES

# (type, sentence template, noun) in emission order
SUMMARY_FRAGMENTS = (
    (AchievementType.INTERNSHIP.value, "Completed {count} {noun}. ", "internship"),
    (AchievementType.HACKATHON.value, "Participated in {count} {noun}. ", "hackathon"),
    (AchievementType.PROJECT.value, "Built {count} {noun}. ", "project"),
    (AchievementType.COURSE.value, "Completed {count} {noun}. ", "course"),
)

SUMMARY_SKILL_PREVIEW_COUNT = 3

# ============================================================================
# COMPLETENESS SCORING
# ============================================================================

# Portfolio is a profile field but is not scored
PROFILE_COMPLETENESS_FIELDS = ("name", "email", "phone", "location", "linkedin", "github")
PROFILE_FIELD_POINTS = 5

SUMMARY_POINTS = 10
SUMMARY_MIN_LENGTH = 50

SKILL_POINTS_EACH = 2
SKILL_POINTS_CAP = 20

ACHIEVEMENT_POINTS_EACH = 10
ACHIEVEMENT_POINTS_CAP = 40

MAX_COMPLETENESS = 100

# ============================================================================
# RESUME VISIBILITY
# ============================================================================

VISIBILITY_FIELD_BY_TYPE = {
    AchievementType.PROJECT.value: "show_projects",
    AchievementType.COURSE.value: "show_courses",
    AchievementType.HACKATHON.value: "show_hackathons",
    AchievementType.INTERNSHIP.value: "show_internships",
    AchievementType.CERTIFICATION.value: "show_certifications",
}

VISIBILITY_FIELDS = tuple(VISIBILITY_FIELD_BY_TYPE.values())

PERSONAL_INFO_FIELDS = ("name", "email", "phone", "location", "linkedin", "github", "portfolio")
