"""Route handlers for the API."""

from resume_ecosystem.api.routes import (
    achievements,
    auth,
    health,
    integrations,
    resume,
)

__all__ = [
    "health",
    "auth",
    "achievements",
    "resume",
    "integrations",
]
