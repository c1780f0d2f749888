"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- User: Account credentials and resume profile fields
- Achievement: Hackathons, courses, internships, projects and certifications
- Resume: The single derived resume document per user
- Integration: Connections to external platforms that push achievements

All models inherit from the shared Base declarative class defined in data.db.
"""

from resume_ecosystem.data.db import Base
from resume_ecosystem.data.models.achievement import Achievement
from resume_ecosystem.data.models.integration import Integration
from resume_ecosystem.data.models.resume import Resume
from resume_ecosystem.data.models.user import User

__all__ = ["Base", "Achievement", "Integration", "Resume", "User"]
