"""Resume model: the derived, per-user document kept in sync with achievements.

Summary, skills, achievement ids and completeness are rewritten by every
refresh; personal info, visibility flags and the template are user choices.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_ecosystem.constants.achievement_constants import RESUME_TEMPLATES, ResumeTemplate
from resume_ecosystem.data.db import Base

if TYPE_CHECKING:
    from resume_ecosystem.data.models.user import User


class Resume(Base):
    """
    The single derived resume document of a user.

    ``personal_info`` is a snapshot mirrored from the user profile, not a live
    join. ``summary``, ``skills``, ``achievement_ids`` and ``completeness`` are
    recomputed in full by the resume refresh.
    """

    __tablename__ = "resumes"
    __table_args__ = (
        CheckConstraint(
            "completeness >= 0 AND completeness <= 100", name="ck_resume_completeness_range"
        ),
        CheckConstraint(
            "template IN ({})".format(", ".join(f"'{t}'" for t in RESUME_TEMPLATES)),
            name="ck_resume_template",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )

    personal_info: Mapped[dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)
    summary: Mapped[str] = mapped_column(Text, nullable=False, default="")
    skills: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    # Ordered achievement ids, ascending as of the last refresh
    achievement_ids: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)

    show_projects: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_courses: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_hackathons: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_internships: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_certifications: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    template: Mapped[str] = mapped_column(
        String(16), nullable=False, default=ResumeTemplate.MODERN.value
    )
    completeness: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="resume")
