"""Achievement model for hackathons, courses, internships, projects and certifications.

Each achievement belongs to exactly one user. Type-specific details
(hackathon placement, course grade, internship role, project tech stack)
live in a JSON metadata bag rather than in dedicated columns.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_ecosystem.constants.achievement_constants import (
    ACHIEVEMENT_SOURCES,
    ACHIEVEMENT_STATUSES,
    ACHIEVEMENT_TYPES,
    MANUAL_SOURCE,
    AchievementStatus,
)
from resume_ecosystem.data.db import Base

if TYPE_CHECKING:
    from resume_ecosystem.data.models.user import User


def _in_clause(column: str, values: tuple[str, ...]) -> str:
    quoted = ", ".join(f"'{value}'" for value in values)
    return f"{column} IN ({quoted})"


class Achievement(Base):
    """A single achievement on a user's record.

    Attributes:
        id: Auto-incrementing primary key.
        user_id: Foreign key to the owning user.
        type: One of hackathon, course, internship, project, certification.
        title: Achievement title.
        organization: Issuing or hosting organization.
        description: Free-text description, scanned for skill keywords.
        start_date: Date the achievement started (required).
        end_date: Date the achievement ended, if any.
        skills: JSON array of explicit skill tags.
        certificate_url: Link to a certificate.
        status: Verification status (verified, pending, unverified).
        source: ``manual`` or the integration platform that created it.
        meta: Type-dependent metadata bag, stored in the ``metadata`` column.
        created_at: UTC timestamp when the record was created.
        updated_at: UTC timestamp when the record was last updated.
    """

    __tablename__ = "achievements"
    __table_args__ = (
        CheckConstraint(_in_clause("type", ACHIEVEMENT_TYPES), name="ck_achievement_type"),
        CheckConstraint(_in_clause("status", ACHIEVEMENT_STATUSES), name="ck_achievement_status"),
        CheckConstraint(_in_clause("source", ACHIEVEMENT_SOURCES), name="ck_achievement_source"),
        Index("ix_achievement_user_type", "user_id", "type"),
        Index("ix_achievement_user_created", "user_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type: Mapped[str] = mapped_column(String(32), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    organization: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    skills: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    certificate_url: Mapped[str] = mapped_column(String(512), nullable=False, default="")
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=AchievementStatus.UNVERIFIED.value
    )
    source: Mapped[str] = mapped_column(String(16), nullable=False, default=MANUAL_SOURCE)
    meta: Mapped[dict[str, Any]] = mapped_column("metadata", JSON, nullable=False, default=dict)

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
    user: Mapped[User] = relationship("User", back_populates="achievements")
