"""User account model holding credentials and resume profile fields.

Passwords are stored as salted PBKDF2 hashes, never in plaintext.
Profile fields (phone, location, links) default to empty strings so that
completeness scoring can treat "unset" and "blank" the same way.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_ecosystem.data.db import Base

if TYPE_CHECKING:
    from resume_ecosystem.data.models.achievement import Achievement
    from resume_ecosystem.data.models.integration import Integration
    from resume_ecosystem.data.models.resume import Resume


class User(Base):
    """Application user account.

    Attributes:
        id: Auto-incrementing primary key.
        name: Display name used on the resume.
        email: Unique, lowercased login and contact address.
        password_hash: Salted hash of the user's password.
        phone: Phone number.
        profile_picture: URL of the profile picture.
        location: Free-form location (city, country).
        linkedin: LinkedIn profile URL.
        github: GitHub profile URL or handle.
        portfolio: Personal website URL.
        created_at: UTC timestamp when the account was created.
        updated_at: UTC timestamp when the account was last updated.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)

    phone: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    profile_picture: Mapped[str] = mapped_column(String(512), nullable=False, default="")
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    linkedin: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    github: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    portfolio: Mapped[str] = mapped_column(String(255), nullable=False, default="")

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
    achievements: Mapped[list[Achievement]] = relationship(
        "Achievement", back_populates="user", cascade="all, delete-orphan"
    )
    resume: Mapped[Resume | None] = relationship(
        "Resume", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    integrations: Mapped[list[Integration]] = relationship(
        "Integration", back_populates="user", cascade="all, delete-orphan"
    )
