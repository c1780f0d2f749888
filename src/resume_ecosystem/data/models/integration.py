"""Integration model linking a user to an external achievement platform.

An active integration is the trust relationship that lets the webhook
create auto-verified achievements on the user's behalf.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_ecosystem.constants.achievement_constants import INTEGRATION_PLATFORMS
from resume_ecosystem.data.db import Base

if TYPE_CHECKING:
    from resume_ecosystem.data.models.user import User


class Integration(Base):
    """Connection between a user and one external platform.

    Attributes:
        id: Auto-incrementing primary key.
        user_id: Foreign key to users table.
        platform: External platform name (devpost, coursera, udemy, github, linkedin).
        platform_user_id: The user's identifier on the platform.
        api_key: Platform credential supplied when connecting.
        is_active: Whether webhook events for this pair are accepted.
        last_synced: UTC timestamp of the last accepted webhook event.
        sync_count: Number of accepted webhook events.
    """

    __tablename__ = "integrations"
    __table_args__ = (
        UniqueConstraint("user_id", "platform", name="uq_integration_user_platform"),
        CheckConstraint(
            "platform IN ({})".format(", ".join(f"'{p}'" for p in INTEGRATION_PLATFORMS)),
            name="ck_integration_platform",
        ),
        CheckConstraint("sync_count >= 0", name="ck_integration_sync_count_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    platform: Mapped[str] = mapped_column(String(16), nullable=False)
    platform_user_id: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    api_key: Mapped[str] = mapped_column(String(512), nullable=False, default="")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    last_synced: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    sync_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

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
    user: Mapped[User] = relationship("User", back_populates="integrations")
