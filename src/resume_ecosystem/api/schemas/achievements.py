"""Pydantic schemas for achievement API endpoints."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from resume_ecosystem.constants.achievement_constants import (
    AchievementSource,
    AchievementStatus,
    AchievementType,
)


class AchievementMetadata(BaseModel):
    """Type-dependent details of an achievement."""

    # Hackathons
    position: str | None = Field(None, description="Placement, e.g. '1st'")
    prize: str | None = Field(None, description="Prize won")
    team_size: int | None = Field(None, ge=1, description="Number of team members")

    # Courses
    grade: str | None = Field(None, description="Final grade")
    duration: str | None = Field(None, description="Course length, e.g. '6 weeks'")
    instructor: str | None = Field(None, description="Course instructor")

    # Internships
    role: str | None = Field(None, description="Role held")
    department: str | None = Field(None, description="Department or team")

    # Projects
    tech_stack: list[str] | None = Field(None, description="Technologies used")
    github_url: str | None = Field(None, description="Repository URL")
    live_url: str | None = Field(None, description="Deployed URL")


class AchievementResponse(BaseModel):
    """Response schema for achievement data."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    type: str
    title: str
    organization: str
    description: str = ""
    start_date: date
    end_date: date | None = None
    skills: list[str] = []
    certificate_url: str = ""
    status: str
    source: str
    metadata: dict[str, Any] = {}
    created_at: datetime
    updated_at: datetime


class AchievementCreateRequest(BaseModel):
    """Request schema for creating an achievement."""

    model_config = ConfigDict(use_enum_values=True)

    type: AchievementType = Field(..., description="Kind of achievement")
    title: str = Field(..., min_length=1, description="Achievement title")
    organization: str = Field(..., min_length=1, description="Issuing or hosting organization")
    description: str = Field("", description="Free-text description")
    start_date: date = Field(..., description="Start date (ISO format)")
    end_date: date | None = Field(None, description="End date (ISO format)")
    skills: list[str] = Field(default_factory=list, description="Explicit skill tags")
    certificate_url: str = Field("", description="Certificate link")
    status: AchievementStatus = Field(
        AchievementStatus.UNVERIFIED.value, description="Verification status"
    )
    source: AchievementSource = Field(AchievementSource.MANUAL.value, description="Origin")
    metadata: AchievementMetadata | None = Field(None, description="Type-dependent details")

    def to_service_data(self) -> dict[str, Any]:
        data = self.model_dump()
        data["metadata"] = self.metadata.model_dump(exclude_none=True) if self.metadata else {}
        return data


class AchievementUpdateRequest(BaseModel):
    """Request schema for updating an achievement.

    All fields are optional; only provided fields are updated.
    """

    model_config = ConfigDict(use_enum_values=True)

    type: AchievementType | None = Field(None, description="Kind of achievement")
    title: str | None = Field(None, description="Achievement title")
    organization: str | None = Field(None, description="Issuing or hosting organization")
    description: str | None = Field(None, description="Free-text description")
    start_date: date | None = Field(None, description="Start date (ISO format)")
    end_date: date | None = Field(None, description="End date (ISO format)")
    skills: list[str] | None = Field(None, description="Explicit skill tags")
    certificate_url: str | None = Field(None, description="Certificate link")
    status: AchievementStatus | None = Field(None, description="Verification status")
    source: AchievementSource | None = Field(None, description="Origin")
    metadata: AchievementMetadata | None = Field(None, description="Type-dependent details")

    def to_service_data(self) -> dict[str, Any]:
        data = self.model_dump(exclude_unset=True)
        if "metadata" in data:
            data["metadata"] = (
                self.metadata.model_dump(exclude_none=True) if self.metadata else {}
            )
        return data


class AchievementStatsResponse(BaseModel):
    """Response schema for achievement statistics."""

    total: int
    by_type: dict[str, int]
    by_status: dict[str, int]
    skills: list[str]
