"""Pydantic schemas for resume API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from resume_ecosystem.api.schemas.achievements import AchievementResponse
from resume_ecosystem.constants.achievement_constants import ResumeTemplate


class PersonalInfo(BaseModel):
    """Personal-info snapshot shown on the resume."""

    name: str | None = Field(None, description="Display name")
    email: str | None = Field(None, description="Contact email")
    phone: str | None = Field(None, description="Phone number")
    location: str | None = Field(None, description="City, country")
    linkedin: str | None = Field(None, description="LinkedIn profile URL")
    github: str | None = Field(None, description="GitHub profile URL or username")
    portfolio: str | None = Field(None, description="Personal website URL")


class VisibilitySettings(BaseModel):
    """Which achievement types are included in the resume preview."""

    show_projects: bool = True
    show_courses: bool = True
    show_hackathons: bool = True
    show_internships: bool = True
    show_certifications: bool = True


class ResumeResponse(BaseModel):
    """Response schema for a resume.

    ``achievements`` holds the populated records for the ids in
    ``achievement_ids``; it is empty on responses that only carry ids.
    """

    id: int
    user_id: int
    personal_info: PersonalInfo
    summary: str = ""
    skills: list[str] = []
    achievement_ids: list[int] = []
    achievements: list[AchievementResponse] = []
    visibility: VisibilitySettings
    template: str
    completeness: int = Field(ge=0, le=100)
    created_at: datetime
    updated_at: datetime


class ResumeUpdateRequest(BaseModel):
    """Request schema for editing a resume.

    All fields are optional; personal info is merged into the snapshot.
    """

    model_config = ConfigDict(use_enum_values=True)

    personal_info: PersonalInfo | None = Field(None, description="Personal-info overrides")
    summary: str | None = Field(None, description="Replacement summary text")
    template: ResumeTemplate | None = Field(None, description="Presentation template")


class VisibilityUpdateRequest(BaseModel):
    """Request schema for changing visibility flags. Omitted flags are unchanged."""

    show_projects: bool | None = None
    show_courses: bool | None = None
    show_hackathons: bool | None = None
    show_internships: bool | None = None
    show_certifications: bool | None = None


class SummaryResponse(BaseModel):
    """Response schema for a regenerated summary."""

    summary: str
