"""Pydantic schemas for authentication and user profile endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Response schema for user account and profile data."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str = ""
    profile_picture: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    portfolio: str = ""
    created_at: datetime
    updated_at: datetime


class RegisterRequest(BaseModel):
    """Request schema for registering a user.

    Required fields are checked by the service so that a missing field yields
    a single descriptive 400 message.
    """

    name: str | None = Field(None, description="Display name")
    email: str | None = Field(None, description="Login email address")
    password: str | None = Field(None, description="Password (at least 6 characters)")
    phone: str | None = Field(None, description="Phone number")
    location: str | None = Field(None, description="City, country")


class LoginRequest(BaseModel):
    """Request schema for logging in."""

    email: str | None = Field(None, description="Login email address")
    password: str | None = Field(None, description="Password")


class ProfileUpdateRequest(BaseModel):
    """Request schema for updating profile fields.

    Empty or missing values keep the stored value.
    """

    name: str | None = Field(None, description="Display name")
    phone: str | None = Field(None, description="Phone number")
    location: str | None = Field(None, description="City, country")
    linkedin: str | None = Field(None, description="LinkedIn profile URL")
    github: str | None = Field(None, description="GitHub profile URL or username")
    portfolio: str | None = Field(None, description="Personal website URL")
    profile_picture: str | None = Field(None, description="Profile picture URL")
