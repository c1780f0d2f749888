"""Pydantic schemas for integration and webhook endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from resume_ecosystem.constants.achievement_constants import IntegrationPlatform


class IntegrationResponse(BaseModel):
    """Response schema for integration data. The API key is never returned."""

    id: int
    user_id: int
    platform: str
    platform_user_id: str = ""
    is_active: bool
    last_synced: datetime | None = None
    sync_count: int = 0
    created_at: datetime
    updated_at: datetime


class IntegrationCreateRequest(BaseModel):
    """Request schema for connecting a platform."""

    model_config = ConfigDict(use_enum_values=True)

    platform: IntegrationPlatform = Field(..., description="Platform to connect")
    platform_user_id: str | None = Field(None, description="User ID on the platform")
    api_key: str | None = Field(None, description="Platform credential")


class WebhookRequest(BaseModel):
    """Inbound achievement event from an external platform.

    Field names follow the platforms' camelCase payloads. Presence is checked
    by the service so that any missing field yields one 400 message.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: int | None = Field(None, alias="userId", description="Target user ID")
    platform: str | None = Field(None, description="Sending platform")
    achievement_data: dict[str, Any] | None = Field(
        None, alias="achievementData", description="Achievement fields"
    )
