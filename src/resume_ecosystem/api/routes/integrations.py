"""Integration routes for the API, including the public platform webhook."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path

from resume_ecosystem.api.dependencies import get_current_user_id
from resume_ecosystem.api.schemas.achievements import AchievementResponse
from resume_ecosystem.api.schemas.common import ApiResponse
from resume_ecosystem.api.schemas.integrations import (
    IntegrationCreateRequest,
    IntegrationResponse,
    WebhookRequest,
)
from resume_ecosystem.services.integration import (
    connect_integration,
    delete_integration,
    handle_webhook,
    list_integrations,
    toggle_integration,
)

router = APIRouter(prefix="/integrations", tags=["integrations"])


@router.get(
    "",
    response_model=ApiResponse[list[IntegrationResponse]],
    response_model_exclude_unset=True,
)
def list_integrations_endpoint(
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[list[IntegrationResponse]]:
    """List the current user's platform integrations."""
    results = list_integrations(current_user_id)
    return ApiResponse[list[IntegrationResponse]](
        success=True,
        count=len(results),
        data=[IntegrationResponse(**r) for r in results],
    )


@router.post(
    "",
    response_model=ApiResponse[IntegrationResponse],
    response_model_exclude_unset=True,
    status_code=201,
)
def connect_integration_endpoint(
    data: IntegrationCreateRequest,
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[IntegrationResponse]:
    """Connect a platform, or reactivate an existing connection."""
    result = connect_integration(
        current_user_id,
        platform=data.platform,
        platform_user_id=data.platform_user_id,
        api_key=data.api_key,
    )
    return ApiResponse[IntegrationResponse](success=True, data=IntegrationResponse(**result))


@router.post(
    "/webhook",
    response_model=ApiResponse[AchievementResponse],
    response_model_exclude_unset=True,
    status_code=201,
)
def webhook_endpoint(data: WebhookRequest) -> ApiResponse[AchievementResponse]:
    """Receive an achievement from an external platform.

    Public endpoint: the platform is trusted by having an active integration
    for the user, not by authentication headers. Missing fields give 400,
    an unknown or inactive integration 404, and invalid event fields 400.
    """
    result = handle_webhook(data.user_id, data.platform, data.achievement_data)
    return ApiResponse[AchievementResponse](
        success=True,
        message="Achievement added from webhook",
        data=AchievementResponse(**result),
    )


@router.patch(
    "/{integration_id}/toggle",
    response_model=ApiResponse[IntegrationResponse],
    response_model_exclude_unset=True,
)
def toggle_integration_endpoint(
    integration_id: Annotated[int, Path(description="Integration ID")],
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[IntegrationResponse]:
    """Activate or deactivate an integration."""
    result = toggle_integration(current_user_id, integration_id)
    return ApiResponse[IntegrationResponse](success=True, data=IntegrationResponse(**result))


@router.delete(
    "/{integration_id}",
    response_model=ApiResponse[Any],
    response_model_exclude_unset=True,
)
def delete_integration_endpoint(
    integration_id: Annotated[int, Path(description="Integration ID")],
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[Any]:
    """Disconnect a platform."""
    delete_integration(current_user_id, integration_id)
    return ApiResponse[Any](success=True, message="Integration removed")
