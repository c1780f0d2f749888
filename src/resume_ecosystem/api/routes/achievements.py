"""Achievement routes for the API.

Create, update and delete refresh the owner's resume before responding;
a refresh failure fails the request with 500.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Query

from resume_ecosystem.api.dependencies import get_current_user_id
from resume_ecosystem.api.schemas.achievements import (
    AchievementCreateRequest,
    AchievementResponse,
    AchievementStatsResponse,
    AchievementUpdateRequest,
)
from resume_ecosystem.api.schemas.common import ApiResponse
from resume_ecosystem.constants.achievement_constants import AchievementStatus, AchievementType
from resume_ecosystem.services.achievement import (
    SortOption,
    create_achievement,
    delete_achievement,
    get_achievement,
    get_achievement_stats,
    list_achievements,
    update_achievement,
)

router = APIRouter(prefix="/achievements", tags=["achievements"])


@router.get(
    "",
    response_model=ApiResponse[list[AchievementResponse]],
    response_model_exclude_unset=True,
)
def list_achievements_endpoint(
    current_user_id: Annotated[int, Depends(get_current_user_id)],
    type: Annotated[  # noqa: A002
        AchievementType | None, Query(description="Filter by type")
    ] = None,
    status: Annotated[
        AchievementStatus | None, Query(description="Filter by verification status")
    ] = None,
    sort: Annotated[SortOption, Query(description="Sort order")] = "newest",
) -> ApiResponse[list[AchievementResponse]]:
    """List the current user's achievements, newest first by default."""
    results = list_achievements(
        current_user_id,
        achievement_type=type.value if type else None,
        status=status.value if status else None,
        sort=sort,
    )
    return ApiResponse[list[AchievementResponse]](
        success=True,
        count=len(results),
        data=[AchievementResponse(**r) for r in results],
    )


# --- /stats MUST come before /{achievement_id} to avoid path conflicts ---


@router.get(
    "/stats",
    response_model=ApiResponse[AchievementStatsResponse],
    response_model_exclude_unset=True,
)
def achievement_stats_endpoint(
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[AchievementStatsResponse]:
    """Get counts by type and status plus the extracted skills."""
    stats = get_achievement_stats(current_user_id)
    return ApiResponse[AchievementStatsResponse](
        success=True, data=AchievementStatsResponse(**stats)
    )


@router.get(
    "/{achievement_id}",
    response_model=ApiResponse[AchievementResponse],
    response_model_exclude_unset=True,
)
def get_achievement_endpoint(
    achievement_id: Annotated[int, Path(description="Achievement ID")],
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[AchievementResponse]:
    """Get a single achievement owned by the current user."""
    result = get_achievement(current_user_id, achievement_id)
    return ApiResponse[AchievementResponse](success=True, data=AchievementResponse(**result))


@router.post(
    "",
    response_model=ApiResponse[AchievementResponse],
    response_model_exclude_unset=True,
    status_code=201,
)
def create_achievement_endpoint(
    data: AchievementCreateRequest,
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[AchievementResponse]:
    """Create an achievement and refresh the resume."""
    result = create_achievement(current_user_id, data.to_service_data())
    return ApiResponse[AchievementResponse](success=True, data=AchievementResponse(**result))


@router.put(
    "/{achievement_id}",
    response_model=ApiResponse[AchievementResponse],
    response_model_exclude_unset=True,
)
def update_achievement_endpoint(
    achievement_id: Annotated[int, Path(description="Achievement ID")],
    data: AchievementUpdateRequest,
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[AchievementResponse]:
    """Update an achievement and refresh the resume. Only provided fields are updated."""
    result = update_achievement(current_user_id, achievement_id, data.to_service_data())
    return ApiResponse[AchievementResponse](success=True, data=AchievementResponse(**result))


@router.delete(
    "/{achievement_id}",
    response_model=ApiResponse[Any],
    response_model_exclude_unset=True,
)
def delete_achievement_endpoint(
    achievement_id: Annotated[int, Path(description="Achievement ID")],
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[Any]:
    """Delete an achievement and refresh the resume."""
    delete_achievement(current_user_id, achievement_id)
    return ApiResponse[Any](success=True, message="Achievement removed")
