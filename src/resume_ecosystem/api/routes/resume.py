"""Resume routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from resume_ecosystem.api.dependencies import get_current_user_id
from resume_ecosystem.api.schemas.common import ApiResponse
from resume_ecosystem.api.schemas.resumes import (
    ResumeResponse,
    ResumeUpdateRequest,
    SummaryResponse,
    VisibilityUpdateRequest,
)
from resume_ecosystem.services.resume import (
    get_resume,
    get_resume_preview,
    regenerate_summary,
    update_resume,
    update_visibility,
)

router = APIRouter(prefix="/resume", tags=["resume"])


@router.get(
    "",
    response_model=ApiResponse[ResumeResponse],
    response_model_exclude_unset=True,
)
def get_resume_endpoint(
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[ResumeResponse]:
    """Get the current user's resume with its achievements, creating it if needed."""
    result = get_resume(current_user_id)
    return ApiResponse[ResumeResponse](success=True, data=ResumeResponse(**result))


@router.put(
    "",
    response_model=ApiResponse[ResumeResponse],
    response_model_exclude_unset=True,
)
def update_resume_endpoint(
    data: ResumeUpdateRequest,
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[ResumeResponse]:
    """Edit personal info, summary or template and recompute completeness."""
    personal_info = data.personal_info.model_dump(exclude_none=True) if data.personal_info else None
    result = update_resume(
        current_user_id,
        personal_info=personal_info,
        summary=data.summary,
        template=data.template,
    )
    return ApiResponse[ResumeResponse](success=True, data=ResumeResponse(**result))


@router.patch(
    "/visibility",
    response_model=ApiResponse[ResumeResponse],
    response_model_exclude_unset=True,
)
def update_visibility_endpoint(
    data: VisibilityUpdateRequest,
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[ResumeResponse]:
    """Change which achievement types appear in the preview."""
    result = update_visibility(current_user_id, data.model_dump(exclude_none=True))
    return ApiResponse[ResumeResponse](success=True, data=ResumeResponse(**result))


@router.post(
    "/regenerate-summary",
    response_model=ApiResponse[SummaryResponse],
    response_model_exclude_unset=True,
)
def regenerate_summary_endpoint(
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[SummaryResponse]:
    """Regenerate the summary from the current achievements."""
    summary = regenerate_summary(current_user_id)
    return ApiResponse[SummaryResponse](success=True, data=SummaryResponse(summary=summary))


@router.get(
    "/preview",
    response_model=ApiResponse[ResumeResponse],
    response_model_exclude_unset=True,
)
def get_resume_preview_endpoint(
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[ResumeResponse]:
    """Get the resume with achievements filtered by the visibility settings."""
    result = get_resume_preview(current_user_id)
    return ApiResponse[ResumeResponse](success=True, data=ResumeResponse(**result))
