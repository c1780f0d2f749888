"""Registration, login and profile routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from resume_ecosystem.api.dependencies import get_current_user_id
from resume_ecosystem.api.schemas.common import ApiResponse
from resume_ecosystem.api.schemas.users import (
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserResponse,
)
from resume_ecosystem.services.auth import authenticate_user, register_user
from resume_ecosystem.services.user_profile import get_user, update_user_profile

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=ApiResponse[UserResponse],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def register(data: RegisterRequest) -> ApiResponse[UserResponse]:
    """Register a new user and create their default resume."""
    user = register_user(
        name=data.name,
        email=data.email,
        password=data.password,
        phone=data.phone,
        location=data.location,
    )
    return ApiResponse[UserResponse](success=True, data=UserResponse(**user))


@router.post(
    "/login",
    response_model=ApiResponse[UserResponse],
    response_model_exclude_unset=True,
)
def login(data: LoginRequest) -> ApiResponse[UserResponse]:
    """Check credentials and return the user's data."""
    user = authenticate_user(data.email, data.password)
    return ApiResponse[UserResponse](success=True, data=UserResponse(**user))


@router.get(
    "/me",
    response_model=ApiResponse[UserResponse],
    response_model_exclude_unset=True,
)
def get_me(
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[UserResponse]:
    """Get the current user's account and profile."""
    return ApiResponse[UserResponse](success=True, data=UserResponse(**get_user(current_user_id)))


@router.put(
    "/profile",
    response_model=ApiResponse[UserResponse],
    response_model_exclude_unset=True,
)
def update_profile(
    data: ProfileUpdateRequest,
    current_user_id: Annotated[int, Depends(get_current_user_id)],
) -> ApiResponse[UserResponse]:
    """Update profile fields and mirror them into the resume. Blank values are ignored."""
    user = update_user_profile(current_user_id, data.model_dump(exclude_none=True))
    return ApiResponse[UserResponse](success=True, data=UserResponse(**user))
