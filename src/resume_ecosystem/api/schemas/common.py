"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Uniform response envelope.

    Routes are declared with ``response_model_exclude_unset=True`` so keys that
    were not set (for example ``count`` on single-item responses) are omitted.
    ``success`` must therefore always be passed explicitly.
    """

    success: bool = Field(description="Whether the request succeeded")
    data: DataT | None = Field(None, description="Response payload")
    message: str | None = Field(None, description="Human-readable status message")
    error: Any | None = Field(None, description="Error details (development only)")
    count: int | None = Field(None, description="Number of items in list responses")
