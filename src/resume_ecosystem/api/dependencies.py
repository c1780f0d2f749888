"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Header

from resume_ecosystem.data.db import get_session
from resume_ecosystem.data.models import User
from resume_ecosystem.exceptions import AuthenticationError


def get_current_user_id(
    x_user_id: Annotated[
        str | None,
        Header(
            description=(
                "Current user ID. In production, this should be extracted "
                "from authenticated session/JWT token."
            )
        ),
    ] = None,
) -> int:
    """Resolve the authenticated user from request context.

    NOTE: This is a simplified implementation using a header.
    In production, this should extract from JWT/session.

    Args:
        x_user_id: Raw X-User-Id header value (temporary mechanism).

    Returns:
        int: ID of an existing user.

    Raises:
        AuthenticationError: If the header is missing, is not an integer,
            or names no user (401).
    """
    if x_user_id is None or not x_user_id.strip():
        raise AuthenticationError("Not authorized, please provide X-User-Id header")

    try:
        user_id = int(x_user_id)
    except ValueError as e:
        raise AuthenticationError("Not authorized, invalid X-User-Id header") from e

    with get_session() as session:
        if session.get(User, user_id) is None:
            raise AuthenticationError("Not authorized, user not found")
    return user_id
