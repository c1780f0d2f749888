"""Health check route reporting API and database status."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from resume_ecosystem import __version__
from resume_ecosystem.data.db import get_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=None)
def health_check() -> dict[str, str] | JSONResponse:
    """Return ``healthy`` when the database answers, else 503 ``unhealthy``."""
    try:
        with get_session() as session:
            session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Health check could not reach the database")
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "unreachable", "version": __version__},
        )
    return {"status": "healthy", "database": "ok", "version": __version__}
