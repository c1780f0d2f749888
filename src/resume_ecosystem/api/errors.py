"""Exception handlers rendering failures in the response envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resume_ecosystem.config import is_development
from resume_ecosystem.exceptions import ResumeEcosystemError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, detail: object | None = None) -> JSONResponse:
    """Build a failure envelope. ``detail`` is only exposed in development."""
    content: dict[str, object] = {"success": False, "message": message}
    if detail is not None and is_development():
        content["error"] = detail
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ResumeEcosystemError)
    async def service_error_handler(request: Request, exc: ResumeEcosystemError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return error_response(exc.status_code, exc.message, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid {location}: {first.get('msg')}" if location else "Invalid request"
        # Validation details are safe to return in every environment
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "message": message,
                "error": jsonable_errors(errors),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error", str(exc))


def jsonable_errors(errors: list[dict]) -> list[dict]:
    """Keep only the JSON-safe parts of pydantic error entries."""
    return [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in errors
    ]
