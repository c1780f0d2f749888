"""Service-level exceptions mapped to HTTP responses by the API layer."""

from __future__ import annotations


class ResumeEcosystemError(Exception):
    """Base class for expected service failures.

    Attributes:
        status_code: HTTP status the API layer should respond with.
        message: Human-readable message placed in the response envelope.
    """

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None, detail: object | None = None) -> None:
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class InvalidDataError(ResumeEcosystemError):
    """Raised when input is missing required fields or violates a constraint."""

    status_code = 400
    default_message = "Invalid input"


class AuthenticationError(ResumeEcosystemError):
    status_code = 401
    default_message = "Not authorized"


class PermissionDeniedError(ResumeEcosystemError):
    """Raised when an authenticated user touches a resource they do not own."""

    status_code = 403
    default_message = "Not authorized"


class NotFoundError(ResumeEcosystemError):
    status_code = 404
    default_message = "Resource not found"


class ResumeRefreshError(ResumeEcosystemError):
    """Raised when the derived resume state could not be recomputed and saved."""

    status_code = 500
    default_message = "Failed to refresh resume"
