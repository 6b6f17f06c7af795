"""
Domain errors and their JSON error bodies.

Services raise these; routes catch them and answer with a short, generic
message. The underlying exception is only ever logged.
"""

from typing import Optional

from fastapi.responses import JSONResponse


class ScholarApiError(Exception):
    """Base class for all errors raised by this application."""


class DatabaseError(ScholarApiError):
    """A query against the profile store failed."""


class AIServiceError(ScholarApiError):
    """The chat-completion API could not be reached or returned an unusable reply."""


class ResumeExtractionError(ScholarApiError):
    """The uploaded file could not be decoded as a PDF."""


class AdminAuthError(ScholarApiError):
    """The supplied admin PIN did not match."""


def error_response(status_code: int, message: str, success: Optional[bool] = False) -> JSONResponse:
    """
    Build an error body.

    Pass success=None for endpoints whose error body is just {"error": ...}.
    """
    content = {"error": message}
    if success is not None:
        content = {"success": success, "error": message}
    return JSONResponse(status_code=status_code, content=content)
