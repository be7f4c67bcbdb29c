"""
Centralized error handling for catalog/booking failures.
Services raise the domain exceptions below; routes stay thin and one handler maps them to HTTP.
"""
from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants: status codes
# ---------------------------------------------------------------------------

STATUS_FORBIDDEN = 403
STATUS_NOT_FOUND = 404
STATUS_CONFLICT = 409
STATUS_UNPROCESSABLE = 422
STATUS_INTERNAL_ERROR = 500


# ---------------------------------------------------------------------------
# Domain exceptions
# ---------------------------------------------------------------------------


class EventSpaceError(Exception):
    """Base for all expected service-layer failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(EventSpaceError):
    """Venue, booking or other record does not exist (or is not visible to the caller)."""


class ValidationError(EventSpaceError):
    """Malformed input: bad filter values, out-of-range guest count, price mismatch."""


class ConflictError(EventSpaceError):
    """Request is well-formed but the current state forbids it (date taken, venue banned)."""


class PermissionDeniedError(EventSpaceError):
    """Caller identity missing where the operation needs one."""


# ---------------------------------------------------------------------------
# Error rules: (exception class, status_code). First match wins.
# Add new rules here instead of scattering checks in routes.
# ---------------------------------------------------------------------------

ERROR_RULES: list[tuple[type[EventSpaceError], int]] = [
    (NotFoundError, STATUS_NOT_FOUND),
    (ValidationError, STATUS_UNPROCESSABLE),
    (ConflictError, STATUS_CONFLICT),
    (PermissionDeniedError, STATUS_FORBIDDEN),
]


def error_status_code(exc: Exception) -> int:
    for exc_type, status_code in ERROR_RULES:
        if isinstance(exc, exc_type):
            return status_code
    return STATUS_INTERNAL_ERROR


async def eventspace_error_handler(request: Request, exc: EventSpaceError) -> JSONResponse:
    """
    FastAPI exception handler registered for EventSpaceError in main.py.
    Uses ERROR_RULES for the status code; body is {"detail": message} like HTTPException.
    """
    status_code = error_status_code(exc)
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})
