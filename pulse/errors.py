"""Error taxonomy for HR Pulse.

Every caller-facing failure is one of these categories. Domain code
raises them; the HTTP layer maps ``status_code`` / ``code`` onto the
response. Store-layer exceptions are never wrapped and nothing here
retries.
"""
from typing import Optional

from pulse.models.common import ErrorResponse


class PulseError(Exception):
    """Base class for categorized failures."""

    code: str = "UNKNOWN_ERROR"
    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return ErrorResponse(detail=self.message, error_code=self.code).model_dump(exclude_none=True)


class InvalidInput(PulseError):
    """Malformed or out-of-range input."""

    code = "VALIDATION_ERROR"
    status_code = 400


class Unauthorized(PulseError):
    """No resolvable caller identity."""

    code = "AUTHENTICATION_REQUIRED"
    status_code = 401


class Forbidden(PulseError):
    """Caller's role lacks permission for the requested scope."""

    code = "ACCESS_DENIED"
    status_code = 403


class NotFound(PulseError):
    """Referenced entity is absent (write paths only)."""

    code = "RESOURCE_NOT_FOUND"
    status_code = 404


class Conflict(PulseError):
    """Duplicate submission for an already-recorded (user, date)."""

    code = "CONFLICT"
    status_code = 409
