"""
Error taxonomy shared by the generation adapter and the request handlers.

Every error carries the HTTP status it maps to; the application installs a
single exception handler that renders ``{"detail": message}``.
"""
from fastapi import status


class TutorError(Exception):
    """Base class for all application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(TutorError):
    """Missing or invalid credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidInput(TutorError):
    """Request payload failed validation."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(TutorError):
    """Referenced resource is absent or not owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND


class GenerationError(TutorError):
    """The generation service failed or returned no usable content."""


class GenerationValidationError(TutorError):
    """The generation service returned JSON that breaks the expected shape."""


class InternalError(TutorError):
    """Any other failure while handling a request."""
