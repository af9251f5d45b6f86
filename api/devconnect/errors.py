"""Service-layer error kinds and their HTTP mapping.

Services raise these; a single exception handler in ``devconnect.main`` turns
them into the API's error envelope.
"""

from typing import Any

from fastapi import status


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "SERVER_ERROR"
    message: str = "Server error"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        details: list[dict[str, Any]] | None = None,
    ):
        self.message = message or self.message
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self, request_id: str | None = None) -> dict[str, Any]:
        error: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "request_id": request_id,
        }
        if self.details:
            error["details"] = self.details
        return {"error": error}


class ValidationFailed(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    message = "Validation error"


class DuplicateAccount(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "USER_EXISTS"
    message = "User already exists"


class InvalidCredentials(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "INVALID_CREDENTIALS"
    message = "Invalid credentials"


class NotFound(ServiceError):
    # Profile lookups report 400 for compatibility with existing clients.
    status_code = status.HTTP_400_BAD_REQUEST
    code = "NOT_FOUND"
    message = "Not found"


class Unauthorized(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    message = "No token, authorization denied"


class UpstreamLookupFailed(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "GITHUB_NOT_FOUND"
    message = "No Github profile found"


class ServerError(ServiceError):
    pass
