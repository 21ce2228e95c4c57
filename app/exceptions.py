from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by services and adapters.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, upstream info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Service error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"


class UnauthorizedError(ServiceError):
    """Raised when authentication fails (no token is issued)."""

    http_status = 401
    default_message = "Unauthorized"


class NotFoundError(ServiceError):
    """Raised when a requested resource or search result was not found."""

    http_status = 404
    default_message = "Not found"


class ConflictError(ServiceError):
    """Raised when a resource conflict occurs (e.g., duplicate user email)."""

    http_status = 409
    default_message = "Conflict"


class UpstreamServiceError(ServiceError):
    """Raised when a third-party call (Spoonacular, Facebook) fails in transport or parsing.

    The whole request is aborted; no partial result is returned.
    """

    http_status = 500
    default_message = "Upstream service error"
