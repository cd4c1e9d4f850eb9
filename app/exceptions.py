from typing import Any, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional extra context (field errors, validation info)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 400
    default_message = "Request failed"
    default_code = "error"

    def __init__(self, message: Optional[str] = None, details: Any = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met.

    ``details`` holds the structured error set: a list of
    ``{"field": ..., "message": ..., "type": ...}`` entries.
    """

    http_status = 422
    default_message = "Validation failed"
    default_code = "validation_error"


class NotFoundError(ServiceError):
    """Raised when a referenced recipe, ingredient, rating or user does not exist."""

    http_status = 404
    default_message = "Not found"
    default_code = "not_found"

    @classmethod
    def for_resource(cls, resource: str, resource_id: Any = None) -> "NotFoundError":
        details = {"id": resource_id} if resource_id is not None else None
        return cls(f"{resource} not found", details=details)


class ConflictError(ServiceError):
    """Raised when a resource conflict occurs (e.g., duplicate entry)."""

    http_status = 409
    default_message = "Conflict"
    default_code = "conflict"


class SearchError(ServiceError):
    """Raised when the underlying data query for a search cannot be executed.

    Storage faults are transient from the caller's point of view; handlers
    answer with 503 so clients know the request may be retried.
    """

    http_status = 503
    default_message = "Search failed"
    default_code = "search_error"
