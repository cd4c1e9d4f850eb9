"""Settings and the service error hierarchy."""

from app.config import settings
from app.exceptions import (
    ServiceError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    SearchError,
)

__all__ = [
    "settings",
    "ServiceError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "SearchError",
]
