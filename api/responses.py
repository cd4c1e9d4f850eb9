"""
Pydantic models for the error envelope and health check.

They exist for the OpenAPI document; the handlers in ``api.middleware``
build the same shape by hand.
"""

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorDetail(BaseModel):
    code: str = Field(..., description="Machine-readable error code, e.g. not_found")
    message: str
    details: Optional[object] = Field(
        None, description="Field errors for validation failures, ids for missing resources"
    )


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorDetail
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class HealthResponse(BaseModel):
    status: str = Field(..., description="ok or degraded")
    service: str
    version: Optional[str] = None
    database: Optional[str] = Field(None, description="ok when SELECT 1 succeeds")
    timestamp: datetime = Field(default_factory=datetime.utcnow)


ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "No such resource"},
    422: {"model": ErrorResponse, "description": "Invalid request parameters"},
}

SEARCH_ERROR_RESPONSES = {
    **ERROR_RESPONSES,
    503: {"model": ErrorResponse, "description": "Catalog storage unavailable, retry shortly"},
}

WRITE_ERROR_RESPONSES = {
    **ERROR_RESPONSES,
    409: {"model": ErrorResponse, "description": "Conflicts with existing data"},
}
