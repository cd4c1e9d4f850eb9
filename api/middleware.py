"""
HTTP plumbing shared by every router: request logging plus the handlers
that turn exceptions into the RecipeFinder error envelope.

Every error response has the same shape::

    {"success": false,
     "error": {"code": "...", "message": "...", "details": ...},
     "timestamp": "..."}
"""

import time
import logging
from datetime import datetime
from uuid import uuid4
from decimal import Decimal

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import ServiceError, ServiceValidationError, SearchError
from domain.schemas.validation import format_errors

logger = logging.getLogger("recipefinder.middleware")

REQUEST_ID_HEADER = "X-Request-ID"
SEARCH_RETRY_AFTER_SEC = 1


def make_serializable(obj):
    """Recursively turn Decimals into floats so details survive JSON encoding"""
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    return obj


def error_body(code: str, message: str, details=None) -> dict:
    error = {"code": code, "message": message}
    if details:
        error["details"] = make_serializable(details)
    return {
        "success": False,
        "error": error,
        "timestamp": datetime.utcnow().isoformat(),
    }


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id and log how long it took.

    A caller-supplied ``X-Request-ID`` is reused so ids can be followed
    across services. Both the id and the elapsed time are echoed back as
    response headers.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        route = f"{request.method} {request.url.path}"
        started = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            elapsed = time.perf_counter() - started
            logger.error(
                "[%s] %s crashed after %.4fs", request_id, route, elapsed, exc_info=True
            )
            raise

        elapsed = time.perf_counter() - started
        logger.info(
            "[%s] %s -> %d in %.4fs",
            request_id,
            route,
            response.status_code,
            elapsed,
            extra={"request_id": request_id, "status_code": response.status_code},
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Body, path and query problems found by FastAPI before the route runs"""
    errors = format_errors(exc.errors())
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=ServiceValidationError.http_status,
        content=error_body("validation_error", "Request validation failed", errors),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(
        "%s %s answered %d: %s", request.method, request.url.path, exc.status_code, exc.detail
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(f"http_{exc.status_code}", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def service_exception_handler(request: Request, exc: ServiceError):
    """Map a service failure to the status code its class declares"""
    headers = None
    if isinstance(exc, SearchError):
        logger.error("Search unavailable on %s: %s", request.url.path, exc)
        headers = {"Retry-After": str(SEARCH_RETRY_AFTER_SEC)}
    else:
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)

    return JSONResponse(
        status_code=exc.http_status,
        content=error_body(exc.code, exc.message, exc.details),
        headers=headers,
    )


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("internal_server_error", "An unexpected error occurred"),
    )
