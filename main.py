"""
RecipeFinder API entry point.

Run with ``python main.py`` for a development server, or point any ASGI
server at ``main:app``.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio

from api.routes import health, recipes, ratings, search, ingredients, categories
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_exception_handler,
    general_exception_handler,
)
from app.config import settings
from app.exceptions import ServiceError
from domain.models import init_database

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("recipefinder.main")

ROUTERS = (health, recipes, ratings, search, ingredients, categories)


async def _create_schema() -> None:
    """Create tables, waiting for the database to accept connections."""
    attempts = settings.db_init_attempts
    for attempt in range(1, attempts + 1):
        try:
            await anyio.to_thread.run_sync(init_database)
        except Exception as exc:
            if attempt == attempts:
                _logger.error("Giving up on the database after %d attempts", attempt)
                raise
            _logger.warning("Database not ready (%d/%d): %s", attempt, attempts, exc)
            await anyio.sleep(settings.db_init_delay_sec)
        else:
            _logger.info("Database schema ready")
            return


@asynccontextmanager
async def lifespan(app: FastAPI):
    _logger.info(
        "RecipeFinder %s starting (%s)", settings.app_version, settings.environment.value
    )
    await _create_schema()
    try:
        yield
    finally:
        _logger.info("RecipeFinder stopped")


def create_app() -> FastAPI:
    # interactive docs stay off in production
    docs_prefix = None if settings.is_production() else settings.api_prefix
    application = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=None if docs_prefix is None else f"{docs_prefix}/openapi.json",
        docs_url=None if docs_prefix is None else f"{docs_prefix}/docs",
        redoc_url=None if docs_prefix is None else f"{docs_prefix}/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    application.add_middleware(RequestLoggingMiddleware)

    for exc_class, handler in (
        (RequestValidationError, validation_exception_handler),
        (StarletteHTTPException, http_exception_handler),
        (ServiceError, service_exception_handler),
        (Exception, general_exception_handler),
    ):
        application.add_exception_handler(exc_class, handler)

    for module in ROUTERS:
        application.include_router(module.router, prefix=settings.api_prefix)

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
