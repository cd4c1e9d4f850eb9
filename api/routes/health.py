"""Liveness probe"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from api.responses import HealthResponse
from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("recipefinder.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)):
    """Report the service as degraded when the database does not answer"""
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.warning("Database health check failed: %s", e)
        database = "unavailable"
    return HealthResponse(
        status="ok" if database == "ok" else "degraded",
        service=settings.app_name,
        version=settings.app_version,
        database=database,
    )
