"""
Engine, session factory and declarative base for the catalog.

The engine is built once from ``settings.database_url``; PostgreSQL via
psycopg2 in deployment, in-memory SQLite in the test suite.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("recipefinder.database")

Base = declarative_base()


def _connect_args(url: str) -> dict:
    # SQLite connections are shared with FastAPI's threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    echo=settings.db_echo,
    future=True,
    connect_args=_connect_args(settings.database_url),
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, future=True)


def init_database():
    """Create any missing catalog tables."""
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Catalog tables are in place")


def get_db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
