"""FastAPI dependencies shared by the routers."""

from typing import Generator
from sqlalchemy.orm import Session
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    One SQLAlchemy session per request, closed when the response is sent.

    Tests swap this out through ``app.dependency_overrides``.
    """
    yield from get_db_session()
