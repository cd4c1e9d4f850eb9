"""
Error handling tests.

This test suite covers how failures surface:
- Service exceptions carry code, message and details
- Exception handlers render the shared error envelope
- Storage failures during search answer 503 with a retry hint
- Unexpected errors answer 500 without leaking internals
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from api.dependencies import get_db
from app.exceptions import (
    ConflictError,
    NotFoundError,
    SearchError,
    ServiceError,
    ServiceValidationError,
)
from main import app
from repositories import RecipeRepository
from services import SearchService
from test_fixtures import client, db_session


# =============================================================================
# EXCEPTION TYPES
# =============================================================================


@pytest.mark.parametrize(
    "exc_class, status, code",
    [
        (ServiceValidationError, 422, "validation_error"),
        (NotFoundError, 404, "not_found"),
        (ConflictError, 409, "conflict"),
        (SearchError, 503, "search_error"),
    ],
)
def test_exception_defaults(exc_class, status, code):
    exc = exc_class()
    assert isinstance(exc, ServiceError)
    assert exc.http_status == status
    assert exc.code == code
    assert exc.to_dict() == {"code": code, "message": exc_class.default_message}


def test_exception_to_dict_includes_details():
    exc = ServiceValidationError(
        "Bad input", details=[{"field": "page", "message": "too small", "type": "greater_than"}]
    )
    assert exc.to_dict() == {
        "code": "validation_error",
        "message": "Bad input",
        "details": [{"field": "page", "message": "too small", "type": "greater_than"}],
    }
    assert str(exc) == "Bad input"


def test_not_found_for_resource():
    exc = NotFoundError.for_resource("Recipe", 7)
    assert exc.message == "Recipe not found"
    assert exc.details == {"id": 7}


# =============================================================================
# HTTP ENVELOPE
# =============================================================================


def test_search_storage_failure_returns_503(client: TestClient, monkeypatch):
    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("server closed the connection"))

    monkeypatch.setattr(RecipeRepository, "filtered_query", broken)

    r = client.get("/recipes")
    assert r.status_code == 503
    assert r.headers["Retry-After"] == "1"
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "search_error"
    assert body["error"]["details"] == {"mode": "recipes"}
    assert "server closed" not in body["error"]["message"]
    assert "timestamp" in body


def test_unknown_route_uses_envelope(client: TestClient):
    r = client.get("/no-such-route")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "http_404"


def test_path_parameter_type_error(client: TestClient):
    r = client.get("/recipes/not-a-number")
    assert r.status_code == 422
    assert r.json()["error"]["details"][0]["field"] == "path.recipe_id"


def test_unexpected_error_returns_500(db_session: Session, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(SearchService, "search_recipes", staticmethod(explode))

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        r = TestClient(app, raise_server_exceptions=False).get("/recipes")
    finally:
        app.dependency_overrides.pop(get_db, None)

    assert r.status_code == 500
    assert r.json()["error"] == {
        "code": "internal_server_error",
        "message": "An unexpected error occurred",
    }
