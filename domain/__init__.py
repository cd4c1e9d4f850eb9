"""Recipe catalog domain: ORM models, request/response schemas and enums."""

from domain import enums, models, schemas

__all__ = ["enums", "models", "schemas"]
