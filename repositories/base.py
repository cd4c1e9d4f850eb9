"""
Shared repository behaviour.

Repositories never commit. ``add`` and ``remove`` flush so generated keys
and cascades are visible, and the calling service decides when the unit of
work ends.
"""

from typing import Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """Primary-key access for one mapped class."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        return self.db.get(self.model, entity_id)

    def add(self, entity: ModelType) -> ModelType:
        self.db.add(entity)
        self.db.flush()
        return entity

    def remove(self, entity: ModelType) -> None:
        self.db.delete(entity)
        self.db.flush()

    def exists(self, entity_id: int) -> bool:
        return self.get_by_id(entity_id) is not None
