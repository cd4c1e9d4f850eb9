"""
Category Repository - Data access layer for the category tree
"""

from typing import List

from sqlalchemy.orm import Session

from domain.models import Category
from repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Repository for categories stored as a parent-id tree"""

    def __init__(self, db: Session):
        super().__init__(db, Category)

    def get_all_ordered(self) -> List[Category]:
        """Every category, ordered by position then id"""
        return (
            self.db.query(Category)
            .order_by(Category.position, Category.id)
            .all()
        )

    def get_children(self, parent_id: int) -> List[Category]:
        return (
            self.db.query(Category)
            .filter(Category.parent_id == parent_id)
            .order_by(Category.position, Category.id)
            .all()
        )
