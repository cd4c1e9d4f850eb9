"""
Recipe Repository - Data access layer for recipe catalog queries
"""

from typing import Any, List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, joinedload, selectinload

from domain.models import Recipe, RecipeIngredient
from repositories.base import BaseRepository


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipes and their ingredient lines"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def _with_lines(self, query: Query) -> Query:
        return query.options(
            joinedload(Recipe.category),
            selectinload(Recipe.recipe_ingredients).selectinload(
                RecipeIngredient.ingredient
            ),
        )

    def get_detail(self, recipe_id: int) -> Optional[Recipe]:
        """Get recipe with category and ingredient lines loaded"""
        query = self.db.query(Recipe).filter(Recipe.id == recipe_id)
        return self._with_lines(query).first()

    def filtered_query(
        self, filters: Sequence[Any], ordering: Sequence[Any] = ()
    ) -> Query:
        """Recipes matching every filter, in the given order.

        The query is returned unexecuted so pagination can count and
        slice it in the database.
        """
        query = self.db.query(Recipe).options(joinedload(Recipe.category))
        if filters:
            query = query.filter(*filters)
        if ordering:
            query = query.order_by(*ordering)
        return query

    def find_with_lines(self, filters: Sequence[Any]) -> List[Recipe]:
        """Materialize matching recipes with their ingredient lines"""
        query = self.db.query(Recipe)
        if filters:
            query = query.filter(*filters)
        return self._with_lines(query).order_by(Recipe.id).all()

    def count_in_category(self, category_id: int) -> int:
        return (
            self.db.query(func.count(Recipe.id))
            .filter(Recipe.category_id == category_id)
            .scalar()
        ) or 0
