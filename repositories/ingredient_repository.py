"""
Ingredient Repository - Data access layer for the ingredient master table
"""

from typing import Dict, Iterable, Optional

from sqlalchemy import asc, desc, or_
from sqlalchemy.orm import Query, Session

from domain.enums import IngredientSortField, SortOrder
from domain.models import Ingredient
from repositories.base import BaseRepository

SORT_COLUMNS = {
    IngredientSortField.NAME.value: Ingredient.name,
    IngredientSortField.NAME_UK.value: Ingredient.name_uk,
    IngredientSortField.UNIT_PRICE_CENTS.value: Ingredient.unit_price_cents,
    IngredientSortField.CREATED_AT.value: Ingredient.created_at,
}


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for ingredient master data"""

    def __init__(self, db: Session):
        super().__init__(db, Ingredient)

    def get_by_ids(self, ingredient_ids: Iterable[int]) -> Dict[int, Ingredient]:
        """Map of id -> ingredient for the ids that exist"""
        ids = [int(i) for i in ingredient_ids]
        if not ids:
            return {}
        rows = self.db.query(Ingredient).filter(Ingredient.id.in_(ids)).all()
        return {ing.id: ing for ing in rows}

    def search_query(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        sort: str = IngredientSortField.NAME.value,
        order: str = SortOrder.ASC.value,
    ) -> Query:
        """Case-insensitive search on name and localized name"""
        q = self.db.query(Ingredient)
        if query and query.strip():
            term = query.strip()
            q = q.filter(
                or_(
                    Ingredient.name.icontains(term, autoescape=True),
                    Ingredient.name_uk.icontains(term, autoescape=True),
                )
            )
        if category:
            q = q.filter(Ingredient.category == category)
        column = SORT_COLUMNS.get(sort, Ingredient.name)
        direction = desc if order == SortOrder.DESC.value else asc
        return q.order_by(direction(column), Ingredient.id.asc())
