"""Ingredient service - master ingredient lookup and search."""

import logging

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import Ingredient
from domain.schemas import IngredientListResponse, IngredientQueryParams, IngredientResponse
from repositories import IngredientRepository
from services.pagination import paginate_query

logger = logging.getLogger("recipefinder.ingredient")


class IngredientService:
    """Business logic for ingredient master data."""

    @staticmethod
    def get_ingredient(db: Session, ingredient_id: int) -> Ingredient:
        ingredient = IngredientRepository(db).get_by_id(ingredient_id)
        if ingredient is None:
            raise NotFoundError.for_resource("Ingredient", ingredient_id)
        return ingredient

    @staticmethod
    def search_ingredients(
        db: Session, params: IngredientQueryParams
    ) -> IngredientListResponse:
        """Substring search on English and Ukrainian names, paginated."""
        logger.debug("Ingredient lookup: %s", params.model_dump(exclude_none=True))
        query = IngredientRepository(db).search_query(
            query=params.query,
            category=params.category,
            sort=params.sort.value,
            order=params.order.value,
        )
        page = paginate_query(query, params.page, params.per_page)
        return IngredientListResponse(
            data=[IngredientResponse.model_validate(i) for i in page.items],
            meta=page.meta(),
        )
