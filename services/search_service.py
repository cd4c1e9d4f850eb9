"""
Search Service - the three recipe search modes.

Plain search filters and sorts in the database and paginates there.
Ingredient search narrows candidates in the database to recipes sharing at
least one ingredient with the caller, then scores each one and paginates the
scored hits in memory. Budget search pushes the budget cut-off and ordering
down to the database and normalizes only the requested page.

A storage failure while querying is logged and re-raised as SearchError.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import SearchError
from domain.schemas import (
    BudgetFitItem,
    BudgetSearchParams,
    BudgetSearchResponse,
    IngredientMatchItem,
    IngredientMatchParams,
    IngredientMatchResponse,
    IngredientResponse,
    RecipeResponse,
    RecipeSearchParams,
    RecipeSearchResponse,
)
from repositories import RecipeRepository
from repositories.recipe_filters import (
    budget_filter,
    budget_ordering,
    build_recipe_filters,
    category_filter,
    ingredient_overlap_filter,
    max_cost_filter,
    recipe_ordering,
)
from services import budget_normalizer, ingredient_matcher
from services.pagination import paginate, paginate_query

logger = logging.getLogger("recipefinder.search")


@contextmanager
def _storage_errors(mode: str, params: Dict[str, Any]):
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Search '%s' failed with params %s", mode, params)
        raise SearchError(
            f"Recipe search '{mode}' could not be completed",
            details={"mode": mode},
        ) from exc


class SearchService:
    """Recipe search over the catalog"""

    @staticmethod
    def search_recipes(db: Session, params: RecipeSearchParams) -> RecipeSearchResponse:
        """Plain search: text, category, difficulty, cost, time and rating filters"""
        logger.debug("Plain search: %s", params.model_dump(exclude_none=True))
        repo = RecipeRepository(db)
        with _storage_errors("recipes", params.model_dump(mode="json")):
            query = repo.filtered_query(
                build_recipe_filters(params),
                recipe_ordering(params.sort, params.order),
            )
            page = paginate_query(query, params.page, params.per_page)

        return RecipeSearchResponse(
            data=[RecipeResponse.model_validate(r) for r in page.items],
            meta=page.meta(),
        )

    @staticmethod
    def search_by_ingredients(
        db: Session, params: IngredientMatchParams
    ) -> IngredientMatchResponse:
        """Recipes that can be made mostly from the given ingredients"""
        threshold = (
            params.match_percentage
            if params.match_percentage is not None
            else settings.default_match_percentage
        )
        logger.debug(
            "Ingredient search: ids=%s threshold=%s include_optional=%s",
            params.ingredient_ids,
            threshold,
            params.include_optional,
        )

        filters = [ingredient_overlap_filter(params.ingredient_ids)]
        for extra in (category_filter(params.category_id), max_cost_filter(params.max_cost)):
            if extra is not None:
                filters.append(extra)

        repo = RecipeRepository(db)
        with _storage_errors("by_ingredients", params.model_dump(mode="json")):
            candidates = repo.find_with_lines(filters)

        hits = []
        for recipe in candidates:
            match = ingredient_matcher.score(
                recipe, params.ingredient_ids, params.include_optional
            )
            if match is not None and match.is_match(threshold):
                hits.append((recipe, match))
        hits.sort(key=ingredient_matcher.match_sort_key)

        page = paginate(hits, params.page, params.per_page)
        data: List[IngredientMatchItem] = []
        for recipe, match in page.items:
            missing = ingredient_matcher.missing_ingredients(
                recipe, params.ingredient_ids, params.include_optional
            )
            data.append(
                IngredientMatchItem(
                    **RecipeResponse.model_validate(recipe).model_dump(),
                    match_percentage=match.match_percentage,
                    matched_ingredients=match.matched_ingredients,
                    total_ingredients=match.total_ingredients,
                    missing_ingredients=[
                        IngredientResponse.model_validate(i) for i in missing
                    ],
                )
            )

        logger.debug("Ingredient search: %s of %s candidates matched", page.total, len(candidates))
        return IngredientMatchResponse(data=data, meta=page.meta())

    @staticmethod
    def search_by_budget(db: Session, params: BudgetSearchParams) -> BudgetSearchResponse:
        """Recipes whose (serving-scaled) cost fits the budget, cheapest first"""
        logger.debug("Budget search: %s", params.model_dump(exclude_none=True))
        filters = [budget_filter(params.budget_cents, params.servings)]
        category = category_filter(params.category_id)
        if category is not None:
            filters.append(category)

        repo = RecipeRepository(db)
        with _storage_errors("by_budget", params.model_dump(mode="json")):
            query = repo.filtered_query(filters, budget_ordering(params.servings))
            page = paginate_query(query, params.page, params.per_page)

        data = []
        for recipe in page.items:
            fit = budget_normalizer.normalize(recipe, params.budget_cents, params.servings)
            data.append(
                BudgetFitItem(
                    **RecipeResponse.model_validate(recipe).model_dump(),
                    **fit.to_dict(),
                )
            )

        return BudgetSearchResponse(
            data=data, meta=page.meta(budget_cents=params.budget_cents)
        )
