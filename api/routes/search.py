"""
Search routes - find recipes by the ingredients on hand or by budget.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from api.responses import SEARCH_ERROR_RESPONSES
from domain.schemas import (
    BudgetSearchParams,
    BudgetSearchResponse,
    IngredientMatchParams,
    IngredientMatchResponse,
)
from services import SearchService

router = APIRouter(prefix="/search", tags=["Search"])
logger = logging.getLogger("recipefinder.api.search")


@router.post(
    "/by-ingredients",
    response_model=IngredientMatchResponse,
    responses=SEARCH_ERROR_RESPONSES,
)
def search_by_ingredients(payload: IngredientMatchParams, db: Session = Depends(get_db)):
    """
    Recipes that can be cooked mostly from the given ingredients.

    - **ingredient_ids**: Ingredients the caller has (at least one)
    - **match_percentage**: Minimum share of the recipe's ingredients covered, default 80
    - **include_optional**: Count optional lines too
    """
    return SearchService.search_by_ingredients(db, payload)


@router.post(
    "/by-budget", response_model=BudgetSearchResponse, responses=SEARCH_ERROR_RESPONSES
)
def search_by_budget(payload: BudgetSearchParams, db: Session = Depends(get_db)):
    """
    Recipes that fit a budget, cheapest first.

    - **budget_cents**: Budget in cents
    - **servings**: Scale each recipe's cost to this many servings
    """
    return SearchService.search_by_budget(db, payload)
