"""Ingredient routes - browse and search the ingredient catalog."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
import logging

from api.dependencies import get_db
from api.responses import ERROR_RESPONSES
from domain.schemas import (
    IngredientListResponse,
    IngredientQueryParams,
    IngredientResponse,
    validate_params,
)
from services import IngredientService

router = APIRouter(prefix="/ingredients", tags=["Ingredients"])
logger = logging.getLogger("recipefinder.api.ingredients")


@router.get("", response_model=IngredientListResponse, responses=ERROR_RESPONSES)
def search_ingredients(
    query: Optional[str] = Query(default=None, description="Search in name or localized name"),
    category: Optional[str] = Query(default=None, description="Ingredient category"),
    sort: Optional[str] = Query(
        default=None, description="name, name_uk, unit_price_cents or created_at"
    ),
    order: Optional[str] = Query(default=None, description="asc or desc"),
    page: Optional[str] = Query(default=None),
    per_page: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
):
    params = validate_params(
        IngredientQueryParams,
        {
            "query": query,
            "category": category,
            "sort": sort,
            "order": order,
            "page": page,
            "per_page": per_page,
        },
    )
    return IngredientService.search_ingredients(db, params)


@router.get("/{ingredient_id}", response_model=IngredientResponse, responses=ERROR_RESPONSES)
def get_ingredient(ingredient_id: int, db: Session = Depends(get_db)):
    return IngredientService.get_ingredient(db, ingredient_id)
