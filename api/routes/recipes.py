"""
Recipe routes - catalog search, recipe viewing and recipe administration.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional
import logging

from api.dependencies import get_db
from api.responses import ERROR_RESPONSES, SEARCH_ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from domain.schemas import (
    RecipeCreate,
    RecipeDetailResponse,
    RecipeSearchParams,
    RecipeSearchResponse,
    RecipeUpdate,
    validate_params,
)
from services import SearchService
from services import recipe_service

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("recipefinder.api.recipes")


@router.get("", response_model=RecipeSearchResponse, responses=SEARCH_ERROR_RESPONSES)
def search_recipes_endpoint(
    query: Optional[str] = Query(default=None, description="Search in title and description"),
    category_id: Optional[str] = Query(default=None, description="Category filter"),
    difficulty: Optional[str] = Query(default=None, description="easy, medium or hard"),
    max_cost: Optional[str] = Query(default=None, description="Max cost in cents"),
    max_prep_time: Optional[str] = Query(
        default=None, description="Max prep + cook time in minutes"
    ),
    min_rating: Optional[str] = Query(default=None, description="Minimum average rating"),
    sort: Optional[str] = Query(default=None, description="rating, cost, time or created_at"),
    order: Optional[str] = Query(default=None, description="asc or desc"),
    page: Optional[str] = Query(default=None, description="Page number, from 1"),
    per_page: Optional[str] = Query(default=None, description="Items per page (1-100)"),
    db: Session = Depends(get_db),
):
    """
    Search recipes with filters.

    - **query**: Case-insensitive match in title or description
    - **category_id**, **difficulty**: Exact filters
    - **max_cost**: Estimated cost in cents at most this
    - **max_prep_time**: Prep plus cook time at most this
    - **min_rating**: Average rating at least this
    - **sort** / **order**: Defaults to rating, descending
    """
    params = validate_params(
        RecipeSearchParams,
        {
            "query": query,
            "category_id": category_id,
            "difficulty": difficulty,
            "max_cost": max_cost,
            "max_prep_time": max_prep_time,
            "min_rating": min_rating,
            "sort": sort,
            "order": order,
            "page": page,
            "per_page": per_page,
        },
    )
    return SearchService.search_recipes(db, params)


@router.get("/{recipe_id}", response_model=RecipeDetailResponse, responses=ERROR_RESPONSES)
def get_recipe(recipe_id: int, db: Session = Depends(get_db)):
    """Get a single recipe with its ingredient lines."""
    return recipe_service.get_recipe(db, recipe_id)


@router.post(
    "",
    response_model=RecipeDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_ERROR_RESPONSES,
)
def create_recipe(payload: RecipeCreate, db: Session = Depends(get_db)):
    """Create a recipe; its estimated cost is computed from the lines."""
    return recipe_service.create_recipe(db, payload)


@router.put("/{recipe_id}", response_model=RecipeDetailResponse, responses=WRITE_ERROR_RESPONSES)
def update_recipe(recipe_id: int, payload: RecipeUpdate, db: Session = Depends(get_db)):
    """Update a recipe. A supplied ``ingredients`` list replaces every line."""
    return recipe_service.update_recipe(db, recipe_id, payload)


@router.delete(
    "/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT, responses=ERROR_RESPONSES
)
def delete_recipe(recipe_id: int, db: Session = Depends(get_db)):
    recipe_service.delete_recipe(db, recipe_id)
