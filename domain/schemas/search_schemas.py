"""Pydantic schemas for recipe search requests and responses."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from core.utils.helpers import unique_ints
from domain.enums import Difficulty, RecipeSortField, SortOrder
from domain.schemas.recipe_schemas import RecipeResponse
from domain.schemas.ingredient_schemas import IngredientResponse
from domain.schemas.pagination_schemas import PaginationMeta


# =============================================================================
# Request parameters
# =============================================================================


class RecipeSearchParams(BaseModel):
    """Filters for the plain recipe search"""

    query: Optional[str] = Field(None, description="Substring of title or description")
    category_id: Optional[int] = None
    difficulty: Optional[Difficulty] = None
    max_cost: Optional[int] = Field(None, gt=0, description="Upper bound on cost in cents")
    max_prep_time: Optional[int] = Field(
        None, gt=0, description="Upper bound on prep + cook time in minutes"
    )
    min_rating: Optional[Decimal] = Field(None, ge=0, le=5)
    sort: Optional[RecipeSortField] = None
    order: SortOrder = SortOrder.DESC
    page: Optional[int] = Field(None, gt=0)
    per_page: Optional[int] = Field(None, gt=0, le=100)


class IngredientMatchParams(BaseModel):
    """Parameters for searching recipes by the ingredients the caller has"""

    ingredient_ids: List[int] = Field(..., min_length=1)
    match_percentage: Optional[int] = Field(
        None, ge=1, le=100, description="Minimum share of matched ingredients"
    )
    include_optional: bool = False
    category_id: Optional[int] = None
    max_cost: Optional[int] = Field(None, gt=0)
    page: Optional[int] = Field(None, gt=0)
    per_page: Optional[int] = Field(None, gt=0, le=100)

    @field_validator("ingredient_ids")
    @classmethod
    def dedupe_ingredient_ids(cls, v: List[int]) -> List[int]:
        """Keep first occurrence order, drop repeats"""
        return unique_ints(v)


class BudgetSearchParams(BaseModel):
    """Parameters for searching recipes that fit a budget"""

    budget_cents: int = Field(..., gt=0)
    servings: Optional[int] = Field(
        None, gt=0, description="Scale recipe cost to this many servings"
    )
    category_id: Optional[int] = None
    page: Optional[int] = Field(None, gt=0)
    per_page: Optional[int] = Field(None, gt=0, le=100)


# =============================================================================
# Responses
# =============================================================================


class BudgetSearchMeta(PaginationMeta):
    budget_cents: int


class IngredientMatchItem(RecipeResponse):
    """Recipe annotated with how well it matches the caller's ingredients"""

    match_percentage: float
    matched_ingredients: int
    total_ingredients: int
    missing_ingredients: List[IngredientResponse] = []


class BudgetFitItem(RecipeResponse):
    """Recipe annotated with how it fits the caller's budget"""

    actual_cost_cents: int
    fits_budget: bool
    remaining_budget_cents: int
    budget_usage_percentage: float


class RecipeSearchResponse(BaseModel):
    data: List[RecipeResponse]
    meta: PaginationMeta


class IngredientMatchResponse(BaseModel):
    data: List[IngredientMatchItem]
    meta: PaginationMeta


class BudgetSearchResponse(BaseModel):
    data: List[BudgetFitItem]
    meta: BudgetSearchMeta
