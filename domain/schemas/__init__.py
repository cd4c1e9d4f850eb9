"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.pagination_schemas import PaginationMeta
from domain.schemas.ingredient_schemas import (
    IngredientResponse,
    IngredientQueryParams,
    IngredientListResponse,
)
from domain.schemas.recipe_schemas import (
    RecipeIngredientInput,
    RecipeCreate,
    RecipeUpdate,
    CategorySummary,
    RecipeIngredientResponse,
    RecipeResponse,
    RecipeDetailResponse,
)
from domain.schemas.search_schemas import (
    RecipeSearchParams,
    IngredientMatchParams,
    BudgetSearchParams,
    BudgetSearchMeta,
    IngredientMatchItem,
    BudgetFitItem,
    RecipeSearchResponse,
    IngredientMatchResponse,
    BudgetSearchResponse,
)
from domain.schemas.rating_schemas import (
    RatingCreate,
    RatingResponse,
    RecipeRatingSummary,
)
from domain.schemas.category_schemas import CategoryNode
from domain.schemas.validation import validate_params, format_errors

__all__ = [
    "PaginationMeta",
    "IngredientResponse",
    "IngredientQueryParams",
    "IngredientListResponse",
    "RecipeIngredientInput",
    "RecipeCreate",
    "RecipeUpdate",
    "CategorySummary",
    "RecipeIngredientResponse",
    "RecipeResponse",
    "RecipeDetailResponse",
    "RecipeSearchParams",
    "IngredientMatchParams",
    "BudgetSearchParams",
    "BudgetSearchMeta",
    "IngredientMatchItem",
    "BudgetFitItem",
    "RecipeSearchResponse",
    "IngredientMatchResponse",
    "BudgetSearchResponse",
    "RatingCreate",
    "RatingResponse",
    "RecipeRatingSummary",
    "CategoryNode",
    "validate_params",
    "format_errors",
]
