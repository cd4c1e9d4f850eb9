"""Pydantic schemas for recipes and their ingredient lines."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, model_validator

from domain.enums import Difficulty
from domain.schemas.ingredient_schemas import IngredientResponse


# =============================================================================
# Inputs
# =============================================================================


class RecipeIngredientInput(BaseModel):
    """One ingredient line of a recipe"""

    ingredient_id: int
    quantity: Decimal = Field(..., gt=0, max_digits=10, decimal_places=3)
    unit: str = Field(..., min_length=1, max_length=20)
    notes: Optional[str] = Field(None, max_length=255)
    optional: bool = False


def _check_unique_ingredients(lines: Optional[List[RecipeIngredientInput]]):
    if not lines:
        return
    ids = [line.ingredient_id for line in lines]
    if len(ids) != len(set(ids)):
        raise ValueError("each ingredient may appear only once per recipe")


class RecipeCreate(BaseModel):
    """Schema for creating a recipe"""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    instructions: str = Field(..., min_length=1)
    category_id: Optional[int] = None
    prep_time_min: int = Field(..., gt=0)
    cook_time_min: int = Field(..., ge=0)
    servings: int = Field(4, gt=0)
    difficulty: Difficulty = Difficulty.EASY
    image_url: Optional[str] = Field(None, max_length=500)
    ingredients: Optional[List[RecipeIngredientInput]] = None

    @model_validator(mode="after")
    def unique_ingredients(self):
        _check_unique_ingredients(self.ingredients)
        return self


class RecipeUpdate(BaseModel):
    """Partial update; ``ingredients`` when present replaces every line"""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    instructions: Optional[str] = Field(None, min_length=1)
    category_id: Optional[int] = None
    prep_time_min: Optional[int] = Field(None, gt=0)
    cook_time_min: Optional[int] = Field(None, ge=0)
    servings: Optional[int] = Field(None, gt=0)
    difficulty: Optional[Difficulty] = None
    image_url: Optional[str] = Field(None, max_length=500)
    ingredients: Optional[List[RecipeIngredientInput]] = None

    @model_validator(mode="after")
    def unique_ingredients(self):
        _check_unique_ingredients(self.ingredients)
        return self


# =============================================================================
# Responses
# =============================================================================


class CategorySummary(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class RecipeIngredientResponse(BaseModel):
    """Schema for recipe ingredient line response"""

    id: int
    ingredient_id: int
    quantity: float
    unit: str
    optional: bool
    notes: Optional[str] = None
    ingredient: Optional[IngredientResponse] = None

    model_config = {"from_attributes": True}


class RecipeResponse(BaseModel):
    """Schema for recipe list items"""

    id: int
    title: str
    description: Optional[str] = None
    prep_time_min: int
    cook_time_min: int
    total_time_min: int
    servings: int
    difficulty: Difficulty
    image_url: Optional[str] = None
    est_cost_cents: int
    avg_rating: float
    ratings_count: int
    category: Optional[CategorySummary] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class RecipeDetailResponse(RecipeResponse):
    """Full recipe with instructions and ingredient lines"""

    instructions: str
    ingredients: List[RecipeIngredientResponse] = Field(
        default_factory=list,
        validation_alias=AliasChoices("ingredients", "recipe_ingredients"),
    )
