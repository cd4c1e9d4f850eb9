"""Pydantic schemas for recipe ratings."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RatingCreate(BaseModel):
    """Create or replace a user's rating of a recipe"""

    user_id: int
    score: int = Field(..., ge=1, le=5, description="Score from 1 to 5")
    review: Optional[str] = None


class RatingResponse(BaseModel):
    id: int
    recipe_id: int
    user_id: int
    score: int
    review: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class RecipeRatingSummary(BaseModel):
    """Aggregate written back onto the recipe"""

    recipe_id: int
    avg_rating: float
    ratings_count: int
