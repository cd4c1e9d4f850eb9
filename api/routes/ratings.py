"""Rating routes - score a recipe and withdraw a score."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from api.responses import ERROR_RESPONSES
from domain.schemas import RatingCreate, RatingResponse, RecipeRatingSummary
from services import RatingService

router = APIRouter(prefix="/recipes/{recipe_id}/ratings", tags=["Ratings"])
logger = logging.getLogger("recipefinder.api.ratings")


@router.put("", response_model=RatingResponse, responses=ERROR_RESPONSES)
def rate_recipe(recipe_id: int, payload: RatingCreate, db: Session = Depends(get_db)):
    """Create or replace the user's rating; the recipe average is refreshed."""
    return RatingService.rate_recipe(
        db, recipe_id, payload.user_id, payload.score, payload.review
    )


@router.delete("/{user_id}", response_model=RecipeRatingSummary, responses=ERROR_RESPONSES)
def delete_rating(recipe_id: int, user_id: int, db: Session = Depends(get_db)):
    """Remove the user's rating and return the refreshed aggregate."""
    return RatingService.delete_rating(db, recipe_id, user_id)
