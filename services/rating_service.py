from typing import Optional
import logging

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from core.utils.helpers import round_half_up
from domain.models import Rating, Recipe
from domain.schemas import RecipeRatingSummary
from repositories import RatingRepository, RecipeRepository, UserRepository

logger = logging.getLogger("recipefinder.rating")


class RatingService:
    """Ratings and the average/count aggregate kept on each recipe"""

    @staticmethod
    def recalculate_rating(db: Session, recipe: Recipe) -> RecipeRatingSummary:
        """
        Rewrite ``avg_rating`` and ``ratings_count`` from the stored ratings.

        The average is rounded half-up to two places; an unrated recipe gets
        0 and 0. Flushes only, the caller commits.
        """
        db.flush()
        avg, count = RatingRepository(db).aggregate_for_recipe(recipe.id)
        recipe.avg_rating = round_half_up(avg, 2) if count else round_half_up(0, 2)
        recipe.ratings_count = count
        db.flush()
        return RecipeRatingSummary(
            recipe_id=recipe.id,
            avg_rating=float(recipe.avg_rating),
            ratings_count=count,
        )

    @staticmethod
    def rate_recipe(
        db: Session,
        recipe_id: int,
        user_id: int,
        score: int,
        review: Optional[str] = None,
    ) -> Rating:
        """Create or replace the user's rating and refresh the recipe aggregate."""
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if recipe is None:
            raise NotFoundError.for_resource("Recipe", recipe_id)
        if UserRepository(db).get_by_id(user_id) is None:
            raise NotFoundError.for_resource("User", user_id)

        rating_repo = RatingRepository(db)
        try:
            rating = rating_repo.get_by_recipe_and_user(recipe_id, user_id)
            if rating is None:
                rating = rating_repo.add(
                    Rating(recipe_id=recipe_id, user_id=user_id, score=score, review=review)
                )
            else:
                rating.score = score
                rating.review = review
            summary = RatingService.recalculate_rating(db, recipe)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error rating recipe %s by user %s", recipe_id, user_id)
            raise

        db.refresh(rating)
        logger.info(
            "Recipe %s rated %s by user %s (avg %s over %s)",
            recipe_id,
            score,
            user_id,
            summary.avg_rating,
            summary.ratings_count,
        )
        return rating

    @staticmethod
    def delete_rating(db: Session, recipe_id: int, user_id: int) -> RecipeRatingSummary:
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if recipe is None:
            raise NotFoundError.for_resource("Recipe", recipe_id)

        rating_repo = RatingRepository(db)
        rating = rating_repo.get_by_recipe_and_user(recipe_id, user_id)
        if rating is None:
            raise NotFoundError(
                "Rating not found", details={"recipe_id": recipe_id, "user_id": user_id}
            )

        try:
            rating_repo.remove(rating)
            summary = RatingService.recalculate_rating(db, recipe)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error deleting rating of recipe %s by user %s", recipe_id, user_id)
            raise
        return summary
