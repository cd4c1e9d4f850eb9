"""
Rating Repository - Data access layer for recipe ratings and their authors
"""

from decimal import Decimal
from typing import Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from domain.models import AppUser, Rating
from repositories.base import BaseRepository


class RatingRepository(BaseRepository[Rating]):
    """Repository for ratings"""

    def __init__(self, db: Session):
        super().__init__(db, Rating)

    def get_by_recipe_and_user(self, recipe_id: int, user_id: int) -> Optional[Rating]:
        return (
            self.db.query(Rating)
            .filter(Rating.recipe_id == recipe_id, Rating.user_id == user_id)
            .first()
        )

    def aggregate_for_recipe(self, recipe_id: int) -> Tuple[Optional[Decimal], int]:
        """Return (average score, count) for a recipe; average is None when unrated"""
        avg, count = (
            self.db.query(func.avg(Rating.score), func.count(Rating.id))
            .filter(Rating.recipe_id == recipe_id)
            .one()
        )
        return avg, int(count or 0)


class UserRepository(BaseRepository[AppUser]):
    """Repository for user identities"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)
