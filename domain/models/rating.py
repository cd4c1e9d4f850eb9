"""
Rating and user models.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    TIMESTAMP,
    ForeignKey,
    UniqueConstraint,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class AppUser(Base):
    """User account. Only the identity needed to own ratings."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(100), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    ratings = relationship(
        "Rating", back_populates="user", cascade="all, delete-orphan"
    )


class Rating(Base):
    """A user's score for a recipe; one per (recipe, user) pair."""

    __tablename__ = "ratings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    score = Column(Integer, nullable=False, index=True)
    review = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    recipe = relationship("Recipe", back_populates="ratings")
    user = relationship("AppUser", back_populates="ratings")

    __table_args__ = (
        UniqueConstraint("recipe_id", "user_id", name="uq_rating_recipe_user"),
        CheckConstraint("score BETWEEN 1 AND 5", name="ck_rating_score_range"),
    )

    def __repr__(self):
        return f"<Rating(recipe_id={self.recipe_id}, user_id={self.user_id}, score={self.score})>"
