"""
Recipe model with derived cost and rating aggregates.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Numeric,
    TIMESTAMP,
    ForeignKey,
    CheckConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.enums import Difficulty
from domain.models.database import Base


class Recipe(Base):
    """
    Recipe catalog entry.

    ``est_cost_cents`` is derived from the ingredient lines and
    ``avg_rating``/``ratings_count`` from the ratings; both are rewritten by
    the service layer whenever their sources change.
    """

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    instructions = Column(Text, nullable=False)
    category_id = Column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), index=True
    )
    prep_time_min = Column(Integer, nullable=False)
    cook_time_min = Column(Integer, nullable=False, default=0)
    servings = Column(Integer, nullable=False, default=4)
    difficulty = Column(
        SQLEnum(
            Difficulty,
            name="recipe_difficulty",
            values_callable=lambda enum_cls: [d.value for d in enum_cls],
        ),
        nullable=False,
        default=Difficulty.EASY,
        index=True,
    )
    image_url = Column(String(500))
    est_cost_cents = Column(Integer, nullable=False, default=0, index=True)
    avg_rating = Column(Numeric(3, 2), nullable=False, default=0, index=True)
    ratings_count = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    category = relationship("Category", back_populates="recipes")
    recipe_ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.id",
    )
    ratings = relationship(
        "Rating", back_populates="recipe", cascade="all, delete-orphan"
    )

    __table_args__ = (
        CheckConstraint("servings > 0", name="ck_recipe_servings_positive"),
        CheckConstraint("prep_time_min > 0", name="ck_recipe_prep_time_positive"),
        CheckConstraint("cook_time_min >= 0", name="ck_recipe_cook_time_non_negative"),
        CheckConstraint("est_cost_cents >= 0", name="ck_recipe_cost_non_negative"),
    )

    @property
    def total_time_min(self) -> int:
        return (self.prep_time_min or 0) + (self.cook_time_min or 0)

    def __repr__(self):
        return f"<Recipe(id={self.id}, title='{self.title}')>"
