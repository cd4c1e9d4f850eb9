"""
Ingredient models - master ingredient table and recipe ingredient lines.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Numeric,
    Boolean,
    TIMESTAMP,
    ForeignKey,
    UniqueConstraint,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Ingredient(Base):
    """
    Master ingredient table - single source of truth.

    Recipes reference ingredients through RecipeIngredient lines; the unit
    price here drives every recipe's estimated cost.
    """

    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    name_uk = Column(String(100), nullable=False, index=True)
    default_unit = Column(String(20), nullable=False, default="pcs")
    category = Column(String(50), index=True)
    unit_price_cents = Column(Integer, nullable=False, default=0)
    image_url = Column(String(500))

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    recipe_ingredients = relationship("RecipeIngredient", back_populates="ingredient")

    __table_args__ = (
        CheckConstraint("unit_price_cents >= 0", name="ck_ingredient_price_non_negative"),
    )

    def __repr__(self):
        return f"<Ingredient(id={self.id}, name='{self.name}')>"


class RecipeIngredient(Base):
    """Ingredient line of a recipe. Owned by its recipe."""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    ingredient_id = Column(
        Integer, ForeignKey("ingredients.id"), nullable=False, index=True
    )
    quantity = Column(Numeric(10, 3), nullable=False)
    unit = Column(String(20), nullable=False)
    optional = Column(Boolean, nullable=False, default=False)
    notes = Column(String(255))

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    recipe = relationship("Recipe", back_populates="recipe_ingredients")
    ingredient = relationship("Ingredient", back_populates="recipe_ingredients")

    __table_args__ = (
        UniqueConstraint("recipe_id", "ingredient_id", name="uq_recipe_ingredient"),
        CheckConstraint("quantity > 0", name="ck_recipe_ingredient_quantity_positive"),
    )

    def __repr__(self):
        return (
            f"<RecipeIngredient(recipe_id={self.recipe_id}, "
            f"ingredient_id={self.ingredient_id}, quantity={self.quantity})>"
        )
