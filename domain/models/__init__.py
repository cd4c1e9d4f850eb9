"""SQLAlchemy tables of the recipe catalog and the engine they live on."""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.category import Category
from domain.models.ingredient import Ingredient, RecipeIngredient
from domain.models.recipe import Recipe
from domain.models.rating import AppUser, Rating

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    "Category",
    "Ingredient",
    "RecipeIngredient",
    "Recipe",
    "AppUser",
    "Rating",
]
