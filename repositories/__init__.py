"""Query helpers over the recipe catalog tables."""

from repositories.base import BaseRepository
from repositories.recipe_repository import RecipeRepository
from repositories.ingredient_repository import IngredientRepository
from repositories.rating_repository import RatingRepository, UserRepository
from repositories.category_repository import CategoryRepository

__all__ = [
    "BaseRepository",
    "RecipeRepository",
    "IngredientRepository",
    "RatingRepository",
    "UserRepository",
    "CategoryRepository",
]
