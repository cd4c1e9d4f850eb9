"""API routes package"""

from . import health, recipes, ratings, search, ingredients, categories

__all__ = ["health", "recipes", "ratings", "search", "ingredients", "categories"]
