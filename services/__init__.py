"""Services package - Business logic layer"""

from services.search_service import SearchService
from services.rating_service import RatingService
from services.ingredient_service import IngredientService
from services.category_service import CategoryService

# Note: recipe_service, cost_calculator, ingredient_matcher, budget_normalizer
# and pagination contain plain functions, not classes

__all__ = [
    "SearchService",
    "RatingService",
    "IngredientService",
    "CategoryService",
]
