"""
Domain enums for RecipeFinder.
Contains all enumeration types used across the domain models and schemas.
"""

import enum


class Difficulty(str, enum.Enum):
    """Recipe difficulty levels"""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class RecipeSortField(str, enum.Enum):
    """Sort keys accepted by the plain recipe search"""

    RATING = "rating"
    COST = "cost"
    TIME = "time"
    CREATED_AT = "created_at"


class IngredientSortField(str, enum.Enum):
    """Sort keys accepted by the ingredient search"""

    NAME = "name"
    NAME_UK = "name_uk"
    UNIT_PRICE_CENTS = "unit_price_cents"
    CREATED_AT = "created_at"


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"
