"""
Predicate composition for recipe queries.

Each filter maps one search parameter to an SQLAlchemy boolean expression,
or to None when the parameter is absent. ``build_recipe_filters`` collects
the present ones; the repository ANDs them together. Every value travels as
a bound parameter, so nothing the caller sends is spliced into SQL text.
"""

from typing import Any, Iterable, List, Optional

from sqlalchemy import asc, case, desc, or_

from domain.enums import Difficulty, RecipeSortField, SortOrder
from domain.models import Recipe, RecipeIngredient


def _value(option: Any) -> Optional[str]:
    """Enum members and plain strings both reduce to their string value"""
    if option is None:
        return None
    return getattr(option, "value", option)


def total_time_expression():
    return Recipe.prep_time_min + Recipe.cook_time_min


def text_filter(query: Optional[str]):
    """Case-insensitive substring match on title or description"""
    if query is None or not query.strip():
        return None
    term = query.strip()
    return or_(
        Recipe.title.icontains(term, autoescape=True),
        Recipe.description.icontains(term, autoescape=True),
    )


def category_filter(category_id: Optional[int]):
    if category_id is None:
        return None
    return Recipe.category_id == int(category_id)


def difficulty_filter(difficulty: Optional[Any]):
    if difficulty is None:
        return None
    return Recipe.difficulty == Difficulty(_value(difficulty))


def max_cost_filter(max_cost: Optional[int]):
    if max_cost is None:
        return None
    return Recipe.est_cost_cents <= int(max_cost)


def max_total_time_filter(max_minutes: Optional[int]):
    if max_minutes is None:
        return None
    return total_time_expression() <= int(max_minutes)


def min_rating_filter(min_rating: Optional[Any]):
    if min_rating is None:
        return None
    return Recipe.avg_rating >= min_rating


def serving_adjusted_cost_expression(servings: Optional[int] = None):
    """SQL twin of ``budget_normalizer.serving_adjusted_cost``.

    ``round(est * servings / recipe_servings)`` half-up, written as
    ``(2 * est * servings + recipe_servings) // (2 * recipe_servings)`` so
    it stays in integer arithmetic. Recipes without servings keep their
    stored cost.
    """
    if not servings:
        return Recipe.est_cost_cents
    requested = int(servings)
    scaled = (Recipe.est_cost_cents * (2 * requested) + Recipe.servings) // (
        Recipe.servings * 2
    )
    return case((Recipe.servings > 0, scaled), else_=Recipe.est_cost_cents)


def budget_filter(budget_cents: int, servings: Optional[int] = None):
    """Recipes whose (optionally serving-scaled) cost stays within budget"""
    return serving_adjusted_cost_expression(servings) <= int(budget_cents)


def ingredient_overlap_filter(ingredient_ids: Iterable[int]):
    """Recipes with at least one line using one of ``ingredient_ids``"""
    ids = [int(i) for i in ingredient_ids]
    if not ids:
        return None
    return Recipe.recipe_ingredients.any(RecipeIngredient.ingredient_id.in_(ids))


def build_recipe_filters(params: Any) -> List[Any]:
    """Collect the filters present on a search parameter object"""
    candidates = [
        text_filter(getattr(params, "query", None)),
        category_filter(getattr(params, "category_id", None)),
        difficulty_filter(getattr(params, "difficulty", None)),
        max_cost_filter(getattr(params, "max_cost", None)),
        max_total_time_filter(getattr(params, "max_prep_time", None)),
        min_rating_filter(getattr(params, "min_rating", None)),
    ]
    return [c for c in candidates if c is not None]


def _sort_expression(sort_key: Optional[str]):
    if sort_key == RecipeSortField.RATING.value:
        return Recipe.avg_rating
    if sort_key == RecipeSortField.COST.value:
        return Recipe.est_cost_cents
    if sort_key == RecipeSortField.TIME.value:
        return total_time_expression()
    if sort_key == RecipeSortField.CREATED_AT.value:
        return Recipe.created_at
    return None


def recipe_ordering(sort: Any = None, order: Any = None) -> List[Any]:
    """ORDER BY clauses for the plain search.

    Missing sort means rating; an unknown sort field falls back to rating
    descending regardless of ``order``. Recipe id breaks ties.
    """
    expression = _sort_expression(_value(sort) or RecipeSortField.RATING.value)
    if expression is None:
        return [Recipe.avg_rating.desc(), Recipe.id.asc()]
    direction = asc if _value(order) == SortOrder.ASC.value else desc
    return [direction(expression), Recipe.id.asc()]


def budget_ordering(servings: Optional[int] = None) -> List[Any]:
    """Cheapest (serving-scaled) first, then best rated"""
    cost = serving_adjusted_cost_expression(servings)
    return [cost.asc(), Recipe.avg_rating.desc(), Recipe.id.asc()]
