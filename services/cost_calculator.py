"""Estimated recipe cost from ingredient lines."""

import logging
import math
from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from core.utils.helpers import to_decimal
from domain.models import Recipe, RecipeIngredient

logger = logging.getLogger("recipefinder.cost")


def line_cost_cents(quantity, unit_price_cents: Optional[int]) -> int:
    """``floor(quantity * unit_price_cents)``; unknown price counts as 0"""
    if quantity is None or unit_price_cents is None:
        return 0
    return int(math.floor(to_decimal(quantity) * Decimal(int(unit_price_cents))))


def compute_lines_cost(lines: Iterable[RecipeIngredient]) -> int:
    total = 0
    for line in lines:
        ingredient = line.ingredient
        if ingredient is None:
            continue
        total += line_cost_cents(line.quantity, ingredient.unit_price_cents)
    return max(total, 0)


def compute_cost(recipe: Recipe) -> int:
    """Sum of line costs over every line, optional ones included"""
    return compute_lines_cost(recipe.recipe_ingredients)


def recalculate_cost(db: Session, recipe: Recipe) -> int:
    """
    Recompute ``est_cost_cents`` from the recipe's current lines.

    The new value is flushed, not committed; callers own the transaction so
    the lines and the cost land in the same commit.
    """
    db.flush()
    db.refresh(recipe, attribute_names=["recipe_ingredients"])
    cost = compute_cost(recipe)
    if recipe.est_cost_cents != cost:
        logger.debug(
            "Recipe %s cost %s -> %s", recipe.id, recipe.est_cost_cents, cost
        )
    recipe.est_cost_cents = cost
    db.flush()
    return cost
