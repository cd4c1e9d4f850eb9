"""Serving-adjusted cost and budget-fit metrics."""

from dataclasses import dataclass
from typing import Optional

from core.utils.helpers import percentage, round_half_up, to_decimal
from domain.models import Recipe


@dataclass(frozen=True)
class BudgetFit:
    actual_cost_cents: int
    fits_budget: bool
    remaining_budget_cents: int
    budget_usage_percentage: float

    def to_dict(self) -> dict:
        return {
            "actual_cost_cents": self.actual_cost_cents,
            "fits_budget": self.fits_budget,
            "remaining_budget_cents": self.remaining_budget_cents,
            "budget_usage_percentage": self.budget_usage_percentage,
        }


def serving_adjusted_cost(
    est_cost_cents: int, recipe_servings: Optional[int], requested_servings: Optional[int]
) -> int:
    """Scale the total cost from the recipe's servings to the requested ones.

    Multiplies before dividing so exact halves (5 cents, 6 servings, 3
    requested) round up like ``serving_adjusted_cost_expression`` does in SQL.
    """
    if not requested_servings or not recipe_servings or recipe_servings <= 0:
        return int(est_cost_cents or 0)
    scaled = to_decimal(est_cost_cents or 0) * requested_servings
    return int(round_half_up(scaled / to_decimal(recipe_servings)))


def normalize(
    recipe: Recipe, budget_cents: int, requested_servings: Optional[int] = None
) -> BudgetFit:
    actual = serving_adjusted_cost(recipe.est_cost_cents, recipe.servings, requested_servings)
    return BudgetFit(
        actual_cost_cents=actual,
        fits_budget=actual <= budget_cents,
        remaining_budget_cents=budget_cents - actual,
        budget_usage_percentage=percentage(actual, budget_cents, 1),
    )
