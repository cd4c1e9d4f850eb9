"""
Ingredient-match scoring.

A recipe is scored against the set of ingredients the caller has on hand.
Only distinct ingredient ids count, and optional lines are left out unless
the caller asks for them. A recipe with nothing left to consider is not a
candidate at all, so ``score`` returns None for it.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from core.utils.helpers import percentage
from domain.models import Recipe

PERCENT_PLACES = 2


@dataclass(frozen=True)
class MatchScore:
    total_ingredients: int
    matched_ingredients: int
    match_percentage: float

    def is_match(self, min_match_percentage: float) -> bool:
        return self.match_percentage >= min_match_percentage


def considered_ingredient_ids(recipe: Recipe, include_optional: bool = False) -> Set[int]:
    return {
        line.ingredient_id
        for line in recipe.recipe_ingredients
        if include_optional or not line.optional
    }


def score(
    recipe: Recipe, query_ingredient_ids: Iterable[int], include_optional: bool = False
) -> Optional[MatchScore]:
    considered = considered_ingredient_ids(recipe, include_optional)
    if not considered:
        return None
    matched = len(considered & {int(i) for i in query_ingredient_ids})
    return MatchScore(
        total_ingredients=len(considered),
        matched_ingredients=matched,
        match_percentage=percentage(matched, len(considered), PERCENT_PLACES),
    )


def missing_ingredient_ids(
    recipe: Recipe, query_ingredient_ids: Iterable[int], include_optional: bool = False
) -> List[int]:
    """Considered ingredients the caller does not have, in line order"""
    have = {int(i) for i in query_ingredient_ids}
    missing = []
    for line in recipe.recipe_ingredients:
        if not include_optional and line.optional:
            continue
        if line.ingredient_id not in have and line.ingredient_id not in missing:
            missing.append(line.ingredient_id)
    return missing


def missing_ingredients(
    recipe: Recipe, query_ingredient_ids: Iterable[int], include_optional: bool = False
) -> list:
    """Ingredient rows behind ``missing_ingredient_ids``"""
    wanted = set(missing_ingredient_ids(recipe, query_ingredient_ids, include_optional))
    found = []
    for line in recipe.recipe_ingredients:
        if line.ingredient_id in wanted and line.ingredient is not None:
            found.append(line.ingredient)
            wanted.discard(line.ingredient_id)
    return found


def match_sort_key(item: Tuple[Recipe, MatchScore]):
    """Best match first, then best rated, then lowest id"""
    recipe, match = item
    return (-match.match_percentage, -float(recipe.avg_rating or 0), recipe.id)
