"""
Recipe administration: create, update and delete recipes.

Every write path replaces ingredient lines (when given), recalculates the
estimated cost and refreshes the category ``recipes_count`` before a single
commit. Any failure rolls the session back, so lines and cost never land
separately.
"""

from typing import Iterable, List, Optional, Set
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import (
    ConflictError,
    NotFoundError,
    ServiceError,
    ServiceValidationError,
)
from domain.models import Category, Recipe, RecipeIngredient
from domain.schemas import RecipeCreate, RecipeIngredientInput, RecipeUpdate
from repositories import CategoryRepository, IngredientRepository, RecipeRepository
from services.cost_calculator import recalculate_cost

logger = logging.getLogger("recipefinder.recipe")

RECIPE_FIELDS = (
    "title",
    "description",
    "instructions",
    "category_id",
    "prep_time_min",
    "cook_time_min",
    "servings",
    "difficulty",
    "image_url",
)


def get_recipe(db: Session, recipe_id: int) -> Recipe:
    """Recipe with category and ingredient lines loaded."""
    recipe = RecipeRepository(db).get_detail(recipe_id)
    if recipe is None:
        raise NotFoundError.for_resource("Recipe", recipe_id)
    return recipe


def _check_category(db: Session, category_id: Optional[int]) -> None:
    if category_id is None:
        return
    if not CategoryRepository(db).exists(category_id):
        raise ServiceValidationError(
            f"Category {category_id} does not exist",
            details=[
                {
                    "field": "category_id",
                    "message": "unknown category",
                    "type": "value_error",
                }
            ],
        )


def _replace_lines(
    db: Session, recipe: Recipe, lines: List[RecipeIngredientInput]
) -> None:
    """Swap every ingredient line of ``recipe`` for ``lines``"""
    ids = [line.ingredient_id for line in lines]
    if len(ids) != len(set(ids)):
        raise ServiceValidationError(
            "Each ingredient may appear only once per recipe",
            details=[
                {
                    "field": "ingredients",
                    "message": "duplicate ingredient",
                    "type": "value_error",
                }
            ],
        )

    known = IngredientRepository(db).get_by_ids(ids)
    unknown = [i for i in ids if i not in known]
    if unknown:
        raise ServiceValidationError(
            "Unknown ingredients",
            details=[
                {
                    "field": "ingredients",
                    "message": f"ingredient {i} does not exist",
                    "type": "value_error",
                }
                for i in unknown
            ],
        )

    # old rows must be gone before re-inserting the same (recipe, ingredient) pair
    recipe.recipe_ingredients.clear()
    db.flush()
    for line in lines:
        recipe.recipe_ingredients.append(
            RecipeIngredient(
                ingredient_id=line.ingredient_id,
                quantity=line.quantity,
                unit=line.unit,
                notes=line.notes,
                optional=line.optional,
            )
        )


def refresh_category_counts(db: Session, category_ids: Iterable[Optional[int]]) -> None:
    """Rewrite ``recipes_count`` for each touched category"""
    repo = RecipeRepository(db)
    for category_id in {c for c in category_ids if c is not None}:
        category = db.get(Category, category_id)
        if category is not None:
            category.recipes_count = repo.count_in_category(category_id)
    db.flush()


def _commit(db: Session, recipe: Recipe, touched: Set[Optional[int]]) -> None:
    recalculate_cost(db, recipe)
    refresh_category_counts(db, touched)
    db.commit()


def create_recipe(db: Session, data: RecipeCreate) -> Recipe:
    try:
        _check_category(db, data.category_id)
        recipe = Recipe(**data.model_dump(include=set(RECIPE_FIELDS)))
        db.add(recipe)
        db.flush()
        if data.ingredients:
            _replace_lines(db, recipe, data.ingredients)
        _commit(db, recipe, {recipe.category_id})
    except ServiceError:
        db.rollback()
        raise
    except IntegrityError as e:
        db.rollback()
        logger.warning("Recipe create conflict: %s", e.orig)
        raise ConflictError("Recipe conflicts with existing data") from e
    except Exception:
        db.rollback()
        logger.exception("Error creating recipe '%s'", data.title)
        raise

    logger.info("Created recipe %s (cost %s)", recipe.id, recipe.est_cost_cents)
    return get_recipe(db, recipe.id)


def update_recipe(db: Session, recipe_id: int, data: RecipeUpdate) -> Recipe:
    """
    Apply a partial update.

    Only fields present in the payload change. When ``ingredients`` is
    present the whole line set is replaced; an empty list removes every line.
    """
    recipe = RecipeRepository(db).get_by_id(recipe_id)
    if recipe is None:
        raise NotFoundError.for_resource("Recipe", recipe_id)

    changes = data.model_dump(exclude_unset=True, include=set(RECIPE_FIELDS))
    touched = {recipe.category_id}
    try:
        if "category_id" in changes:
            _check_category(db, changes["category_id"])
        for field, value in changes.items():
            setattr(recipe, field, value)
        if data.ingredients is not None:
            _replace_lines(db, recipe, data.ingredients)
        touched.add(recipe.category_id)
        _commit(db, recipe, touched)
    except ServiceError:
        db.rollback()
        raise
    except IntegrityError as e:
        db.rollback()
        logger.warning("Recipe %s update conflict: %s", recipe_id, e.orig)
        raise ConflictError("Recipe conflicts with existing data") from e
    except Exception:
        db.rollback()
        logger.exception("Error updating recipe %s", recipe_id)
        raise

    logger.info("Updated recipe %s (cost %s)", recipe_id, recipe.est_cost_cents)
    return get_recipe(db, recipe_id)


def delete_recipe(db: Session, recipe_id: int) -> None:
    recipe = RecipeRepository(db).get_by_id(recipe_id)
    if recipe is None:
        raise NotFoundError.for_resource("Recipe", recipe_id)

    category_id = recipe.category_id
    try:
        RecipeRepository(db).remove(recipe)
        refresh_category_counts(db, [category_id])
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Error deleting recipe %s", recipe_id)
        raise
    logger.info("Deleted recipe %s", recipe_id)
