"""Rating service tests: upsert, delete and the aggregate kept on the recipe."""

import pytest
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import Rating, Recipe
from services import RatingService
from test_fixtures import db_session, make_rating, make_recipe, make_user


def test_first_rating_sets_average_and_count(db_session: Session):
    recipe = make_recipe(db_session)
    user = make_user(db_session)

    rating = RatingService.rate_recipe(db_session, recipe.id, user.id, 4, "Lovely")

    assert rating.score == 4
    assert rating.review == "Lovely"
    db_session.refresh(recipe)
    assert float(recipe.avg_rating) == 4.0
    assert recipe.ratings_count == 1


def test_rating_again_replaces_the_previous_score(db_session: Session):
    recipe = make_recipe(db_session)
    user = make_user(db_session)

    RatingService.rate_recipe(db_session, recipe.id, user.id, 2)
    RatingService.rate_recipe(db_session, recipe.id, user.id, 5)

    assert db_session.query(Rating).count() == 1
    db_session.refresh(recipe)
    assert float(recipe.avg_rating) == 5.0
    assert recipe.ratings_count == 1


def test_average_is_rounded_to_two_places(db_session: Session):
    recipe = make_recipe(db_session)
    for score in (5, 4, 4):
        RatingService.rate_recipe(db_session, recipe.id, make_user(db_session).id, score)

    db_session.refresh(recipe)
    # 13 / 3 = 4.333...
    assert float(recipe.avg_rating) == 4.33
    assert recipe.ratings_count == 3


def test_delete_rating_recomputes(db_session: Session):
    recipe = make_recipe(db_session)
    alice = make_user(db_session, name="Alice")
    bob = make_user(db_session, name="Bob")
    RatingService.rate_recipe(db_session, recipe.id, alice.id, 5)
    RatingService.rate_recipe(db_session, recipe.id, bob.id, 2)

    summary = RatingService.delete_rating(db_session, recipe.id, bob.id)

    assert summary.avg_rating == 5.0
    assert summary.ratings_count == 1


def test_deleting_last_rating_resets_to_zero(db_session: Session):
    recipe = make_recipe(db_session)
    user = make_user(db_session)
    RatingService.rate_recipe(db_session, recipe.id, user.id, 3)

    summary = RatingService.delete_rating(db_session, recipe.id, user.id)

    assert summary.avg_rating == 0.0
    assert summary.ratings_count == 0
    db_session.expire_all()
    stored = db_session.get(Recipe, recipe.id)
    assert float(stored.avg_rating) == 0.0
    assert stored.ratings_count == 0


def test_recalculate_matches_stored_ratings(db_session: Session):
    recipe = make_recipe(db_session)
    for score in (1, 2, 3, 5):
        make_rating(db_session, recipe, make_user(db_session), score)

    summary = RatingService.recalculate_rating(db_session, recipe)
    db_session.commit()

    assert summary.avg_rating == 2.75
    assert summary.ratings_count == 4


def test_missing_recipe_user_or_rating(db_session: Session):
    recipe = make_recipe(db_session)
    user = make_user(db_session)

    with pytest.raises(NotFoundError):
        RatingService.rate_recipe(db_session, 999, user.id, 4)
    with pytest.raises(NotFoundError):
        RatingService.rate_recipe(db_session, recipe.id, 999, 4)
    with pytest.raises(NotFoundError) as exc_info:
        RatingService.delete_rating(db_session, recipe.id, user.id)
    assert exc_info.value.details == {"recipe_id": recipe.id, "user_id": user.id}
