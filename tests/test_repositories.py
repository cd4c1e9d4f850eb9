"""
Repository tests against the SQLite test database.

These cover the queries the services build on: eager loading of recipe
lines, ingredient lookups and the rating aggregate.
"""

from sqlalchemy.orm import Session

from repositories import (
    CategoryRepository,
    IngredientRepository,
    RatingRepository,
    RecipeRepository,
    UserRepository,
)
from repositories.recipe_filters import ingredient_overlap_filter
from test_fixtures import (
    db_session,
    make_category,
    make_ingredient,
    make_rating,
    make_recipe,
    make_user,
)


def test_recipe_detail_loads_lines_in_order(db_session: Session):
    beet = make_ingredient(db_session, "beet")
    onion = make_ingredient(db_session, "onion")
    recipe_id = make_recipe(db_session, lines=[(onion, 1, False), (beet, 2, True)]).id
    db_session.expunge_all()

    loaded = RecipeRepository(db_session).get_detail(recipe_id)
    assert [line.ingredient.name for line in loaded.recipe_ingredients] == ["onion", "beet"]
    assert RecipeRepository(db_session).get_detail(recipe_id + 1) is None


def test_find_with_lines_uses_overlap_filter(db_session: Session):
    beet = make_ingredient(db_session, "beet")
    potato = make_ingredient(db_session, "potato")
    borscht = make_recipe(db_session, "Borscht", lines=[(beet, 2, False)])
    make_recipe(db_session, "Deruny", lines=[(potato, 5, False)])

    found = RecipeRepository(db_session).find_with_lines([ingredient_overlap_filter([beet.id])])
    assert [r.id for r in found] == [borscht.id]


def test_count_in_category(db_session: Session):
    soups = make_category(db_session, "Soups")
    make_recipe(db_session, "A", category=soups)
    make_recipe(db_session, "B", category=soups)
    make_recipe(db_session, "C")
    assert RecipeRepository(db_session).count_in_category(soups.id) == 2


def test_ingredient_lookups(db_session: Session):
    beet = make_ingredient(db_session, "Beet")
    repo = IngredientRepository(db_session)

    assert repo.get_by_ids([beet.id, 999]) == {beet.id: beet}
    assert repo.get_by_ids([]) == {}


def test_ingredient_search_query_escapes_wildcards(db_session: Session):
    make_ingredient(db_session, "salt 100%")
    make_ingredient(db_session, "salt")
    repo = IngredientRepository(db_session)

    assert [i.name for i in repo.search_query("100%").all()] == ["salt 100%"]
    assert [i.name for i in repo.search_query("%").all()] == ["salt 100%"]


def test_rating_aggregate(db_session: Session):
    recipe = make_recipe(db_session)
    repo = RatingRepository(db_session)
    assert repo.aggregate_for_recipe(recipe.id) == (None, 0)

    make_rating(db_session, recipe, make_user(db_session), 3)
    make_rating(db_session, recipe, make_user(db_session), 4)
    avg, count = repo.aggregate_for_recipe(recipe.id)
    assert float(avg) == 3.5
    assert count == 2


def test_user_exists(db_session: Session):
    user = make_user(db_session)
    repo = UserRepository(db_session)
    assert repo.exists(user.id)
    assert not repo.exists(user.id + 1)


def test_category_children_ordered_by_position(db_session: Session):
    root = make_category(db_session, "Root")
    make_category(db_session, "Second", parent=root, position=2)
    make_category(db_session, "First", parent=root, position=1)
    children = CategoryRepository(db_session).get_children(root.id)
    assert [c.name for c in children] == ["First", "Second"]
