"""
Shared test fixtures and utilities for the RecipeFinder test suite.

Database tests run against an in-memory SQLite database. StaticPool keeps a
single connection, so the schema created here is the one every session and
every TestClient request sees. Each test gets freshly created tables.
"""

import uuid
from decimal import Decimal
from typing import Generator, Iterable, Optional, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from api.dependencies import get_db
from domain.enums import Difficulty
from domain.models import (
    AppUser,
    Base,
    Category,
    Ingredient,
    Rating,
    Recipe,
    RecipeIngredient,
)
from main import app
from services.cost_calculator import recalculate_cost

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Create a database session for integration tests.

    Tables are created before the test and dropped after it, so no state
    leaks between tests.

    Yields:
        Session: SQLAlchemy database session
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """TestClient whose requests share the test's database session"""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


# =============================================================================
# Factories
# =============================================================================


def make_user(db: Session, name: str = "Olena Kovalenko", email: Optional[str] = None) -> AppUser:
    user = AppUser(email=email or unique_email("olena"), name=name)
    db.add(user)
    db.commit()
    return user


def make_category(
    db: Session, name: str, parent: Optional[Category] = None, position: int = 0
) -> Category:
    category = Category(
        name=name, parent_id=parent.id if parent else None, position=position
    )
    db.add(category)
    db.commit()
    return category


def make_ingredient(
    db: Session,
    name: str,
    unit_price_cents: int = 100,
    name_uk: Optional[str] = None,
    category: Optional[str] = None,
    default_unit: str = "pcs",
) -> Ingredient:
    ingredient = Ingredient(
        name=name,
        name_uk=name_uk or name,
        unit_price_cents=unit_price_cents,
        category=category,
        default_unit=default_unit,
    )
    db.add(ingredient)
    db.commit()
    return ingredient


LineSpec = Tuple[Ingredient, object, bool]


def make_recipe(
    db: Session,
    title: str = "Borscht",
    lines: Iterable[LineSpec] = (),
    servings: int = 4,
    prep_time_min: int = 20,
    cook_time_min: int = 40,
    difficulty: Difficulty = Difficulty.EASY,
    category: Optional[Category] = None,
    description: Optional[str] = None,
    avg_rating=0,
    est_cost_cents: Optional[int] = None,
) -> Recipe:
    """
    Create a recipe with ingredient lines ``(ingredient, quantity, optional)``.

    The cost is computed from the lines unless ``est_cost_cents`` is given,
    in which case it is stored as-is.
    """
    recipe = Recipe(
        title=title,
        description=description,
        instructions="Mix and cook.",
        servings=servings,
        prep_time_min=prep_time_min,
        cook_time_min=cook_time_min,
        difficulty=difficulty,
        category_id=category.id if category else None,
        avg_rating=Decimal(str(avg_rating)),
    )
    db.add(recipe)
    db.flush()
    for ingredient, quantity, optional in lines:
        recipe.recipe_ingredients.append(
            RecipeIngredient(
                ingredient_id=ingredient.id,
                quantity=Decimal(str(quantity)),
                unit=ingredient.default_unit,
                optional=optional,
            )
        )
    if est_cost_cents is None:
        recalculate_cost(db, recipe)
    else:
        recipe.est_cost_cents = est_cost_cents
    db.commit()
    return recipe


def make_rating(db: Session, recipe: Recipe, user: AppUser, score: int) -> Rating:
    rating = Rating(recipe_id=recipe.id, user_id=user.id, score=score)
    db.add(rating)
    db.commit()
    return rating
