"""Tests for page/per-page arithmetic, in memory and against the database."""

from sqlalchemy.orm import Session

from domain.models import Ingredient
from services.pagination import Page, paginate, paginate_query
from test_fixtures import db_session, make_ingredient

ITEMS = list(range(1, 29))


def test_last_partial_page():
    page = paginate(ITEMS, page=3, per_page=10)
    assert page.total == 28
    assert page.total_pages == 3
    assert page.items == [21, 22, 23, 24, 25, 26, 27, 28]


def test_out_of_range_page_is_empty_with_full_total():
    page = paginate(ITEMS, page=100, per_page=10)
    assert page.items == []
    assert page.total == 28
    assert page.total_pages == 3
    assert page.page == 100


def test_defaults():
    page = paginate(ITEMS)
    assert page.page == 1
    assert page.per_page == 20
    assert page.items == ITEMS[:20]


def test_page_is_floored_at_one():
    assert paginate(ITEMS, page=0, per_page=5).page == 1
    assert paginate(ITEMS, page=-3, per_page=5).items == [1, 2, 3, 4, 5]


def test_per_page_is_clamped():
    assert paginate(ITEMS, per_page=500).per_page == 100
    assert paginate(ITEMS, per_page=0).per_page == 1
    assert paginate(ITEMS, per_page=-2).per_page == 1


def test_empty_input():
    page = paginate([], page=1, per_page=10)
    assert page.total == 0
    assert page.total_pages == 0
    assert page.items == []


def test_meta_echoes_extra_keys():
    page = Page(page=2, per_page=10, total=28, total_pages=3)
    assert page.offset == 10
    assert page.meta(budget_cents=2000) == {
        "page": 2,
        "per_page": 10,
        "total": 28,
        "total_pages": 3,
        "budget_cents": 2000,
    }


def test_paginate_query_counts_and_slices_in_database(db_session: Session):
    for i in range(1, 13):
        make_ingredient(db_session, f"spice-{i:02d}")
    query = db_session.query(Ingredient).order_by(Ingredient.name)

    page = paginate_query(query, page=2, per_page=5)
    assert page.total == 12
    assert page.total_pages == 3
    assert [i.name for i in page.items] == [f"spice-{i:02d}" for i in range(6, 11)]

    beyond = paginate_query(query, page=9, per_page=5)
    assert beyond.items == []
    assert beyond.total == 12
