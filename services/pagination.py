"""
Page/per-page arithmetic shared by every search mode.

``paginate`` slices an in-memory sequence (used by the ingredient-match
search, whose scores are computed per row); ``paginate_query`` counts and
slices a SQLAlchemy query in the database. Both normalize their inputs the
same way and never fail on an out-of-range page: they return an empty slice
with the full total.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Sequence, TypeVar

from sqlalchemy.orm import Query

from app.config import settings
from core.utils.helpers import ceil_div

T = TypeVar("T")

MIN_PER_PAGE = 1


@dataclass
class Page(Generic[T]):
    page: int
    per_page: int
    total: int
    total_pages: int
    items: List[T] = field(default_factory=list)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    def meta(self, **extra: Any) -> dict:
        """Response ``meta`` block; ``extra`` keys are echoed alongside"""
        payload = {
            "page": self.page,
            "per_page": self.per_page,
            "total": self.total,
            "total_pages": self.total_pages,
        }
        payload.update(extra)
        return payload


def normalize_page(page: Optional[int]) -> int:
    if page is None:
        return 1
    return max(int(page), 1)


def normalize_per_page(per_page: Optional[int]) -> int:
    if per_page is None:
        return settings.default_per_page
    return min(max(int(per_page), MIN_PER_PAGE), settings.max_per_page)


def total_pages_for(total: int, per_page: int) -> int:
    return ceil_div(total, per_page) if total > 0 else 0


def paginate(
    items: Sequence[T], page: Optional[int] = None, per_page: Optional[int] = None
) -> Page[T]:
    """Slice an already ordered, fully materialized sequence"""
    page = normalize_page(page)
    per_page = normalize_per_page(per_page)
    total = len(items)
    start = (page - 1) * per_page
    return Page(
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages_for(total, per_page),
        items=list(items[start : start + per_page]),
    )


def paginate_query(
    query: Query, page: Optional[int] = None, per_page: Optional[int] = None
) -> Page:
    """Count the full query, then fetch one page of it"""
    page = normalize_page(page)
    per_page = normalize_per_page(per_page)
    total = query.order_by(None).count()
    offset = (page - 1) * per_page
    items = query.offset(offset).limit(per_page).all() if offset < total else []
    return Page(
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages_for(total, per_page),
        items=items,
    )
