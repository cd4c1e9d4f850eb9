"""Pydantic schemas for ingredients."""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.enums import IngredientSortField, SortOrder
from domain.schemas.pagination_schemas import PaginationMeta


class IngredientResponse(BaseModel):
    """Schema for ingredient response"""

    id: int
    name: str
    name_uk: str
    default_unit: str
    category: Optional[str] = None
    unit_price_cents: int
    image_url: Optional[str] = None

    model_config = {"from_attributes": True}


class IngredientQueryParams(BaseModel):
    """Filters for the ingredient catalog search"""

    query: Optional[str] = Field(None, description="Substring of name or localized name")
    category: Optional[str] = None
    sort: IngredientSortField = IngredientSortField.NAME
    order: SortOrder = SortOrder.ASC
    page: Optional[int] = Field(None, gt=0)
    per_page: Optional[int] = Field(None, gt=0, le=100)


class IngredientListResponse(BaseModel):
    data: List[IngredientResponse]
    meta: PaginationMeta
