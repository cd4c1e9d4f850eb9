"""Pydantic schema for the category tree."""

from typing import List, Optional

from pydantic import BaseModel


class CategoryNode(BaseModel):
    """Category with its nested subcategories"""

    id: int
    name: str
    description: Optional[str] = None
    position: int
    recipes_count: int
    children: List["CategoryNode"] = []

    model_config = {"from_attributes": True}
