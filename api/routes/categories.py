"""Category routes - the recipe category tree."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
import logging

from api.dependencies import get_db
from api.responses import ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from domain.schemas import CategoryNode
from services import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])
logger = logging.getLogger("recipefinder.api.categories")


@router.get("", response_model=List[CategoryNode])
def get_category_tree(db: Session = Depends(get_db)):
    """Root categories by position, each with its nested subcategories."""
    return CategoryService.get_tree(db)


@router.get("/{category_id}/descendants", response_model=List[int], responses=ERROR_RESPONSES)
def get_descendants(category_id: int, db: Session = Depends(get_db)):
    return CategoryService.get_descendant_ids(db, category_id)


@router.delete(
    "/{category_id}", status_code=status.HTTP_204_NO_CONTENT, responses=WRITE_ERROR_RESPONSES
)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    """Delete an unused category; 409 while recipes still belong to it."""
    CategoryService.delete_category(db, category_id)
