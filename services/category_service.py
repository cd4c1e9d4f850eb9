"""Category tree built from the parent-id column."""

import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError
from domain.models import Category
from domain.schemas import CategoryNode
from repositories import CategoryRepository, RecipeRepository

logger = logging.getLogger("recipefinder.category")


class CategoryService:
    @staticmethod
    def get_tree(db: Session) -> List[CategoryNode]:
        """Root categories ordered by position, each with nested children"""
        categories = CategoryRepository(db).get_all_ordered()
        children: Dict[Optional[int], List[Category]] = {}
        for category in categories:
            children.setdefault(category.parent_id, []).append(category)

        def build(category: Category, seen: set) -> CategoryNode:
            seen = seen | {category.id}
            return CategoryNode(
                id=category.id,
                name=category.name,
                description=category.description,
                position=category.position,
                recipes_count=category.recipes_count,
                children=[
                    build(child, seen)
                    for child in children.get(category.id, [])
                    if child.id not in seen
                ],
            )

        return [build(root, set()) for root in children.get(None, [])]

    @staticmethod
    def get_descendant_ids(db: Session, category_id: int) -> List[int]:
        """Ids of every category below ``category_id``, breadth first"""
        repo = CategoryRepository(db)
        if not repo.exists(category_id):
            raise NotFoundError.for_resource("Category", category_id)

        found: List[int] = []
        frontier = [category_id]
        visited = {category_id}
        while frontier:
            next_frontier = []
            for parent_id in frontier:
                for child in repo.get_children(parent_id):
                    if child.id in visited:
                        continue
                    visited.add(child.id)
                    found.append(child.id)
                    next_frontier.append(child.id)
            frontier = next_frontier
        return found

    @staticmethod
    def delete_category(db: Session, category_id: int) -> None:
        """
        Delete a category that no recipe uses.

        Raises ConflictError while recipes still belong to it. Its
        subcategories are kept and become roots.
        """
        repo = CategoryRepository(db)
        category = repo.get_by_id(category_id)
        if category is None:
            raise NotFoundError.for_resource("Category", category_id)

        recipes = RecipeRepository(db).count_in_category(category_id)
        if recipes > 0:
            raise ConflictError(
                "Cannot delete category with recipes",
                details={"id": category_id, "recipes_count": recipes},
                code="has_dependent_records",
            )

        try:
            db.query(Category).filter(Category.parent_id == category_id).update(
                {Category.parent_id: None}, synchronize_session="fetch"
            )
            repo.remove(category)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error deleting category %s", category_id)
            raise
        logger.info("Deleted category %s", category_id)
