"""
Category model - self-referential tree of recipe categories.
"""

from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Category(Base):
    """Recipe category. Roots have no parent; ``recipes_count`` is denormalized."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    parent_id = Column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), index=True
    )
    name = Column(String(100), nullable=False)
    description = Column(Text)
    image_url = Column(String(500))
    position = Column(Integer, nullable=False, default=0, index=True)
    recipes_count = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    parent = relationship("Category", remote_side=[id], back_populates="children")
    children = relationship(
        "Category", back_populates="parent", order_by="Category.position"
    )
    recipes = relationship("Recipe", back_populates="category")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
