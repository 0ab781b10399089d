"""
Category model for Tasknote
Categories are labels with a display color; tasks reference them by name
"""
from datetime import datetime
from typing import Optional
from sqlmodel import Field, SQLModel
from pydantic import field_validator


DEFAULT_CATEGORY_COLOR = "categoryDefault"


class CategoryBase(SQLModel):
    """Base model for category with common fields"""
    name: str = Field(min_length=1, max_length=100)
    color: str = Field(default=DEFAULT_CATEGORY_COLOR, max_length=50)


class Category(CategoryBase, table=True):
    """Category model for database table"""
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=datetime.now)


class CategoryCreate(CategoryBase):
    """Schema for creating a new category"""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Category name cannot be empty")
        return v


class CategoryUpdate(SQLModel):
    """Schema for renaming or recoloring a category"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    color: Optional[str] = Field(default=None, max_length=50)


class CategoryPublic(CategoryBase):
    """Public representation of category"""
    id: int
    created_at: datetime
    task_count: Optional[int] = None
