"""
Models module for Tasknote
Contains all database models and their schemas
"""
from sqlmodel import SQLModel
from .task import Task, TaskCreate, TaskUpdate, TaskPublic, Priority, UNCATEGORIZED
from .category import Category, CategoryCreate, CategoryUpdate, CategoryPublic, DEFAULT_CATEGORY_COLOR

__all__ = [
    "SQLModel",
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "TaskPublic",
    "Priority",
    "UNCATEGORIZED",
    "Category",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryPublic",
    "DEFAULT_CATEGORY_COLOR",
]
