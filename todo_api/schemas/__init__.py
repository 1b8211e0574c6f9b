"""Pydantic schemas for API requests and responses."""

from todo_api.schemas.category import (
    AttachedTodoCreate,
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
)
from todo_api.schemas.todo import (
    TodoCategory,
    TodoCreate,
    TodoResponse,
    TodoSummary,
    TodoUpdate,
)

__all__ = [
    "AttachedTodoCreate",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "TodoCreate",
    "TodoUpdate",
    "TodoCategory",
    "TodoSummary",
    "TodoResponse",
]
