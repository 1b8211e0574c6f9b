"""SQLAlchemy models."""

from todo_api.models.category import Category
from todo_api.models.todo import Todo

__all__ = [
    "Category",
    "Todo",
]
