"""Category schemas."""

from pydantic import ConfigDict, Field

from todo_api.database import MAX_ID
from todo_api.models.category import Category
from todo_api.schemas.base import CamelModel
from todo_api.schemas.todo import TodoCreate, TodoSummary


class AttachedTodoCreate(TodoCreate):
    """Todo created together with its category."""

    category_id: int | None = Field(None, ge=0, le=MAX_ID)


class CategoryCreate(CamelModel):
    """Create a new category, optionally with todos attached."""

    name: str = Field(..., min_length=1, max_length=255)
    todos: list[AttachedTodoCreate] = Field(default_factory=list)


class CategoryUpdate(CamelModel):
    """Rename a category."""

    name: str = Field(..., min_length=1, max_length=255)


class CategoryResponse(CamelModel):
    """Category with its live todos."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    todos: list[TodoSummary] = Field(default_factory=list)

    @classmethod
    def from_category(cls, category: Category) -> "CategoryResponse":
        """Build the response shape, leaving out soft-deleted todos."""
        return cls(
            id=category.id,
            name=category.name,
            todos=[TodoSummary.model_validate(todo) for todo in category.live_todos],
        )
