"""Todo schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field, field_serializer, field_validator

from todo_api.database import MAX_ID
from todo_api.models.todo import TITLE_MAX_LENGTH
from todo_api.schemas.base import CamelModel, as_utc


class TodoCreate(CamelModel):
    """Create a new todo.

    Completion, deletion and creation time are server-controlled; any values
    sent for them are ignored.
    """

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str
    due_date: datetime
    category_id: int = Field(..., ge=0, le=MAX_ID)

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: datetime) -> datetime:
        return as_utc(value)


class TodoUpdate(CamelModel):
    """Partially update a todo.

    Omitted or null fields are left unchanged. A category_id of 0 also means
    "leave the category unchanged".
    """

    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str | None = None
    is_completed: bool | None = None
    due_date: datetime | None = None
    category_id: int | None = Field(None, ge=0, le=MAX_ID)

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: datetime | None) -> datetime | None:
        return as_utc(value) if value is not None else None


class TodoCategory(CamelModel):
    """Minimal category nested inside a todo (no todo list)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class TodoSummary(CamelModel):
    """Flat todo without its category, as listed under a category."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    is_deleted: bool
    is_completed: bool
    created_at: datetime
    due_date: datetime
    category_id: int

    @field_serializer("created_at", "due_date")
    def serialize_timestamp(self, value: datetime) -> datetime:
        # SQLite hands back naive values; everything is stored as UTC
        return as_utc(value)


class TodoResponse(TodoSummary):
    """Todo with its minimal category."""

    category: TodoCategory
