"""Todo API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.orm import Session, joinedload

from todo_api.database import MAX_ID, get_db
from todo_api.models.category import Category
from todo_api.models.mixins import utcnow
from todo_api.models.todo import Todo
from todo_api.schemas.todo import TodoCreate, TodoResponse, TodoUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todos", tags=["todos"])

TodoId = Annotated[int, Path(ge=1, le=MAX_ID)]


def category_exists(db: Session, category_id: int) -> bool:
    """Check whether a category with this id exists."""
    return db.query(Category.id).filter(Category.id == category_id).first() is not None


def get_todo(db: Session, todo_id: int) -> Todo:
    """Get a todo that has not been soft-deleted or raise 404."""
    todo = (
        db.query(Todo)
        .options(joinedload(Todo.category))
        .filter(Todo.id == todo_id, Todo.is_deleted.is_(False))
        .first()
    )
    if not todo:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return todo


def require_category(db: Session, category_id: int) -> None:
    """Reject a reference to a category that does not exist."""
    if not category_exists(db, category_id):
        logger.warning("Rejected reference to missing category %s", category_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Category not found")


@router.get("", response_model=list[TodoResponse])
def get_todos(db: Annotated[Session, Depends(get_db)]):
    """Get all todos that have not been deleted."""
    return (
        db.query(Todo)
        .options(joinedload(Todo.category))
        .filter(Todo.is_deleted.is_(False))
        .order_by(Todo.id)
        .all()
    )


@router.get("/{todo_id}", response_model=TodoResponse)
def get_todo_by_id(todo_id: TodoId, db: Annotated[Session, Depends(get_db)]):
    """Get a single todo."""
    return get_todo(db, todo_id)


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_data: TodoCreate,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
):
    """Create a new todo in an existing category."""
    require_category(db, todo_data.category_id)

    todo = Todo(
        title=todo_data.title,
        content=todo_data.content,
        due_date=todo_data.due_date,
        category_id=todo_data.category_id,
        created_at=utcnow(),
        is_completed=False,
        is_deleted=False,
    )
    db.add(todo)
    db.commit()
    db.refresh(todo)

    logger.info("Created todo %s in category %s", todo.id, todo.category_id)
    response.headers["Location"] = f"/todos/{todo.id}"
    return todo


@router.patch("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_todo(
    todo_id: TodoId,
    todo_data: TodoUpdate,
    db: Annotated[Session, Depends(get_db)],
):
    """Partially update a todo."""
    todo = get_todo(db, todo_id)

    # 0 keeps the current category
    if todo_data.category_id:
        require_category(db, todo_data.category_id)
        todo.category_id = todo_data.category_id

    if todo_data.title is not None:
        todo.title = todo_data.title
    if todo_data.content is not None:
        todo.content = todo_data.content
    if todo_data.is_completed is not None:
        todo.is_completed = todo_data.is_completed
    if todo_data.due_date is not None:
        todo.due_date = todo_data.due_date

    db.commit()
    logger.info("Updated todo %s", todo_id)


@router.delete("/{todo_id}", response_model=TodoResponse)
def delete_todo(todo_id: TodoId, db: Annotated[Session, Depends(get_db)]):
    """Soft delete a todo, returning the updated record."""
    todo = get_todo(db, todo_id)

    todo.soft_delete()
    db.commit()
    db.refresh(todo)
    logger.info("Soft-deleted todo %s", todo_id)
    return todo
