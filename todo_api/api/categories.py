"""Category API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.orm import Session, selectinload

from todo_api.database import MAX_ID, get_db
from todo_api.models.category import Category
from todo_api.models.mixins import utcnow
from todo_api.models.todo import Todo
from todo_api.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])

CategoryId = Annotated[int, Path(ge=1, le=MAX_ID)]


def get_category(db: Session, category_id: int) -> Category:
    """Get a category by id or raise 404."""
    category = (
        db.query(Category)
        .options(selectinload(Category.todos))
        .filter(Category.id == category_id)
        .first()
    )
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return category


@router.get("", response_model=list[CategoryResponse])
def get_categories(db: Annotated[Session, Depends(get_db)]):
    """Get all categories with their todos."""
    categories = (
        db.query(Category).options(selectinload(Category.todos)).order_by(Category.id).all()
    )
    return [CategoryResponse.from_category(category) for category in categories]


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category_by_id(category_id: CategoryId, db: Annotated[Session, Depends(get_db)]):
    """Get a single category with its todos."""
    return CategoryResponse.from_category(get_category(db, category_id))


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    category_data: CategoryCreate,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
):
    """Create a new category, along with any todos sent with it."""
    category = Category(name=category_data.name)
    now = utcnow()
    for todo_data in category_data.todos:
        category.todos.append(
            Todo(
                title=todo_data.title,
                content=todo_data.content,
                due_date=todo_data.due_date,
                created_at=now,
                is_completed=False,
                is_deleted=False,
            )
        )
    db.add(category)
    db.commit()
    db.refresh(category)

    logger.info("Created category %s with %d todos", category.id, len(category.todos))
    response.headers["Location"] = f"/categories/{category.id}"
    return CategoryResponse.from_category(category)


@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_category(
    category_id: CategoryId,
    category_data: CategoryUpdate,
    db: Annotated[Session, Depends(get_db)],
):
    """Rename a category."""
    category = get_category(db, category_id)

    category.name = category_data.name
    db.commit()
    logger.info("Renamed category %s", category_id)


@router.delete("/{category_id}", response_model=CategoryResponse)
def delete_category(category_id: CategoryId, db: Annotated[Session, Depends(get_db)]):
    """Delete a category that no todo references, returning the removed record."""
    category = get_category(db, category_id)

    # Soft-deleted todos still hold the foreign key
    if category.todos:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Category has todos")

    removed = CategoryResponse.from_category(category)
    db.delete(category)
    db.commit()
    logger.info("Deleted category %s", category_id)
    return removed
