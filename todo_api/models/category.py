"""Category model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from todo_api.database import Base


class Category(Base):
    """Category model grouping todos."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    # Relationships
    todos = relationship("Todo", back_populates="category", order_by="Todo.id")

    @property
    def live_todos(self) -> list:
        """Todos that have not been soft-deleted."""
        return [todo for todo in self.todos if not todo.is_deleted]
