"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime

from sqlalchemy import Boolean, Column


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class SoftDeleteMixin:
    """Mixin to add soft delete functionality."""

    is_deleted = Column(Boolean, default=False, nullable=False, index=True)

    def soft_delete(self) -> None:
        """Soft delete the record."""
        self.is_deleted = True
