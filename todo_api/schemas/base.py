"""Shared base for wire schemas."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class CamelModel(BaseModel):
    """Base model using camelCase field names on the wire.

    Snake_case names are still accepted on input so ORM objects and Python
    callers can populate fields directly.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
