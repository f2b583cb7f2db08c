"""Base class for value objects."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    Their structural form uses camelCase keys (``originalName``, ``mimeType``)
    while Python code uses snake_case attribute names.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        alias_generator=to_camel,
        populate_by_name=True,
    )


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Interpret naive datetimes as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
