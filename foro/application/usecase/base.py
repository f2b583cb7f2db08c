"""Base use case and input helpers."""

from abc import ABC, abstractmethod
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from foro.domain.error import ValidationError

V = TypeVar("V", bound=BaseModel)


class BaseUseCase(ABC):
    """Base use case for orchestrating repository calls."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def build_value(model: type[V], data: Any, field: str) -> V:
    """Build a value object from raw input.

    Pydantic errors become a domain ``ValidationError`` whose ``field`` is
    the dotted path of the first failing input, prefixed with ``field``.

    Args:
        model: Value object class
        data: Raw input (usually a dict from a request body)
        field: Path of ``data`` within the request (e.g. ``authors.0``)

    Returns:
        The validated value object

    Raises:
        ValidationError: If ``data`` does not describe a valid value
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        error = e.errors()[0]
        path = ".".join(str(part) for part in (field, *error["loc"]))
        raise ValidationError(error["msg"], field=path) from e


def build_values(model: type[V], items: Iterable[Any], field: str) -> list[V]:
    """Build a list of value objects, reporting failures by index."""
    return [build_value(model, item, f"{field}.{i}") for i, item in enumerate(items)]
