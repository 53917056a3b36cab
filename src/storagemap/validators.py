"""Ready-made validating transforms for ``StorageMap.read``."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from storagemap.result import Failure, Result, Success, failure, success
from storagemap.types import Validator

T = TypeVar("T")


def accept_any(value: object) -> Success[object]:
    """Accept any decoded value unchanged."""
    return success(value)


def of_type(*types: type[T]) -> Validator[T, str]:
    """Accept values that are instances of one of ``types``.

    ``bool`` values are rejected unless ``bool`` itself is listed.
    """
    if not types:
        raise TypeError("of_type() requires one or more types")

    expected = " | ".join(t.__name__ for t in types)

    def validate(value: object) -> Result[T, str]:
        if isinstance(value, bool) and bool not in types:
            return failure(f"expected {expected}, got bool")
        if isinstance(value, types):
            return success(value)
        return failure(f"expected {expected}, got {type(value).__name__}")

    return validate


def with_model(model: type[T] | Any) -> Validator[T, list[dict[str, Any]]]:  # noqa: ANN401
    """Validate decoded values with pydantic against ``model``.

    ``model`` can be a ``BaseModel`` subclass or any type pydantic can build a
    ``TypeAdapter`` for (``list[int]``, ``TypedDict``s, dataclasses, ...).
    Rejections carry pydantic's error dictionaries.
    """
    adapter: TypeAdapter[T] = TypeAdapter(model)

    def validate(value: object) -> Success[T] | Failure[list[dict[str, Any]]]:
        try:
            return success(adapter.validate_python(value))
        except PydanticValidationError as e:
            return failure([dict(error) for error in e.errors(include_url=False)])

    return validate


__all__ = ["accept_any", "of_type", "with_model"]
