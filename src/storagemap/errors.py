"""StorageMap failure payload models."""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

F = TypeVar("F")


class StorageMapError(BaseModel):
    """Base failure payload.

    Every payload carries a literal ``kind`` and exactly one attribute named after it,
    so callers can branch on either.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    kind: str


class StorageError(StorageMapError):
    """The underlying store raised while handling a key."""

    kind: Literal["storage_error"] = "storage_error"
    storage_error: Any
    key: str


class ClearStorageError(StorageMapError):
    """The underlying store raised while wiping every key."""

    kind: Literal["storage_error"] = "storage_error"
    storage_error: Any


class KeyNotExistError(StorageMapError):
    """No value is stored under the key."""

    kind: Literal["key_not_exist_error"] = "key_not_exist_error"
    key_not_exist_error: None = None
    key: str


class MapError(StorageMapError):
    """Decoding the stored text or running the validating transform raised."""

    kind: Literal["map_error"] = "map_error"
    map_error: Any
    key: str


class ValidationError(StorageMapError, Generic[F]):
    """The validating transform rejected the decoded value."""

    kind: Literal["validation_error"] = "validation_error"
    validation_error: F
    key: str


class EncodeError(StorageMapError):
    """The value could not be encoded to JSON text."""

    kind: Literal["encode_error"] = "encode_error"
    encode_error: Any
    key: str


type ReadError[F] = StorageError | KeyNotExistError | MapError | ValidationError[F]
type WriteError = StorageError | EncodeError

__all__ = [
    "ClearStorageError",
    "EncodeError",
    "KeyNotExistError",
    "MapError",
    "ReadError",
    "StorageError",
    "StorageMapError",
    "ValidationError",
    "WriteError",
]
