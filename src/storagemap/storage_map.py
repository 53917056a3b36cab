"""Validated storage façade over a raw key-value Storage."""

from __future__ import annotations

import json
from typing import TypeVar

from storagemap.common import create_logger
from storagemap.errors import (
    ClearStorageError,
    EncodeError,
    KeyNotExistError,
    MapError,
    ReadError,
    StorageError,
    StorageMapError,
    ValidationError,
    WriteError,
)
from storagemap.result import Failure, Result, Success, SuccessFailure, failure, success
from storagemap.storage import Storage
from storagemap.types import Validator

S = TypeVar("S")
F = TypeVar("F")
E = TypeVar("E", bound=StorageMapError)

logger = create_logger("storage_map")


class StorageMap:
    """Reads and writes JSON values through a ``Storage`` without raising.

    Every operation returns a ``Result``. Exceptions raised by the storage, by JSON
    decoding or by the validating transform are captured into failure payloads;
    only ``Exception`` subclasses are captured.
    """

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    @property
    def storage(self) -> Storage:
        return self._storage

    def write(self, key: str, value: object) -> Result[None, WriteError]:
        """Encode ``value`` as JSON and store it under ``key``.

        Returns:
            ``success(None)``, or a failure holding ``EncodeError`` when the value is
            not JSON-serializable and ``StorageError`` when ``store`` raised.
        """
        try:
            text = json.dumps(value)
        except (TypeError, ValueError, RecursionError) as encode_error:
            return self._fail(EncodeError(encode_error=encode_error, key=key))

        try:
            self._storage.store(key, text)
        except Exception as storage_error:
            return self._fail(StorageError(storage_error=storage_error, key=key))

        return success(None)

    def read(self, key: str, validate: Validator[S, F]) -> Result[S, ReadError[F]]:
        """Fetch ``key``, decode it and run ``validate`` on the decoded value.

        Stages run in a fixed order and stop at the first failure:

        - ``fetch`` raised: ``StorageError``
        - ``fetch`` returned ``None``: ``KeyNotExistError``
        - decoding or ``validate`` raised: ``MapError``
        - ``validate`` returned a failure: ``ValidationError`` carrying its payload

        Otherwise the success payload of ``validate`` is returned.
        """
        try:
            text = self._storage.fetch(key)
        except Exception as storage_error:
            return self._fail(StorageError(storage_error=storage_error, key=key))

        if text is None:
            return self._fail(KeyNotExistError(key=key))

        try:
            validated = validate(json.loads(text))
            if not isinstance(validated, SuccessFailure):
                raise TypeError(f"Validator must return a Success or Failure, got {type(validated).__name__}")
        except Exception as map_error:
            return self._fail(MapError(map_error=map_error, key=key))

        match validated:
            case Failure(validation_error):
                return self._fail(ValidationError(validation_error=validation_error, key=key))
            case Success(value):
                return success(value)

    def remove_item(self, key: str) -> Result[None, StorageError]:
        try:
            self._storage.remove(key)
        except Exception as storage_error:
            return self._fail(StorageError(storage_error=storage_error, key=key))

        return success(None)

    def clear(self) -> Result[None, ClearStorageError]:
        try:
            self._storage.wipe()
        except Exception as storage_error:
            return self._fail(ClearStorageError(storage_error=storage_error))

        return success(None)

    def _fail(self, error: E) -> Failure[E]:
        logger.debug("Storage operation failed", kind=error.kind, key=getattr(error, "key", None))
        return failure(error)


def create_storage_map(storage: Storage) -> StorageMap:
    """Create a ``StorageMap`` bound to ``storage``.

    Args:
        storage: Any object providing ``store``, ``fetch``, ``remove`` and ``wipe``.
    """
    return StorageMap(storage)
