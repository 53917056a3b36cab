"""StorageMap - JSON values over a raw key-value store, with typed failure results.

By default, StorageMap's internal logging is disabled when used as a library.
Library users can enable logging by calling storagemap.enable_logging().
"""

from storagemap.common import disable_library_logging, enable_library_logging
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
from storagemap.result import Failure, Result, Success, UnwrapError, failure, is_failure, is_success, success
from storagemap.storage import FileStorage, MemoryStorage, Storage
from storagemap.storage_map import StorageMap, create_storage_map
from storagemap.types import JsonValue, Validator
from storagemap.validators import accept_any, of_type, with_model

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "ClearStorageError",
    "EncodeError",
    "Failure",
    "FileStorage",
    "JsonValue",
    "KeyNotExistError",
    "MapError",
    "MemoryStorage",
    "ReadError",
    "Result",
    "Storage",
    "StorageError",
    "StorageMap",
    "StorageMapError",
    "Success",
    "UnwrapError",
    "ValidationError",
    "Validator",
    "WriteError",
    "accept_any",
    "create_storage_map",
    "enable_logging",
    "failure",
    "is_failure",
    "is_success",
    "of_type",
    "success",
    "with_model",
]
