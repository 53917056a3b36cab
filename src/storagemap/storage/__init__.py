"""StorageMap storage backends."""

from .exceptions import CorruptStorageFileError, StorageBackendError
from .file import FileStorage
from .memory import MemoryStorage
from .protocol import Storage

__all__ = [
    "CorruptStorageFileError",
    "FileStorage",
    "MemoryStorage",
    "Storage",
    "StorageBackendError",
]
