"""Exceptions raised by the bundled storage backends."""

from __future__ import annotations

from pathlib import Path


class StorageBackendError(Exception):
    """Base error for the bundled storage backends."""


class CorruptStorageFileError(StorageBackendError):
    """The backing data file does not hold a JSON object of strings."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Corrupt storage file {path}: {reason}")
