"""File-based Storage implementation."""

from __future__ import annotations

import json
from pathlib import Path

from storagemap.common import AppDirectories, create_logger, get_data_directory_from_dirs

from .exceptions import CorruptStorageFileError

logger = create_logger("storage.file")


class FileStorage:
    """File-based implementation of the Storage protocol.

    All keys of a namespace live in one JSON object at
    ``<data dir>/<namespace>/data.json``, mapping each key to its stored text.
    Errors from the filesystem are raised as-is.
    """

    def __init__(self, namespace: str, directories: AppDirectories) -> None:
        self._namespace = namespace
        self._directories = directories

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def path(self) -> Path:
        return self._get_data_file_path()

    def store(self, key: str, text: str) -> None:
        data_file = self._get_data_file_path()
        data_file.parent.mkdir(parents=True, exist_ok=True)

        existing_data = self._read_all(data_file)
        existing_data[key] = text
        self._write_all(data_file, existing_data)

    def fetch(self, key: str) -> str | None:
        return self._read_all(self._get_data_file_path()).get(key)

    def remove(self, key: str) -> None:
        data_file = self._get_data_file_path()
        all_data = self._read_all(data_file)

        if key in all_data:
            del all_data[key]
            self._write_all(data_file, all_data)

    def wipe(self) -> None:
        data_file = self._get_data_file_path()
        if data_file.exists():
            data_file.unlink()
            logger.debug("Wiped storage namespace", namespace=self._namespace, path=str(data_file))

    def keys(self) -> list[str]:
        return list(self._read_all(self._get_data_file_path()))

    def __len__(self) -> int:
        return len(self._read_all(self._get_data_file_path()))

    def _read_all(self, data_file: Path) -> dict[str, str]:
        if not data_file.exists():
            return {}

        try:
            all_data = json.loads(data_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise CorruptStorageFileError(data_file, f"invalid JSON ({e})") from e

        if not isinstance(all_data, dict):
            raise CorruptStorageFileError(data_file, "stored data must be a JSON object")
        if not all(isinstance(value, str) for value in all_data.values()):
            raise CorruptStorageFileError(data_file, "stored values must be strings")

        return all_data

    def _write_all(self, data_file: Path, all_data: dict[str, str]) -> None:
        data_file.write_text(json.dumps(all_data, indent=2), encoding="utf-8")

    def _get_data_file_path(self) -> Path:
        data_dir = get_data_directory_from_dirs(self._directories)
        return data_dir / self._namespace / "data.json"
