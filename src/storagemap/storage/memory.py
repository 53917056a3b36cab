"""In-memory Storage implementation."""

from __future__ import annotations

import threading
from collections.abc import Mapping


class MemoryStorage:
    """Dict-backed implementation of the Storage protocol.

    Safe to share between threads; every primitive holds the same lock.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def store(self, key: str, text: str) -> None:
        with self._lock:
            self._items[key] = text

    def fetch(self, key: str) -> str | None:
        with self._lock:
            return self._items.get(key)

    def remove(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)

    def wipe(self) -> None:
        with self._lock:
            self._items.clear()

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
