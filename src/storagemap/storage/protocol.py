"""Storage protocol."""

from __future__ import annotations

from typing import Protocol


class Storage(Protocol):
    """Protocol for the raw key-value surface wrapped by ``StorageMap``.

    Any method may raise. ``fetch`` returns ``None`` when the key is absent;
    every string, including ``""``, counts as stored text.
    """

    def store(self, key: str, text: str) -> None: ...

    def fetch(self, key: str) -> str | None: ...

    def remove(self, key: str) -> None: ...

    def wipe(self) -> None: ...
