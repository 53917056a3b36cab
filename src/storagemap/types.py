"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Callable

from storagemap.result import Result

type JsonValue = dict[str, object] | list[object] | str | int | float | bool | None

type Validator[S, F] = Callable[[object], Result[S, F]]

__all__ = ["JsonValue", "Validator"]
