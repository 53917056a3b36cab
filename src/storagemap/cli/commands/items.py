from __future__ import annotations

import json
from enum import StrEnum
from typing import Annotated

import typer
import yaml

from storagemap.errors import KeyNotExistError, StorageMapError
from storagemap.settings import get_settings
from storagemap.storage import FileStorage
from storagemap.storage_map import StorageMap, create_storage_map
from storagemap.validators import accept_any


class OutputFormat(StrEnum):
    JSON = "json"
    YAML = "yaml"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (json or yaml)."),
]
NamespaceOption = Annotated[
    str | None,
    typer.Option("--namespace", "-n", help="Storage namespace. Defaults to STORAGEMAP_STORAGE__NAMESPACE."),
]

KEY_NOT_FOUND_EXIT_CODE = 2


def register(app: typer.Typer) -> None:
    app.command("set")(set_item)
    app.command("get")(get_item)
    app.command("remove")(remove_item)
    app.command("clear")(clear)
    app.command("keys")(keys)


def set_item(
    key: Annotated[str, typer.Argument(help="Key to write.")],
    value: Annotated[str, typer.Argument(help="JSON value. Text that is not valid JSON is stored as a string.")],
    namespace: NamespaceOption = None,
) -> None:
    """Store VALUE under KEY."""
    result = _open(namespace).write(key, _parse_value(value))
    if result.is_failure():
        _handle_error(result.failure)


def get_item(
    key: Annotated[str, typer.Argument(help="Key to read.")],
    format: FormatOption = OutputFormat.JSON,
    namespace: NamespaceOption = None,
) -> None:
    """Print the value stored under KEY."""
    result = _open(namespace).read(key, accept_any)
    if result.is_failure():
        _handle_error(result.failure)

    typer.echo(_format_payload(result.unwrap(), format))


def remove_item(
    key: Annotated[str, typer.Argument(help="Key to remove.")],
    namespace: NamespaceOption = None,
) -> None:
    """Remove KEY."""
    result = _open(namespace).remove_item(key)
    if result.is_failure():
        _handle_error(result.failure)


def clear(namespace: NamespaceOption = None) -> None:
    """Remove every key in the namespace."""
    result = _open(namespace).clear()
    if result.is_failure():
        _handle_error(result.failure)


def keys(namespace: NamespaceOption = None) -> None:
    """List the keys stored in the namespace."""
    storage = _file_storage(namespace)
    try:
        stored_keys = storage.keys()
    except Exception as e:
        typer.secho(f"Failed to list keys in '{storage.namespace}': {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from e

    for key in sorted(stored_keys):
        typer.echo(key)


def _file_storage(namespace: str | None) -> FileStorage:
    settings = get_settings()
    return FileStorage(
        namespace=namespace or settings.storage.namespace,
        directories=settings.to_app_directories(),
    )


def _open(namespace: str | None) -> StorageMap:
    return create_storage_map(_file_storage(namespace))


def _parse_value(raw: str) -> object:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _format_payload(payload: object, format: OutputFormat) -> str:
    if format is OutputFormat.YAML:
        # Scalars are dumped as a document terminated by "..."
        return yaml.safe_dump(payload, sort_keys=True).removesuffix("\n...\n").rstrip("\n")
    return json.dumps(payload, indent=2, sort_keys=True)


def _handle_error(error: StorageMapError) -> None:
    if isinstance(error, KeyNotExistError):
        typer.secho(f"Key '{error.key}' not found", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=KEY_NOT_FOUND_EXIT_CODE)

    cause = getattr(error, error.kind)
    key = getattr(error, "key", None)
    message = f"[{error.kind}] {cause}" if key is None else f"[{error.kind}] {key}: {cause}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)
