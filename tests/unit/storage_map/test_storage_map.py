from __future__ import annotations

import json
from pathlib import Path

import pytest

from storagemap import (
    ClearStorageError,
    EncodeError,
    KeyNotExistError,
    MapError,
    StorageError,
    ValidationError,
    create_storage_map,
    failure,
    success,
)
from storagemap.common import AppDirectories
from storagemap.result import Result, UnwrapError
from storagemap.storage import FileStorage, MemoryStorage
from storagemap.storage_map import StorageMap


class BrokenStorage:
    """Storage whose every primitive raises a distinct error."""

    def __init__(self) -> None:
        self.errors = {name: RuntimeError(f"{name} is broken") for name in ("store", "fetch", "remove", "wipe")}

    def store(self, key: str, text: str) -> None:
        raise self.errors["store"]

    def fetch(self, key: str) -> str | None:
        raise self.errors["fetch"]

    def remove(self, key: str) -> None:
        raise self.errors["remove"]

    def wipe(self) -> None:
        raise self.errors["wipe"]


def accept_string(value: object) -> Result[str, str]:
    return success(value) if isinstance(value, str) else failure("not a string")


def accept_number(value: object) -> Result[int, str]:
    return success(value) if isinstance(value, int) else failure("not a number")


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def storage_map(storage: MemoryStorage) -> StorageMap:
    return create_storage_map(storage)


@pytest.fixture
def broken() -> BrokenStorage:
    return BrokenStorage()


@pytest.fixture
def broken_map(broken: BrokenStorage) -> StorageMap:
    return create_storage_map(broken)


def test_write_stores_json_text(storage_map: StorageMap, storage: MemoryStorage) -> None:
    result = storage_map.write("test-1", 1)

    assert result == success(None)
    assert storage.fetch("test-1") == json.dumps(1)


def test_write_returns_storage_error(broken_map: StorageMap, broken: BrokenStorage) -> None:
    result = broken_map.write("test-1", 1)

    assert result == failure(StorageError(storage_error=broken.errors["store"], key="test-1"))
    assert result.unwrap_failure().storage_error is broken.errors["store"]


def test_write_returns_encode_error_for_cyclic_value(storage_map: StorageMap, storage: MemoryStorage) -> None:
    cyclic: list[object] = []
    cyclic.append(cyclic)

    result = storage_map.write("cyclic", cyclic)

    assert result.is_failure()
    error = result.unwrap_failure()
    assert isinstance(error, EncodeError)
    assert error.key == "cyclic"
    assert isinstance(error.encode_error, ValueError)
    assert storage.fetch("cyclic") is None


def test_write_returns_encode_error_for_unserializable_value(storage_map: StorageMap) -> None:
    result = storage_map.write("key", {"value": object()})

    error = result.unwrap_failure()
    assert isinstance(error, EncodeError)
    assert isinstance(error.encode_error, TypeError)


def test_write_encodes_before_touching_storage(broken_map: StorageMap) -> None:
    result = broken_map.write("key", {1, 2})

    assert isinstance(result.unwrap_failure(), EncodeError)


def test_read_returns_validated_value(storage_map: StorageMap) -> None:
    storage_map.write("test-2", "test")

    result = storage_map.read("test-2", accept_string)

    assert result == success("test")


def test_read_returns_storage_error(broken_map: StorageMap, broken: BrokenStorage) -> None:
    result = broken_map.read("test-2", accept_string)

    assert result == failure(StorageError(storage_error=broken.errors["fetch"], key="test-2"))


def test_read_returns_key_not_exist_error(storage_map: StorageMap) -> None:
    storage_map.write("test-2", "test")

    result = storage_map.read("???", accept_string)

    assert result == failure(KeyNotExistError(key="???"))
    error = result.unwrap_failure()
    assert error.key_not_exist_error is None
    assert error.model_dump() == {"kind": "key_not_exist_error", "key_not_exist_error": None, "key": "???"}


def test_read_returns_validation_error(storage_map: StorageMap) -> None:
    storage_map.write("test-2", "test")

    result = storage_map.read("test-2", accept_number)

    assert result == failure(ValidationError(validation_error="not a number", key="test-2"))


def test_read_returns_map_error_for_malformed_text(storage_map: StorageMap, storage: MemoryStorage) -> None:
    storage.store("test-2", "test")

    result = storage_map.read("test-2", accept_string)

    error = result.unwrap_failure()
    assert isinstance(error, MapError)
    assert error.key == "test-2"
    assert isinstance(error.map_error, json.JSONDecodeError)


def test_read_returns_map_error_when_validator_raises(storage_map: StorageMap) -> None:
    raised = KeyError("missing field")

    def explode(value: object) -> Result[object, str]:
        raise raised

    storage_map.write("key", {"a": 1})

    result = storage_map.read("key", explode)

    assert result == failure(MapError(map_error=raised, key="key"))


def test_read_returns_map_error_when_validator_returns_non_result(storage_map: StorageMap) -> None:
    storage_map.write("key", 1)

    result = storage_map.read("key", lambda value: value)  # type: ignore[arg-type, return-value]

    error = result.unwrap_failure()
    assert isinstance(error, MapError)
    assert isinstance(error.map_error, TypeError)


def test_read_treats_empty_text_as_present(storage_map: StorageMap, storage: MemoryStorage) -> None:
    storage.store("empty", "")

    result = storage_map.read("empty", accept_string)

    assert isinstance(result.unwrap_failure(), MapError)


def test_read_does_not_call_validator_when_key_missing(storage_map: StorageMap) -> None:
    calls: list[object] = []

    def record(value: object) -> Result[object, str]:
        calls.append(value)
        return success(value)

    storage_map.read("missing", record)

    assert calls == []


def test_read_prefers_storage_error_over_everything(broken_map: StorageMap) -> None:
    def explode(value: object) -> Result[object, str]:
        raise AssertionError("validator must not run")

    error = broken_map.read("key", explode).unwrap_failure()

    assert isinstance(error, StorageError)


def test_read_does_not_capture_base_exceptions(storage_map: StorageMap) -> None:
    def interrupt(value: object) -> Result[object, str]:
        raise KeyboardInterrupt

    storage_map.write("key", 1)

    with pytest.raises(KeyboardInterrupt):
        storage_map.read("key", interrupt)


@pytest.mark.parametrize(
    "value",
    [
        {"a": 1},
        [1, 2, 3],
        "text",
        "",
        0,
        1.5,
        True,
        None,
        {"nested": {"list": [1, {"b": None}], "flag": False}},
    ],
)
def test_read_after_write_round_trips(storage_map: StorageMap, value: object) -> None:
    assert storage_map.write("k", value) == success(None)

    assert storage_map.read("k", success) == success(value)


def test_remove_item_deletes_value(storage_map: StorageMap, storage: MemoryStorage) -> None:
    value = {"value": "test"}
    storage_map.write("test-3", value)
    assert storage.fetch("test-3") == json.dumps(value)

    result = storage_map.remove_item("test-3")

    assert result == success(None)
    assert storage.fetch("test-3") is None
    assert len(storage) == 0


def test_remove_item_on_missing_key_succeeds(storage_map: StorageMap) -> None:
    assert storage_map.remove_item("never-written") == success(None)


def test_remove_item_returns_storage_error(broken_map: StorageMap, broken: BrokenStorage) -> None:
    result = broken_map.remove_item("test-3")

    assert result == failure(StorageError(storage_error=broken.errors["remove"], key="test-3"))


def test_clear_removes_every_value(storage_map: StorageMap, storage: MemoryStorage) -> None:
    storage_map.write("test-4-a", {"value": "test"})
    storage_map.write("test-4-b", [1, 2, 3])

    result = storage_map.clear()

    assert result == success(None)
    assert len(storage) == 0
    assert storage_map.read("test-4-a", success) == failure(KeyNotExistError(key="test-4-a"))
    assert storage_map.read("test-4-b", success) == failure(KeyNotExistError(key="test-4-b"))


def test_clear_returns_storage_error_without_key(broken_map: StorageMap, broken: BrokenStorage) -> None:
    result = broken_map.clear()

    assert result == failure(ClearStorageError(storage_error=broken.errors["wipe"]))
    assert "key" not in result.unwrap_failure().model_dump()


def test_write_read_remove_read_scenario(storage_map: StorageMap) -> None:
    assert storage_map.write("k", {"a": 1}) == success(None)
    assert storage_map.read("k", success) == success({"a": 1})
    assert storage_map.remove_item("k") == success(None)
    assert storage_map.read("k", success) == failure(KeyNotExistError(key="k"))


def test_unwrap_on_failed_read_chains_storage_exception(broken_map: StorageMap, broken: BrokenStorage) -> None:
    with pytest.raises(UnwrapError) as excinfo:
        broken_map.read("x", success).unwrap()

    assert excinfo.value.__cause__ is broken.errors["fetch"]


def test_unwrap_on_failed_read_chains_decode_exception(storage_map: StorageMap, storage: MemoryStorage) -> None:
    storage.store("bad", "{not json")

    with pytest.raises(UnwrapError) as excinfo:
        storage_map.read("bad", success).unwrap()

    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_unwrap_on_missing_key_has_no_cause(storage_map: StorageMap) -> None:
    with pytest.raises(UnwrapError) as excinfo:
        storage_map.read("missing", success).unwrap()

    assert excinfo.value.__cause__ is None


def test_failures_can_be_matched_by_kind(broken_map: StorageMap) -> None:
    match broken_map.read("x", success).unwrap_failure():
        case StorageError(storage_error=error, key=key):
            assert str(error) == "fetch is broken"
            assert key == "x"
        case other:
            pytest.fail(f"unexpected failure {other!r}")


def test_file_storage_backed_map(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    storage = FileStorage(namespace="tests", directories=AppDirectories(app_name="storagemap"))
    storage_map = create_storage_map(storage)

    storage_map.write("a", {"value": "test"})
    storage_map.write("b", [1, 2, 3])

    assert json.loads(storage.path.read_text()) == {"a": '{"value": "test"}', "b": "[1, 2, 3]"}
    assert storage_map.read("b", success) == success([1, 2, 3])
    assert storage_map.clear() == success(None)
    assert storage_map.read("a", success) == failure(KeyNotExistError(key="a"))


def test_storage_property_exposes_bound_storage(storage_map: StorageMap, storage: MemoryStorage) -> None:
    assert storage_map.storage is storage
