from __future__ import annotations

import json
from pathlib import Path

import pytest

from pyopenradio.exceptions import BackendUnavailableError, MalformedRecordError
from pyopenradio.storage.backend import InMemoryBackend, JsonFileBackend, KeyValueBackend


@pytest.fixture(params=["memory", "file"])
def backend(request: pytest.FixtureRequest, tmp_path: Path) -> KeyValueBackend:
    if request.param == "memory":
        return InMemoryBackend()
    return JsonFileBackend(tmp_path / "prefs")


def test_backends_satisfy_protocol(backend: KeyValueBackend) -> None:
    assert isinstance(backend, KeyValueBackend)


def test_put_get_delete(backend: KeyValueBackend) -> None:
    backend.put("ns", "a", "1")

    assert backend.get("ns", "a") == "1"
    assert backend.get("other", "a") is None

    backend.delete("ns", "a")
    backend.delete("ns", "a")
    assert backend.get("ns", "a") is None


def test_enumeration_keeps_insertion_order(backend: KeyValueBackend) -> None:
    for key in ("c", "a", "b"):
        backend.put("ns", key, key.upper())
    backend.put("ns", "a", "A2")

    assert backend.get_all_records("ns") == [("c", "C"), ("a", "A2"), ("b", "B")]


def test_serialize_round_trip(backend: KeyValueBackend) -> None:
    backend.put("ns", "a", '{"id": "a"}')
    backend.put("ns", "b", '{"id": "b"}')

    text = backend.serialize_all("ns")

    assert json.loads(text) == {"a": '{"id": "a"}', "b": '{"id": "b"}'}
    assert backend.deserialize_all(text) == backend.get_all_records("ns")


def test_deserialize_skips_non_string_values(backend: KeyValueBackend) -> None:
    assert backend.deserialize_all('{"a": "x", "b": 5}') == [("a", "x")]


@pytest.mark.parametrize("text", ["not json", "[1, 2]"])
def test_deserialize_rejects_non_object(backend: KeyValueBackend, text: str) -> None:
    with pytest.raises(MalformedRecordError):
        backend.deserialize_all(text)


def test_file_backend_survives_new_instance(tmp_path: Path) -> None:
    JsonFileBackend(tmp_path).put("FavoritesPreferences", "a", "1")

    reopened = JsonFileBackend(tmp_path)

    assert reopened.get("FavoritesPreferences", "a") == "1"
    assert (tmp_path / "FavoritesPreferences.json").is_file()
    assert not list(tmp_path.glob("*.tmp"))


def test_file_backend_corrupt_file_is_unavailable(tmp_path: Path) -> None:
    (tmp_path / "ns.json").write_text("{broken", encoding="utf-8")
    backend = JsonFileBackend(tmp_path)

    with pytest.raises(BackendUnavailableError) as excinfo:
        backend.get_all_records("ns")
    assert excinfo.value.namespace == "ns"


def test_file_backend_write_failure_is_unavailable(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    backend = JsonFileBackend(blocker)

    with pytest.raises(BackendUnavailableError):
        backend.put("ns", "a", "1")


@pytest.mark.parametrize("namespace", ["", "../escape", "a/b"])
def test_file_backend_rejects_path_namespaces(tmp_path: Path, namespace: str) -> None:
    with pytest.raises(BackendUnavailableError):
        JsonFileBackend(tmp_path).put(namespace, "a", "1")


def test_closed_backend_rejects_calls(backend: KeyValueBackend) -> None:
    backend.put("ns", "a", "1")
    backend.close()

    with pytest.raises(BackendUnavailableError):
        backend.get("ns", "a")
    with pytest.raises(BackendUnavailableError):
        backend.put("ns", "b", "2")
    with pytest.raises(BackendUnavailableError):
        backend.get_all_records("ns")
