"""Persistent key/value backends.

A backend stores opaque strings under ``(namespace, key)`` pairs and
owns the string form of a whole namespace.  The station stores only
ever talk to the :class:`KeyValueBackend` protocol.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Protocol, runtime_checkable

from pyopenradio.exceptions import BackendUnavailableError, MalformedRecordError

_logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueBackend(Protocol):
    """Durable string-keyed storage partitioned by namespace."""

    def get(self, namespace: str, key: str) -> str | None: ...

    def put(self, namespace: str, key: str, value: str) -> None: ...

    def delete(self, namespace: str, key: str) -> None: ...

    def get_all_records(self, namespace: str) -> list[tuple[str, str]]: ...

    def serialize_all(self, namespace: str) -> str: ...

    def deserialize_all(self, text: str) -> list[tuple[str, str]]: ...

    def close(self) -> None: ...


def _dump_namespace(records: dict[str, str]) -> str:
    return json.dumps(records, ensure_ascii=False)


def _load_namespace(text: str, *, namespace: str = "") -> dict[str, str]:
    """Parse the string form of a namespace.

    Entries whose value is not a string are dropped with a warning;
    anything that is not a JSON object is rejected as a whole.
    """
    try:
        data = json.loads(text) if text.strip() else {}
    except ValueError as exc:
        raise MalformedRecordError(f"namespace data is not valid JSON: {exc}", namespace=namespace) from exc
    if not isinstance(data, dict):
        raise MalformedRecordError("namespace data must be a JSON object", namespace=namespace)
    records: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            _logger.warning("Skipping non-string entry key=%s namespace=%s", key, namespace)
            continue
        records[str(key)] = value
    return records


class _JsonNamespaceMixin:
    """String form shared by the shipped backends: a JSON object ``{key: value}``."""

    def serialize_all(self, namespace: str) -> str:
        return _dump_namespace(dict(self.get_all_records(namespace)))  # type: ignore[attr-defined]

    def deserialize_all(self, text: str) -> list[tuple[str, str]]:
        return list(_load_namespace(text).items())


class InMemoryBackend(_JsonNamespaceMixin):
    """Process-local backend.  Nothing survives the process."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._namespaces: dict[str, dict[str, str]] = {}
        self._closed = False

    def _check_open(self, namespace: str) -> None:
        if self._closed:
            raise BackendUnavailableError("backend is closed", namespace=namespace)

    def get(self, namespace: str, key: str) -> str | None:
        with self._lock:
            self._check_open(namespace)
            return self._namespaces.get(namespace, {}).get(key)

    def put(self, namespace: str, key: str, value: str) -> None:
        with self._lock:
            self._check_open(namespace)
            self._namespaces.setdefault(namespace, {})[key] = value

    def delete(self, namespace: str, key: str) -> None:
        with self._lock:
            self._check_open(namespace)
            self._namespaces.get(namespace, {}).pop(key, None)

    def get_all_records(self, namespace: str) -> list[tuple[str, str]]:
        with self._lock:
            self._check_open(namespace)
            return list(self._namespaces.get(namespace, {}).items())

    def close(self) -> None:
        """Release the data; later calls raise :class:`BackendUnavailableError`."""
        with self._lock:
            self._closed = True
            self._namespaces.clear()


class JsonFileBackend(_JsonNamespaceMixin):
    """Backend keeping one ``<namespace>.json`` file per namespace.

    Every write rewrites the namespace file through a temporary file and
    an atomic rename, so a crash leaves either the old or the new
    content on disk.  Reads go to disk each time; the file is the only
    state.
    """

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self._directory = Path(directory)
        self._lock = threading.RLock()
        self._closed = False

    def _path(self, namespace: str) -> Path:
        if not namespace or any(sep in namespace for sep in ("/", "\\")) or namespace in {".", ".."}:
            raise BackendUnavailableError(f"invalid namespace {namespace!r}", namespace=namespace)
        return self._directory / f"{namespace}.json"

    def _check_open(self, namespace: str) -> None:
        if self._closed:
            raise BackendUnavailableError("backend is closed", namespace=namespace)

    def _read(self, namespace: str) -> dict[str, str]:
        self._check_open(namespace)
        path = self._path(namespace)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise BackendUnavailableError(f"cannot read {path}: {exc}", namespace=namespace) from exc
        try:
            return _load_namespace(text, namespace=namespace)
        except MalformedRecordError as exc:
            raise BackendUnavailableError(f"corrupt namespace file {path}: {exc}", namespace=namespace) from exc

    def _write(self, namespace: str, records: dict[str, str]) -> None:
        self._check_open(namespace)
        path = self._path(namespace)
        tmp_name: str | None = None
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{namespace}.", suffix=".tmp", dir=self._directory)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(_dump_namespace(records))
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise BackendUnavailableError(f"cannot write {path}: {exc}", namespace=namespace) from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
        _logger.debug("Wrote %d record(s) to %s", len(records), path)

    def get(self, namespace: str, key: str) -> str | None:
        with self._lock:
            return self._read(namespace).get(key)

    def put(self, namespace: str, key: str, value: str) -> None:
        with self._lock:
            records = self._read(namespace)
            records[key] = value
            self._write(namespace, records)

    def delete(self, namespace: str, key: str) -> None:
        with self._lock:
            records = self._read(namespace)
            if key not in records:
                return
            del records[key]
            self._write(namespace, records)

    def get_all_records(self, namespace: str) -> list[tuple[str, str]]:
        with self._lock:
            return list(self._read(namespace).items())

    def close(self) -> None:
        with self._lock:
            self._closed = True
