"""Dependency construction and the process-wide registry.

Applications and tests should prefer :func:`build_dependencies` and
pass the result around.  :class:`DependencyRegistry` exists for entry
points that can only reach a process-wide object; it builds the
dependencies exactly once.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from pyopenradio.config import OpenRadioConfig
from pyopenradio.exceptions import RegistryNotInitializedError
from pyopenradio.presenter import MainPresenter, MainView
from pyopenradio.storage.backend import InMemoryBackend, JsonFileBackend, KeyValueBackend
from pyopenradio.storage.favorites import FavoritesStore
from pyopenradio.storage.latest import LatestRadioStationStore

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Dependencies:
    backend: KeyValueBackend
    favorites_store: FavoritesStore
    latest_store: LatestRadioStationStore
    presenter: MainPresenter

    def close(self) -> None:
        self.backend.close()


def build_backend(config: OpenRadioConfig) -> KeyValueBackend:
    if config.persistent and config.storage_dir:
        return JsonFileBackend(config.storage_dir)
    return InMemoryBackend()


def build_dependencies(config: OpenRadioConfig, *, backend: KeyValueBackend | None = None) -> Dependencies:
    """Construct the storage stack described by *config*."""
    if backend is None:
        backend = build_backend(config)
    favorites_store = FavoritesStore(
        backend,
        config.favorites_namespace,
        search_id_prefixes=config.search_id_prefixes,
    )
    latest_store = LatestRadioStationStore(backend, config.latest_namespace)
    presenter = MainPresenter(latest_store, favorites_store)
    _logger.debug("Built dependencies backend=%s", type(backend).__name__)
    return Dependencies(
        backend=backend,
        favorites_store=favorites_store,
        latest_store=latest_store,
        presenter=presenter,
    )


class DependencyRegistry:
    """Init-once holder of the application's :class:`Dependencies`."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._dependencies: Dependencies | None = None

    @property
    def is_initialized(self) -> bool:
        return self._dependencies is not None

    def init(self, config: OpenRadioConfig | None = None, *, backend: KeyValueBackend | None = None) -> Dependencies:
        """Build the dependencies on the first call; later calls return them unchanged."""
        with self._lock:
            if self._dependencies is None:
                self._dependencies = build_dependencies(config or OpenRadioConfig.from_env(), backend=backend)
            return self._dependencies

    @property
    def dependencies(self) -> Dependencies:
        dependencies = self._dependencies
        if dependencies is None:
            raise RegistryNotInitializedError("DependencyRegistry.init() has not been called")
        return dependencies

    def inject(self, view: MainView) -> None:
        view.configure_with(self.dependencies.presenter)

    def reset(self) -> None:
        """Close and forget the dependencies (tests and shutdown)."""
        with self._lock:
            if self._dependencies is not None:
                self._dependencies.close()
            self._dependencies = None


registry = DependencyRegistry()
