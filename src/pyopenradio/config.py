"""Storage configuration for pyopenradio."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyopenradio._constants import FAVORITES_NAMESPACE, LATEST_NAMESPACE, SEARCH_ID_PREFIXES
from pyopenradio.exceptions import OpenRadioConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_prefixes(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclasses.dataclass(frozen=True)
class OpenRadioConfig:
    """Storage configuration.

    Parameters
    ----------
    storage_dir : str or None
        Directory holding one JSON file per namespace.  Required when
        ``persistent`` is enabled.
    persistent : bool
        Persist stations to ``storage_dir``.  When disabled an in-memory
        backend is used and nothing survives the process.
    favorites_namespace : str
        Backend namespace of the favorites collection.
    latest_namespace : str
        Backend namespace of the last played station.
    search_id_prefixes : tuple of str
        Prefixes stripped from media ids that originate from a search.
    """

    storage_dir: str | None = None
    persistent: bool = False
    favorites_namespace: str = FAVORITES_NAMESPACE
    latest_namespace: str = LATEST_NAMESPACE
    search_id_prefixes: tuple[str, ...] = SEARCH_ID_PREFIXES

    def __post_init__(self) -> None:
        if self.persistent and not self.storage_dir:
            raise OpenRadioConfigError("storage_dir is required when persistent storage is enabled")
        if not self.favorites_namespace or not self.latest_namespace:
            raise OpenRadioConfigError("namespaces must be non-empty")
        if self.favorites_namespace == self.latest_namespace:
            raise OpenRadioConfigError("favorites and latest namespaces must differ")

    @classmethod
    def from_env(cls, **overrides: Any) -> OpenRadioConfig:
        """Create configuration from environment variables.

        Reads ``OPENRADIO_STORAGE_DIR``, ``OPENRADIO_PERSISTENT``,
        ``OPENRADIO_FAVORITES_NAMESPACE``, ``OPENRADIO_LATEST_NAMESPACE``
        and ``OPENRADIO_SEARCH_PREFIXES`` (comma separated).  Explicit
        keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        OpenRadioConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "OPENRADIO_STORAGE_DIR": "storage_dir",
            "OPENRADIO_FAVORITES_NAMESPACE": "favorites_namespace",
            "OPENRADIO_LATEST_NAMESPACE": "latest_namespace",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        prefixes_env = env.get("OPENRADIO_SEARCH_PREFIXES")
        if prefixes_env is not None and "search_id_prefixes" not in overrides:
            config_kwargs["search_id_prefixes"] = _env_prefixes(prefixes_env)

        if "persistent" not in overrides:
            # A configured directory implies persistence unless switched off.
            default_persistent = bool(config_kwargs.get("storage_dir") or overrides.get("storage_dir"))
            config_kwargs["persistent"] = _env_bool(env.get("OPENRADIO_PERSISTENT"), default_persistent)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
