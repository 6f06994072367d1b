from __future__ import annotations

import pytest

from pyopenradio._constants import SEARCH_ID_PREFIXES
from pyopenradio.config import OpenRadioConfig
from pyopenradio.exceptions import OpenRadioConfigError

_ENV_KEYS = (
    "OPENRADIO_STORAGE_DIR",
    "OPENRADIO_PERSISTENT",
    "OPENRADIO_FAVORITES_NAMESPACE",
    "OPENRADIO_LATEST_NAMESPACE",
    "OPENRADIO_SEARCH_PREFIXES",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_from_empty_env() -> None:
    config = OpenRadioConfig.from_env()

    assert config.persistent is False
    assert config.storage_dir is None
    assert config.favorites_namespace == "FavoritesPreferences"
    assert config.search_id_prefixes == SEARCH_ID_PREFIXES


def test_storage_dir_implies_persistence(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("OPENRADIO_STORAGE_DIR", str(tmp_path))

    config = OpenRadioConfig.from_env()

    assert config.persistent is True
    assert config.storage_dir == str(tmp_path)


def test_persistence_can_be_switched_off(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("OPENRADIO_STORAGE_DIR", str(tmp_path))
    monkeypatch.setenv("OPENRADIO_PERSISTENT", "off")

    assert OpenRadioConfig.from_env().persistent is False


def test_search_prefixes_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENRADIO_SEARCH_PREFIXES", "q:, find_ ,")

    assert OpenRadioConfig.from_env().search_id_prefixes == ("q:", "find_")


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENRADIO_FAVORITES_NAMESPACE", "FromEnv")

    config = OpenRadioConfig.from_env(favorites_namespace="Explicit")

    assert config.favorites_namespace == "Explicit"


def test_persistent_without_directory_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENRADIO_PERSISTENT", "1")

    with pytest.raises(OpenRadioConfigError):
        OpenRadioConfig.from_env()


def test_namespaces_must_differ() -> None:
    with pytest.raises(OpenRadioConfigError):
        OpenRadioConfig(favorites_namespace="Same", latest_namespace="Same")
