"""pyopenradio - Persistent favorites and last played radio stations."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyopenradio")
except PackageNotFoundError:
    __version__ = "0+local"
from pyopenradio._constants import UNKNOWN_SORT_ID
from pyopenradio.config import OpenRadioConfig
from pyopenradio.exceptions import (
    BackendUnavailableError,
    MalformedRecordError,
    OpenRadioConfigError,
    OpenRadioError,
    RegistryNotInitializedError,
    StorageError,
)
from pyopenradio.models import RadioStation
from pyopenradio.playback import KeyCode, MediaButtonEvent, MediaButtonReceiver, PlaybackCommand
from pyopenradio.presenter import MainPresenter
from pyopenradio.registry import DependencyRegistry, build_dependencies
from pyopenradio.storage import (
    FavoritesStore,
    InMemoryBackend,
    JsonFileBackend,
    KeyValueBackend,
    LatestRadioStationStore,
)

__all__ = [
    "__version__",
    "UNKNOWN_SORT_ID",
    "BackendUnavailableError",
    "DependencyRegistry",
    "FavoritesStore",
    "InMemoryBackend",
    "JsonFileBackend",
    "KeyCode",
    "KeyValueBackend",
    "LatestRadioStationStore",
    "MainPresenter",
    "MalformedRecordError",
    "MediaButtonEvent",
    "MediaButtonReceiver",
    "OpenRadioConfig",
    "OpenRadioConfigError",
    "OpenRadioError",
    "PlaybackCommand",
    "RadioStation",
    "RegistryNotInitializedError",
    "StorageError",
    "build_dependencies",
]
