"""Persistent radio station storage.

Stores sit on top of a :class:`KeyValueBackend`; the backend owns
durability, the stores own record identity.
"""

from pyopenradio.storage.backend import InMemoryBackend, JsonFileBackend, KeyValueBackend
from pyopenradio.storage.favorites import FavoritesStore
from pyopenradio.storage.latest import LatestRadioStationStore
from pyopenradio.storage.stations import RadioStationsStore

__all__ = [
    "FavoritesStore",
    "InMemoryBackend",
    "JsonFileBackend",
    "KeyValueBackend",
    "LatestRadioStationStore",
    "RadioStationsStore",
]
