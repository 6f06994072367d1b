"""Favorite radio stations."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from pyopenradio._constants import FAVORITES_NAMESPACE, SEARCH_ID_PREFIXES
from pyopenradio.media_id import derive_key, normalize_from_search_id, normalize_station
from pyopenradio.models.radio_station import RadioStation
from pyopenradio.storage._cache import MembershipCache
from pyopenradio.storage.backend import KeyValueBackend
from pyopenradio.storage.stations import RadioStationsStore

_logger = logging.getLogger(__name__)


class FavoritesStore(RadioStationsStore):
    """Favorites collection with a membership cache.

    Every record is keyed on its normalized media id, on add, remove
    and lookup alike.  ``is_favorite`` answers from the cache when it
    can and otherwise scans the collection once per key.

    One re-entrant lock per instance covers each read-modify-write
    sequence (backend call plus cache update).  The cache is only
    updated after the backend call returned, so a failing backend
    leaves it untouched.
    """

    def __init__(
        self,
        backend: KeyValueBackend,
        namespace: str = FAVORITES_NAMESPACE,
        *,
        search_id_prefixes: tuple[str, ...] = SEARCH_ID_PREFIXES,
    ) -> None:
        super().__init__(backend, namespace)
        self._search_id_prefixes = search_id_prefixes
        self._cache = MembershipCache()
        self._lock = threading.RLock()

    def __contains__(self, station: object) -> bool:
        return isinstance(station, RadioStation) and self.is_favorite(station)

    def __len__(self) -> int:
        return len(self.get_all())

    def _normalize(self, station: RadioStation) -> RadioStation:
        return normalize_station(station, self._search_id_prefixes)

    def _next_sort_id(self) -> int:
        highest = max((station.sort_id for station in self.get_all() if station.has_sort_id), default=0)
        return highest + 1

    def add(self, station: RadioStation) -> RadioStation:
        """Add or overwrite *station*; returns the record as stored.

        A station without a sort position keeps the one already
        persisted for its key, or gets the next free position.
        """
        with self._lock:
            station = self._normalize(station)
            key = derive_key(station)
            if not station.has_sort_id:
                existing = self._get(key)
                if existing is not None and existing.has_sort_id:
                    sort_id = existing.sort_id
                else:
                    sort_id = self._next_sort_id()
                station = station.model_copy(update={"sort_id": sort_id})
            self._put(station)
            self._cache.mark(key, True)
            return station

    def _matching_keys(self, key: str) -> list[str]:
        """Storage keys of every record whose normalized id is *key*."""
        return [
            stored_key
            for stored_key, candidate in self._records()
            if normalize_from_search_id(candidate.id, self._search_id_prefixes) == key
        ]

    def remove(self, station: RadioStation) -> None:
        """Remove *station*.  Removing an absent station is a no-op.

        Records persisted under a decorated id that normalizes to the
        same key are removed as well.
        """
        with self._lock:
            key = derive_key(self._normalize(station))
            stale = [stored_key for stored_key in self._matching_keys(key) if stored_key != key]
            for stored_key in [key, *stale]:
                self._delete(stored_key)
            self._cache.mark(key, False)

    def add_all(self, stations: Iterable[RadioStation]) -> list[RadioStation]:
        with self._lock:
            return [self.add(station) for station in stations]

    def restore_from_string(self, text: str) -> list[RadioStation]:
        with self._lock:
            return super().restore_from_string(text)

    def is_favorite(self, station: RadioStation) -> bool:
        with self._lock:
            key = derive_key(self._normalize(station))
            cached = self._cache.lookup(key)
            if cached is not None:
                return cached
            _logger.debug("Membership cache miss key=%s namespace=%s", key, self.namespace)
            present = bool(self._matching_keys(key))
            self._cache.mark(key, present)
            return present

    def clear(self) -> None:
        with self._lock:
            super().clear()
            self._cache.clear()
