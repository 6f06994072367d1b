"""Collection operations shared by the station stores."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from pyopenradio.exceptions import MalformedRecordError
from pyopenradio.media_id import derive_key
from pyopenradio.models.radio_station import RadioStation
from pyopenradio.storage.backend import KeyValueBackend
from pyopenradio.storage.codec import decode_station, encode_station

_logger = logging.getLogger(__name__)


class RadioStationsStore(ABC):
    """Station records kept under one backend namespace.

    This class only moves records in and out of the backend.  Identity
    policy (id normalization, sort positions, caching) belongs to the
    subclasses.
    """

    def __init__(self, backend: KeyValueBackend, namespace: str) -> None:
        self._backend = backend
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def backend(self) -> KeyValueBackend:
        return self._backend

    def _put(self, station: RadioStation) -> None:
        key = derive_key(station)
        self._backend.put(self._namespace, key, encode_station(station))
        _logger.debug("Stored station key=%s namespace=%s", key, self._namespace)

    def _delete(self, key: str) -> None:
        self._backend.delete(self._namespace, key)
        _logger.debug("Removed station key=%s namespace=%s", key, self._namespace)

    def _decode(self, key: str, value: str) -> RadioStation | None:
        try:
            return decode_station(value, namespace=self._namespace, key=key)
        except MalformedRecordError as exc:
            _logger.warning("Skipping malformed record key=%s namespace=%s: %s", key, self._namespace, exc)
            return None

    def _get(self, key: str) -> RadioStation | None:
        value = self._backend.get(self._namespace, key)
        if value is None:
            return None
        return self._decode(key, value)

    def _records(self) -> Iterator[tuple[str, RadioStation]]:
        for key, value in self._backend.get_all_records(self._namespace):
            station = self._decode(key, value)
            if station is not None:
                yield key, station

    def get_all(self) -> list[RadioStation]:
        """All decodable records, in backend enumeration order."""
        return [station for _key, station in self._records()]

    @abstractmethod
    def add_all(self, stations: Iterable[RadioStation]) -> list[RadioStation]:
        """Store *stations*; returns the records as stored."""

    def get_all_as_string(self) -> str:
        """The whole collection in the backend's string form."""
        return self._backend.serialize_all(self._namespace)

    def restore_from_string(self, text: str) -> list[RadioStation]:
        """Add every station found in a :meth:`get_all_as_string` dump.

        Entries that do not decode are logged and skipped.  Returns the
        records as stored.
        """
        stations: list[RadioStation] = []
        for key, value in self._backend.deserialize_all(text):
            station = self._decode(key, value)
            if station is not None:
                stations.append(station)
        return self.add_all(stations)

    def clear(self) -> None:
        for key, _value in self._backend.get_all_records(self._namespace):
            self._delete(key)
