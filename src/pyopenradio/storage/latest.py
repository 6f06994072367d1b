"""Last played radio station."""

from __future__ import annotations

from collections.abc import Iterable

from pyopenradio._constants import LATEST_NAMESPACE, LATEST_STATION_KEY
from pyopenradio.models.radio_station import RadioStation
from pyopenradio.storage.backend import KeyValueBackend
from pyopenradio.storage.codec import encode_station
from pyopenradio.storage.stations import RadioStationsStore


class LatestRadioStationStore(RadioStationsStore):
    """Holds at most one station: the one played last."""

    def __init__(self, backend: KeyValueBackend, namespace: str = LATEST_NAMESPACE) -> None:
        super().__init__(backend, namespace)

    def set(self, station: RadioStation) -> None:
        self._backend.put(self._namespace, LATEST_STATION_KEY, encode_station(station))

    def get(self) -> RadioStation | None:
        return self._get(LATEST_STATION_KEY)

    def add_all(self, stations: Iterable[RadioStation]) -> list[RadioStation]:
        """Keep only the last of *stations*."""
        written = list(stations)
        if written:
            self.set(written[-1])
        return written[-1:]
