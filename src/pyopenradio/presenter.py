"""Presenter handed to the main screen."""

from __future__ import annotations

from typing import Protocol

from pyopenradio.models.radio_station import RadioStation
from pyopenradio.storage.favorites import FavoritesStore
from pyopenradio.storage.latest import LatestRadioStationStore


class MainPresenter:
    """Read and update the stations shown on the main screen."""

    def __init__(self, latest_store: LatestRadioStationStore, favorites_store: FavoritesStore) -> None:
        self._latest_store = latest_store
        self._favorites_store = favorites_store

    def last_played(self) -> RadioStation | None:
        return self._latest_store.get()

    def set_last_played(self, station: RadioStation) -> None:
        self._latest_store.set(station)

    def is_favorite(self, station: RadioStation) -> bool:
        return self._favorites_store.is_favorite(station)

    def toggle_favorite(self, station: RadioStation) -> bool:
        """Flip the favorite state of *station*; returns the new state."""
        if self._favorites_store.is_favorite(station):
            self._favorites_store.remove(station)
            return False
        self._favorites_store.add(station)
        return True

    def favorites(self) -> list[RadioStation]:
        """Favorites ordered by sort position; unpositioned ones last."""
        return sorted(
            self._favorites_store.get_all(),
            key=lambda station: (not station.has_sort_id, station.sort_id),
        )


class MainView(Protocol):
    def configure_with(self, presenter: MainPresenter) -> None: ...
