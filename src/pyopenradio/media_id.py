"""Media id helpers.

A station reached through a search carries a decorated media id.  The
stores key every record on the normalized id so that the decorated and
the canonical form of the same station refer to one entry.
"""

from __future__ import annotations

from collections.abc import Iterable

from pyopenradio._constants import SEARCH_ID_PREFIXES
from pyopenradio.models.radio_station import RadioStation


def normalize_from_search_id(media_id: str, prefixes: Iterable[str] = SEARCH_ID_PREFIXES) -> str:
    """Strip every leading search-origin prefix from *media_id*.

    Prefixes may be stacked (``"search_search_42"``); all of them are
    removed.  An id that is nothing but a prefix is returned unchanged
    so that the result is never empty.
    """
    candidates = tuple(prefix for prefix in prefixes if prefix)
    value = media_id
    stripped = True
    while stripped:
        stripped = False
        for prefix in candidates:
            if value.startswith(prefix) and len(value) > len(prefix):
                value = value[len(prefix) :]
                stripped = True
    return value


def normalize_station(station: RadioStation, prefixes: Iterable[str] = SEARCH_ID_PREFIXES) -> RadioStation:
    """Return *station* with a normalized id (the same object if already normal)."""
    media_id = normalize_from_search_id(station.id, prefixes)
    if media_id == station.id:
        return station
    return station.model_copy(update={"id": media_id})


def derive_key(station: RadioStation) -> str:
    """Storage key of *station*."""
    return station.id
