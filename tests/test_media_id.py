from __future__ import annotations

from pyopenradio.media_id import derive_key, normalize_from_search_id, normalize_station
from pyopenradio.models.radio_station import RadioStation


def test_search_prefix_stripped() -> None:
    assert normalize_from_search_id("search_123") == "123"
    assert normalize_from_search_id("__SEARCH_FROM_APP__123") == "123"


def test_plain_id_unchanged() -> None:
    assert normalize_from_search_id("123") == "123"


def test_stacked_prefixes_stripped() -> None:
    assert normalize_from_search_id("search___SEARCH_FROM_APP__search_9") == "9"


def test_bare_prefix_kept() -> None:
    assert normalize_from_search_id("search_") == "search_"


def test_custom_prefixes() -> None:
    assert normalize_from_search_id("q:55", prefixes=("q:",)) == "55"
    assert normalize_from_search_id("search_55", prefixes=("q:",)) == "search_55"


def test_decorated_and_canonical_ids_share_a_key() -> None:
    decorated = normalize_station(RadioStation(id="search_123", name="Jazz"))
    canonical = normalize_station(RadioStation(id="123"))

    assert derive_key(decorated) == derive_key(canonical) == "123"
    assert decorated.name == "Jazz"


def test_normalize_returns_same_object_when_already_normal() -> None:
    station = RadioStation(id="123")
    assert normalize_station(station) is station
