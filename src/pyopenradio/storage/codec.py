"""Encode and decode station records for the backends."""

from __future__ import annotations

import json

from pydantic import ValidationError

from pyopenradio.exceptions import MalformedRecordError
from pyopenradio.models.radio_station import RadioStation


def encode_station(station: RadioStation) -> str:
    return json.dumps(station.to_wire(), ensure_ascii=False, sort_keys=True)


def decode_station(value: str, *, namespace: str = "", key: str = "") -> RadioStation:
    """Decode a persisted record.

    Raises :class:`MalformedRecordError` when *value* is not a JSON
    object or does not validate as a :class:`RadioStation`.
    """
    try:
        data = json.loads(value)
    except ValueError as exc:
        raise MalformedRecordError(f"record {key!r} is not valid JSON", namespace=namespace, key=key) from exc
    if not isinstance(data, dict):
        raise MalformedRecordError(f"record {key!r} is not a JSON object", namespace=namespace, key=key)
    try:
        return RadioStation.model_validate(data)
    except ValidationError as exc:
        raise MalformedRecordError(f"record {key!r} failed validation: {exc}", namespace=namespace, key=key) from exc
