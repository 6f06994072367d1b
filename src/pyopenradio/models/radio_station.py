"""Radio station model."""

from __future__ import annotations

import math
from typing import Any

from pydantic import field_validator

from pyopenradio._constants import UNKNOWN_SORT_ID
from pyopenradio.models._base import OpenRadioBaseModel


def _safe_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return int(result)


class RadioStation(OpenRadioBaseModel):
    """A radio station as persisted by the station stores.

    Only ``id`` and ``sort_id`` carry meaning for storage.  The display
    and stream attributes, and any extra attribute supplied by the
    caller, are passed through untouched.
    """

    id: str
    """Media id.  May carry a search-origin prefix until normalized."""
    sort_id: int = UNKNOWN_SORT_ID
    """Position hint; ``UNKNOWN_SORT_ID`` until a store assigns one."""
    name: str | None = None
    """Display name."""
    stream_url: str | None = None
    """Playback URL."""
    image_url: str | None = None
    """Artwork URL."""
    genre: str | None = None
    country: str | None = None

    @property
    def has_sort_id(self) -> bool:
        """Whether a position has been assigned."""
        return self.sort_id != UNKNOWN_SORT_ID

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> str:
        media_id = str(value).strip() if value is not None else ""
        if not media_id:
            raise ValueError("id must be non-empty")
        return media_id

    @field_validator("sort_id", mode="before")
    @classmethod
    def _coerce_sort_id(cls, value: Any) -> int:
        parsed = _safe_int(value)
        return UNKNOWN_SORT_ID if parsed is None else parsed
