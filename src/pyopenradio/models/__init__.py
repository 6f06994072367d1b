"""Data models for pyopenradio."""

from pyopenradio.models._base import OpenRadioBaseModel, OpenRadioEnum
from pyopenradio.models.radio_station import RadioStation

__all__ = [
    "OpenRadioBaseModel",
    "OpenRadioEnum",
    "RadioStation",
]
