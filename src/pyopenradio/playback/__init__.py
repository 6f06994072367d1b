"""Playback control seams."""

from pyopenradio.playback.media_buttons import (
    KeyCode,
    MediaButtonEvent,
    MediaButtonReceiver,
    PlaybackCommand,
    PlaybackController,
    translate_key_code,
)

__all__ = [
    "KeyCode",
    "MediaButtonEvent",
    "MediaButtonReceiver",
    "PlaybackCommand",
    "PlaybackController",
    "translate_key_code",
]
