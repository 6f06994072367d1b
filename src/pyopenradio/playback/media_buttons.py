"""Hardware media-button translation.

Media buttons (headset, remote, keyboard) arrive as key events.  They
are translated into a :class:`PlaybackCommand` acting on the last
played station; everything else is logged and ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pyopenradio._constants import MEDIA_BUTTON_ACTION
from pyopenradio.models._base import OpenRadioEnum

_logger = logging.getLogger(__name__)


class KeyCode(OpenRadioEnum):
    """Media key codes (Android ``KeyEvent`` numbering)."""

    UNKNOWN = -1
    MEDIA_PLAY_PAUSE = 85
    MEDIA_STOP = 86
    MEDIA_PLAY = 126
    MEDIA_PAUSE = 127


class PlaybackCommand(StrEnum):
    PLAY = "play"
    TOGGLE_PLAY_PAUSE = "toggle_play_pause"
    STOP = "stop"
    UNHANDLED = "unhandled"


_KEY_COMMANDS: dict[KeyCode, PlaybackCommand] = {
    KeyCode.MEDIA_PLAY: PlaybackCommand.PLAY,
    KeyCode.MEDIA_PLAY_PAUSE: PlaybackCommand.TOGGLE_PLAY_PAUSE,
    KeyCode.MEDIA_PAUSE: PlaybackCommand.STOP,
    KeyCode.MEDIA_STOP: PlaybackCommand.STOP,
}


class MediaButtonEvent(BaseModel):
    """A broadcast carrying an optional key event."""

    model_config = ConfigDict(frozen=True)

    action: str = MEDIA_BUTTON_ACTION
    key_code: int | None = Field(default=None, description="Key code, None when the event carried no key")

    @field_validator("action")
    @classmethod
    def _strip_action(cls, value: str) -> str:
        return value.strip()


class PlaybackController(Protocol):
    """Side of the player that acts on the last played station."""

    def play_last_played(self) -> None: ...

    def toggle_last_played(self) -> None: ...

    def stop_last_played(self) -> None: ...


def translate_key_code(key_code: Any) -> PlaybackCommand:
    """Map a key code to the playback command it triggers."""
    if key_code is None:
        return PlaybackCommand.UNHANDLED
    try:
        code = KeyCode(int(key_code))
    except (TypeError, ValueError):
        return PlaybackCommand.UNHANDLED
    return _KEY_COMMANDS.get(code, PlaybackCommand.UNHANDLED)


def _always_active() -> bool:
    return True


class MediaButtonReceiver:
    """Dispatch media-button events to a :class:`PlaybackController`.

    ``is_active`` reports whether the playback service is alive; events
    received while it is not are dropped.
    """

    def __init__(
        self,
        controller: PlaybackController,
        *,
        is_active: Callable[[], bool] = _always_active,
    ) -> None:
        self._controller = controller
        self._is_active = is_active
        self._actions: dict[PlaybackCommand, Callable[[], None]] = {
            PlaybackCommand.PLAY: controller.play_last_played,
            PlaybackCommand.TOGGLE_PLAY_PAUSE: controller.toggle_last_played,
            PlaybackCommand.STOP: controller.stop_last_played,
        }

    def on_receive(self, event: MediaButtonEvent) -> PlaybackCommand | None:
        """Handle *event*; returns the command acted upon.

        ``None`` is returned when the event was dropped or carried an
        unhandled key code.
        """
        _logger.debug("Media button event received: %s", event)
        if not self._is_active():
            return None
        if event.action != MEDIA_BUTTON_ACTION:
            return None

        command = translate_key_code(event.key_code)
        action = self._actions.get(command)
        if action is None:
            _logger.warning("Unhandled key code: %s", event.key_code)
            return None
        action()
        return command
