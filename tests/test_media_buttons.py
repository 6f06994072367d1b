from __future__ import annotations

import logging

import pytest

from pyopenradio.playback.media_buttons import (
    KeyCode,
    MediaButtonEvent,
    MediaButtonReceiver,
    PlaybackCommand,
    translate_key_code,
)


class _RecordingController:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def play_last_played(self) -> None:
        self.calls.append("play")

    def toggle_last_played(self) -> None:
        self.calls.append("toggle")

    def stop_last_played(self) -> None:
        self.calls.append("stop")


@pytest.mark.parametrize(
    ("key_code", "command"),
    [
        (KeyCode.MEDIA_PLAY, PlaybackCommand.PLAY),
        (KeyCode.MEDIA_PLAY_PAUSE, PlaybackCommand.TOGGLE_PLAY_PAUSE),
        (KeyCode.MEDIA_PAUSE, PlaybackCommand.STOP),
        (KeyCode.MEDIA_STOP, PlaybackCommand.STOP),
        (24, PlaybackCommand.UNHANDLED),
        (None, PlaybackCommand.UNHANDLED),
        ("126", PlaybackCommand.PLAY),
        ("volume", PlaybackCommand.UNHANDLED),
    ],
)
def test_translate_key_code(key_code: object, command: PlaybackCommand) -> None:
    assert translate_key_code(key_code) == command


def test_receiver_dispatches_to_controller() -> None:
    controller = _RecordingController()
    receiver = MediaButtonReceiver(controller)

    for code in (126, 85, 127, 86):
        receiver.on_receive(MediaButtonEvent(key_code=code))

    assert controller.calls == ["play", "toggle", "stop", "stop"]


def test_receiver_logs_unhandled(caplog: pytest.LogCaptureFixture) -> None:
    controller = _RecordingController()
    receiver = MediaButtonReceiver(controller)

    with caplog.at_level(logging.WARNING, logger="pyopenradio.playback.media_buttons"):
        result = receiver.on_receive(MediaButtonEvent(key_code=24))

    assert result is None
    assert controller.calls == []
    assert "Unhandled key code: 24" in caplog.text


def test_receiver_handles_event_without_key() -> None:
    controller = _RecordingController()

    assert MediaButtonReceiver(controller).on_receive(MediaButtonEvent()) is None
    assert controller.calls == []


def test_receiver_ignores_other_actions() -> None:
    controller = _RecordingController()
    receiver = MediaButtonReceiver(controller)

    assert receiver.on_receive(MediaButtonEvent(action="android.intent.action.BOOT_COMPLETED", key_code=126)) is None
    assert controller.calls == []


def test_receiver_ignores_events_while_inactive() -> None:
    controller = _RecordingController()
    active = False
    receiver = MediaButtonReceiver(controller, is_active=lambda: active)

    assert receiver.on_receive(MediaButtonEvent(key_code=126)) is None
    active = True
    assert receiver.on_receive(MediaButtonEvent(key_code=126)) == PlaybackCommand.PLAY
    assert controller.calls == ["play"]
