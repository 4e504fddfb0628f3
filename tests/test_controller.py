from unittest import mock

import pygame
import pytest

from musicwalker.audio import AudioPlayer
from musicwalker.controller import NO_TRACK, PlayerController


def _refuse_bad(path):
    if "bad" in path:
        raise pygame.error("cannot open")


@pytest.fixture
def music():
    fake = mock.Mock()
    fake.load.side_effect = _refuse_bad
    return fake


@pytest.fixture
def controller(music):
    return PlayerController(player=AudioPlayer(mixer=mock.Mock(music=music)))


@pytest.fixture
def started(controller):
    controller.add_files(["a.mp3", "b.mp3"])
    controller.play()
    return controller


def test_initial_track_name(controller):
    assert controller.track_name == "No track selected"


def test_play_starts_first_queued_track(controller, music):
    names = []
    controller.track_name_changed.connect(names.append)
    controller.add_files(["/music/a.mp3", "/music/b.mp3"])
    controller.play()
    assert controller.queue.current() == "/music/a.mp3"
    assert (controller.track_name, names) == ("a.mp3", ["a.mp3"])
    assert controller.player.is_playing() is True
    music.load.assert_any_call("/music/a.mp3")


def test_play_with_empty_queue_does_nothing(controller, music):
    controller.play()
    assert controller.player.is_playing() is False
    assert music.mock_calls == []


def test_play_while_playing_is_ignored(started, music):
    started.play()
    assert started.queue.current() == "a.mp3"
    assert music.play.call_count == 1


def test_pause_then_play_resumes_current_track(started):
    started.pause()
    assert started.player.is_playing() is False
    started.play()
    assert started.player.is_playing() is True
    assert started.queue.current() == "a.mp3"


def test_stop_halts_playback(started):
    states = []
    for action in (started.stop, started.play):
        action()
        states.append(started.player.is_playing())
    assert states == [False, False]


def test_next_and_previous_switch_tracks(started):
    steps = [started.next_track, started.next_track, started.previous_track, started.previous_track]
    seen = []
    for step in steps:
        step()
        seen.append((started.track_name, started.queue.current()))
    assert seen == [
        ("b.mp3", "b.mp3"),
        ("b.mp3", "b.mp3"),
        ("a.mp3", "a.mp3"),
        ("a.mp3", "a.mp3"),
    ]


def test_add_no_files_leaves_queue_alone(controller):
    changes = []
    controller.queue.queue_changed.connect(lambda: changes.append(1))
    controller.add_files([])
    assert changes == []
    assert controller.queue.has_next() is False


def test_clear_stops_and_resets_name(started):
    started.clear()
    assert started.player.is_playing() is False
    assert started.track_name == NO_TRACK
    assert started.queue.has_next() is False
    assert started.queue.current() == ""


def test_unloadable_track_keeps_old_name(controller, caplog):
    controller.on_track_changed("bad.mp3")
    assert controller.track_name == NO_TRACK
    assert controller.player.is_playing() is False
    assert "bad.mp3" in caplog.text