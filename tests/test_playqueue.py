from pathlib import Path

import pytest

from musicwalker.playqueue import QueueManager, Signal


def _recorder(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


def _queue(*paths):
    queue = QueueManager()
    if paths:
        queue.add_to_queue(list(paths))
    return queue


def _advance(queue, times):
    return [queue.next() for _ in range(times)]


def test_signal_calls_every_slot_with_arguments():
    signal = Signal()
    recorders = [_recorder(signal), _recorder(signal)]
    signal.emit("x", 2)
    assert recorders == [[("x", 2)], [("x", 2)]]


def test_new_queue_is_empty():
    queue = _queue()
    assert queue.current() == ""
    assert (queue.has_next(), queue.has_previous()) == (False, False)
    assert (queue.next(), queue.previous()) == (None, None)


@pytest.mark.parametrize(
    ("item", "expected_changes", "expected_next"),
    [("a.mp3", [()], True), ("", [], False), ([], [], False)],
)
def test_add_to_queue(item, expected_changes, expected_next):
    queue = _queue()
    changes = _recorder(queue.queue_changed)
    queue.add_to_queue(item)
    assert changes == expected_changes
    assert queue.has_next() is expected_next


def test_add_list_and_path_objects_keeps_order():
    queue = _queue("a.mp3", Path("b.mp3"))
    queue.add_to_queue("c.mp3")
    assert _advance(queue, 4) == ["a.mp3", "b.mp3", "c.mp3", None]


def test_next_emits_current_track_then_queue_changed():
    queue = _queue("a.mp3", "b.mp3")
    events = []
    queue.current_track_changed.connect(lambda path: events.append(("track", path)))
    queue.queue_changed.connect(lambda: events.append(("queue",)))
    assert queue.next() == "a.mp3"
    assert events == [("track", "a.mp3"), ("queue",)]
    assert queue.current() == "a.mp3"


def test_history_grows_only_after_a_current_track():
    queue = _queue("a.mp3", "b.mp3")
    seen = []
    for _ in range(2):
        queue.next()
        seen.append(queue.has_previous())
    assert seen == [False, True]


def test_previous_puts_current_back_in_front():
    queue = _queue("a.mp3", "b.mp3", "c.mp3")
    _advance(queue, 2)
    assert queue.previous() == "a.mp3"
    assert queue.current() == "a.mp3"
    assert queue.has_previous() is False
    assert _advance(queue, 2) == ["b.mp3", "c.mp3"]


def test_clear_resets_everything_and_emits_empty_track():
    queue = _queue("a.mp3", "b.mp3", "c.mp3")
    _advance(queue, 2)
    tracks = _recorder(queue.current_track_changed)
    changes = _recorder(queue.queue_changed)
    queue.clear_queue()
    assert (tracks, changes) == ([("",)], [()])
    assert queue.current() == ""
    assert (queue.has_next(), queue.has_previous()) == (False, False)