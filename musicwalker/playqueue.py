"""Track queue with a back history and simple signal dispatch."""

from __future__ import annotations

import logging
import os
from collections import deque
from typing import Callable, Iterable, Optional, Union

log = logging.getLogger(__name__)

PathItem = Union[str, "os.PathLike[str]"]


class Signal:
    """A list of callables that are invoked together when the signal is emitted."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., object]] = []

    def connect(self, slot: Callable[..., object]) -> None:
        self._slots.append(slot)

    def emit(self, *args: object) -> None:
        for slot in list(self._slots):
            slot(*args)


class QueueManager:
    """Upcoming tracks, the current track and the tracks played before it."""

    def __init__(self) -> None:
        self.queue_changed = Signal()
        self.current_track_changed = Signal()
        self._queue: deque[str] = deque()
        self._history: list[str] = []
        self._current = ""

    def add_to_queue(self, item: Union[PathItem, Iterable[PathItem]]) -> None:
        """Append one path, or every path of an iterable, to the queue."""
        if isinstance(item, (str, os.PathLike)):
            path = os.fspath(item)
            if not path:
                log.warning("Attempted to add empty file path to queue")
                return
            self._queue.append(path)
        else:
            paths = [os.fspath(p) for p in item]
            if not paths:
                log.warning("Attempted to add empty file list to queue")
                return
            self._queue.extend(paths)
        self.queue_changed.emit()

    def clear_queue(self) -> None:
        self._queue.clear()
        self._history.clear()
        self._current = ""
        self.queue_changed.emit()
        self.current_track_changed.emit("")

    def next(self) -> Optional[str]:
        """Advance to the first queued track; None when the queue is empty."""
        if not self.has_next():
            return None
        if self._current:
            self._history.append(self._current)
        self._current = self._queue.popleft()
        self.current_track_changed.emit(self._current)
        self.queue_changed.emit()
        return self._current

    def previous(self) -> Optional[str]:
        """Go back to the last played track; None when there is no history."""
        if not self.has_previous():
            return None
        if self._current:
            self._queue.appendleft(self._current)
        self._current = self._history.pop()
        self.current_track_changed.emit(self._current)
        self.queue_changed.emit()
        return self._current

    def current(self) -> str:
        """The current track, or an empty string when there is none."""
        return self._current

    def has_next(self) -> bool:
        return bool(self._queue)

    def has_previous(self) -> bool:
        return bool(self._history)