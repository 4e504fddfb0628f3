"""Glue between the track queue, the audio player and the display."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from musicwalker.audio import AudioError, AudioPlayer
from musicwalker.playqueue import QueueManager, Signal

log = logging.getLogger(__name__)

NO_TRACK = "No track selected"


class PlayerController:
    """Reacts to user commands and keeps playback in step with the queue."""

    def __init__(
        self,
        queue: Optional[QueueManager] = None,
        player: Optional[AudioPlayer] = None,
    ) -> None:
        self.queue = QueueManager() if queue is None else queue
        self.player = AudioPlayer() if player is None else player
        self.track_name = NO_TRACK
        self.track_name_changed = Signal()
        self.queue.current_track_changed.connect(self.on_track_changed)

    def _show(self, name: str) -> None:
        self.track_name = name
        self.track_name_changed.emit(name)

    def play(self) -> None:
        if self.player.is_playing():
            return
        current = self.queue.current()
        if not current and self.queue.has_next():
            self.queue.next()
        elif current:
            self.player.play()

    def pause(self) -> None:
        self.player.pause()

    def stop(self) -> None:
        self.player.stop()

    def next_track(self) -> None:
        if self.queue.has_next():
            self.queue.next()

    def previous_track(self) -> None:
        if self.queue.has_previous():
            self.queue.previous()

    def add_files(self, files: Iterable[str]) -> None:
        files = list(files)
        if files:
            self.queue.add_to_queue(files)

    def clear(self) -> None:
        self.player.stop()
        self.queue.clear_queue()
        self._show(NO_TRACK)

    def on_track_changed(self, file_path: str) -> None:
        """Load and start the new current track, showing its file name."""
        try:
            self.player.load(file_path)
        except AudioError as exc:
            log.warning("%s", exc)
            return
        self._show(Path(file_path).name)
        self.player.play()