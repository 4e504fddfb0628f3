"""Music playback through the pygame mixer."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

log = logging.getLogger(__name__)

FREQUENCY = 44100
SAMPLE_SIZE = -16
CHANNELS = 2
BUFFER = 2048


class AudioError(Exception):
    """A track could not be loaded."""


class AudioPlayer:
    """Plays one music track at a time.

    ``mixer`` is the mixer module to drive; it defaults to ``pygame.mixer``.
    """

    def __init__(self, mixer: Optional[Any] = None) -> None:
        self._mixer = pygame.mixer if mixer is None else mixer
        self._loaded = False
        self._playing = False
        self._closed = False
        try:
            self._mixer.init(
                frequency=FREQUENCY, size=SAMPLE_SIZE, channels=CHANNELS, buffer=BUFFER
            )
        except pygame.error as exc:
            log.warning("could not open audio: %s", exc)

    def load(self, file_path: str) -> None:
        """Stop the current track and load ``file_path``; raise AudioError on failure."""
        self.stop()
        path = os.fspath(file_path) if file_path else ""
        if not path:
            raise AudioError("no file to load")
        try:
            self._mixer.music.load(path)
        except pygame.error as exc:
            raise AudioError(f"cannot load {path!r}: {exc}") from exc
        self._loaded = True

    def play(self) -> None:
        """Start the loaded track from the beginning if it is not playing."""
        if not self._loaded or self._playing:
            return
        try:
            self._mixer.music.play(loops=0)
        except pygame.error as exc:
            log.warning("could not play music: %s", exc)
            return
        self._playing = True

    def pause(self) -> None:
        if self._playing:
            self._mixer.music.pause()
            self._playing = False

    def stop(self) -> None:
        if self._loaded:
            self._mixer.music.stop()
            self._mixer.music.unload()
            self._loaded = False
            self._playing = False

    def is_playing(self) -> bool:
        return self._playing

    def close(self) -> None:
        """Stop playback and shut the mixer down."""
        if self._closed:
            return
        self.stop()
        if self._mixer.get_init():
            self._mixer.quit()
        self._closed = True

    def __enter__(self) -> "AudioPlayer":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()