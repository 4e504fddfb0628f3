# MusicWalker

MusicWalker is a small desktop MP3 player. You build a queue of MP3 files
and play through them. The player remembers the tracks it has already
played, so you can step back through them.

## Installation

```
pip install musicwalker
```

The window and audio playback use `pygame`. The file picker used to add
tracks uses Tkinter, which comes with most Python installations.

## Running

```
musicwalker
```

This opens a dark-themed, resizable window. The large panel at the top shows
the file name of the current track ("No track selected" when there is none).
Below it is a row of buttons:

- **➕ Queue**: pick one or more `.mp3` files and add them to the end of the queue.
- **⏮ / ⏭**: go to the previous or the next track. The new track is loaded
  and starts playing.
- **▶**: if no track is current, take the first queued track and play it.
  Otherwise start the loaded track from its beginning, unless it is already
  playing. Pressing ▶ after ⏸ therefore restarts the track.
- **⏸**: pause.
- **⏹**: stop and unload the current track. ▶ does not reload it; use ⏮ or
  ⏭ to load a track again.
- **❌ Clear**: stop playback and empty both the queue and the history.

## Using it as a library

The queue does not depend on the window:

```python
from musicwalker.playqueue import QueueManager

queue = QueueManager()
queue.current_track_changed.connect(lambda path: print("now playing:", path))
queue.add_to_queue(["one.mp3", "two.mp3"])

queue.next()        # "one.mp3"
queue.next()        # "two.mp3"
queue.previous()    # "one.mp3"; "two.mp3" goes back to the front of the queue
queue.has_next()    # True
queue.current()     # "one.mp3"
```

`add_to_queue` takes a single path or an iterable of paths. An empty path or
an empty list is ignored with a logged warning. `next()` and `previous()`
return `None` when there is nothing to move to. `clear_queue()` empties the
queue and the history and emits `current_track_changed` with `""`.

`Signal` in `musicwalker.playqueue` is a plain list of callbacks:
`connect(slot)` adds one, and `emit(*args)` calls them all in order.

`AudioPlayer` in `musicwalker.audio` drives the pygame mixer and works as a
context manager. `load(path)` raises `AudioError` when the file cannot be
loaded. `play()`, `pause()`, `stop()` and `is_playing()` control and report
playback, and `close()` shuts the mixer down. You can pass another mixer
object to the constructor in place of `pygame.mixer`.

`PlayerController` in `musicwalker.controller` joins a `QueueManager` to an
`AudioPlayer` in the same way the window does. When the current track
changes, it loads and plays the new track and updates `track_name`, and it
emits `track_name_changed`.

## What it does not do

MusicWalker has no seeking, no volume control, no progress display and no
saved playlists. When a track ends it does not move on to the next one by
itself; press ⏭.

## Running the tests

```
pip install "musicwalker[test]"
pytest
```