"""The pygame window: track display, control buttons and the event loop."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from musicwalker.controller import NO_TRACK, PlayerController  # noqa: E402
from musicwalker.playqueue import Signal  # noqa: E402

WINDOW_TITLE = "🎵 MusicWalker"
WINDOW_SIZE = (1920, 1080)

WINDOW_BG = (30, 30, 30)
AREA_BG = (42, 42, 42)
AREA_BORDER = (58, 58, 58)
BUTTON_BG = (58, 58, 58)
BUTTON_HOVER = (74, 74, 74)
TEXT = (255, 255, 255)

_MARGIN = 15
_SPACING = 12
_FONT_NAMES = "segoeuisymbol,segoeui,dejavusans"


def _font(size: int, bold: bool) -> pygame.font.Font:
    pygame.font.init()
    return pygame.font.SysFont(_FONT_NAMES, size, bold=bold)


class PlayerArea:
    """Rounded panel showing the current track's name."""

    MIN_WIDTH = 800
    MIN_HEIGHT = 300

    def __init__(self) -> None:
        self.track_name = NO_TRACK
        self.rect = pygame.Rect(0, 0, self.MIN_WIDTH, self.MIN_HEIGHT)
        self._font: Optional[pygame.font.Font] = None

    def set_track_name(self, name: str) -> None:
        self.track_name = name

    def _draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, AREA_BG, self.rect, border_radius=15)
        pygame.draw.rect(surface, AREA_BORDER, self.rect, width=1, border_radius=15)
        if self._font is None:
            self._font = _font(28, bold=True)
        text = self._font.render(self.track_name, True, TEXT)
        shadow = self._font.render(self.track_name, True, (0, 0, 0))
        shadow.set_alpha(40)
        target = text.get_rect(center=self.rect.center)
        for dx, dy in ((-2, 0), (2, 0), (0, -2), (0, 2), (-1, -1), (1, 1), (-1, 1), (1, -1)):
            surface.blit(shadow, target.move(dx, dy))
        surface.blit(text, target)


@dataclass
class _Button:
    label: str
    signal: Signal
    control: bool
    rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))


class PlayerWidget:
    """A row of playback and queue buttons, each with its own signal."""

    HEIGHT = 60
    _CONTROL_WIDTH = 40
    _QUEUE_WIDTH = 120
    _GAP = 15
    _EXTRA_GAP = 20

    def __init__(self) -> None:
        self.play_clicked = Signal()
        self.pause_clicked = Signal()
        self.stop_clicked = Signal()
        self.next_clicked = Signal()
        self.prev_clicked = Signal()
        self.add_clicked = Signal()
        self.clear_clicked = Signal()
        self._buttons = {
            "add": _Button("➕ Queue", self.add_clicked, control=False),
            "prev": _Button("⏮", self.prev_clicked, control=True),
            "play": _Button("▶", self.play_clicked, control=True),
            "pause": _Button("⏸", self.pause_clicked, control=True),
            "stop": _Button("⏹", self.stop_clicked, control=True),
            "next": _Button("⏭", self.next_clicked, control=True),
            "clear": _Button("❌ Clear", self.clear_clicked, control=False),
        }
        self._fonts: Optional[tuple[pygame.font.Font, pygame.font.Font]] = None
        self._layout(pygame.Rect(0, 0, PlayerArea.MIN_WIDTH, self.HEIGHT))

    def _layout(self, rect: pygame.Rect) -> None:
        self.rect = pygame.Rect(rect)
        top = self.rect.top + 10
        height = self.rect.height - 20
        x = self.rect.left + self._GAP
        self._buttons["add"].rect = pygame.Rect(x, top, self._QUEUE_WIDTH, height)
        x += self._QUEUE_WIDTH + self._GAP + self._EXTRA_GAP + self._GAP
        for name in ("prev", "play", "pause", "stop", "next"):
            self._buttons[name].rect = pygame.Rect(x, top, self._CONTROL_WIDTH, height)
            x += self._CONTROL_WIDTH + self._GAP
        self._buttons["clear"].rect = pygame.Rect(
            self.rect.right - self._GAP - self._QUEUE_WIDTH, top, self._QUEUE_WIDTH, height
        )

    def _click(self, pos: tuple[int, int]) -> bool:
        for button in self._buttons.values():
            if button.rect.collidepoint(pos):
                button.signal.emit()
                return True
        return False

    def _draw(self, surface: pygame.Surface, mouse_pos: Optional[tuple[int, int]] = None) -> None:
        if self._fonts is None:
            self._fonts = (_font(20, bold=True), _font(16, bold=False))
        control_font, queue_font = self._fonts
        for button in self._buttons.values():
            hovered = mouse_pos is not None and button.rect.collidepoint(mouse_pos)
            colour = BUTTON_HOVER if hovered else BUTTON_BG
            pygame.draw.rect(surface, colour, button.rect, border_radius=4)
            font = control_font if button.control else queue_font
            text = font.render(button.label, True, TEXT)
            surface.blit(text, text.get_rect(center=button.rect.center))


class MainWindow:
    """The application window wiring the widgets to a PlayerController."""

    def __init__(
        self,
        controller: Optional[PlayerController] = None,
        size: tuple[int, int] = WINDOW_SIZE,
    ) -> None:
        self.controller = PlayerController() if controller is None else controller
        self.area = PlayerArea()
        self.widget = PlayerWidget()
        self.size = size

        self.widget.play_clicked.connect(self.controller.play)
        self.widget.pause_clicked.connect(self.controller.pause)
        self.widget.stop_clicked.connect(self.controller.stop)
        self.widget.next_clicked.connect(self.controller.next_track)
        self.widget.prev_clicked.connect(self.controller.previous_track)
        self.widget.add_clicked.connect(self._on_add)
        self.widget.clear_clicked.connect(self.controller.clear)
        self.controller.track_name_changed.connect(self.area.set_track_name)
        self.area.set_track_name(self.controller.track_name)

        self._layout(size)

    def _layout(self, size: tuple[int, int]) -> None:
        width, height = size
        self.size = (width, height)
        inner_width = max(width - 2 * _MARGIN, 0)
        widget_top = height - _MARGIN - PlayerWidget.HEIGHT
        self.widget._layout(pygame.Rect(_MARGIN, widget_top, inner_width, PlayerWidget.HEIGHT))
        area_height = max(widget_top - _SPACING - _MARGIN, 0)
        self.area.rect = pygame.Rect(_MARGIN, _MARGIN, inner_width, area_height)

    def _on_add(self) -> None:
        self.controller.add_files(self.ask_files())

    def ask_files(self) -> list[str]:
        """Ask the user for MP3 files; an empty list when cancelled."""
        import tkinter
        from tkinter import filedialog

        root = tkinter.Tk()
        root.withdraw()
        try:
            names = filedialog.askopenfilenames(
                parent=root,
                title="Select MP3 Files",
                filetypes=[("MP3 Files", "*.mp3")],
            )
        finally:
            root.destroy()
        return list(names)

    def _draw(self, surface: pygame.Surface, mouse_pos: Optional[tuple[int, int]] = None) -> None:
        surface.fill(WINDOW_BG)
        self.area._draw(surface)
        self.widget._draw(surface, mouse_pos)

    def run(self) -> int:
        """Show the window and process events until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.size, pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.VIDEORESIZE:
                        self._layout(event.size)
                        screen = pygame.display.get_surface()
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.widget._click(event.pos)
                self._draw(screen, pygame.mouse.get_pos())
                pygame.display.flip()
                clock.tick(30)
        finally:
            self.controller.player.close()
            pygame.quit()
        return 0


def main(argv: Optional[list[str]] = None) -> int:
    return MainWindow().run()