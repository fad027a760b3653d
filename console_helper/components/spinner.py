"""Spinner component for loading animations.

The spinner does not own a clock: each ``tick()`` advances one frame. Call
``tick()`` from your own loop or timer, or start it with ``animate=True``
to have a background thread tick at the frame set's interval. Frame index
and terminal state are guarded by a lock so both styles are safe.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from ..ansi import Color, colorize
from ..config import get_settings
from ..terminal import Terminal, get_terminal

_logging = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameSet:
    frames: tuple[str, ...]
    interval_ms: int


SPINNERS = MappingProxyType({
    "dots": FrameSet(("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"), 80),
    "line": FrameSet(("-", "\\", "|", "/"), 100),
    "circle": FrameSet(("◐", "◓", "◑", "◒"), 120),
    "square": FrameSet(("◰", "◳", "◲", "◱"), 120),
    "arrow": FrameSet(("←", "↖", "↑", "↗", "→", "↘", "↓", "↙"), 100),
    "bounce": FrameSet(("⠁", "⠂", "⠄", "⠂"), 120),
    "box": FrameSet(("▖", "▘", "▝", "▗"), 100),
    "star": FrameSet(("✶", "✸", "✹", "✺", "✹", "✷"), 100),
    "toggle": FrameSet(("⊶", "⊷"), 250),
    "grow": FrameSet(("▁", "▃", "▄", "▅", "▆", "▇", "█", "▇", "▆", "▅", "▄", "▃"), 100),
    "pulse": FrameSet(("●", "◉", "◎", "◉"), 150),
    "wave": FrameSet(("▁", "▂", "▃", "▄", "▅", "▆", "▇", "█", "▇", "▆", "▅", "▄", "▃", "▂"), 80),
})

DEFAULT_SPINNER = "dots"


def get_frame_set(name: str | None) -> FrameSet:
    """Look up a frame set, falling back to 'dots' for unknown names."""
    frame_set = SPINNERS.get(name or DEFAULT_SPINNER)
    if frame_set is None:
        _logging.debug(f"Unknown spinner type {name!r}, using {DEFAULT_SPINNER!r}")
        return SPINNERS[DEFAULT_SPINNER]
    return frame_set


class SpinnerOutcome(Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    WARNED = "warned"
    STOPPED = "stopped"


class Spinner:
    """Animated loading indicator with a trailing label."""

    def __init__(
        self,
        text: str = "",
        kind: str | None = None,
        color: Color | None = "cyan",
        text_color: Color | None = None,
        frame_set: FrameSet | None = None,
        terminal: Terminal | None = None,
    ):
        self.text = text
        self.kind = kind or get_settings().spinner
        self.frame_set = frame_set or get_frame_set(self.kind)
        self.color = color
        self.text_color = text_color
        self._terminal = terminal
        self._frame_index = 0
        self._running = False
        self._outcome: SpinnerOutcome | None = None
        self._lock = threading.RLock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def terminal(self) -> Terminal:
        return self._terminal or get_terminal()

    @property
    def frame_index(self) -> int:
        return self._frame_index

    @property
    def running(self) -> bool:
        return self._running

    @property
    def outcome(self) -> SpinnerOutcome | None:
        return self._outcome

    def is_spinning(self) -> bool:
        return self._running

    def frame(self) -> str:
        """Render the current frame and label without advancing."""
        with self._lock:
            glyph = colorize(self.frame_set.frames[self._frame_index], self.color)
            if not self.text:
                return glyph
            label = f" {self.text}"
            if self.text_color:
                label = colorize(label, self.text_color)
            return glyph + label

    def render(self) -> str:
        return self.frame()

    def __str__(self) -> str:
        return self.render()

    def print(self, terminal: Terminal | None = None) -> None:
        """Write the current frame as a finished line."""
        (terminal or self.terminal).write_line(self.render())

    def _draw(self) -> None:
        self.terminal.clear_line()
        self.terminal.write(self.frame())

    def tick(self) -> "Spinner":
        """Advance one frame and redraw; no-op unless running."""
        with self._lock:
            if not self._running:
                return self
            self._frame_index = (self._frame_index + 1) % len(self.frame_set.frames)
            self._draw()
        return self

    def _animate(self) -> None:
        interval = self.frame_set.interval_ms / 1000
        while not self._stop_event.wait(interval):
            self.tick()

    def start(self, text: str | None = None, animate: bool = False) -> "Spinner":
        """Show the first frame; with *animate* a daemon thread keeps ticking."""
        with self._lock:
            if self._running or self._outcome is not None:
                return self
            if text is not None:
                self.text = text
            self._running = True
            self.terminal.hide_cursor()
            self._draw()

        if animate:
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._animate, daemon=True)
            self._thread.start()
        return self

    def set_text(self, text: str) -> "Spinner":
        """Change the label; the frame sequence is unaffected."""
        with self._lock:
            self.text = text
        return self

    def _finish(
        self,
        outcome: SpinnerOutcome,
        text: str | None,
        symbol: str | None = None,
        color: Color | None = None,
    ) -> "Spinner":
        with self._lock:
            if self._outcome is not None:
                return self
            self._outcome = outcome
            self._running = False

        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=1)

        with self._lock:
            self.terminal.clear_line()
            if symbol is not None:
                final = text if text is not None else self.text
                self.terminal.write(f"{colorize(symbol, color)} {final}\n")
            elif text is not None:
                self.terminal.write(f"{text}\n")
            self.terminal.show_cursor()

        _logging.debug(f"Spinner finished: {outcome.value}")
        return self

    def succeed(self, text: str | None = None) -> "Spinner":
        return self._finish(SpinnerOutcome.SUCCEEDED, text, "✓", "green")

    def fail(self, text: str | None = None) -> "Spinner":
        return self._finish(SpinnerOutcome.FAILED, text, "✗", "red")

    def warn(self, text: str | None = None) -> "Spinner":
        return self._finish(SpinnerOutcome.WARNED, text, "⚠", "yellow")

    def stop(self, text: str | None = None) -> "Spinner":
        """Stop without a status symbol; *text*, when given, is printed as-is."""
        return self._finish(SpinnerOutcome.STOPPED, text)

    def __enter__(self) -> "Spinner":
        return self.start(animate=True)

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.succeed()
        else:
            self.fail()

    @classmethod
    def dots(cls, text: str = "", **options) -> "Spinner":
        return cls(text, kind="dots", **options)

    @classmethod
    def line(cls, text: str = "", **options) -> "Spinner":
        return cls(text, kind="line", **options)

    @classmethod
    def circle(cls, text: str = "", **options) -> "Spinner":
        return cls(text, kind="circle", **options)

    @classmethod
    def arrow(cls, text: str = "", **options) -> "Spinner":
        return cls(text, kind="arrow", **options)


__all__ = ["FrameSet", "SPINNERS", "Spinner", "SpinnerOutcome", "get_frame_set"]
