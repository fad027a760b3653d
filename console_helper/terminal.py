"""Terminal control: output, cursor movement, screen modes and raw input mode.

All output passes through ``click.echo``. Rendered text has its color codes
stripped when colors are disabled; cursor and screen control sequences are
written unchanged, so prompts keep redrawing in place under NO_COLOR.
"""

import logging
import os
import shutil
import sys
from contextlib import contextmanager
from typing import IO, Iterator, NamedTuple

import click
from prompt_toolkit.input.vt100 import raw_mode as _pt_raw_mode

from .config import get_settings

_logging = logging.getLogger(__name__)

CLEAR_LINE = "\x1b[2K\r"
CLEAR_SCREEN = "\x1b[2J\x1b[H"
CLEAR_DOWN = "\x1b[J"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
SAVE_CURSOR = "\x1b[s"
RESTORE_CURSOR = "\x1b[u"
ALT_SCREEN_ON = "\x1b[?1049h"
ALT_SCREEN_OFF = "\x1b[?1049l"


class TerminalSize(NamedTuple):
    width: int
    height: int


def _isatty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # closed stream
        return False


def detect_color_support(stream=None) -> bool:
    """Check whether *stream* should receive color codes.

    NO_COLOR disables colors, FORCE_COLOR enables them, otherwise colors
    follow whether the stream is an interactive terminal. A configured
    color_mode of 'always' or 'never' overrides detection.
    """
    mode = get_settings().color_mode
    if mode == "always":
        return True
    if mode == "never":
        return False

    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return _isatty(stream if stream is not None else sys.stdout)


class Terminal:
    """Writes rendered output and terminal control sequences to a stream.

    Args:
        stream: Output stream (defaults to sys.stdout at write time)
        color: Force colors on/off; None means detect_color_support()
        input_stream: Stream whose file descriptor raw_mode() toggles
    """

    def __init__(
        self,
        stream: IO[str] | None = None,
        color: bool | None = None,
        input_stream: IO[str] | None = None,
    ):
        self._stream = stream
        self._color = color
        self._input_stream = input_stream

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def input_stream(self) -> IO[str]:
        return self._input_stream if self._input_stream is not None else sys.stdin

    def supports_color(self) -> bool:
        if self._color is not None:
            return self._color
        return detect_color_support(self.stream)

    def write(self, text: str) -> None:
        click.echo(text, file=self.stream, nl=False, color=self.supports_color())
        self.stream.flush()

    def _control(self, sequence: str) -> None:
        click.echo(sequence, file=self.stream, nl=False, color=True)
        self.stream.flush()

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    def clear_line(self) -> None:
        self._control(CLEAR_LINE)

    def clear_screen(self) -> None:
        self._control(CLEAR_SCREEN)

    def clear_down(self) -> None:
        """Erase from the cursor to the end of the screen."""
        self._control(CLEAR_DOWN)

    def move_cursor(self, x: int, y: int) -> None:
        """Move the cursor to 0-based column *x*, row *y*."""
        self._control(f"\x1b[{y + 1};{x + 1}H")

    def hide_cursor(self) -> None:
        self._control(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._control(SHOW_CURSOR)

    def cursor_up(self, lines: int = 1) -> None:
        if lines > 0:
            self._control(f"\x1b[{lines}A")

    def cursor_down(self, lines: int = 1) -> None:
        if lines > 0:
            self._control(f"\x1b[{lines}B")

    def cursor_back(self, columns: int = 1) -> None:
        if columns > 0:
            self._control(f"\x1b[{columns}D")

    def save_cursor(self) -> None:
        self._control(SAVE_CURSOR)

    def restore_cursor(self) -> None:
        self._control(RESTORE_CURSOR)

    def enter_alternate_screen(self) -> None:
        self._control(ALT_SCREEN_ON)

    def exit_alternate_screen(self) -> None:
        self._control(ALT_SCREEN_OFF)

    @contextmanager
    def alternate_screen(self) -> Iterator["Terminal"]:
        """Full-screen mode for the duration of the block."""
        self.enter_alternate_screen()
        try:
            yield self
        finally:
            self.exit_alternate_screen()

    def size(self) -> TerminalSize:
        """Terminal dimensions, falling back to 80x24."""
        ts = shutil.get_terminal_size((80, 24))
        return TerminalSize(ts.columns or 80, ts.lines or 24)

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Put the input terminal in raw mode, restoring it on exit.

        Does nothing when input is not a terminal.
        """
        stream = self.input_stream
        if not _isatty(stream):
            yield
            return

        _logging.debug("Entering raw input mode")
        with _pt_raw_mode(stream.fileno()):
            try:
                yield
            finally:
                _logging.debug("Leaving raw input mode")


_default_terminal: Terminal | None = None


def get_terminal() -> Terminal:
    """Return the shared Terminal bound to stdout/stdin."""
    global _default_terminal
    if _default_terminal is None:
        _default_terminal = Terminal()
    return _default_terminal


__all__ = [
    "Terminal",
    "TerminalSize",
    "detect_color_support",
    "get_terminal",
    "CLEAR_LINE",
    "CLEAR_SCREEN",
    "CLEAR_DOWN",
    "HIDE_CURSOR",
    "SHOW_CURSOR",
]
