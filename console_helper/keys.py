"""Keystroke capture and decoding for interactive prompts.

Raw terminal input is decoded with prompt_toolkit's VT100 parser and
reduced to the handful of key kinds the prompts care about.
"""

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from prompt_toolkit.input.vt100_parser import Vt100Parser
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from .terminal import Terminal, get_terminal

_logging = logging.getLogger(__name__)


class KeyKind(Enum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    CTRL_C = "ctrl_c"
    ARROW_UP = "arrow_up"
    ARROW_DOWN = "arrow_down"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded keystroke; *raw* holds the bytes as received."""
    kind: KeyKind
    raw: str = ""

    @classmethod
    def char(cls, ch: str) -> "KeyEvent":
        return cls(KeyKind.CHAR, ch)


# Keys.Backspace is an alias of Keys.ControlH, which also covers \x7f
_KEY_KINDS = {
    Keys.ControlM: KeyKind.ENTER,
    Keys.ControlJ: KeyKind.ENTER,
    Keys.ControlH: KeyKind.BACKSPACE,
    Keys.ControlC: KeyKind.CTRL_C,
    Keys.Up: KeyKind.ARROW_UP,
    Keys.Down: KeyKind.ARROW_DOWN,
}


def key_events_from_press(press: KeyPress) -> list[KeyEvent]:
    """Translate a prompt_toolkit KeyPress into zero or more KeyEvents."""
    key = press.key
    if key == Keys.BracketedPaste:
        return [KeyEvent.char(ch) for ch in press.data if ch.isprintable()]

    if isinstance(key, Keys):
        kind = _KEY_KINDS.get(key, KeyKind.OTHER)
        return [KeyEvent(kind, press.data)]

    if len(key) == 1 and key.isprintable():
        return [KeyEvent.char(key)]

    return [KeyEvent(KeyKind.OTHER, press.data)]


def decode_keys(data: str) -> list[KeyEvent]:
    """Decode a chunk of raw terminal input into key events."""
    presses: list[KeyPress] = []
    parser = Vt100Parser(presses.append)
    parser.feed_and_flush(data)

    events: list[KeyEvent] = []
    for press in presses:
        events.extend(key_events_from_press(press))
    return events


def decode_key(raw: str) -> KeyEvent:
    """Decode a single keystroke sequence, e.g. ``"\\x1b[A"`` or ``"a"``."""
    events = decode_keys(raw)
    return events[0] if events else KeyEvent(KeyKind.OTHER, raw)


class KeyReader:
    """Reads key events from the terminal in raw mode.

    Use as a context manager; raw mode is released on every exit path:

        with KeyReader() as keys:
            for event in keys:
                ...
    """

    def __init__(self, terminal: Terminal | None = None, chunk_size: int = 1024):
        self._terminal = terminal or get_terminal()
        self._chunk_size = chunk_size
        self._raw = None

    def __enter__(self) -> "KeyReader":
        self._raw = self._terminal.raw_mode()
        self._raw.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        raw, self._raw = self._raw, None
        if raw is not None:
            return raw.__exit__(exc_type, exc_val, exc_tb)
        return None

    def __iter__(self) -> Iterator[KeyEvent]:
        fd = self._terminal.input_stream.fileno()
        while True:
            data = os.read(fd, self._chunk_size)
            if not data:
                _logging.debug("Key input reached end of stream")
                return
            yield from decode_keys(data.decode("utf-8", errors="replace"))


@contextmanager
def key_source(
    keys: Iterable[KeyEvent] | None = None,
    terminal: Terminal | None = None,
) -> Iterator[Iterator[KeyEvent]]:
    """Yield an iterator of key events.

    Given *keys*, iterate those directly; otherwise read the terminal in
    raw mode for the duration of the block.
    """
    if keys is not None:
        yield iter(keys)
        return

    with KeyReader(terminal) as reader:
        yield iter(reader)


__all__ = [
    "KeyKind",
    "KeyEvent",
    "KeyReader",
    "decode_key",
    "decode_keys",
    "key_events_from_press",
    "key_source",
]
