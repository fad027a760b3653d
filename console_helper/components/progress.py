"""Progress bar component."""

import logging
import math

from ..ansi import Color, colorize
from ..config import get_settings
from ..terminal import Terminal, get_terminal

_logging = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class ProgressBar:
    """A determinate progress bar.

    ``render()`` is a pure function of the current state; the lifecycle
    methods redraw it in place on the terminal:

        bar = ProgressBar(total=3).start()
        for item in items:
            work(item)
            bar.increment()
        bar.complete()
    """

    def __init__(
        self,
        total: float = 100,
        width: int = 40,
        complete_char: str | None = None,
        incomplete_char: str | None = None,
        show_percentage: bool = True,
        show_value: bool = False,
        complete_color: Color | None = "green",
        incomplete_color: Color | None = "gray",
        terminal: Terminal | None = None,
    ):
        settings = get_settings()
        self.total = total
        self.width = max(0, width)
        self.complete_char = complete_char or settings.progress_complete_char
        self.incomplete_char = incomplete_char or settings.progress_incomplete_char
        self.show_percentage = show_percentage
        self.show_value = show_value
        self.complete_color = complete_color
        self.incomplete_color = incomplete_color
        self._terminal = terminal
        self._current: float = 0
        self._finished = False

    @property
    def terminal(self) -> Terminal:
        return self._terminal or get_terminal()

    @property
    def current(self) -> float:
        return self._current

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def percentage(self) -> float:
        """Completion in percent, clamped to 0-100."""
        if self.total <= 0:
            return 100.0
        return min(100.0, max(0.0, self._current / self.total * 100))

    def filled_width(self) -> int:
        return _round_half_up(self.width * self.percentage / 100)

    def render(self) -> str:
        filled = self.filled_width()
        empty = self.width - filled

        output = (
            "["
            + colorize(self.complete_char * filled, self.complete_color)
            + colorize(self.incomplete_char * empty, self.incomplete_color)
            + "]"
        )

        if self.show_percentage:
            output += f" {_round_half_up(self.percentage)}%"

        if self.show_value:
            output += f" ({_format_number(self._current)}/{_format_number(self.total)})"

        return output

    def __str__(self) -> str:
        return self.render()

    def print(self, terminal: Terminal | None = None) -> None:
        (terminal or self.terminal).write_line(self.render())

    def _draw(self) -> None:
        self.terminal.clear_line()
        self.terminal.write(self.render())

    def start(self) -> "ProgressBar":
        self.terminal.hide_cursor()
        self._draw()
        return self

    def update(self, value: float) -> "ProgressBar":
        """Set the current value, clamped to [0, total], and redraw."""
        if self._finished:
            return self
        self._current = min(max(self.total, 0), max(0, value))
        self._draw()
        return self

    def increment(self, amount: float = 1) -> "ProgressBar":
        return self.update(self._current + amount)

    def complete(self) -> "ProgressBar":
        """Fill the bar, finish the line and restore the cursor."""
        if self._finished:
            return self
        self._current = max(self.total, 0)
        self._draw()
        self._finish()
        return self

    def stop(self) -> "ProgressBar":
        """Leave the bar at its current position."""
        if self._finished:
            return self
        self._finish()
        return self

    def _finish(self) -> None:
        self._finished = True
        self.terminal.write("\n")
        self.terminal.show_cursor()
        _logging.debug(f"Progress finished at {self._current}/{self.total}")

    def __enter__(self) -> "ProgressBar":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.complete()
        else:
            self.stop()

    @classmethod
    def simple(cls, total: float, **options) -> "ProgressBar":
        return cls(total=total, **options)


__all__ = ["ProgressBar"]
