"""Interactive single-choice menu."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from ..ansi import Color, Style, colorize, compose, visible_length
from ..config import get_settings
from ..errors import PromptCancelled
from ..keys import KeyEvent, KeyKind, key_source
from ..terminal import Terminal, get_terminal

_logging = logging.getLogger(__name__)

_UNSET = object()


@dataclass
class Choice:
    """A menu entry. The value defaults to the label."""
    label: str
    value: Any = _UNSET
    disabled: bool = False

    def __post_init__(self):
        if self.value is _UNSET:
            self.value = self.label

    @classmethod
    def of(cls, item: "Choice | Mapping[str, Any] | str") -> "Choice":
        if isinstance(item, Choice):
            return item
        if isinstance(item, Mapping):
            return cls(**item)
        return cls(label=str(item), value=item)


class SelectState:
    """Cursor over a list of choices.

    Up/down (or k/j) move the cursor, wrapping around and skipping disabled
    choices. Enter submits unless the current choice is disabled.
    """

    def __init__(self, choices: Sequence[Choice], default: Any = None):
        if not choices:
            raise ValueError("select requires at least one choice")
        if all(choice.disabled for choice in choices):
            raise ValueError("select requires at least one enabled choice")

        self.choices = list(choices)
        self.index = 0
        self.submitted = False
        self.cancelled = False

        if default is not None:
            for i, choice in enumerate(self.choices):
                if choice.value == default:
                    self.index = i
                    break

        if self.current.disabled:
            self.move(1)

    @property
    def current(self) -> Choice:
        return self.choices[self.index]

    @property
    def done(self) -> bool:
        return self.submitted or self.cancelled

    def move(self, step: int) -> None:
        count = len(self.choices)
        index = self.index
        for _ in range(count):
            index = (index + step) % count
            if not self.choices[index].disabled:
                break
        self.index = index

    def handle(self, event: KeyEvent) -> bool:
        """Apply *event*; return True when the highlighted choice changed."""
        previous = self.index
        if event.kind == KeyKind.ARROW_UP or event == KeyEvent.char("k"):
            self.move(-1)
        elif event.kind == KeyKind.ARROW_DOWN or event == KeyEvent.char("j"):
            self.move(1)
        elif event.kind == KeyKind.ENTER:
            if self.current.disabled:
                _logging.debug(f"Ignoring enter on disabled choice {self.current.label!r}")
            else:
                self.submitted = True
        elif event.kind == KeyKind.CTRL_C:
            self.cancelled = True
        return self.index != previous


def render_choice(
    choice: Choice,
    selected: bool,
    pointer: str = "❯",
    selected_color: Color | None = "cyan",
    unselected_color: Color | None = None,
) -> str:
    """One menu line: the pointer or its blank gutter, then the label."""
    if selected:
        line = compose(pointer, Style(color=selected_color, bold=True)) + " "
    else:
        line = " " * (visible_length(pointer) + 1)

    if choice.disabled:
        muted = Style(color="gray", dim=True)
        line += compose(choice.label, muted)
        line += compose(" (disabled)", Style(color="gray", dim=True, italic=True))
    elif selected:
        line += compose(choice.label, Style(color=selected_color, bold=True))
    else:
        line += colorize(choice.label, unselected_color)
    return line


def select(
    message: str,
    choices: Iterable["Choice | Mapping[str, Any] | str"],
    default: Any = None,
    pointer: str | None = None,
    margin: int = 1,
    message_color: Color | None = "cyan",
    selected_color: Color | None = "cyan",
    unselected_color: Color | None = None,
    keys: Iterable[KeyEvent] | None = None,
    terminal: Terminal | None = None,
) -> Any:
    """Show a menu and return the value of the chosen entry.

    Choices may be Choice objects, mappings with label/value/disabled keys,
    or plain values used as both label and value. The pointer defaults to
    the configured one.

    Raises:
        ValueError: If there are no choices, or none is enabled
        PromptCancelled: On ctrl-c or when the key source runs out
    """
    state = SelectState([Choice.of(item) for item in choices], default)
    terminal = terminal or get_terminal()
    pointer = pointer or get_settings().pointer

    def draw() -> None:
        for i, choice in enumerate(state.choices):
            terminal.clear_line()
            terminal.write_line(
                render_choice(choice, i == state.index, pointer, selected_color, unselected_color)
            )

    if message:
        terminal.write_line(colorize(message, message_color))
    for _ in range(margin):
        terminal.write_line()

    terminal.hide_cursor()
    try:
        with key_source(keys, terminal) as events:
            draw()
            for event in events:
                if state.handle(event):
                    terminal.cursor_up(len(state.choices))
                    draw()
                if state.done:
                    break
    finally:
        terminal.show_cursor()

    if not state.submitted:
        _logging.debug("Selection cancelled")
        terminal.write_line()
        raise PromptCancelled()

    # replace the menu with the final answer
    terminal.cursor_up(len(state.choices))
    terminal.clear_down()
    terminal.write_line(compose(f"{pointer} {state.current.label}", Style(color=selected_color, bold=True)))
    return state.current.value


__all__ = ["Choice", "SelectState", "render_choice", "select"]
