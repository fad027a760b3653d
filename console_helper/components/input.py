"""Line input prompts: free text, passwords and yes/no confirmation."""

import logging
from typing import Callable, Iterable, Iterator

from ..ansi import Color, Style, colorize, compose
from ..errors import PromptCancelled
from ..keys import KeyEvent, KeyKind, key_source
from ..terminal import Terminal, get_terminal

_logging = logging.getLogger(__name__)

MASK_CHAR = "•"

Validator = Callable[[str], str | None]


class InputState:
    """Editing state of a single input line.

    Characters are inserted at the cursor unless ``max_length`` is reached,
    backspace removes the character before the cursor, enter submits and
    ctrl-c cancels. Other keys are ignored.
    """

    def __init__(self, value: str = "", mask: bool = False, max_length: int | None = None):
        self.value = value
        self.cursor = len(value)
        self.mask = mask
        self.max_length = max_length
        self.submitted = False
        self.cancelled = False

    @property
    def done(self) -> bool:
        return self.submitted or self.cancelled

    @property
    def display(self) -> str:
        return MASK_CHAR * len(self.value) if self.mask else self.value

    def handle(self, event: KeyEvent) -> bool:
        """Apply *event*; return True when the visible value changed."""
        if event.kind == KeyKind.ENTER:
            self.submitted = True
        elif event.kind == KeyKind.CTRL_C:
            self.cancelled = True
        elif event.kind == KeyKind.BACKSPACE:
            if self.cursor > 0:
                self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
                self.cursor -= 1
                return True
        elif event.kind == KeyKind.CHAR:
            if self.max_length is not None and len(self.value) >= self.max_length:
                return False
            self.value = self.value[: self.cursor] + event.raw + self.value[self.cursor :]
            self.cursor += len(event.raw)
            return True
        return False


def _prompt_prefix(prompt: str, color: Color | None) -> str:
    return colorize(f"{prompt} ", color) if prompt else ""


def _draw(terminal: Terminal, prefix: str, state: InputState, placeholder: str) -> None:
    terminal.clear_line()
    terminal.write(prefix)
    if state.value or not placeholder:
        terminal.write(state.display)
    else:
        terminal.write(compose(placeholder, Style(color="gray", dim=True)))
        terminal.cursor_back(len(placeholder))


def _cancel(terminal: Terminal) -> PromptCancelled:
    terminal.show_cursor()
    terminal.write_line()
    return PromptCancelled()


def _read_value(
    events: Iterator[KeyEvent],
    terminal: Terminal,
    prefix: str,
    default: str,
    placeholder: str,
    mask: bool,
    max_length: int | None,
) -> str:
    state = InputState(default, mask=mask, max_length=max_length)
    _draw(terminal, prefix, state, placeholder)

    for event in events:
        if state.handle(event):
            _draw(terminal, prefix, state, placeholder)
        if state.cancelled:
            raise _cancel(terminal)
        if state.submitted:
            terminal.write_line()
            return state.value

    _logging.debug("Key source exhausted before input was submitted")
    raise _cancel(terminal)


def prompt_input(
    prompt: str = "",
    default: str = "",
    placeholder: str = "",
    validate: Validator | None = None,
    mask: bool = False,
    max_length: int | None = None,
    prompt_color: Color | None = "cyan",
    keys: Iterable[KeyEvent] | None = None,
    terminal: Terminal | None = None,
) -> str:
    """Ask for a line of text.

    Args:
        prompt: Label written before the value
        default: Initial value, returned as-is if the user just presses enter
        placeholder: Dimmed hint shown while the value is empty
        validate: Called with the submitted value; returning a message
            rejects it and the prompt is asked again
        mask: Echo every character as a bullet
        max_length: Maximum number of characters accepted
        prompt_color: Color of the prompt label
        keys: Key events to consume instead of reading the terminal
        terminal: Output terminal (defaults to the shared one)

    Returns:
        The submitted value

    Raises:
        PromptCancelled: On ctrl-c or when the key source runs out
    """
    terminal = terminal or get_terminal()
    prefix = _prompt_prefix(prompt, prompt_color)

    with key_source(keys, terminal) as events:
        while True:
            value = _read_value(events, terminal, prefix, default, placeholder, mask, max_length)
            error = validate(value) if validate else None
            if not error:
                return value
            _logging.debug(f"Input rejected by validator: {error}")
            terminal.write_line(colorize(f"✗ {error}", "red"))


def prompt_text(prompt: str, **options) -> str:
    return prompt_input(prompt=prompt, **options)


def prompt_password(prompt: str, **options) -> str:
    """Like prompt_input, with every character masked."""
    return prompt_input(prompt=prompt, mask=True, **options)


def prompt_confirm(
    prompt: str,
    default: bool = False,
    keys: Iterable[KeyEvent] | None = None,
    terminal: Terminal | None = None,
) -> bool:
    """Ask a yes/no question; a blank answer returns *default*."""
    suffix = " (Y/n)" if default else " (y/N)"
    answer = prompt_input(
        prompt=prompt + suffix,
        prompt_color="yellow",
        keys=keys,
        terminal=terminal,
    )
    normalized = answer.strip().lower()
    if not normalized:
        return default
    return normalized in ("y", "yes")


__all__ = [
    "InputState",
    "prompt_input",
    "prompt_text",
    "prompt_password",
    "prompt_confirm",
]
