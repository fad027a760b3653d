"""Styled text component."""

from dataclasses import dataclass, field, replace

from ..ansi import Color, Style, compose
from ..terminal import Terminal, get_terminal


@dataclass
class Text:
    """A run of text rendered with a single Style.

    Example:
        >>> Text("done", Style(color="green", bold=True)).render()
        '\\x1b[1m\\x1b[32mdone\\x1b[0m'
    """
    text: str = ""
    style: Style = field(default_factory=Style)

    def render(self) -> str:
        return compose(self.text, self.style)

    def __str__(self) -> str:
        return self.render()

    @property
    def plain(self) -> str:
        """The text without styling."""
        return self.text

    def print(self, newline: bool = True, terminal: Terminal | None = None) -> None:
        term = terminal or get_terminal()
        if newline:
            term.write_line(self.render())
        else:
            term.write(self.render())

    def styled(self, **changes) -> "Text":
        """Copy of this Text with some style attributes changed."""
        return Text(self.text, replace(self.style, **changes))

    @classmethod
    def color(cls, text: str, color: Color) -> "Text":
        return cls(text, Style(color=color))

    @classmethod
    def red(cls, text: str) -> "Text":
        return cls.color(text, "red")

    @classmethod
    def green(cls, text: str) -> "Text":
        return cls.color(text, "green")

    @classmethod
    def yellow(cls, text: str) -> "Text":
        return cls.color(text, "yellow")

    @classmethod
    def blue(cls, text: str) -> "Text":
        return cls.color(text, "blue")

    @classmethod
    def magenta(cls, text: str) -> "Text":
        return cls.color(text, "magenta")

    @classmethod
    def cyan(cls, text: str) -> "Text":
        return cls.color(text, "cyan")

    @classmethod
    def white(cls, text: str) -> "Text":
        return cls.color(text, "white")

    @classmethod
    def gray(cls, text: str) -> "Text":
        return cls.color(text, "gray")

    @classmethod
    def bold(cls, text: str) -> "Text":
        return cls(text, Style(bold=True))

    @classmethod
    def dim(cls, text: str) -> "Text":
        return cls(text, Style(dim=True))

    @classmethod
    def italic(cls, text: str) -> "Text":
        return cls(text, Style(italic=True))

    @classmethod
    def underline(cls, text: str) -> "Text":
        return cls(text, Style(underline=True))

    @classmethod
    def strikethrough(cls, text: str) -> "Text":
        return cls(text, Style(strikethrough=True))

    @classmethod
    def inverse(cls, text: str) -> "Text":
        return cls(text, Style(inverse=True))


__all__ = ["Text"]
