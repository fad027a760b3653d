"""Block-letter ASCII art and simple decorative shapes."""

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType

from ..ansi import Color, colorize
from ..layout import pad
from ..terminal import Terminal, get_terminal

_logging = logging.getLogger(__name__)

FONTS = MappingProxyType({
    "standard": MappingProxyType({
        "A": ("  ▄▀▀▄  ", " ▄▀▀▀▀▄ ", "█▀▀▀▀▀█", "█     █"),
        "B": ("█▀▀▀▀▄ ", "█▄▄▄▄▀ ", "█    ▀▄", "█▄▄▄▄▀ "),
        "C": (" ▄▀▀▀▀▄", "█      ", "█      ", " ▀▄▄▄▄▀"),
        "D": ("█▀▀▀▀▄ ", "█    ▀▄", "█     █", "█▄▄▄▄▀ "),
        "E": ("█▀▀▀▀▀", "█▀▀▀▀ ", "█     ", "█▄▄▄▄▄"),
        "F": ("█▀▀▀▀▀", "█▀▀▀▀ ", "█     ", "█     "),
        "G": (" ▄▀▀▀▀▄", "█      ", "█   ▄▄█", " ▀▄▄▄▀ "),
        "H": ("█     █", "█▀▀▀▀▀█", "█     █", "█     █"),
        "I": ("█▀▀▀▀█", "  ██  ", "  ██  ", "█▄▄▄▄█"),
        "J": ("   ▄▄█", "     █", "█    █", " ▀▄▄▀ "),
        "K": ("█   ▄▀", "█▀▀▀  ", "█   ▀▄", "█    ▀▄"),
        "L": ("█     ", "█     ", "█     ", "█▄▄▄▄▄"),
        "M": ("█▀█▀█ ", "█ ▀ █ ", "█   █ ", "█   █ "),
        "N": ("█▄   █", "█ ▀▄ █", "█   ▀█", "█    █"),
        "O": (" ▄▀▀▀▄ ", "█     █", "█     █", " ▀▄▄▄▀ "),
        "P": ("█▀▀▀▀▄", "█▄▄▄▄▀", "█     ", "█     "),
        "Q": (" ▄▀▀▀▄ ", "█     █", "█   ▄ █", " ▀▄▄ ▀▄"),
        "R": ("█▀▀▀▀▄", "█▄▄▄▄▀", "█   ▀▄", "█    ▀▄"),
        "S": (" ▄▀▀▀▀▄", "▀▄▄    ", "    ▄▄▀", "▀▄▄▄▄▀ "),
        "T": ("▀▀█▀▀▀▀", "  █    ", "  █    ", "  █    "),
        "U": ("█     █", "█     █", "█     █", " ▀▄▄▄▀ "),
        "V": ("█     █", "█     █", " █   █ ", "  ▀▄▀  "),
        "W": ("█     █", "█  █  █", "█ █ █ █", " █   █ "),
        "X": ("█    █", " █  █ ", "  ██  ", " █  █ "),
        "Y": ("█    █", " █  █ ", "  ██  ", "  ██  "),
        "Z": ("█▀▀▀▀█", "   ▄▀ ", " ▄▀   ", "█▄▄▄▄█"),
        " ": ("       ", "       ", "       ", "       "),
    }),
    "small": MappingProxyType({
        "A": ("▄▀█", "█▀█"),
        "B": ("█▀▄", "█▄▀"),
        "C": ("█▀▀", "▀▀▀"),
        "D": ("█▀▄", "█▄▀"),
        "E": ("█▀▀", "██▄"),
        "F": ("█▀▀", "█▀ "),
        "G": ("█▀▀", "█▄█"),
        "H": ("█ █", "█▀█"),
        "I": ("█", "█"),
        "J": ("  █", "█▄█"),
        "K": ("█▄▀", "█ █"),
        "L": ("█  ", "█▄▄"),
        "M": ("█▄█", "█ █"),
        "N": ("█▄█", "█ █"),
        "O": ("█▀█", "█▄█"),
        "P": ("█▀█", "█▀ "),
        "Q": ("▄▀█", "█ ▄"),
        "R": ("█▀█", "█▀▄"),
        "S": ("█▀▀", "▄██"),
        "T": ("▀█▀", " █ "),
        "U": ("█ █", "█▄█"),
        "V": ("█ █", " ▀ "),
        "W": ("█ █", "▀▄▀"),
        "X": ("▀▄▀", "█ █"),
        "Y": ("█ █", " █ "),
        "Z": ("▀█▀", "█▄▄"),
        " ": ("   ", "   "),
    }),
})

DEFAULT_FONT = "standard"


def get_font(name: str | None):
    font = FONTS.get(name or DEFAULT_FONT)
    if font is None:
        _logging.debug(f"Unknown font {name!r}, using {DEFAULT_FONT!r}")
        return FONTS[DEFAULT_FONT]
    return font


def _paint_lines(lines: list[str], color: Color | None) -> str:
    # one span per line keeps every line self-resetting
    return "\n".join(colorize(line, color) if line else line for line in lines)


@dataclass
class AsciiArt:
    """Text rendered in block letters.

    Characters missing from the font render as its space glyph. With
    ``align`` set to center or right, lines are padded to ``width`` or, when
    that is unset, to the terminal width.
    """
    text: str = ""
    font: str = DEFAULT_FONT
    color: Color | None = None
    align: str = "left"
    width: int | None = None

    def lines(self) -> list[str]:
        glyphs = get_font(self.font)
        blank = glyphs[" "]
        height = len(blank)
        rows = [""] * height

        for char in self.text.upper():
            glyph = glyphs.get(char, blank)
            # some glyph rows are ragged; square them off
            glyph_width = max(len(row) for row in glyph)
            for i in range(height):
                rows[i] += (glyph[i] if i < len(glyph) else "").ljust(glyph_width)

        if self.align in ("center", "right"):
            width = self.width or get_terminal().size().width
            rows = [pad(row, width, self.align) for row in rows]

        return rows if self.text else []

    def render(self) -> str:
        return _paint_lines(self.lines(), self.color)

    def __str__(self) -> str:
        return self.render()

    def print(self, terminal: Terminal | None = None) -> None:
        (terminal or get_terminal()).write_line(self.render())

    @classmethod
    def big(cls, text: str, **options) -> "AsciiArt":
        return cls(text=text, font="standard", **options)

    @classmethod
    def small(cls, text: str, **options) -> "AsciiArt":
        return cls(text=text, font="small", **options)


def banner(text: str = "", char: str = "=", width: int = 60, color: Color | None = None) -> str:
    """Rule, centered title, rule. An empty title leaves just the two rules."""
    rule = char * width
    lines = [rule]
    if text:
        lines.append(pad(f" {text} ", width, "center"))
    lines.append(rule)
    return _paint_lines(lines, color)


def line(width: int = 60, char: str = "─", color: Color | None = None) -> str:
    return colorize(char * width, color)


def loading_bar(progress: float, width: int = 30, color: Color | None = "cyan") -> str:
    """A bare bar for *progress* percent, without brackets or labels."""
    progress = min(100.0, max(0.0, progress))
    filled = int(math.floor(width * progress / 100 + 0.5))
    return colorize("█" * filled + "░" * (width - filled), color)


__all__ = ["AsciiArt", "FONTS", "banner", "line", "loading_bar", "get_font"]
