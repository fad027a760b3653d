"""ANSI escape handling: visible width measurement and style code generation.

Every width computation in console_helper goes through ``strip_ansi`` and
``visible_length``; nothing else counts the raw length of a string that may
carry styling.
"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, NamedTuple, Union

_logging = logging.getLogger(__name__)

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")

RESET = "\x1b[0m"

ATTRIBUTES = MappingProxyType({
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "italic": "\x1b[3m",
    "underline": "\x1b[4m",
    "blink": "\x1b[5m",
    "inverse": "\x1b[7m",
    "hidden": "\x1b[8m",
    "strikethrough": "\x1b[9m",
})

# Emission order for composed spans.
ATTRIBUTE_ORDER = (
    "bold",
    "dim",
    "italic",
    "underline",
    "strikethrough",
    "inverse",
    "blink",
)

_PALETTE = (
    ("black", 30),
    ("red", 31),
    ("green", 32),
    ("yellow", 33),
    ("blue", 34),
    ("magenta", 35),
    ("cyan", 36),
    ("white", 37),
    ("gray", 90),
    ("bright_red", 91),
    ("bright_green", 92),
    ("bright_yellow", 93),
    ("bright_blue", 94),
    ("bright_magenta", 95),
    ("bright_cyan", 96),
    ("bright_white", 97),
)

FG = MappingProxyType({name: f"\x1b[{code}m" for name, code in _PALETTE})
BG = MappingProxyType({name: f"\x1b[{code + 10}m" for name, code in _PALETTE})


class RGB(NamedTuple):
    r: int
    g: int
    b: int


Color = Union[str, RGB, tuple, Mapping[str, int]]


def strip_ansi(s: str) -> str:
    """Remove SGR escape sequences (``ESC [ params m``) from *s*.

    Anything that is not a complete SGR sequence is left untouched.
    """
    return ANSI_RE.sub("", s)


def visible_length(s: str) -> int:
    """Visible length of *s*, excluding ANSI styling codes."""
    return len(strip_ansi(s))


def _channel(value) -> int:
    return max(0, min(255, int(value)))


def rgb(r: int, g: int, b: int) -> str:
    """24-bit foreground code."""
    return f"\x1b[38;2;{_channel(r)};{_channel(g)};{_channel(b)}m"


def bg_rgb(r: int, g: int, b: int) -> str:
    """24-bit background code."""
    return f"\x1b[48;2;{_channel(r)};{_channel(g)};{_channel(b)}m"


def parse_hex(value: str) -> RGB | None:
    """Parse ``#RRGGBB`` or ``RRGGBB`` into an RGB triple, None if malformed."""
    match = HEX_RE.fullmatch(value.strip())
    if not match:
        return None
    digits = match.group(1)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def hex_color(value: str) -> str:
    """Foreground code for a hex color; empty string if it does not parse."""
    parsed = parse_hex(value)
    return rgb(*parsed) if parsed else ""


def bg_hex_color(value: str) -> str:
    """Background code for a hex color; empty string if it does not parse."""
    parsed = parse_hex(value)
    return bg_rgb(*parsed) if parsed else ""


def _palette_key(name: str) -> str:
    name = name.strip()
    if name.isupper():
        return name.lower()
    # brightRed -> bright_red
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def _to_rgb(color) -> RGB | None:
    if isinstance(color, RGB):
        return color
    if isinstance(color, Mapping):
        try:
            return RGB(color["r"], color["g"], color["b"])
        except KeyError:
            return None
    if isinstance(color, (tuple, list)) and len(color) == 3:
        return RGB(*color)
    return None


def color_code(color: Color | None, background: bool = False) -> str:
    """Resolve a color spec to its escape sequence.

    Resolution order: palette name, 6-hex-digit string (``#`` optional),
    RGB triple. Anything unrecognized resolves to an empty string.
    """
    if color is None or color == "":
        return ""

    if isinstance(color, str):
        table = BG if background else FG
        code = table.get(_palette_key(color))
        if code:
            return code
        parsed = parse_hex(color)
        if parsed:
            return bg_rgb(*parsed) if background else rgb(*parsed)
        _logging.debug(f"Unknown color {color!r}, emitting no color code")
        return ""

    triple = _to_rgb(color)
    if triple is None:
        _logging.debug(f"Unsupported color value {color!r}, emitting no color code")
        return ""
    return bg_rgb(*triple) if background else rgb(*triple)


@dataclass(frozen=True)
class Style:
    """Descriptive text style; carries no escape-sequence knowledge itself."""
    color: Color | None = None
    bg_color: Color | None = None
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    inverse: bool = False
    blink: bool = False


def style_open(style: Style) -> str:
    """Escape sequence that opens *style*: attributes, foreground, background."""
    parts = [ATTRIBUTES[name] for name in ATTRIBUTE_ORDER if getattr(style, name)]
    parts.append(color_code(style.color))
    parts.append(color_code(style.bg_color, background=True))
    return "".join(parts)


def compose(text: str, style: Style | None = None) -> str:
    """Wrap *text* in the opening codes of *style* and a trailing reset.

    The result is self-contained: it always ends with RESET, so spans can be
    concatenated freely.
    """
    return f"{style_open(style or Style())}{text}{RESET}"


def colorize(text: str, color: Color | None) -> str:
    """Color *text* with a foreground color; no-op when *color* is None."""
    if color is None:
        return text
    return compose(text, Style(color=color))


__all__ = [
    "ANSI_RE",
    "RESET",
    "ATTRIBUTES",
    "ATTRIBUTE_ORDER",
    "FG",
    "BG",
    "RGB",
    "Color",
    "Style",
    "strip_ansi",
    "visible_length",
    "rgb",
    "bg_rgb",
    "parse_hex",
    "hex_color",
    "bg_hex_color",
    "color_code",
    "style_open",
    "compose",
    "colorize",
]
