"""Border glyph sets shared by boxes and tables."""

import logging
from dataclasses import dataclass
from types import MappingProxyType

_logging = logging.getLogger(__name__)


@dataclass(frozen=True)
class BorderChars:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    top_join: str
    bottom_join: str
    left_join: str
    right_join: str
    cross: str


BORDERS = MappingProxyType({
    "single": BorderChars("┌", "┐", "└", "┘", "─", "│", "┬", "┴", "├", "┤", "┼"),
    "double": BorderChars("╔", "╗", "╚", "╝", "═", "║", "╦", "╩", "╠", "╣", "╬"),
    "round": BorderChars("╭", "╮", "╰", "╯", "─", "│", "┬", "┴", "├", "┤", "┼"),
    "bold": BorderChars("┏", "┓", "┗", "┛", "━", "┃", "┳", "┻", "┣", "┫", "╋"),
    "classic": BorderChars("+", "+", "+", "+", "-", "|", "+", "+", "+", "+", "+"),
})

DEFAULT_BORDER = "single"


def get_border(name: str | None) -> BorderChars:
    """Look up a border style, falling back to 'single' for unknown names."""
    border = BORDERS.get(name or DEFAULT_BORDER)
    if border is None:
        _logging.debug(f"Unknown border style {name!r}, using {DEFAULT_BORDER!r}")
        return BORDERS[DEFAULT_BORDER]
    return border


__all__ = ["BorderChars", "BORDERS", "DEFAULT_BORDER", "get_border"]
