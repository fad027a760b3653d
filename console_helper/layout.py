"""Visible-width aware text layout: padding, wrapping, truncation, spacing."""

from dataclasses import dataclass
from typing import Mapping, Union

from .ansi import strip_ansi, visible_length

ALIGNMENTS = ("left", "center", "right")


@dataclass(frozen=True)
class Spacing:
    """Per-side spacing used for margins and paddings."""
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @classmethod
    def of(cls, spec: "SpacingSpec") -> "Spacing":
        """Build a Spacing from an int (all sides), a Spacing, or a mapping."""
        if isinstance(spec, Spacing):
            return spec
        if isinstance(spec, int):
            return cls(spec, spec, spec, spec)
        if isinstance(spec, Mapping):
            return cls(
                top=spec.get("top", 0) or 0,
                right=spec.get("right", 0) or 0,
                bottom=spec.get("bottom", 0) or 0,
                left=spec.get("left", 0) or 0,
            )
        raise TypeError(f"spacing must be int, Spacing or mapping, got {type(spec).__name__}")


SpacingSpec = Union[int, Spacing, Mapping[str, int]]


def pad(s: str, width: int, align: str = "left", fill: str = " ") -> str:
    """Pad *s* to *width* visible columns.

    Strings already at least *width* wide are returned unchanged. Centered
    text gets the smaller half of the padding on the left.
    """
    padding = max(0, width - visible_length(s))

    if align == "center":
        left = padding // 2
        right = padding - left
        return fill * left + s + fill * right
    elif align == "right":
        return fill * padding + s
    else:
        return s + fill * padding


def center(text: str, width: int | None = None) -> str:
    """Center *text* within *width*, defaulting to the terminal width."""
    if not width:
        from .terminal import get_terminal

        width = get_terminal().size().width
    return pad(text, width, "center")


def add_margin(text: str, margin: SpacingSpec) -> str:
    """Surround *text* with blank lines and spaces.

    Left/right spacing is added to every line; top/bottom spacing inserts
    empty lines.
    """
    spacing = Spacing.of(margin)
    left = " " * spacing.left
    right = " " * spacing.right

    lines = [left + line + right for line in text.split("\n")]
    return "\n".join([""] * spacing.top + lines + [""] * spacing.bottom)


def add_padding(text: str, padding: SpacingSpec) -> str:
    """Add padding inside a container; same geometry as add_margin."""
    return add_margin(text, padding)


def _wrap_line(line: str, width: int) -> list[str]:
    lines: list[str] = []
    current = ""

    for word in line.split(" "):
        candidate = f"{current} {word}" if current else word
        if visible_length(candidate) <= width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word

    if current:
        lines.append(current)

    # blank input lines survive as blank output lines
    return lines or [""]


def wrap_lines(text: str, width: int, preserve_newlines: bool = True) -> list[str]:
    """Greedy word wrap returning the list of wrapped lines.

    Words longer than *width* are kept whole on their own line.
    """
    if not preserve_newlines:
        return _wrap_line(text.replace("\n", " "), width)

    result: list[str] = []
    for line in text.split("\n"):
        result.extend(_wrap_line(line, width))
    return result


def wrap(text: str, width: int, preserve_newlines: bool = True) -> str:
    """Word-wrap *text* to *width* visible columns."""
    return "\n".join(wrap_lines(text, width, preserve_newlines))


def truncate(text: str, width: int, ellipsis: str = "...") -> str:
    """Shorten *text* to *width* visible columns, ending with *ellipsis*.

    Truncation works on the stripped text, so styling is dropped whenever
    the text is actually shortened.
    """
    if visible_length(text) <= width:
        return text

    keep = max(0, width - visible_length(ellipsis))
    return strip_ansi(text)[:keep] + ellipsis


def max_line_width(text: str) -> int:
    """Widest visible line in a multi-line string."""
    return max(visible_length(line) for line in text.split("\n"))


__all__ = [
    "ALIGNMENTS",
    "Spacing",
    "SpacingSpec",
    "pad",
    "center",
    "add_margin",
    "add_padding",
    "wrap",
    "wrap_lines",
    "truncate",
    "max_line_width",
]
