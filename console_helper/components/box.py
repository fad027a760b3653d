"""Box component: bordered frame around padded, width-fitted content."""

from dataclasses import dataclass, field

from ..ansi import Color, colorize, strip_ansi, visible_length
from ..config import get_settings
from ..layout import Spacing, SpacingSpec, max_line_width, pad, truncate, wrap_lines
from ..terminal import Terminal, get_terminal
from .borders import get_border


def _default_border_style() -> str:
    return get_settings().border_style


def fit_to_height(lines: list[str], target_height: int, valign: str = "top") -> list[str]:
    """Pad *lines* with blank lines, or cut trailing ones, to *target_height*.

    Blank lines go below the content for 'top', above it for 'bottom', and
    are split with the smaller half on top for 'center'.
    """
    target_height = max(0, target_height)
    if len(lines) >= target_height:
        return lines[:target_height]

    empty = target_height - len(lines)
    if valign == "center":
        top = empty // 2
        return [""] * top + lines + [""] * (empty - top)
    elif valign == "bottom":
        return [""] * empty + lines
    else:
        return lines + [""] * empty


@dataclass
class Box:
    """A bordered container.

    Without an explicit ``width`` the box grows to fit its widest content
    line plus horizontal padding, and is never narrower than the title.
    With an explicit ``width`` long lines are wrapped, and words that still
    do not fit are truncated, so every rendered line has the same width.
    """
    content: str = ""
    title: str = ""
    title_align: str = "left"
    width: int | None = None
    height: int | None = None
    padding: SpacingSpec = 1
    border_style: str = field(default_factory=_default_border_style)
    border_color: Color | None = None
    align: str = "left"
    valign: str = "top"

    def inner_width(self) -> int:
        """Width between the two vertical borders."""
        if self.width:
            return self.width
        spacing = Spacing.of(self.padding)
        return max(
            max_line_width(self.content) + spacing.left + spacing.right,
            visible_length(self.title) + 2,
        )

    def _content_lines(self, inner: int) -> list[str]:
        spacing = Spacing.of(self.padding)
        # side padding never pushes a line past the inner width
        left_width = min(spacing.left, inner)
        right_width = min(spacing.right, inner - left_width)
        content_width = inner - left_width - right_width
        left = " " * left_width
        right = " " * right_width

        ellipsis = "..." if content_width > 3 else ""
        lines = []
        for line in self.content.split("\n"):
            if visible_length(line) > content_width:
                # styled runs must not span wrapped lines
                pieces = [
                    truncate(p, content_width, ellipsis)
                    for p in wrap_lines(strip_ansi(line), content_width)
                ]
            else:
                pieces = [line]
            for piece in pieces:
                lines.append(left + pad(piece, content_width, self.align) + right)

        return [""] * spacing.top + lines + [""] * spacing.bottom

    def _top_border(self, inner: int) -> str:
        border = get_border(self.border_style)

        def paint(text):
            return colorize(text, self.border_color)

        if not self.title:
            return paint(border.top_left + border.horizontal * inner + border.top_right)

        title_text = f" {self.title} "
        if visible_length(title_text) > inner:
            title_text = truncate(title_text, inner, ellipsis="")
        remaining = max(0, inner - visible_length(title_text))

        if self.title_align == "center":
            left_width = remaining // 2
            right_width = remaining - left_width
            return (
                paint(border.top_left + border.horizontal * left_width)
                + title_text
                + paint(border.horizontal * right_width + border.top_right)
            )
        elif self.title_align == "right":
            return (
                paint(border.top_left + border.horizontal * remaining)
                + title_text
                + paint(border.top_right)
            )
        else:
            return (
                paint(border.top_left)
                + title_text
                + paint(border.horizontal * remaining + border.top_right)
            )

    def render(self) -> str:
        border = get_border(self.border_style)
        inner = self.inner_width()

        lines = self._content_lines(inner)
        if self.height:
            lines = fit_to_height(lines, self.height - 2, self.valign)

        vertical = colorize(border.vertical, self.border_color)
        result = [self._top_border(inner)]
        for line in lines:
            result.append(vertical + pad(line, inner) + vertical)
        result.append(
            colorize(
                border.bottom_left + border.horizontal * inner + border.bottom_right,
                self.border_color,
            )
        )
        return "\n".join(result)

    def __str__(self) -> str:
        return self.render()

    def print(self, terminal: Terminal | None = None) -> None:
        (terminal or get_terminal()).write_line(self.render())

    @classmethod
    def from_text(cls, content: str, **options) -> "Box":
        return cls(content=content, **options)

    @classmethod
    def single(cls, content: str, **options) -> "Box":
        return cls(content=content, border_style="single", **options)

    @classmethod
    def double(cls, content: str, **options) -> "Box":
        return cls(content=content, border_style="double", **options)

    @classmethod
    def round(cls, content: str, **options) -> "Box":
        return cls(content=content, border_style="round", **options)

    @classmethod
    def bold(cls, content: str, **options) -> "Box":
        return cls(content=content, border_style="bold", **options)

    @classmethod
    def classic(cls, content: str, **options) -> "Box":
        return cls(content=content, border_style="classic", **options)


__all__ = ["Box", "fit_to_height"]
