"""Table component for displaying tabular data."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from ..ansi import Color, Style, colorize, compose, visible_length
from ..config import get_settings
from ..layout import pad, truncate
from ..terminal import Terminal, get_terminal
from .borders import BorderChars, get_border


def _default_border_style() -> str:
    return get_settings().border_style


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class Table:
    """Rows and columns framed by border glyphs.

    Rows shorter than the column count render empty trailing cells. Each
    column is as wide as its widest header or cell unless ``column_widths``
    overrides it.
    """
    headers: Sequence[Any] = field(default_factory=list)
    rows: Sequence[Sequence[Any]] = field(default_factory=list)
    column_widths: Sequence[int] | None = None
    padding: int = 1
    border_style: str = field(default_factory=_default_border_style)
    header_color: Color | None = "cyan"
    border_color: Color | None = None
    align: str | Sequence[str] = "left"
    show_headers: bool = True

    @property
    def column_count(self) -> int:
        return max([len(self.headers)] + [len(row) for row in self.rows])

    def calculate_column_widths(self) -> list[int]:
        """Resolve the content width of every column.

        Explicit widths win; columns they do not cover fall back to the
        widest visible header or cell.
        """
        count = self.column_count
        widths = [0] * count

        if self.show_headers:
            for i, header in enumerate(self.headers):
                widths[i] = max(widths[i], visible_length(_cell_text(header)))

        for row in self.rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], visible_length(_cell_text(cell)))

        if self.column_widths is not None:
            for i, width in enumerate(self.column_widths[:count]):
                widths[i] = width

        return widths

    def _cell_align(self, index: int) -> str:
        if isinstance(self.align, str):
            return self.align
        if index < len(self.align) and self.align[index]:
            return self.align[index]
        return "left"

    def _rule(self, widths: list[int], left: str, join: str, right: str) -> str:
        border = get_border(self.border_style)
        segments = [
            colorize(border.horizontal * (w + self.padding * 2), self.border_color)
            for w in widths
        ]
        return (
            colorize(left, self.border_color)
            + colorize(join, self.border_color).join(segments)
            + colorize(right, self.border_color)
        )

    def _row(self, cells: Sequence[Any], widths: list[int], header: bool = False) -> str:
        border = get_border(self.border_style)
        space = " " * self.padding

        rendered = []
        for i, width in enumerate(widths):
            text = _cell_text(cells[i]) if i < len(cells) else ""
            if visible_length(text) > width:
                # only reachable through an explicit column width
                text = truncate(text, width, "..." if width > 3 else "")
            content = space + pad(text, width, self._cell_align(i)) + space
            if header and self.header_color:
                content = compose(content, Style(color=self.header_color, bold=True))
            rendered.append(content)

        vertical = colorize(border.vertical, self.border_color)
        return vertical + vertical.join(rendered) + vertical

    def render(self) -> str:
        border: BorderChars = get_border(self.border_style)
        widths = self.calculate_column_widths()
        result = [self._rule(widths, border.top_left, border.top_join, border.top_right)]

        if self.show_headers and self.headers:
            result.append(self._row(self.headers, widths, header=True))
            result.append(self._rule(widths, border.left_join, border.cross, border.right_join))

        for index, row in enumerate(self.rows):
            result.append(self._row(row, widths))
            if index < len(self.rows) - 1:
                result.append(
                    self._rule(widths, border.left_join, border.cross, border.right_join)
                )

        result.append(
            self._rule(widths, border.bottom_left, border.bottom_join, border.bottom_right)
        )
        return "\n".join(result)

    def __str__(self) -> str:
        return self.render()

    def print(self, terminal: Terminal | None = None) -> None:
        (terminal or get_terminal()).write_line(self.render())

    @classmethod
    def simple(cls, headers: Sequence[Any], rows: Sequence[Sequence[Any]], **options) -> "Table":
        return cls(headers=headers, rows=rows, **options)

    @classmethod
    def from_records(cls, records: Sequence[Mapping[str, Any]], **options) -> "Table":
        """Build a table from mappings; headers come from the first record's keys."""
        if not records:
            return cls(**options)

        headers = list(records[0].keys())
        rows = [[record.get(key) for key in headers] for record in records]
        return cls(headers=headers, rows=rows, **options)


__all__ = ["Table"]
