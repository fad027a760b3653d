"""Tests for the Table component."""

import pytest

from console_helper.ansi import strip_ansi, visible_length
from console_helper.components import Table


class TestColumnWidths:
    """Tests for Table.calculate_column_widths()."""

    def test_widest_header_or_cell(self):
        table = Table(headers=["A", "BB"], rows=[["1", "22"], ["333", ""]])
        assert table.calculate_column_widths() == [3, 2]

    def test_styled_cells_measured_by_visible_width(self):
        table = Table(headers=["H"], rows=[["\x1b[31mabcd\x1b[0m"]])
        assert table.calculate_column_widths() == [4]

    def test_hidden_headers_do_not_count(self):
        table = Table(headers=["Long header"], rows=[["a"]], show_headers=False)
        assert table.calculate_column_widths() == [1]

    def test_explicit_widths_override_covered_columns(self):
        table = Table(headers=["A", "B", "C"], rows=[["xx", "yy", "zz"]], column_widths=[5, 1])
        assert table.calculate_column_widths() == [5, 1, 2]

    def test_ragged_rows_extend_column_count(self):
        table = Table(headers=["A"], rows=[["1", "2", "3"]])
        assert table.column_count == 3
        assert table.calculate_column_widths() == [1, 1, 1]


class TestTableRender:
    """Tests for Table.render()."""

    def test_header_and_single_row(self):
        table = Table(headers=["A", "BB"], rows=[["1", "22"]], header_color=None)
        assert table.render().split("\n") == [
            "┌───┬────┐",
            "│ A │ BB │",
            "├───┼────┤",
            "│ 1 │ 22 │",
            "└───┴────┘",
        ]

    def test_header_is_styled(self):
        rendered = Table(headers=["A"], rows=[["1"]]).render()
        header = rendered.split("\n")[1]
        assert "\x1b[1m\x1b[36m A \x1b[0m" in header
        assert strip_ansi(header) == "│ A │"

    def test_separators_between_rows_only(self):
        table = Table(headers=["A"], rows=[["1"], ["2"], ["3"]], header_color=None)
        lines = table.render().split("\n")
        assert lines == [
            "┌───┐",
            "│ A │",
            "├───┤",
            "│ 1 │",
            "├───┤",
            "│ 2 │",
            "├───┤",
            "│ 3 │",
            "└───┘",
        ]

    def test_missing_and_none_cells_render_empty(self):
        table = Table(headers=["A", "B"], rows=[["x"], [None, "y"]], header_color=None)
        lines = table.render().split("\n")
        assert lines[3] == "│ x │   │"
        assert lines[5] == "│   │ y │"

    def test_without_headers(self):
        table = Table(headers=["Long header"], rows=[["a"]], show_headers=False)
        assert table.render() == "┌───┐\n│ a │\n└───┘"

    def test_per_column_alignment(self):
        table = Table(
            headers=["A", "B"],
            rows=[["x", "yyy"]],
            align=["left", "right"],
            header_color=None,
        )
        lines = table.render().split("\n")
        assert lines[1] == "│ A │   B │"
        assert lines[3] == "│ x │ yyy │"

    def test_override_truncates_wide_cells(self):
        table = Table(headers=["Name"], rows=[["abcdefgh"]], column_widths=[5], header_color=None)
        assert table.render().split("\n")[3] == "│ ab... │"

    def test_padding(self):
        table = Table(headers=["A"], rows=[], padding=2, header_color=None)
        assert table.render().split("\n")[:2] == ["┌─────┐", "│  A  │"]

    def test_border_style_and_color(self):
        table = Table(headers=["A"], rows=[["1"]], border_style="double", border_color="blue")
        rendered = table.render()
        assert rendered.startswith("\x1b[34m╔")
        assert strip_ansi(rendered).split("\n")[-1] == "╚═══╝"

    @pytest.mark.parametrize(
        "options",
        [
            {"headers": ["Name", "Age"], "rows": [["Alice", 30], ["Bob", None]]},
            {"headers": ["A"], "rows": [["1", "two", "three"]], "border_style": "round"},
            {"headers": ["X", "Y"], "rows": [["long value", "b"]], "column_widths": [3]},
            {"headers": [], "rows": [["\x1b[32mok\x1b[0m", "fine"]], "border_color": "red"},
            {"headers": ["Only"], "rows": [], "padding": 0},
        ],
    )
    def test_every_line_has_equal_width(self, options):
        lines = Table(**options).render().split("\n")
        assert len({visible_length(line) for line in lines}) == 1

    def test_print(self, plain_terminal, output):
        Table(headers=["A"], rows=[["1"]]).print(terminal=plain_terminal)
        assert output.getvalue() == "┌───┐\n│ A │\n├───┤\n│ 1 │\n└───┘\n"


class TestTableConstructors:
    """Tests for Table.simple() and Table.from_records()."""

    def test_simple(self):
        table = Table.simple(["A"], [["1"]], border_style="classic", header_color=None)
        assert table.render() == "+---+\n| A |\n+---+\n| 1 |\n+---+"

    def test_from_records(self):
        table = Table.from_records([{"n": 1, "v": None}, {"n": 22, "v": "x"}], header_color=None)
        assert table.headers == ["n", "v"]
        assert table.rows == [[1, None], [22, "x"]]
        assert table.render().split("\n")[3] == "│ 1  │   │"

    def test_from_records_empty(self):
        table = Table.from_records([], header_color=None)
        assert table.headers == []
        assert table.rows == []
