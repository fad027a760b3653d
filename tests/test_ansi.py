"""Tests for ANSI stripping, width measurement and style composition."""

import logging

import pytest

from console_helper.ansi import (
    BG,
    FG,
    RESET,
    RGB,
    Style,
    bg_hex_color,
    color_code,
    colorize,
    compose,
    hex_color,
    parse_hex,
    rgb,
    strip_ansi,
    style_open,
    visible_length,
)


class TestStripAnsi:
    """Tests for escape-sequence removal and visible width."""

    def test_plain_text_unchanged(self):
        assert strip_ansi("hello") == "hello"

    def test_removes_sgr_sequences(self):
        assert strip_ansi("\x1b[1m\x1b[31mred\x1b[0m") == "red"

    def test_removes_truecolor_sequences(self):
        assert strip_ansi("\x1b[38;2;255;0;0mx\x1b[0m") == "x"

    def test_leaves_non_sgr_sequences(self):
        """Cursor movement is not styling and is not stripped."""
        assert strip_ansi("\x1b[2Kx") == "\x1b[2Kx"

    def test_visible_length_ignores_codes(self):
        assert visible_length(colorize("abc", "red")) == 3
        assert visible_length(compose("hello", Style(color="cyan", bold=True))) == 5

    def test_visible_length_empty(self):
        assert visible_length("") == 0

    def test_strip_is_idempotent(self):
        s = compose("x", Style(color="#00ff00", bg_color="blue", underline=True))
        assert strip_ansi(strip_ansi(s)) == strip_ansi(s) == "x"


class TestColorCodes:
    """Tests for palette, hex and RGB color resolution."""

    def test_palette_foreground_codes(self):
        assert FG["red"] == "\x1b[31m"
        assert FG["gray"] == "\x1b[90m"
        assert FG["bright_white"] == "\x1b[97m"

    def test_palette_background_codes(self):
        assert BG["red"] == "\x1b[41m"
        assert BG["bright_cyan"] == "\x1b[106m"

    def test_camel_case_names(self):
        assert color_code("brightRed") == "\x1b[91m"
        assert color_code("RED") == "\x1b[31m"

    def test_hex_with_and_without_hash(self):
        assert color_code("#ff8000") == "\x1b[38;2;255;128;0m"
        assert color_code("ff8000") == "\x1b[38;2;255;128;0m"

    def test_hex_background(self):
        assert color_code("#000000", background=True) == "\x1b[48;2;0;0;0m"
        assert bg_hex_color("#010203") == "\x1b[48;2;1;2;3m"

    def test_rgb_tuple_and_mapping(self):
        assert color_code((1, 2, 3)) == "\x1b[38;2;1;2;3m"
        assert color_code({"r": 4, "g": 5, "b": 6}) == "\x1b[38;2;4;5;6m"
        assert color_code(RGB(7, 8, 9), background=True) == "\x1b[48;2;7;8;9m"

    def test_rgb_clamps_channels(self):
        assert rgb(300, -5, 128) == "\x1b[38;2;255;0;128m"

    def test_parse_hex_rejects_malformed(self):
        assert parse_hex("#fff") is None
        assert parse_hex("zzzzzz") is None
        assert hex_color("nope") == ""

    def test_unknown_color_is_empty_and_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="console_helper.ansi"):
            assert color_code("chartreuse") == ""
        assert "chartreuse" in caplog.text

    def test_none_and_empty(self):
        assert color_code(None) == ""
        assert color_code("") == ""

    def test_incomplete_mapping(self):
        assert color_code({"r": 1}) == ""


class TestCompose:
    """Tests for styled span composition."""

    def test_default_style_is_text_plus_reset(self):
        assert compose("x") == "x" + RESET

    def test_attribute_order(self):
        style = Style(blink=True, bold=True, underline=True, italic=True)
        assert style_open(style) == "\x1b[1m\x1b[3m\x1b[4m\x1b[5m"

    def test_attributes_then_foreground_then_background(self):
        result = compose("x", Style(color="red", bg_color="blue", bold=True))
        assert result == "\x1b[1m\x1b[31m\x1b[44mx\x1b[0m"

    def test_unknown_color_adds_no_code(self):
        assert compose("x", Style(color="mystery")) == "x" + RESET

    def test_colorize_none_is_noop(self):
        assert colorize("x", None) == "x"

    @pytest.mark.parametrize("color", ["green", "#123456", (1, 2, 3)])
    def test_span_is_self_contained(self, color):
        assert colorize("x", color).endswith(RESET)
