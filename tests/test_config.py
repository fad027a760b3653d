"""Tests for settings loading, validation and config paths."""

import logging
from pathlib import Path

import pytest

from console_helper.config import (
    ConfigError,
    Settings,
    get_settings,
    load_settings,
    reset_settings,
    validate_settings,
)
from console_helper.errors import ConsoleHelperError
from console_helper.paths import CONFIG_ENV_VAR, get_config_dir, get_config_path


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_defaults(self):
        settings = Settings()
        assert settings.color_mode == "auto"
        assert settings.border_style == "single"
        assert settings.spinner == "dots"
        assert settings.progress_complete_char == "█"
        assert settings.progress_incomplete_char == "░"
        assert settings.pointer == "❯"

    def test_invalid_color_mode(self):
        with pytest.raises(ValueError, match="color_mode"):
            Settings(color_mode="sometimes")

    def test_empty_value(self):
        with pytest.raises(ValueError, match="non-empty string"):
            Settings(border_style="")

    def test_non_string_value(self):
        with pytest.raises(ValueError, match="spinner"):
            Settings(spinner=3)

    def test_progress_chars_must_be_single(self):
        with pytest.raises(ValueError, match="single character"):
            Settings(progress_complete_char="##")

    def test_unknown_border_accepted(self):
        assert Settings(border_style="custom").border_style == "custom"


class TestValidateSettings:
    """Tests for validate_settings()."""

    def test_none_gives_defaults(self):
        assert validate_settings(None) == Settings()

    def test_partial_mapping(self):
        assert validate_settings({"spinner": "line"}) == Settings(spinner="line")

    def test_non_mapping(self):
        with pytest.raises(ConfigError, match="mapping"):
            validate_settings(["a"])

    def test_unknown_keys(self):
        with pytest.raises(ConfigError, match="Unknown settings: colour, size"):
            validate_settings({"size": 1, "colour": "red"})

    def test_invalid_value_becomes_config_error(self):
        with pytest.raises(ConfigError, match="color_mode"):
            validate_settings({"color_mode": "loud"})


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_from_text(self):
        settings = load_settings("color_mode: never\nborder_style: double\n")
        assert settings.color_mode == "never"
        assert settings.border_style == "double"

    def test_empty_text(self):
        assert load_settings("") == Settings()

    def test_missing_file_gives_defaults(self, temp_dir: Path):
        assert load_settings(temp_dir / "missing.yaml") == Settings()

    def test_from_file(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("pointer: '>'\n", encoding="utf-8")
        assert load_settings(path).pointer == ">"

    def test_default_path(self, isolated_settings: Path):
        isolated_settings.parent.mkdir(parents=True, exist_ok=True)
        isolated_settings.write_text("spinner: arrow\n")
        assert load_settings().spinner == "arrow"

    def test_syntax_error_shows_location(self):
        with pytest.raises(ConfigError) as exc_info:
            load_settings("a: b: c\n")
        message = str(exc_info.value)
        assert message.startswith("Settings syntax error at line 1")
        assert "a: b: c" in message
        assert message.split("\n")[-1].strip() == "^"

    def test_invalid_utf8_file(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(ConfigError, match="UTF-8"):
            load_settings(path)

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            load_settings(42)


class TestCachedSettings:
    """Tests for get_settings() and reset_settings()."""

    def test_cached_until_reset(self, isolated_settings: Path):
        first = get_settings()
        assert get_settings() is first

        isolated_settings.parent.mkdir(parents=True, exist_ok=True)
        isolated_settings.write_text("spinner: line\n")
        assert get_settings().spinner == "dots"

        reset_settings()
        assert get_settings().spinner == "line"

    def test_invalid_file_falls_back_to_defaults(self, isolated_settings: Path, caplog):
        isolated_settings.parent.mkdir(parents=True, exist_ok=True)
        isolated_settings.write_text("color_mode: sometimes\n")

        with caplog.at_level(logging.WARNING, logger="console_helper.config"):
            settings = get_settings()

        assert settings == Settings()
        assert "color_mode" in caplog.text
        assert f"Hint: fix or remove {isolated_settings}" in caplog.text

    def test_load_settings_stays_strict(self, isolated_settings: Path):
        isolated_settings.parent.mkdir(parents=True, exist_ok=True)
        isolated_settings.write_text("color_mode: sometimes\n")
        with pytest.raises(ConfigError, match="color_mode"):
            load_settings()

    def test_config_error_is_library_error(self):
        assert issubclass(ConfigError, ConsoleHelperError)


class TestConfigPaths:
    """Tests for config path helpers."""

    def test_env_override(self, monkeypatch, temp_dir: Path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(temp_dir / "custom.yaml"))
        assert get_config_path() == temp_dir / "custom.yaml"

    def test_default_location(self, monkeypatch, temp_dir: Path):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.setenv("HOME", str(temp_dir))
        assert get_config_dir() == temp_dir / ".config" / "console-helper"
        assert get_config_path() == temp_dir / ".config" / "console-helper" / "config.yaml"
