"""Settings loading and validation for console_helper.

User settings live in a small YAML file (see ``paths.get_config_path``). A
missing file simply means defaults; a malformed one makes ``load_settings``
raise ``ConfigError`` with the line and column of the problem, while
``get_settings`` logs it and falls back to defaults.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from .errors import ConsoleHelperError, format_field_error, format_suggestion
from .paths import get_config_path

_logging = logging.getLogger(__name__)

COLOR_MODES = ("auto", "always", "never")


class ConfigError(ConsoleHelperError):
    """Raised when settings loading or parsing fails.

    Provides detailed error messages including line numbers,
    column positions, and caret indicators for syntax errors.
    """
    pass


@dataclass
class Settings:
    """Defaults shared by every component.

    Unknown border or spinner names are accepted here and degrade to the
    documented fallback at render time.
    """
    color_mode: str = "auto"
    border_style: str = "single"
    spinner: str = "dots"
    progress_complete_char: str = "█"
    progress_incomplete_char: str = "░"
    pointer: str = "❯"

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or not value:
                raise ValueError(
                    format_field_error("Settings", f.name, "must be a non-empty string")
                )

        if self.color_mode not in COLOR_MODES:
            raise ValueError(
                format_field_error(
                    "Settings", "color_mode", f"must be one of: {', '.join(COLOR_MODES)}"
                )
            )

        for name in ("progress_complete_char", "progress_incomplete_char"):
            if len(getattr(self, name)) != 1:
                raise ValueError(
                    format_field_error("Settings", name, "must be a single character")
                )


def validate_settings(data: dict | None) -> Settings:
    """Validate and convert a raw mapping to a Settings instance.

    Args:
        data: Raw mapping from yaml.safe_load() (None for an empty file)

    Returns:
        Settings with defaults filled in for absent keys

    Raises:
        ConfigError: If validation fails with clear field errors
    """
    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigError(f"Settings must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(unknown)}")

    try:
        return Settings(**data)
    except ValueError as e:
        raise ConfigError(str(e)) from e


def _format_syntax_error(original_text: str, error: yaml.MarkedYAMLError) -> str:
    """Format a YAML syntax error with line, caret, and context."""
    mark = error.problem_mark
    if mark is None:
        return f"Settings syntax error: {error.problem or error}"

    line_num = mark.line + 1
    col_num = mark.column + 1
    msg_parts = [
        f"Settings syntax error at line {line_num}, col {col_num}: {error.problem}"
    ]

    lines = original_text.split("\n")
    if 1 <= line_num <= len(lines):
        msg_parts.append(lines[line_num - 1])
        msg_parts.append(" " * (col_num - 1) + "^")

    return "\n".join(msg_parts)


def load_settings(path_or_text: Path | str | None = None) -> Settings:
    """Load settings from a YAML file or raw YAML text.

    Args:
        path_or_text: A Path to a settings file, raw YAML text, or None to
            use the default settings path. A missing file yields defaults.

    Returns:
        Validated Settings

    Raises:
        ConfigError: If the file cannot be read, is malformed or invalid.
        TypeError: If path_or_text is of an unsupported type.
    """
    if path_or_text is None:
        path_or_text = get_config_path()

    if isinstance(path_or_text, Path):
        if not path_or_text.exists():
            _logging.debug(f"No settings file at {path_or_text}, using defaults")
            return Settings()
        try:
            original_text = path_or_text.read_text(encoding="utf-8")
        except PermissionError:
            raise ConfigError(f"Permission denied reading settings file: {path_or_text}")
        except UnicodeDecodeError:
            raise ConfigError(f"Settings file is not valid UTF-8: {path_or_text}")
        except OSError as e:
            raise ConfigError(f"Error reading settings file {path_or_text}: {e}")
        _logging.debug(f"Loading settings from {path_or_text}")
    elif isinstance(path_or_text, str):
        original_text = path_or_text
    else:
        raise TypeError(
            f"path_or_text must be Path or str, got {type(path_or_text).__name__}"
        )

    try:
        data = yaml.safe_load(original_text)
    except yaml.MarkedYAMLError as e:
        raise ConfigError(_format_syntax_error(original_text, e)) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Settings syntax error: {e}") from e

    return validate_settings(data)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use.

    An invalid settings file is reported as a warning and replaced by the
    defaults; call load_settings() directly to get the ConfigError.
    """
    global _settings
    if _settings is None:
        try:
            _settings = load_settings()
        except ConfigError as e:
            _logging.warning(
                format_suggestion(str(e), f"fix or remove {get_config_path()}, using defaults")
            )
            _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None


__all__ = [
    "ConfigError",
    "Settings",
    "COLOR_MODES",
    "validate_settings",
    "load_settings",
    "get_settings",
    "reset_settings",
]
