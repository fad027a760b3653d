"""Terminal rendering toolkit.

ANSI-aware text measurement and layout, styled text, boxes, tables,
progress bars, spinners, ASCII art and simple interactive prompts.
"""

import logging
import sys

from .ansi import (
    Style,
    colorize,
    compose,
    hex_color,
    rgb,
    strip_ansi,
    visible_length,
)
from .components import (
    AsciiArt,
    Box,
    Choice,
    ProgressBar,
    Spinner,
    Table,
    Text,
    banner,
    line,
    loading_bar,
    prompt_confirm,
    prompt_input,
    prompt_password,
    select,
)
from .config import ConfigError, Settings, get_settings, load_settings, reset_settings
from .errors import ConsoleHelperError, PromptCancelled
from .layout import Spacing, add_margin, add_padding, center, pad, truncate, wrap
from .terminal import Terminal, get_terminal

__version__ = "0.1.0"

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Send console_helper logs to stderr; DEBUG when *debug*, else WARNING."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(stream=sys.stderr, level=level, format=_LOG_FORMAT, force=True)
    logging.getLogger(__name__).setLevel(level)


__all__ = [
    "Style",
    "colorize",
    "compose",
    "hex_color",
    "rgb",
    "strip_ansi",
    "visible_length",
    "AsciiArt",
    "Box",
    "Choice",
    "ProgressBar",
    "Spinner",
    "Table",
    "Text",
    "banner",
    "line",
    "loading_bar",
    "prompt_confirm",
    "prompt_input",
    "prompt_password",
    "select",
    "ConfigError",
    "Settings",
    "get_settings",
    "load_settings",
    "reset_settings",
    "ConsoleHelperError",
    "PromptCancelled",
    "Spacing",
    "add_margin",
    "add_padding",
    "center",
    "pad",
    "truncate",
    "wrap",
    "Terminal",
    "get_terminal",
    "setup_logging",
]
