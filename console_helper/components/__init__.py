"""Renderable terminal components.

Static components (Text, Box, Table, AsciiArt) render to strings; ProgressBar
and Spinner redraw in place; the prompt functions read keystrokes.

The public API is re-exported from this __init__ file.
"""

from .ascii_art import (
    AsciiArt,
    FONTS,
    banner,
    get_font,
    line,
    loading_bar,
)
from .borders import (
    BORDERS,
    BorderChars,
    DEFAULT_BORDER,
    get_border,
)
from .box import Box, fit_to_height
from .input import (
    InputState,
    prompt_confirm,
    prompt_input,
    prompt_password,
    prompt_text,
)
from .progress import ProgressBar
from .select import Choice, SelectState, render_choice, select
from .spinner import (
    FrameSet,
    SPINNERS,
    Spinner,
    SpinnerOutcome,
    get_frame_set,
)
from .table import Table
from .text import Text

__all__ = [
    "AsciiArt",
    "FONTS",
    "banner",
    "get_font",
    "line",
    "loading_bar",
    "BORDERS",
    "BorderChars",
    "DEFAULT_BORDER",
    "get_border",
    "Box",
    "fit_to_height",
    "InputState",
    "prompt_confirm",
    "prompt_input",
    "prompt_password",
    "prompt_text",
    "ProgressBar",
    "Choice",
    "SelectState",
    "render_choice",
    "select",
    "FrameSet",
    "SPINNERS",
    "Spinner",
    "SpinnerOutcome",
    "get_frame_set",
    "Table",
    "Text",
]
