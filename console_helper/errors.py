"""Exceptions raised by console_helper and the message helpers they share.

Messages follow one shape throughout the package:
- Problems reported to the user start with 'Error: '
- A bad settings value reads "<entity> field '<field>' <issue>"
- A hint, when there is one, follows as '. Hint: <what to do>'
"""


class ConsoleHelperError(Exception):
    """Base class for all console_helper errors."""


class PromptCancelled(ConsoleHelperError):
    """Raised when the user cancels an interactive prompt with Ctrl-C.

    The terminal mode is restored before this is raised, so callers may
    simply exit or carry on with a default.
    """

    def __init__(self, message: str = "Prompt cancelled by user"):
        super().__init__(message)


def format_error(message: str) -> str:
    """Prefix *message* with 'Error: '."""
    return f"Error: {message}"


def format_field_error(entity: str, field: str, issue: str) -> str:
    """Describe an invalid field.

    >>> format_field_error("Settings", "pointer", "must be a non-empty string")
    "Settings field 'pointer' must be a non-empty string"
    """
    return f"{entity} field '{field}' {issue}"


def format_suggestion(message: str, suggestion: str) -> str:
    """An error message followed by a hint on how to fix it.

    Used for the warning logged when the settings file cannot be used::

        Error: Settings field 'color_mode' must be one of: auto, always, never.
        Hint: fix or remove ~/.config/console-helper/config.yaml, using defaults
    """
    return f"{format_error(message)}. Hint: {suggestion}"


__all__ = [
    "ConsoleHelperError",
    "PromptCancelled",
    "format_error",
    "format_field_error",
    "format_suggestion",
]
