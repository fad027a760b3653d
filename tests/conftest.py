"""Pytest fixtures and utilities for console_helper tests."""

import io
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from console_helper.config import reset_settings
from console_helper.keys import KeyEvent, KeyKind
from console_helper.terminal import Terminal


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path: Path) -> Generator[Path, None, None]:
    """Point the settings file at an empty temp location for every test."""
    config_path = tmp_path / "console-helper" / "config.yaml"
    monkeypatch.setenv("CONSOLE_HELPER_CONFIG", str(config_path))
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    reset_settings()
    yield config_path
    reset_settings()


@pytest.fixture
def output() -> io.StringIO:
    """Buffer that captures everything written to the test terminal."""
    return io.StringIO()


@pytest.fixture
def terminal(output: io.StringIO) -> Terminal:
    """Terminal writing to an in-memory buffer with colors enabled."""
    return Terminal(stream=output, color=True, input_stream=io.StringIO())


@pytest.fixture
def plain_terminal(output: io.StringIO) -> Terminal:
    """Terminal writing to an in-memory buffer with colors stripped."""
    return Terminal(stream=output, color=False, input_stream=io.StringIO())


@pytest.fixture
def typed():
    """Build key events for typing a string followed by enter."""
    def build(text: str) -> list[KeyEvent]:
        return [KeyEvent.char(ch) for ch in text] + [KeyEvent(KeyKind.ENTER, "\r")]
    return build
