"""Tests for console_helper."""
