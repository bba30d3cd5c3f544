"""Shared pytest fixtures for simplelog tests."""

import re

import pytest

import simplelog
from simplelog import terminal

LINE_RE = re.compile(
    r"^\[(?P<label>[A-Z]+) "
    r"(?P<stamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{6})\] "
    r"(?P<message>.*)$"
)


@pytest.fixture(autouse=True)
def reset_default_logger():
    """Put the shared default logger back to INFO after every test."""
    yield
    simplelog.set_level(simplelog.INFO)


@pytest.fixture
def plain_stderr(monkeypatch):
    """Treat stderr as a pipe or file: no color codes."""
    monkeypatch.setattr(terminal, "STDERR_IS_TTY", False)


@pytest.fixture
def tty_stderr(monkeypatch):
    """Treat stderr as an interactive terminal: colored output."""
    monkeypatch.setattr(terminal, "STDERR_IS_TTY", True)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run without SIMPLELOG_* variables or a stray .env file."""
    monkeypatch.delenv("SIMPLELOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
