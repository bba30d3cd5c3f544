"""The shared default logger and the functions that front it.

The default logger is created once, at import, with an INFO threshold and
lives for the rest of the process. Reach it through the functions below.
"""

from typing import Any

from simplelog.levels import DEBUG, ERROR, INFO, WARNING
from simplelog.logger import Logger

_default_logger = Logger(INFO)


def default_logger() -> Logger:
    """Return the shared default Logger."""
    return _default_logger


def set_level(value: int | str) -> None:
    """Set the default logger's threshold. Raises InvalidLevel on bad input."""
    _default_logger.set_level(value)


def get_level() -> int:
    return _default_logger.level


def log(level: int, fmt: str, *args: Any) -> None:
    _default_logger.log(level, fmt, *args)


def debug(fmt: str, *args: Any) -> None:
    _default_logger.log(DEBUG, fmt, *args)


def info(fmt: str, *args: Any) -> None:
    _default_logger.log(INFO, fmt, *args)


def warning(fmt: str, *args: Any) -> None:
    _default_logger.log(WARNING, fmt, *args)


def error(fmt: str, *args: Any) -> None:
    _default_logger.log(ERROR, fmt, *args)
