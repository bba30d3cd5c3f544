"""Leveled, timestamped, colorized log lines written to stderr."""

import sys
import threading
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from simplelog import terminal
from simplelog.levels import DEBUG, ERROR, INFO, WARNING, resolve_level

RED = "\033[0;31;49m"
GREEN = "\033[0;32;49m"
YELLOW = "\033[0;33;49m"
BLUE = "\033[0;34;49m"
RESET = "\033[0m"

_STYLES = {
    DEBUG: (BLUE, "DEBUG"),
    INFO: (GREEN, "INFO"),
    WARNING: (YELLOW, "WARNING"),
    ERROR: (RED, "ERROR"),
}

# Shared by every Logger: they all write to the same stderr
_write_lock = threading.Lock()


def style_for(level: int) -> tuple[str, str]:
    """Return the (color, label) pair for a level, falling back to INFO."""
    return _STYLES.get(level, _STYLES[INFO])


def format_timestamp(dt: datetime) -> str:
    """Render ``dt`` as ``YYYY-MM-DD HH:MM:SS.ffffff``."""
    return "%04d-%02d-%02d %02d:%02d:%02d.%06d" % (
        dt.year,
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second,
        dt.microsecond,
    )


def format_message(fmt: str, args: tuple) -> str:
    """
    Interpolate ``args`` into ``fmt`` with printf-style ``%`` semantics.

    A single non-empty mapping argument is used for ``%(name)s`` keys.
    Bad format strings or argument mismatches never raise; the raw format
    is returned with a ``%!(...)`` marker describing the problem.
    """
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return fmt % args
    except Exception as e:
        return f"{fmt} %!({type(e).__name__}: {e})"


def _write(line: str) -> None:
    stream = sys.stderr
    if stream is None:
        return
    try:
        stream.write(line)
        stream.flush()
    except (OSError, ValueError):
        # stderr is gone; there is nowhere left to report it
        pass


class Logger:
    """
    🪵 A threshold-gated logger writing one line per call to stderr.

    Most programs use the shared default through the module-level
    functions in :mod:`simplelog`. Create a Logger directly when a
    component needs its own threshold.

    Example:
        log = Logger(WARNING)
        log.info("dropped")
        log.error("disk at %d%%", 91)
    """

    def __init__(self, level: int | str = INFO) -> None:
        # Reentrant: message arguments may log through this logger while rendering
        self._lock = threading.RLock()
        self._level = resolve_level(level)

    def __repr__(self) -> str:
        return f"Logger(level={self._level})"

    @property
    def level(self) -> int:
        with self._lock:
            return self._level

    def set_level(self, value: int | str) -> None:
        """
        Set the threshold from an integer or a level name.

        Args:
            value: Any integer (used verbatim) or one of "debug", "info",
                "warning", "error" in any letter case

        Raises:
            InvalidLevel: If the value is neither; the threshold is unchanged
        """
        level = resolve_level(value)
        with self._lock:
            self._level = level

    def log(self, level: int, fmt: str, *args: Any) -> None:
        """Format and write one line if ``level`` meets the threshold."""
        with self._lock:
            if level < self._level:
                return

            prefix, label = style_for(level)
            postfix = RESET
            if not terminal.STDERR_IS_TTY:
                prefix = ""
                postfix = ""

            stamp = format_timestamp(datetime.now())
            message = format_message(fmt, args)
            line = f"{prefix}[{label} {stamp}] {message}{postfix}\n"

            with _write_lock:
                _write(line)

    def debug(self, fmt: str, *args: Any) -> None:
        self.log(DEBUG, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        self.log(INFO, fmt, *args)

    def warning(self, fmt: str, *args: Any) -> None:
        self.log(WARNING, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        self.log(ERROR, fmt, *args)
