"""Leveled, colorized logging to stderr with a Tornado-style line format.

    import simplelog

    simplelog.set_level("debug")
    simplelog.info("listening on port %d", 8080)

Environment configuration lives in :mod:`simplelog.config` and is never
imported here, so ``import simplelog`` needs nothing beyond the standard library.
"""

from simplelog.facade import (
    debug,
    default_logger,
    error,
    get_level,
    info,
    log,
    set_level,
    warning,
)
from simplelog.levels import DEBUG, ERROR, INFO, WARNING, InvalidLevel, Level
from simplelog.logger import Logger

__all__ = [
    "DEBUG",
    "ERROR",
    "INFO",
    "WARNING",
    "InvalidLevel",
    "Level",
    "Logger",
    "debug",
    "default_logger",
    "error",
    "get_level",
    "info",
    "log",
    "set_level",
    "warning",
]
