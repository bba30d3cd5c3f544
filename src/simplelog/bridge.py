"""Route records from loguru or the standard library into a simplelog Logger.

Both front-ends number their levels on the same scale (DEBUG=10 ... CRITICAL=50),
so one mapping serves them both.
"""

import logging
from collections.abc import Callable
from typing import Any

from loguru import logger as loguru_logger

from simplelog.facade import default_logger
from simplelog.levels import DEBUG, ERROR, INFO, WARNING, Level
from simplelog.logger import Logger


def level_for(levelno: int) -> Level:
    """
    Map a stdlib/loguru level number to a simplelog level.

    Examples:
        5 (TRACE) -> DEBUG
        25 (SUCCESS) -> INFO
        50 (CRITICAL) -> ERROR
    """
    if levelno < logging.INFO:
        return DEBUG
    if levelno < logging.WARNING:
        return INFO
    if levelno < logging.ERROR:
        return WARNING
    return ERROR


def loguru_sink(target: Logger | None = None) -> Callable[[Any], None]:
    """
    Build a loguru sink that writes through ``target``.

    Args:
        target: Logger to write to; the default logger when omitted

    Returns:
        A callable suitable for ``loguru.logger.add``
    """
    if target is None:
        target = default_logger()

    def sink(message: Any) -> None:
        record = message.record
        target.log(level_for(record["level"].no), "%s", record["message"])

    return sink


def install_loguru(target: Logger | None = None, level: str | int = "DEBUG") -> int:
    """Add a simplelog sink to loguru and return its handler id."""
    return loguru_logger.add(loguru_sink(target), level=level, format="{message}")


class SimplelogHandler(logging.Handler):
    """
    🔌 Standard library handler writing through a simplelog Logger.

    Example:
        logging.getLogger().addHandler(SimplelogHandler())
    """

    def __init__(self, target: Logger | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.target = target if target is not None else default_logger()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            self.target.log(level_for(record.levelno), "%s", message)
        except Exception:
            self.handleError(record)
